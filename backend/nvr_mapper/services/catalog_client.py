"""HTTP client for the container catalog NVR lookup."""
from __future__ import annotations

import logging
from urllib.parse import quote

import httpx
from pydantic import ValidationError

from ..schemas import KEY_SEPARATOR, CatalogImage, CatalogResponse
from ..settings import DEFAULT_CATALOG_BASE_URL

logger = logging.getLogger(__name__)

ARCH_FILTER = "parsed_data.labels=em=(name=='architecture'andvalue=='{arch}')"


class CatalogClientError(RuntimeError):
    """Raised when the catalog lookup cannot produce a usable answer."""


class TransportError(CatalogClientError):
    """Raised when the catalog cannot be reached or answers with an HTTP error."""

    def __init__(self, url: str, message: str) -> None:
        super().__init__(f"HTTP error ({url}): {message}")
        self.url = url


class DecodeError(CatalogClientError):
    """Raised when the catalog body is not a valid lookup response."""


class ShapeError(CatalogClientError):
    """Raised when the catalog answers with more than one matching image."""


def validate_identifier(name: str, value: str) -> None:
    """Reject identifiers that cannot form an unambiguous mapping key."""

    if not value:
        raise ValueError(f"{name} must be a non-empty string")
    if KEY_SEPARATOR in value:
        raise ValueError(f"{name} must not contain {KEY_SEPARATOR!r}: {value}")


class CatalogClient:
    """Looks up the content sets and CPE IDs of a build in the catalog."""

    def __init__(
        self,
        base_url: str = DEFAULT_CATALOG_BASE_URL,
        *,
        timeout: float = 30.0,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout
        self._transport = transport

    def build_url(self, nvr: str, arch: str) -> str:
        path_segment = quote(nvr, safe="")
        filter_expr = ARCH_FILTER.format(arch=quote(arch, safe=""))
        return f"{self._base_url}/{path_segment}?filter={filter_expr}"

    def fetch_content_sets(self, nvr: str, arch: str) -> CatalogImage | None:
        """Return the single image block for ``nvr`` on ``arch``.

        ``None`` means the catalog knows no image for the pair. More than one
        block is ambiguous and raises :class:`ShapeError`.
        """

        validate_identifier("nvr", nvr)
        validate_identifier("arch", arch)

        url = self.build_url(nvr, arch)
        logger.debug("Querying catalog: %s", url)
        try:
            with httpx.Client(timeout=self._timeout, transport=self._transport) as client:
                response = client.get(url)
                response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            raise TransportError(
                url, f"catalog responded with HTTP {exc.response.status_code}"
            ) from exc
        except httpx.HTTPError as exc:
            raise TransportError(url, str(exc) or type(exc).__name__) from exc

        try:
            payload = response.json()
        except ValueError as exc:
            raise DecodeError(f"JSON parse error: {exc}") from exc

        try:
            parsed = CatalogResponse.model_validate(payload)
        except ValidationError as exc:
            raise DecodeError(f"Unexpected catalog response shape: {exc}") from exc

        if not parsed.data:
            logger.info("No content sets known for %s (%s)", nvr, arch)
            return None
        if len(parsed.data) > 1:
            raise ShapeError(
                f"ambiguous response: more than one matching image for {nvr} ({arch})"
            )
        return parsed.data[0]
