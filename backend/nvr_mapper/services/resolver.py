"""Resolve content sets for builds and cache them in the mapping store."""
from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
import logging
from typing import Iterable

from ..schemas import MappingEntry
from ..stores.mapping_store import MappingStore, StoreError
from .catalog_client import CatalogClient, CatalogClientError

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class Resolution:
    """Outcome of resolving one (nvr, arch) pair in a batch."""

    nvr: str
    arch: str
    content_sets: list[str] = field(default_factory=list)
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


class ContentSetResolver:
    """Fetches content sets from the catalog and merges them into the store."""

    def __init__(self, client: CatalogClient, store: MappingStore) -> None:
        self._client = client
        self._store = store

    @property
    def store(self) -> MappingStore:
        return self._store

    def resolve(self, nvr: str, arch: str) -> list[str]:
        """Return the content sets of ``nvr`` on ``arch``, caching the answer.

        Catalog errors propagate unchanged. An unknown build returns an empty
        list and leaves the store untouched. A store failure fails the call.
        """

        image = self._client.fetch_content_sets(nvr, arch)
        if image is None:
            return []

        entry = MappingEntry(
            nvr=nvr,
            arch=arch,
            content_sets=list(image.content_sets),
            cpe_ids=list(image.cpe_ids),
        )
        self._store.merge(entry)
        return list(image.content_sets)

    def resolve_many(
        self, pairs: Iterable[tuple[str, str]], *, max_workers: int = 8
    ) -> list[Resolution]:
        """Resolve many pairs in parallel, keeping the input order."""

        items = list(pairs)
        if not items:
            return []

        with ThreadPoolExecutor(max_workers=max_workers) as executor:
            return list(executor.map(lambda pair: self._resolve_one(*pair), items))

    def _resolve_one(self, nvr: str, arch: str) -> Resolution:
        try:
            content_sets = self.resolve(nvr, arch)
        except (CatalogClientError, StoreError, ValueError) as exc:
            logger.warning("Failed to resolve %s (%s): %s", nvr, arch, exc)
            return Resolution(nvr=nvr, arch=arch, error=str(exc))
        return Resolution(nvr=nvr, arch=arch, content_sets=content_sets)
