"""Shared fixtures: a mock container catalog and an isolated mapping file."""
from __future__ import annotations

import sys
from pathlib import Path
from typing import Any

import httpx
import pytest

PROJECT_ROOT = Path(__file__).resolve().parents[2]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

CATALOG_BASE = "https://catalog.test/api/containers/v1/images/nvr"
NVR_PATH_PREFIX = "/api/containers/v1/images/nvr/"


class MockCatalog:
    """Serves canned lookup payloads keyed by NVR and records requests."""

    def __init__(self, payloads: dict[str, Any] | None = None) -> None:
        self.payloads: dict[str, Any] = dict(payloads or {})
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        nvr = request.url.path[len(NVR_PATH_PREFIX):]
        payload = self.payloads.get(nvr, {"data": [], "page": 0, "page_size": 100, "total": 0})
        if isinstance(payload, httpx.Response):
            return payload
        if isinstance(payload, Exception):
            raise payload
        return httpx.Response(200, json=payload)

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self)


def single_block(content_sets: list[str], cpe_ids: list[str]) -> dict[str, Any]:
    """Build a well-formed one-image catalog payload."""

    return {
        "data": [{"content_sets": content_sets, "cpe_ids": cpe_ids}],
        "page": 0,
        "page_size": 100,
        "total": 1,
    }


@pytest.fixture()
def mock_catalog() -> MockCatalog:
    return MockCatalog()


@pytest.fixture()
def mapping_path(tmp_path: Path) -> Path:
    return tmp_path / "nvr-mapping.json"

