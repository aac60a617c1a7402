"""Factory helpers wiring the CLI to the mapper services."""
from __future__ import annotations

import httpx

from backend.nvr_mapper.settings import MapperSettings
from backend.nvr_mapper.state import AppState


def create_state(
    *,
    base_url: str | None = None,
    mapping_path: str | None = None,
    timeout: float | None = None,
    transport: httpx.BaseTransport | None = None,
) -> AppState:
    """Build the mapper state, letting explicit options override settings."""

    overrides: dict[str, object] = {}
    if base_url is not None:
        overrides["catalog_base_url"] = base_url
    if mapping_path is not None:
        overrides["mapping_path"] = mapping_path
    if timeout is not None:
        overrides["request_timeout"] = timeout

    return AppState(MapperSettings(**overrides), transport=transport)
