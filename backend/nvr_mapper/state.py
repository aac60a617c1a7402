"""Shared state container for the NVR mapper API."""
from __future__ import annotations

from dataclasses import dataclass

import httpx

from .services import CatalogClient, ContentSetResolver
from .settings import MapperSettings
from .stores.mapping_store import MappingStore


@dataclass(slots=True)
class AppState:
    """Wires the catalog client, mapping store and resolver from settings."""

    settings: MapperSettings
    catalog_client: CatalogClient
    mapping_store: MappingStore
    resolver: ContentSetResolver

    def __init__(
        self,
        settings: MapperSettings,
        *,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self.settings = settings
        self.catalog_client = CatalogClient(
            settings.catalog_base_url,
            timeout=settings.request_timeout,
            transport=transport,
        )
        self.mapping_store = MappingStore(settings.mapping_path)
        self.resolver = ContentSetResolver(self.catalog_client, self.mapping_store)
