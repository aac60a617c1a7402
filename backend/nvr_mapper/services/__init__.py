"""Service layer helpers for the catalog integration."""

from .catalog_client import (
    CatalogClient,
    CatalogClientError,
    DecodeError,
    ShapeError,
    TransportError,
)
from .resolver import ContentSetResolver, Resolution

__all__ = [
    "CatalogClient",
    "CatalogClientError",
    "ContentSetResolver",
    "DecodeError",
    "Resolution",
    "ShapeError",
    "TransportError",
]
