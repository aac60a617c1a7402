"""Pydantic models for catalog payloads, mapping entries and API responses."""
from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, Field, field_validator


KEY_SEPARATOR = "//"


def mapping_key(nvr: str, arch: str) -> str:
    """Return the composite key an (nvr, arch) pair is stored under."""

    return f"{nvr}{KEY_SEPARATOR}{arch}"


class CatalogImage(BaseModel):
    """One image block returned by the catalog NVR lookup."""

    content_sets: list[str] = Field(default_factory=list)
    cpe_ids: list[str] = Field(default_factory=list)

    @field_validator("content_sets", "cpe_ids", mode="before")
    @classmethod
    def null_as_empty(cls, value: Any) -> Any:
        return [] if value is None else value


class CatalogResponse(BaseModel):
    """Body of the catalog NVR lookup response."""

    data: list[CatalogImage] = Field(default_factory=list)
    page: int = Field(default=0)
    page_size: int = Field(default=0)
    total: int = Field(default=0)

    @field_validator("data", mode="before")
    @classmethod
    def null_as_empty(cls, value: Any) -> Any:
        return [] if value is None else value


class MappingEntry(BaseModel):
    """Persisted content sets and CPE identifiers for one build and architecture."""

    nvr: str = Field(..., description="Name-version-release of the build.")
    arch: str = Field(..., description="Architecture label the build was resolved for.")
    content_sets: list[str] = Field(default_factory=list)
    cpe_ids: list[str] = Field(default_factory=list)

    @property
    def key(self) -> str:
        return mapping_key(self.nvr, self.arch)


class HealthStatus(BaseModel):
    """Service health payload."""

    status: Literal["ok"] = Field(default="ok")
    version: str = Field(default="0.1.0", description="Semantic version of the API service.")


class ContentSetsResponse(BaseModel):
    """Content sets resolved for a build and architecture."""

    nvr: str
    arch: str
    content_sets: list[str] = Field(default_factory=list)
