"""Runtime configuration for the NVR mapper."""
from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


DEFAULT_CATALOG_BASE_URL = "https://catalog.redhat.com/api/containers/v1/images/nvr"


class MapperSettings(BaseSettings):
    """Environment-aware settings for the catalog client and mapping store."""

    catalog_base_url: str = Field(
        DEFAULT_CATALOG_BASE_URL,
        description="Base URL of the container catalog NVR lookup endpoint.",
    )
    mapping_path: str = Field(
        "nvr-mapping.json",
        description="Filesystem path of the persisted NVR to content-set mapping.",
    )
    request_timeout: float = Field(
        default=30.0, gt=0, description="Timeout in seconds for catalog HTTP requests."
    )
    max_workers: int = Field(
        default=8, ge=1, description="Thread pool size used when resolving many NVRs."
    )

    model_config = SettingsConfigDict(
        env_prefix="NVR_MAPPER_",
        env_file=".env",
        env_file_encoding="utf-8",
    )
