"""Tests for settings resolution and CLI overrides."""
from __future__ import annotations

from pathlib import Path

import pytest

from backend.nvr_mapper.settings import DEFAULT_CATALOG_BASE_URL, MapperSettings
from backend.nvr_mapper_cli.client import create_state


def test_defaults_point_at_production_catalog(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("CATALOG_BASE_URL", "MAPPING_PATH", "REQUEST_TIMEOUT", "MAX_WORKERS"):
        monkeypatch.delenv(f"NVR_MAPPER_{name}", raising=False)

    settings = MapperSettings(_env_file=None)

    assert settings.catalog_base_url == DEFAULT_CATALOG_BASE_URL
    assert settings.mapping_path == "nvr-mapping.json"
    assert settings.request_timeout == 30.0
    assert settings.max_workers == 8


def test_environment_overrides_settings(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("NVR_MAPPER_CATALOG_BASE_URL", "http://mock.local/nvr")
    monkeypatch.setenv("NVR_MAPPER_MAX_WORKERS", "3")

    settings = MapperSettings(_env_file=None)

    assert settings.catalog_base_url == "http://mock.local/nvr"
    assert settings.max_workers == 3


def test_create_state_applies_explicit_overrides(tmp_path: Path) -> None:
    path = tmp_path / "custom.json"

    state = create_state(base_url="http://mock.local/nvr/", mapping_path=str(path), timeout=2.5)

    assert state.settings.catalog_base_url == "http://mock.local/nvr/"
    assert state.settings.request_timeout == 2.5
    assert state.mapping_store.path == path.resolve()
    assert state.catalog_client.build_url("a-1-1", "x86_64").startswith("http://mock.local/nvr/a-1-1?")
