"""Application factory for the NVR mapper API."""
import httpx
from fastapi import FastAPI

from .routers import content_sets, health, mapping
from .settings import MapperSettings
from .state import AppState


def create_app(
    settings: MapperSettings | None = None,
    *,
    transport: httpx.BaseTransport | None = None,
) -> FastAPI:
    """Build and configure the FastAPI application."""

    resolved_settings = settings or MapperSettings()
    app_state = AppState(settings=resolved_settings, transport=transport)

    app = FastAPI(title="NVR Mapper API", version="0.1.0")
    app.state.app_state = app_state
    app.state.settings = app_state.settings

    for router in (
        health.router,
        content_sets.router,
        mapping.router,
    ):
        app.include_router(router)

    return app
