"""FastAPI dependencies for the NVR mapper API."""
from fastapi import Depends, Request

from .services import ContentSetResolver
from .state import AppState
from .stores.mapping_store import MappingStore


def get_app_state(request: Request) -> AppState:
    """Resolve the shared application state from the FastAPI request."""
    return request.app.state.app_state


def get_resolver(app_state: AppState = Depends(get_app_state)) -> ContentSetResolver:
    """Return the content-set resolver dependency."""
    return app_state.resolver


def get_mapping_store(app_state: AppState = Depends(get_app_state)) -> MappingStore:
    """Return the mapping store dependency."""
    return app_state.mapping_store
