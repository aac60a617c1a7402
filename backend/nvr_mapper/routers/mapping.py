"""Read-only endpoints over the cached NVR mapping."""
from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException

from ..dependencies import get_mapping_store
from ..schemas import MappingEntry
from ..stores.mapping_store import MappingStore, StoreError

router = APIRouter(prefix="/mapping", tags=["mapping"])


@router.get("", response_model=list[MappingEntry], summary="List cached mapping entries")
def list_entries(store: MappingStore = Depends(get_mapping_store)) -> list[MappingEntry]:
    """Return every cached entry ordered by key."""

    try:
        mapping = store.read()
    except StoreError as exc:
        raise HTTPException(status_code=500, detail=str(exc)) from exc
    return [mapping[key] for key in sorted(mapping)]


@router.get("/{nvr}/{arch}", response_model=MappingEntry, summary="Fetch one cached entry")
def get_entry(
    nvr: str,
    arch: str,
    store: MappingStore = Depends(get_mapping_store),
) -> MappingEntry:
    try:
        entry = store.get(nvr, arch)
    except StoreError as exc:
        raise HTTPException(status_code=500, detail=str(exc)) from exc
    if entry is None:
        raise HTTPException(status_code=404, detail=f"No cached entry for {nvr} ({arch})")
    return entry
