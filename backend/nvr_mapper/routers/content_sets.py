"""Content-set resolution endpoints."""
from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException

from ..dependencies import get_resolver
from ..schemas import ContentSetsResponse
from ..services import ContentSetResolver, DecodeError, ShapeError, TransportError
from ..stores.mapping_store import StoreError

router = APIRouter(prefix="/content-sets", tags=["content-sets"])


@router.get(
    "/{nvr}/{arch}",
    summary="Resolve content sets for a build",
    response_model=ContentSetsResponse,
)
def resolve_content_sets(
    nvr: str,
    arch: str,
    resolver: ContentSetResolver = Depends(get_resolver),
) -> ContentSetsResponse:
    """Query the catalog for ``nvr`` on ``arch`` and cache the answer."""

    try:
        content_sets = resolver.resolve(nvr, arch)
    except ValueError as exc:
        raise HTTPException(status_code=422, detail=str(exc)) from exc
    except ShapeError as exc:
        raise HTTPException(status_code=409, detail=str(exc)) from exc
    except (TransportError, DecodeError) as exc:
        raise HTTPException(status_code=502, detail=str(exc)) from exc
    except StoreError as exc:
        raise HTTPException(status_code=500, detail=str(exc)) from exc

    return ContentSetsResponse(nvr=nvr, arch=arch, content_sets=content_sets)
