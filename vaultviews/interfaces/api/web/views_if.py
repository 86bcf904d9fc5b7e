"""Views endpoints."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException, Query

from vaultviews.helpers.exceptions import ViewAlreadyInitiatedError
from vaultviews.helpers.logging_helper import sanitize_exception_message
from vaultviews.interfaces.api.types.views_types import (
    InitiateViewRequest,
    MatchRequest,
    MatchResponse,
    TagStatResponse,
    ThingResponse,
    VaultFileResponse,
    ViewsResponse,
    ViewThingsResponse,
)
from vaultviews.interfaces.api.web.dependencies import get_views_service
from vaultviews.services.views_svc import ViewsService

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Views"])


# ──────────────────────────────────────────────────────────────────────
# Endpoints
# ──────────────────────────────────────────────────────────────────────


@router.get("/views")
def get_views(
    merge: bool | None = None,
    subfolders: bool | None = None,
    pin: list[str] | None = Query(default=None),
    views_service: ViewsService = Depends(get_views_service),
) -> ViewsResponse:
    """List initiated and uninitiated views and the navigation list."""
    try:
        listing = views_service.get_listing(merge=merge, derive_subfolders=subfolders)
        links = views_service.list_views(pinned_view_names=pin, merge=merge, derive_subfolders=subfolders)
    except OSError as e:
        raise HTTPException(status_code=500, detail=sanitize_exception_message(e, "Could not read vault")) from e
    return ViewsResponse.from_dto(listing, links)


@router.get("/views/things")
def get_view_things(
    view: str = Query(..., min_length=1, description="View name"),
    views_service: ViewsService = Depends(get_views_service),
) -> ViewThingsResponse:
    """Things shown in a view, sorted by name."""
    try:
        rows = views_service.things_in_view(view)
    except OSError as e:
        raise HTTPException(status_code=500, detail=sanitize_exception_message(e, "Could not read vault")) from e
    return ViewThingsResponse(view_name=view, things=[ThingResponse.from_dto(row) for row in rows], count=len(rows))


@router.post("/views/match")
def post_match(
    request: MatchRequest,
    views_service: ViewsService = Depends(get_views_service),
) -> MatchResponse:
    """Check whether a thing with the given tags shows in a view."""
    try:
        matched = views_service.matches(request.view_name, request.tags, request.known_view_names)
    except OSError as e:
        raise HTTPException(status_code=500, detail=sanitize_exception_message(e, "Could not read vault")) from e
    return MatchResponse(view_name=request.view_name, matches=matched)


@router.post("/views/initiate", status_code=201)
def post_initiate_view(
    request: InitiateViewRequest,
    views_service: ViewsService = Depends(get_views_service),
) -> VaultFileResponse:
    """Create the file for a view."""
    try:
        created = views_service.initiate_view(request.view_name)
    except ViewAlreadyInitiatedError as e:
        raise HTTPException(status_code=409, detail=str(e)) from e
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e)) from e
    except OSError as e:
        raise HTTPException(status_code=500, detail=sanitize_exception_message(e, "Could not write vault")) from e
    return VaultFileResponse.from_file(created)


@router.post("/things")
def post_thing(views_service: ViewsService = Depends(get_views_service)) -> VaultFileResponse:
    """Create a new thing, or return the existing draft."""
    try:
        result = views_service.add_thing()
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e)) from e
    except OSError as e:
        raise HTTPException(status_code=500, detail=sanitize_exception_message(e, "Could not write vault")) from e
    return VaultFileResponse.from_dto(result)


@router.get("/tags")
def get_tags(views_service: ViewsService = Depends(get_views_service)) -> list[TagStatResponse]:
    """Vault-wide tag counts."""
    try:
        stats = views_service.tag_stats()
    except OSError as e:
        raise HTTPException(status_code=500, detail=sanitize_exception_message(e, "Could not read vault")) from e
    return [TagStatResponse.from_dto(stat) for stat in stats]
