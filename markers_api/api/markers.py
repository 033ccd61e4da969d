"""Marker API endpoints."""

from typing import Annotated, Any

from fastapi import APIRouter, Depends, Query, status

from markers_api.api.dependencies import (
    AuthContext,
    get_marker_service,
    get_page_params,
    require_auth,
    resolve_identity,
)
from markers_api.models.marker import Marker
from markers_api.schemas.auth import MessageResponse
from markers_api.schemas.marker import MarkerCreate, MarkerResponse, MarkerUpdate
from markers_api.schemas.pagination import Page
from markers_api.services.markers import GeoFilter, MarkerService
from markers_api.services.pagination import PageParams

router = APIRouter(prefix="/api/v1/markers", tags=["markers"])


def to_response(marker: Marker, identity: AuthContext | None = None) -> MarkerResponse:
    """Build a marker response, flagging markers the caller owns."""
    marker_response = MarkerResponse.model_validate(marker)
    marker_response.is_owner = identity is not None and marker.user_id == identity.user_id
    return marker_response


def to_page(result: dict[str, Any], identity: AuthContext | None = None) -> dict[str, Any]:
    return {**result, "data": [to_response(m, identity) for m in result["data"]]}


@router.get("", response_model=Page[MarkerResponse])
async def list_markers(
    params: Annotated[PageParams, Depends(get_page_params)],
    identity: Annotated[AuthContext | None, Depends(resolve_identity)],
    marker_service: Annotated[MarkerService, Depends(get_marker_service)],
    lat: Annotated[float | None, Query(ge=-90, le=90)] = None,
    lng: Annotated[float | None, Query(ge=-180, le=180)] = None,
    radius: Annotated[float | None, Query(gt=0, description="Search radius in km")] = None,
):
    """List markers, optionally restricted to an area around lat/lng."""
    geo = None
    if lat is not None and lng is not None and radius is not None:
        geo = GeoFilter(lat=lat, lng=lng, radius_km=radius)

    return to_page(marker_service.list_markers(params, geo), identity)


@router.get("/my", response_model=Page[MarkerResponse])
@router.get("/me", response_model=Page[MarkerResponse])
async def list_my_markers(
    params: Annotated[PageParams, Depends(get_page_params)],
    identity: Annotated[AuthContext, Depends(require_auth)],
    marker_service: Annotated[MarkerService, Depends(get_marker_service)],
):
    """List the current user's markers."""
    return to_page(marker_service.list_for_user(identity.user_id, params), identity)


@router.get("/{marker_id}", response_model=MarkerResponse)
async def get_marker(
    marker_id: int,
    identity: Annotated[AuthContext | None, Depends(resolve_identity)],
    marker_service: Annotated[MarkerService, Depends(get_marker_service)],
):
    """Get a specific marker."""
    return to_response(marker_service.get_marker(marker_id), identity)


@router.post("", response_model=MarkerResponse, status_code=status.HTTP_201_CREATED)
async def create_marker(
    marker_data: MarkerCreate,
    identity: Annotated[AuthContext, Depends(require_auth)],
    marker_service: Annotated[MarkerService, Depends(get_marker_service)],
):
    """Create a marker owned by the current user."""
    marker = marker_service.create_marker(identity.user_id, marker_data)
    return to_response(marker, identity)


@router.put("/{marker_id}", response_model=MarkerResponse)
async def update_marker(
    marker_id: int,
    marker_data: MarkerUpdate,
    identity: Annotated[AuthContext, Depends(require_auth)],
    marker_service: Annotated[MarkerService, Depends(get_marker_service)],
):
    """Update a marker (owner only)."""
    marker = marker_service.update_marker(marker_id, identity.user_id, marker_data)
    return to_response(marker, identity)


@router.delete("/{marker_id}", response_model=MessageResponse)
async def delete_marker(
    marker_id: int,
    identity: Annotated[AuthContext, Depends(require_auth)],
    marker_service: Annotated[MarkerService, Depends(get_marker_service)],
):
    """Delete a marker (owner only)."""
    marker_service.delete_marker(marker_id, identity.user_id)
    return MessageResponse(message="Marker deleted successfully")
