"""Marker service: CRUD, geo filtering and ownership enforcement."""

import logging
import math
from dataclasses import dataclass
from typing import Any

from sqlalchemy.orm import Query, Session, joinedload

from markers_api.errors import NotFoundError
from markers_api.models.marker import Marker
from markers_api.schemas.marker import MarkerCreate, MarkerUpdate
from markers_api.services.ownership import get_owned_or_raise
from markers_api.services.pagination import PageParams, paginate

logger = logging.getLogger(__name__)

KM_PER_DEGREE = 111  # one degree of latitude is roughly 111 km

# Columns that may not be cleared by an update
REQUIRED_FIELDS = {"title", "latitude", "longitude"}


@dataclass(frozen=True)
class GeoFilter:
    """Circle-ish search area: centre point and radius in kilometres."""

    lat: float
    lng: float
    radius_km: float

    def bounding_box(self) -> tuple[float, float, float, float]:
        """Return (min_lat, max_lat, min_lng, max_lng) around the centre.

        The box is an approximation; near the poles the longitude span
        covers the whole globe.
        """
        lat_delta = self.radius_km / KM_PER_DEGREE
        cos_lat = math.cos(math.radians(self.lat))
        if cos_lat < 1e-9:
            lng_delta = 180.0
        else:
            lng_delta = self.radius_km / (KM_PER_DEGREE * cos_lat)
        return (
            self.lat - lat_delta,
            self.lat + lat_delta,
            self.lng - lng_delta,
            self.lng + lng_delta,
        )


class MarkerService:
    """Service for marker operations."""

    def __init__(self, db: Session):
        self.db = db

    def _base_query(self) -> Query:
        return self.db.query(Marker).options(joinedload(Marker.user))

    def list_markers(self, params: PageParams, geo: GeoFilter | None = None) -> dict[str, Any]:
        """List markers newest first, optionally inside a bounding box."""
        query = self._base_query()
        if geo is not None:
            min_lat, max_lat, min_lng, max_lng = geo.bounding_box()
            query = query.filter(
                Marker.latitude.between(min_lat, max_lat),
                Marker.longitude.between(min_lng, max_lng),
            )
        return paginate(query.order_by(Marker.created_at.desc(), Marker.id.desc()), params)

    def list_for_user(self, user_id: int, params: PageParams) -> dict[str, Any]:
        """List one user's markers newest first."""
        query = (
            self._base_query()
            .filter(Marker.user_id == user_id)
            .order_by(Marker.created_at.desc(), Marker.id.desc())
        )
        return paginate(query, params)

    def get_marker(self, marker_id: int) -> Marker:
        """Get a marker by id."""
        marker = self._base_query().filter(Marker.id == marker_id).first()
        if marker is None:
            raise NotFoundError("Marker not found")
        return marker

    def create_marker(self, user_id: int, data: MarkerCreate) -> Marker:
        """Create a marker owned by ``user_id``."""
        marker = Marker(
            title=data.title,
            description=data.description,
            latitude=data.latitude,
            longitude=data.longitude,
            address=data.address,
            image_url=str(data.image_url) if data.image_url is not None else None,
            user_id=user_id,
        )
        self.db.add(marker)
        self.db.commit()
        logger.info(f"User {user_id} created marker {marker.id}")
        return self.get_marker(marker.id)

    def update_marker(self, marker_id: int, user_id: int, data: MarkerUpdate) -> Marker:
        """Update a marker (owner only)."""
        marker = get_owned_or_raise(self.db, Marker, marker_id, user_id, label="Marker")

        for field, value in data.model_dump(exclude_unset=True).items():
            if value is None and field in REQUIRED_FIELDS:
                continue
            if field == "image_url" and value is not None:
                value = str(value)
            setattr(marker, field, value)

        self.db.commit()
        return self.get_marker(marker_id)

    def delete_marker(self, marker_id: int, user_id: int) -> None:
        """Delete a marker (owner only)."""
        marker = get_owned_or_raise(self.db, Marker, marker_id, user_id, label="Marker")
        self.db.delete(marker)
        self.db.commit()
        logger.info(f"User {user_id} deleted marker {marker_id}")
