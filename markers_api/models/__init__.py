"""SQLAlchemy models."""

from markers_api.models.marker import Marker
from markers_api.models.session import UserSession
from markers_api.models.user import User

__all__ = [
    "User",
    "UserSession",
    "Marker",
]
