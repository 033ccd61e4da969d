"""Pydantic schemas for API requests and responses."""

from markers_api.schemas.auth import (
    AuthResponse,
    MessageResponse,
    UserLogin,
    UserRegister,
    UserResponse,
)
from markers_api.schemas.marker import MarkerCreate, MarkerOwner, MarkerResponse, MarkerUpdate
from markers_api.schemas.pagination import Page
from markers_api.schemas.user import PasswordChange, ProfileUpdate

__all__ = [
    "UserRegister",
    "UserLogin",
    "UserResponse",
    "AuthResponse",
    "MessageResponse",
    "ProfileUpdate",
    "PasswordChange",
    "MarkerCreate",
    "MarkerUpdate",
    "MarkerOwner",
    "MarkerResponse",
    "Page",
]
