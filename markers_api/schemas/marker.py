"""Marker schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from markers_api.schemas.validators import HttpUrlStr


class MarkerCreate(BaseModel):
    """Create a new marker."""

    model_config = ConfigDict(extra="forbid")

    title: str = Field(..., min_length=1, max_length=100)
    description: str | None = Field(None, max_length=500)
    latitude: float = Field(..., ge=-90, le=90)
    longitude: float = Field(..., ge=-180, le=180)
    address: str | None = Field(None, max_length=255)
    image_url: HttpUrlStr | None = None


class MarkerUpdate(BaseModel):
    """Update a marker. Omitted fields are left unchanged."""

    model_config = ConfigDict(extra="forbid")

    title: str | None = Field(None, min_length=1, max_length=100)
    description: str | None = Field(None, max_length=500)
    latitude: float | None = Field(None, ge=-90, le=90)
    longitude: float | None = Field(None, ge=-180, le=180)
    address: str | None = Field(None, max_length=255)
    image_url: HttpUrlStr | None = None


class MarkerOwner(BaseModel):
    """Public summary of a marker's owner."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    email: str
    avatar: str | None


class MarkerResponse(BaseModel):
    """Marker response."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    title: str
    description: str | None
    latitude: float
    longitude: float
    address: str | None
    image_url: str | None
    user_id: int
    created_at: datetime
    updated_at: datetime
    user: MarkerOwner
    is_owner: bool = False
