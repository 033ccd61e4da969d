"""Authentication schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, EmailStr, Field, field_validator

from markers_api.schemas.validators import check_password


class UserRegister(BaseModel):
    """User registration request."""

    model_config = ConfigDict(extra="forbid")

    name: str = Field(..., min_length=2, max_length=50)
    email: EmailStr = Field(..., max_length=255)
    password: str = Field(..., min_length=6, max_length=100)
    confirm_password: str = Field(..., min_length=6, max_length=100)

    @field_validator("password", "confirm_password")
    @classmethod
    def validate_password(cls, value: str) -> str:
        return check_password(value)


class UserLogin(BaseModel):
    """User login request."""

    model_config = ConfigDict(extra="forbid")

    email: EmailStr = Field(..., max_length=255)
    password: str = Field(..., min_length=1, max_length=100)


class UserResponse(BaseModel):
    """User information response."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    email: str
    avatar: str | None
    created_at: datetime
    updated_at: datetime


class AuthResponse(BaseModel):
    """Authentication response with token and user info."""

    message: str
    user: UserResponse
    token: str


class MessageResponse(BaseModel):
    """Plain acknowledgement."""

    message: str
