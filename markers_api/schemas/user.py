"""User profile schemas."""

from pydantic import BaseModel, ConfigDict, Field, field_validator

from markers_api.schemas.validators import HttpUrlStr, check_password


class ProfileUpdate(BaseModel):
    """Update the current user's profile."""

    model_config = ConfigDict(extra="forbid")

    name: str | None = Field(None, min_length=2, max_length=50)
    avatar: HttpUrlStr | None = None


class PasswordChange(BaseModel):
    """Change the current user's password."""

    model_config = ConfigDict(extra="forbid")

    current_password: str = Field(..., min_length=1)
    new_password: str = Field(..., min_length=6, max_length=100)
    confirm_password: str = Field(..., min_length=6, max_length=100)

    @field_validator("new_password", "confirm_password")
    @classmethod
    def validate_password(cls, value: str) -> str:
        return check_password(value)
