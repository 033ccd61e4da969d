"""User directory and profile service."""

from typing import Any

from sqlalchemy.orm import Session

from markers_api.errors import NotFoundError
from markers_api.models.user import User
from markers_api.schemas.user import ProfileUpdate
from markers_api.services.markers import MarkerService
from markers_api.services.pagination import PageParams, paginate


class UserService:
    """Service for user lookups and profile updates."""

    def __init__(self, db: Session):
        self.db = db

    def list_users(self, params: PageParams) -> dict[str, Any]:
        """List users in registration order."""
        return paginate(self.db.query(User).order_by(User.id), params)

    def get_user(self, user_id: int) -> User:
        """Get a user by id."""
        user = self.db.query(User).filter(User.id == user_id).first()
        if user is None:
            raise NotFoundError("User not found")
        return user

    def list_user_markers(self, user_id: int, params: PageParams) -> dict[str, Any]:
        """List a user's markers; unknown users are a 404."""
        self.get_user(user_id)
        return MarkerService(self.db).list_for_user(user_id, params)

    def update_profile(self, user_id: int, data: ProfileUpdate) -> User:
        """Apply a partial profile update."""
        user = self.get_user(user_id)

        if data.name is not None:
            user.name = data.name
        if "avatar" in data.model_fields_set:
            user.avatar = str(data.avatar) if data.avatar is not None else None

        self.db.commit()
        self.db.refresh(user)
        return user
