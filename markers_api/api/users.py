"""User API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends

from markers_api.api.dependencies import (
    AuthContext,
    get_auth_service,
    get_current_user,
    get_page_params,
    get_user_service,
    require_auth,
    resolve_identity,
)
from markers_api.api.markers import to_page
from markers_api.models.user import User
from markers_api.schemas.auth import MessageResponse, UserResponse
from markers_api.schemas.marker import MarkerResponse
from markers_api.schemas.pagination import Page
from markers_api.schemas.user import PasswordChange, ProfileUpdate
from markers_api.services.auth import AuthService
from markers_api.services.pagination import PageParams
from markers_api.services.users import UserService

router = APIRouter(prefix="/api/v1/users", tags=["users"])


@router.get("", response_model=Page[UserResponse])
async def list_users(
    params: Annotated[PageParams, Depends(get_page_params)],
    user_service: Annotated[UserService, Depends(get_user_service)],
):
    """List users, one page at a time."""
    return user_service.list_users(params)


@router.get("/me", response_model=UserResponse)
async def get_my_profile(
    current_user: Annotated[User, Depends(get_current_user)],
):
    """Get the current user's profile."""
    return current_user


@router.put("/profile", response_model=UserResponse)
@router.put("/me", response_model=UserResponse)
async def update_profile(
    profile_data: ProfileUpdate,
    identity: Annotated[AuthContext, Depends(require_auth)],
    user_service: Annotated[UserService, Depends(get_user_service)],
):
    """Update the current user's name or avatar."""
    return user_service.update_profile(identity.user_id, profile_data)


@router.put("/password", response_model=MessageResponse)
@router.put("/me/password", response_model=MessageResponse)
async def change_password(
    password_data: PasswordChange,
    identity: Annotated[AuthContext, Depends(require_auth)],
    auth_service: Annotated[AuthService, Depends(get_auth_service)],
):
    """Change the current user's password."""
    auth_service.change_password(
        identity.user_id,
        current_password=password_data.current_password,
        new_password=password_data.new_password,
        confirm_password=password_data.confirm_password,
    )
    return MessageResponse(message="Password updated successfully")


@router.delete("/account", response_model=MessageResponse)
@router.delete("/me", response_model=MessageResponse)
async def delete_account(
    identity: Annotated[AuthContext, Depends(require_auth)],
    auth_service: Annotated[AuthService, Depends(get_auth_service)],
):
    """Delete the current user with all their markers and sessions."""
    auth_service.delete_account(identity.user_id)
    return MessageResponse(message="User deleted successfully")


@router.get("/{user_id}", response_model=UserResponse)
async def get_user(
    user_id: int,
    user_service: Annotated[UserService, Depends(get_user_service)],
):
    """Get a user by id."""
    return user_service.get_user(user_id)


@router.get("/{user_id}/markers", response_model=Page[MarkerResponse])
async def list_user_markers(
    user_id: int,
    params: Annotated[PageParams, Depends(get_page_params)],
    identity: Annotated[AuthContext | None, Depends(resolve_identity)],
    user_service: Annotated[UserService, Depends(get_user_service)],
):
    """List a user's markers."""
    return to_page(user_service.list_user_markers(user_id, params), identity)
