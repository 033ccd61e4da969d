"""Authentication API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, status

from markers_api.api.dependencies import (
    AuthContext,
    get_auth_service,
    get_current_user,
    require_auth,
)
from markers_api.models.user import User
from markers_api.schemas.auth import (
    AuthResponse,
    MessageResponse,
    UserLogin,
    UserRegister,
    UserResponse,
)
from markers_api.services.auth import AuthService

router = APIRouter(prefix="/api/v1/auth", tags=["auth"])


@router.post("/register", response_model=AuthResponse, status_code=status.HTTP_201_CREATED)
async def register(
    user_data: UserRegister,
    auth_service: Annotated[AuthService, Depends(get_auth_service)],
):
    """Register a new user."""
    user, token = auth_service.register(
        name=user_data.name,
        email=user_data.email,
        password=user_data.password,
        confirm_password=user_data.confirm_password,
    )

    return AuthResponse(
        message="User created successfully",
        user=UserResponse.model_validate(user),
        token=token,
    )


@router.post("/login", response_model=AuthResponse)
async def login(
    credentials: UserLogin,
    auth_service: Annotated[AuthService, Depends(get_auth_service)],
):
    """Login with email and password."""
    user, token = auth_service.login(credentials.email, credentials.password)

    return AuthResponse(
        message="Login successful",
        user=UserResponse.model_validate(user),
        token=token,
    )


@router.post("/logout", response_model=MessageResponse)
async def logout(
    identity: Annotated[AuthContext, Depends(require_auth)],
    auth_service: Annotated[AuthService, Depends(get_auth_service)],
):
    """Logout by deleting the session behind the presented token."""
    auth_service.logout(identity.token)
    return MessageResponse(message="Logout successful")


@router.get("/me", response_model=UserResponse)
async def get_me(
    current_user: Annotated[User, Depends(get_current_user)],
):
    """Get current user information."""
    return current_user
