"""FastAPI dependencies for authentication and database."""

from dataclasses import dataclass
from datetime import timedelta
from functools import lru_cache
from typing import Annotated

from fastapi import Depends, Query
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from markers_api.config import get_settings
from markers_api.database import get_db
from markers_api.errors import UnauthorizedError
from markers_api.models.user import User
from markers_api.services.auth import AuthService
from markers_api.services.markers import MarkerService
from markers_api.services.pagination import DEFAULT_PAGE_SIZE, MAX_PAGE_SIZE, PageParams
from markers_api.services.passwords import PasswordHasher
from markers_api.services.tokens import TokenIssuer
from markers_api.services.users import UserService

# Missing or non-Bearer headers resolve to None instead of a 403
security = HTTPBearer(auto_error=False)


@dataclass(frozen=True)
class AuthContext:
    """Identity attached to an authenticated request."""

    user_id: int
    token: str


@lru_cache
def get_password_hasher() -> PasswordHasher:
    """Get the process-wide password hasher."""
    return PasswordHasher(rounds=get_settings().bcrypt_rounds)


@lru_cache
def get_token_issuer() -> TokenIssuer:
    """Get the process-wide token issuer, keyed by the configured secret."""
    settings = get_settings()
    return TokenIssuer(
        secret=settings.jwt_secret,
        algorithm=settings.jwt_algorithm,
        expiration_minutes=settings.jwt_expiration_minutes,
    )


def get_auth_service(
    db: Annotated[Session, Depends(get_db)],
    hasher: Annotated[PasswordHasher, Depends(get_password_hasher)],
    issuer: Annotated[TokenIssuer, Depends(get_token_issuer)],
) -> AuthService:
    """Get auth service with dependencies."""
    return AuthService(
        db,
        hasher=hasher,
        issuer=issuer,
        session_ttl=timedelta(minutes=get_settings().session_ttl_minutes),
    )


def get_marker_service(
    db: Annotated[Session, Depends(get_db)],
) -> MarkerService:
    """Get marker service with dependencies."""
    return MarkerService(db)


def get_user_service(
    db: Annotated[Session, Depends(get_db)],
) -> UserService:
    """Get user service with dependencies."""
    return UserService(db)


def get_page_params(
    page: Annotated[int, Query(ge=1)] = 1,
    limit: Annotated[int, Query(ge=1, le=MAX_PAGE_SIZE)] = DEFAULT_PAGE_SIZE,
) -> PageParams:
    """Parse pagination query parameters."""
    return PageParams(page=page, limit=limit)


def resolve_identity(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(security)],
    auth_service: Annotated[AuthService, Depends(get_auth_service)],
) -> AuthContext | None:
    """Resolve the bearer token to an identity, or None for anonymous callers.

    Never raises; endpoints with optional auth use this directly.
    """
    if credentials is None:
        return None

    token = credentials.credentials
    user_id = auth_service.verify(token)
    if user_id is None:
        return None

    return AuthContext(user_id=user_id, token=token)


def require_auth(
    identity: Annotated[AuthContext | None, Depends(resolve_identity)],
) -> AuthContext:
    """Reject the request with 401 unless it carries a live session."""
    if identity is None:
        raise UnauthorizedError("Invalid or expired token")
    return identity


def get_current_user(
    identity: Annotated[AuthContext, Depends(require_auth)],
    auth_service: Annotated[AuthService, Depends(get_auth_service)],
) -> User:
    """Get the current authenticated user."""
    user = auth_service.get_user(identity.user_id)
    if user is None:
        raise UnauthorizedError("User not found")
    return user
