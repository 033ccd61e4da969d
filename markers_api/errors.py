"""Application errors and the exception handlers that render them.

Services raise these exceptions; the handlers registered by
``register_exception_handlers`` turn them into a uniform JSON body:

    {"success": false, "message": "Marker not found"}

Example:
    from markers_api.errors import NotFoundError

    def get_marker(db, marker_id):
        marker = db.get(Marker, marker_id)
        if marker is None:
            raise NotFoundError("Marker not found")
        return marker
"""

import logging
from typing import Any

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)


class AppError(Exception):
    """Base error carrying the HTTP status it maps to."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message: str = "Internal server error"

    def __init__(self, message: str | None = None, headers: dict[str, str] | None = None):
        self.message = message or self.default_message
        self.headers = headers
        super().__init__(self.message)


class ValidationError(AppError):
    """400 - a business rule on otherwise well-formed input failed."""

    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Validation failed"

    def __init__(self, field: str, message: str | None = None):
        self.field = field
        super().__init__(message or f"Invalid value for {field}")


class ConflictError(AppError):
    """409 - the resource already exists."""

    status_code = status.HTTP_409_CONFLICT
    default_message = "Conflict"

    def __init__(self, field: str, message: str | None = None):
        self.field = field
        super().__init__(message or f"{field} already exists")


class InvalidCredentialsError(AppError):
    """401 - unknown email or wrong password; the two are never distinguished."""

    status_code = status.HTTP_401_UNAUTHORIZED
    default_message = "Invalid email or password"


class UnauthorizedError(AppError):
    """401 - missing, invalid, revoked or expired bearer token."""

    status_code = status.HTTP_401_UNAUTHORIZED
    default_message = "Unauthorized"

    def __init__(self, message: str | None = None):
        super().__init__(message, headers={"WWW-Authenticate": "Bearer"})


class ForbiddenError(AppError):
    """403 - authenticated, but not the owner."""

    status_code = status.HTTP_403_FORBIDDEN
    default_message = "Forbidden"


class NotFoundError(AppError):
    """404 - resource doesn't exist."""

    status_code = status.HTTP_404_NOT_FOUND
    default_message = "Not found"


class HashingError(Exception):
    """The password hashing backend failed unexpectedly."""


class InvalidTokenError(Exception):
    """A bearer token failed signature, structure or expiry checks."""


def error_body(message: str, details: Any | None = None) -> dict[str, Any]:
    """Build the uniform error payload."""
    body: dict[str, Any] = {"success": False, "message": message}
    if details is not None:
        body["details"] = details
    return body


async def app_error_handler(request: Request, exc: AppError) -> JSONResponse:
    """Render an ``AppError`` with its mapped status."""
    if exc.status_code >= 500:
        logger.error(f"{request.method} {request.url.path} failed: {exc.message}")
    return JSONResponse(
        status_code=exc.status_code,
        content=error_body(exc.message),
        headers=exc.headers,
    )


async def http_error_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """Render routing errors such as unknown paths and wrong methods."""
    return JSONResponse(
        status_code=exc.status_code,
        content=error_body(str(exc.detail)),
        headers=getattr(exc, "headers", None),
    )


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Render schema-level validation failures as 422."""
    return JSONResponse(
        status_code=422,
        content=error_body("Validation failed", jsonable_encoder(exc.errors())),
    )


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    """Log unexpected failures and hide their internals from the client."""
    logger.error(f"Unhandled error on {request.method} {request.url.path}: {exc}", exc_info=exc)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=error_body("Internal server error"),
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Attach the error boundary to the application."""
    app.add_exception_handler(AppError, app_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)
