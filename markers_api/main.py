"""FastAPI application entry point."""

import logging
import time
from contextlib import asynccontextmanager
from datetime import UTC, datetime

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from markers_api.api import auth, markers, users
from markers_api.config import get_settings
from markers_api.errors import register_exception_handlers
from markers_api.logging_config import configure_logging

settings = get_settings()
configure_logging()

logger = logging.getLogger(__name__)

STARTED_AT = time.monotonic()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Handle application startup and shutdown events."""
    logger.info(f"Markers API starting ({settings.environment})")
    yield
    logger.info("Markers API shutting down")


app = FastAPI(
    title="Markers API",
    description="Users, sessions and geo-tagged markers with token authentication",
    version="1.0.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"] if settings.is_development else settings.cors_origins,
    allow_credentials=not settings.is_development,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_exception_handlers(app)

# Register routers
app.include_router(auth.router)
app.include_router(users.router)
app.include_router(markers.router)


@app.get("/")
async def root():
    """API identification."""
    return {"name": "Markers API", "version": app.version}


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {
        "status": "healthy",
        "environment": settings.environment,
        "timestamp": datetime.now(UTC).isoformat(),
        "uptime": round(time.monotonic() - STARTED_AT, 3),
    }
