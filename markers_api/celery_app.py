"""Celery application configuration."""

from celery import Celery

from markers_api.config import get_settings

settings = get_settings()

app = Celery(
    "markers_api",
    broker=settings.redis_url,
    backend=settings.redis_url,
    include=["markers_api.tasks.sessions"],
)

# Celery configuration
app.conf.update(
    task_serializer="json",
    accept_content=["json"],
    result_serializer="json",
    timezone="UTC",
    enable_utc=True,
    task_track_started=True,
    task_time_limit=300,  # 5 minutes max per task
    task_soft_time_limit=240,  # 4 minutes soft limit
    beat_schedule={
        "cleanup-expired-sessions": {
            "task": "markers_api.tasks.sessions.cleanup_expired_sessions",
            "schedule": settings.session_cleanup_interval_minutes * 60.0,
        },
    },
)
