"""Celery tasks for session housekeeping."""

import logging

from sqlalchemy.orm import Session

from markers_api.celery_app import app as celery_app
from markers_api.database import SessionLocal
from markers_api.services.sessions import SessionStore

logger = logging.getLogger(__name__)


@celery_app.task
def cleanup_expired_sessions() -> dict:
    """Delete session rows whose expiry has passed.

    Runs periodically via celery-beat. Request-time checks already ignore
    expired rows; this only keeps the table small.

    Returns:
        dict with the number of sessions removed
    """
    db: Session = SessionLocal()
    try:
        deleted = SessionStore(db).delete_expired()
        logger.info(f"Session cleanup complete: {deleted} removed")
        return {"success": True, "deleted": deleted}
    except Exception as e:
        logger.error(f"Error in cleanup_expired_sessions: {e}", exc_info=True)
        db.rollback()
        raise
    finally:
        db.close()
