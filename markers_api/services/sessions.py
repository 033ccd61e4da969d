"""Session store for issued bearer tokens."""

import logging
from datetime import UTC, datetime, timedelta

from sqlalchemy.orm import Session

from markers_api.models.session import UserSession

logger = logging.getLogger(__name__)


class SessionStore:
    """Persisted mapping from token to (user id, expiry).

    Every method runs as its own transaction. Deletes are idempotent and
    return the number of rows removed.
    """

    def __init__(self, db: Session):
        self.db = db

    def create(self, user_id: int, token: str, ttl: timedelta) -> UserSession:
        """Store a session for ``token`` that expires ``ttl`` from now."""
        # Replace any stale row for the same token
        self.db.query(UserSession).filter(UserSession.token == token).delete(
            synchronize_session=False
        )
        session = UserSession(
            user_id=user_id,
            token=token,
            expires_at=datetime.now(UTC) + ttl,
        )
        self.db.add(session)
        self.db.commit()
        self.db.refresh(session)
        return session

    def find_valid(self, token: str) -> UserSession | None:
        """Return the session for ``token`` if it has not expired."""
        return (
            self.db.query(UserSession)
            .filter(
                UserSession.token == token,
                UserSession.expires_at > datetime.now(UTC),
            )
            .first()
        )

    def delete(self, token: str) -> int:
        """Delete the session for ``token``."""
        deleted = (
            self.db.query(UserSession)
            .filter(UserSession.token == token)
            .delete(synchronize_session=False)
        )
        self.db.commit()
        return deleted

    def delete_all_for_user(self, user_id: int) -> int:
        """Delete every session belonging to ``user_id``."""
        deleted = (
            self.db.query(UserSession)
            .filter(UserSession.user_id == user_id)
            .delete(synchronize_session=False)
        )
        self.db.commit()
        return deleted

    def delete_expired(self) -> int:
        """Sweep sessions whose expiry has passed."""
        deleted = (
            self.db.query(UserSession)
            .filter(UserSession.expires_at <= datetime.now(UTC))
            .delete(synchronize_session=False)
        )
        self.db.commit()
        if deleted:
            logger.info(f"Removed {deleted} expired sessions")
        return deleted
