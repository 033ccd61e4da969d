"""Authentication service: registration, login and session lifecycle."""

import logging
from datetime import timedelta

from sqlalchemy.orm import Session

from markers_api.errors import (
    ConflictError,
    InvalidCredentialsError,
    InvalidTokenError,
    NotFoundError,
    ValidationError,
)
from markers_api.models.user import User
from markers_api.services.passwords import PasswordHasher
from markers_api.services.sessions import SessionStore
from markers_api.services.tokens import TokenIssuer

logger = logging.getLogger(__name__)


class AuthService:
    """Orchestrates the password hasher, token issuer and session store.

    A token grants access only while both its signature and its session
    row are valid, so logout and expiry revoke it even though the JWT
    itself would still decode.
    """

    def __init__(
        self,
        db: Session,
        hasher: PasswordHasher,
        issuer: TokenIssuer,
        session_ttl: timedelta,
    ):
        self.db = db
        self.hasher = hasher
        self.issuer = issuer
        self.session_ttl = session_ttl
        self.sessions = SessionStore(db)

    def get_user(self, user_id: int) -> User | None:
        """Get a user by id."""
        return self.db.query(User).filter(User.id == user_id).first()

    def get_user_by_email(self, email: str) -> User | None:
        """Get a user by email."""
        return self.db.query(User).filter(User.email == email).first()

    def register(
        self, name: str, email: str, password: str, confirm_password: str
    ) -> tuple[User, str]:
        """Create a user and sign them in.

        Raises:
            ValidationError: passwords don't match
            ConflictError: email already registered
        """
        if password != confirm_password:
            raise ValidationError("confirm_password", "Passwords do not match")

        if self.get_user_by_email(email):
            raise ConflictError("email", "User with this email already exists")

        user = User(name=name, email=email, password_hash=self.hasher.hash(password))
        self.db.add(user)
        self.db.commit()
        self.db.refresh(user)

        token = self._start_session(user.id)
        logger.info(f"Registered user {user.id}")
        return user, token

    def login(self, email: str, password: str) -> tuple[User, str]:
        """Check credentials and open a new session.

        Unknown email and wrong password raise the same error.
        """
        user = self.get_user_by_email(email)
        # unknown emails still pay for a bcrypt check
        password_hash = user.password_hash if user else self.hasher.dummy_hash
        if not self.hasher.verify(password, password_hash) or user is None:
            logger.warning("Failed login attempt")
            raise InvalidCredentialsError()

        token = self._start_session(user.id)
        logger.info(f"User {user.id} logged in")
        return user, token

    def logout(self, token: str) -> None:
        """End the session for ``token``. Unknown tokens are ignored."""
        if self.sessions.delete(token):
            logger.info("Session closed")

    def verify(self, token: str) -> int | None:
        """Resolve ``token`` to a user id, or None if it grants no access."""
        try:
            user_id = self.issuer.decode(token)
        except InvalidTokenError:
            return None

        session = self.sessions.find_valid(token)
        if session is None or session.user_id != user_id:
            return None
        return user_id

    def change_password(
        self,
        user_id: int,
        current_password: str,
        new_password: str,
        confirm_password: str,
    ) -> None:
        """Replace a user's password after checking the current one."""
        user = self.get_user(user_id)
        if user is None:
            raise NotFoundError("User not found")

        if not self.hasher.verify(current_password, user.password_hash):
            raise ValidationError("current_password", "Current password is incorrect")

        if new_password != confirm_password:
            raise ValidationError("confirm_password", "New passwords do not match")

        user.password_hash = self.hasher.hash(new_password)
        self.db.commit()
        logger.info(f"User {user_id} changed password")

    def delete_account(self, user_id: int) -> None:
        """Delete a user together with their sessions and markers."""
        user = self.get_user(user_id)
        if user is None:
            raise NotFoundError("User not found")

        self.db.delete(user)
        self.db.commit()
        logger.info(f"Deleted user {user_id}")

    def cleanup_expired_sessions(self) -> int:
        """Remove expired session rows."""
        return self.sessions.delete_expired()

    def _start_session(self, user_id: int) -> str:
        """Drop the user's previous sessions and issue a fresh token."""
        self.sessions.delete_all_for_user(user_id)
        token = self.issuer.issue(user_id)
        self.sessions.create(user_id, token, self.session_ttl)
        return token
