"""Password hashing."""

import logging

from passlib.context import CryptContext

from markers_api.errors import HashingError

logger = logging.getLogger(__name__)


class PasswordHasher:
    """Salted bcrypt hashing with a cost factor fixed at construction."""

    def __init__(self, rounds: int = 10):
        self.rounds = rounds
        self._context = CryptContext(
            schemes=["bcrypt"],
            deprecated="auto",
            bcrypt__rounds=rounds,
            bcrypt__truncate_error=True,
        )
        self._dummy_hash: str | None = None

    @property
    def dummy_hash(self) -> str:
        """A hash no client knows the password for, at the same cost factor."""
        if self._dummy_hash is None:
            self._dummy_hash = self.hash("unused-dummy-password")
        return self._dummy_hash

    def hash(self, password: str) -> str:
        """Hash a password.

        Passwords longer than 72 bytes are refused rather than truncated.
        """
        try:
            return self._context.hash(password)
        except (ValueError, TypeError) as e:
            logger.error(f"Password hashing failed: {e}")
            raise HashingError("Password hashing failed") from e

    def verify(self, password: str, hashed_password: str | None) -> bool:
        """Verify a password against its hash.

        Malformed or empty hashes never match and never raise.
        """
        if not hashed_password:
            return False
        try:
            return self._context.verify(password, hashed_password)
        except (ValueError, TypeError):
            return False
