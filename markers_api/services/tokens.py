"""Signed bearer tokens."""

import secrets
from datetime import UTC, datetime, timedelta

from jose import JWTError, jwt

from markers_api.errors import InvalidTokenError


class TokenIssuer:
    """Issues and decodes JWTs that carry a user id.

    The secret is fixed for the lifetime of the issuer; changing it
    invalidates every outstanding token. Expiry here is independent of
    the session row's own ``expires_at``.
    """

    def __init__(self, secret: str, algorithm: str = "HS256", expiration_minutes: int = 10080):
        if not secret:
            raise ValueError("Token signing secret must not be empty")
        self._secret = secret
        self.algorithm = algorithm
        self.expiration = timedelta(minutes=expiration_minutes)

    def issue(self, user_id: int) -> str:
        """Create a token for ``user_id``.

        ``ts`` and ``jti`` keep two tokens for the same user distinct even
        when issued within the same second.
        """
        now = datetime.now(UTC)
        claims = {
            "sub": str(user_id),
            "ts": int(now.timestamp() * 1_000_000),
            "jti": secrets.token_hex(8),
            "iat": now,
            "exp": now + self.expiration,
        }
        return jwt.encode(claims, self._secret, algorithm=self.algorithm)

    def decode(self, token: str) -> int:
        """Return the user id in ``token``.

        Raises:
            InvalidTokenError: on bad signature, bad structure or expiry alike.
        """
        try:
            payload = jwt.decode(token, self._secret, algorithms=[self.algorithm])
        except JWTError as e:
            raise InvalidTokenError("Invalid token") from e

        subject = payload.get("sub")
        try:
            return int(subject)
        except (TypeError, ValueError) as e:
            raise InvalidTokenError("Invalid token") from e
