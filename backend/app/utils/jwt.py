"""
Bearer-token auth artifacts.

Tokens are stateless: a signed HS256 JWT carrying ``userId``, ``username`` and an
expiry. Nothing is stored server-side, so a token stays valid until it expires even
after the user signs out. Sign-out is a client-side operation (drop the token).
"""
import logging
from datetime import datetime, timedelta, timezone

from jose import JWTError, jwt

from .. import config
from .error_handlers import UnauthorizedError, get_error_message

logger = logging.getLogger(__name__)

ALGORITHM = "HS256"
BEARER_PREFIX = "Bearer "


class TokenAuthority:
    def __init__(self, secret: str | None = None, expire_days: int | None = None):
        self._secret = secret
        self._expire_days = expire_days

    @property
    def secret(self) -> str:
        return config.JWT_SECRET if self._secret is None else self._secret

    @property
    def expires_in(self) -> timedelta:
        days = config.JWT_EXPIRE_DAYS if self._expire_days is None else self._expire_days
        return timedelta(days=days)

    def issue(self, user_id: str, username: str) -> str:
        now = datetime.now(timezone.utc)
        claims = {
            "sub": str(user_id),
            "userId": str(user_id),
            "username": username,
            "iat": now,
            "exp": now + self.expires_in,
        }
        return jwt.encode(claims, self.secret, algorithm=ALGORITHM)

    def verify(self, token: str) -> dict:
        """Return ``{"userId", "username"}`` or raise UnauthorizedError."""
        try:
            payload = jwt.decode(token, self.secret, algorithms=[ALGORITHM])
        except JWTError as e:
            logger.warning("Rejected bearer token: %s", e)
            raise UnauthorizedError(get_error_message("invalid_token"))

        user_id = payload.get("userId") or payload.get("sub")
        username = payload.get("username")
        if not user_id or not username:
            logger.warning("Rejected bearer token: missing identity claims")
            raise UnauthorizedError(get_error_message("invalid_token"))
        return {"userId": str(user_id), "username": username}

    def revoke(self, token: str | None = None) -> bool:
        # Stateless tokens cannot be revoked before they expire.
        return False


def parse_authorization_header(value: str | None) -> str:
    """Extract the token from an ``Authorization: Bearer <token>`` header."""
    if not value or not value.startswith(BEARER_PREFIX):
        raise UnauthorizedError(get_error_message("unauthorized"))
    token = value[len(BEARER_PREFIX):].strip()
    if not token:
        raise UnauthorizedError(get_error_message("unauthorized"))
    return token


token_authority = TokenAuthority()


def create_access_token(user_id: str, username: str) -> str:
    return token_authority.issue(user_id, username)
