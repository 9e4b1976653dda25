"""
Sign-up / sign-in / sign-out.

Passwords are hashed as ``bcrypt(password + EXTRA_BCRYPT_STRING)`` with a fresh salt.
Sign-in hands back a stateless bearer token; see ``utils.jwt`` for its limits.
"""
import logging
from dataclasses import dataclass

from ..repositories.users import UserRepository
from ..utils.error_handlers import (
    DuplicateUsernameError,
    InvalidCredentialError,
    NotFoundError,
    get_error_message,
)
from ..utils.jwt import TokenAuthority, token_authority
from ..utils.security import hash_password, verify_password
from ..utils.validation import validate_credentials

logger = logging.getLogger(__name__)


@dataclass
class SignInResult:
    user_id: str
    username: str
    token: str


class AuthVerifier:
    def __init__(self, users: UserRepository, tokens: TokenAuthority | None = None):
        self.users = users
        self.tokens = tokens or token_authority

    def sign_up(self, username, password) -> str:
        username, password = validate_credentials(username, password)

        # Fast path only; the unique index on users.username is what guarantees it.
        if self.users.get_by_username(username) is not None:
            raise DuplicateUsernameError()

        password_hash = hash_password(password)
        user = self.users.create(username, password_hash)
        logger.info("Registered user %s (%s)", user.username, user.id)
        return user.id

    def sign_in(self, username, password) -> SignInResult:
        username, password = validate_credentials(username, password)

        user = self.users.get_by_username(username)
        if user is None:
            logger.warning("Sign-in for unknown user %s", username)
            raise NotFoundError(get_error_message("user_not_found"), status_code=400)

        if not verify_password(password, user.password):
            logger.warning("Sign-in with wrong password for %s", username)
            raise InvalidCredentialError()

        token = self.tokens.issue(user.id, user.username)
        logger.info("User %s signed in", user.username)
        return SignInResult(user_id=user.id, username=user.username, token=token)

    def sign_out(self, token: str | None = None) -> bool:
        """Always succeeds. Returns whether anything was revoked server-side (never, for tokens)."""
        return self.tokens.revoke(token)
