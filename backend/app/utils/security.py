import logging

import bcrypt

from .. import config
from .validation import validate_password_length

logger = logging.getLogger(__name__)


def hash_password(password: str, pepper: str | None = None, rounds: int | None = None) -> str:
    """
    Hash ``password + pepper`` with bcrypt and a fresh random salt.

    bcrypt truncates at 72 *bytes* (newer builds raise instead), so the limit is
    enforced explicitly on the peppered value.
    """
    if not password:
        raise ValueError("Password is required")

    pepper = config.EXTRA_BCRYPT_STRING if pepper is None else pepper
    validate_password_length(password, pepper)

    salt = bcrypt.gensalt(rounds=rounds or config.BCRYPT_ROUNDS)
    hashed = bcrypt.hashpw((password + pepper).encode("utf-8"), salt)
    return hashed.decode("utf-8")


def verify_password(password: str, hashed: str, pepper: str | None = None) -> bool:
    # bcrypt.checkpw compares in constant time.
    try:
        if not password or not hashed:
            return False
        pepper = config.EXTRA_BCRYPT_STRING if pepper is None else pepper
        pw_bytes = (password + pepper).encode("utf-8")
        if len(pw_bytes) > 72:
            return False
        return bcrypt.checkpw(pw_bytes, hashed.encode("utf-8"))
    except ValueError as e:
        # Malformed stored hash.
        logger.warning("Password verification failed: %s", e)
        return False
