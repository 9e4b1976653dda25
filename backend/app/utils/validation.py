"""
Validation utilities for request input.
"""
from typing import Any

from ..models.ids import is_valid_object_id
from .error_handlers import ValidationError, get_error_message

# bcrypt only looks at the first 72 bytes of its input.
BCRYPT_MAX_BYTES = 72


def validate_credentials(username: Any, password: Any) -> tuple[str, str]:
    """
    Both fields must be present and non-blank.

    Both are returned unchanged: usernames are stored and matched exactly,
    whitespace and case included.
    """
    if not isinstance(username, str) or not username.strip():
        raise ValidationError(get_error_message("credentials_required"))
    if not isinstance(password, str) or not password:
        raise ValidationError(get_error_message("credentials_required"))

    if len(username) > 255:
        raise ValidationError("Username must not exceed 255 characters")
    return username, password


def validate_password_length(password: str, pepper: str = "") -> None:
    """Reject passwords bcrypt would silently truncate once the pepper is appended."""
    if len((password + pepper).encode("utf-8")) > BCRYPT_MAX_BYTES:
        raise ValidationError(get_error_message("password_too_long"))


def validate_object_id(value: Any, error_key: str = "invalid_id") -> str:
    if not is_valid_object_id(value):
        raise ValidationError(get_error_message(error_key))
    return value.lower()
