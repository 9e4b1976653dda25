import re
import secrets

# Store identifiers are 24 lowercase hex characters, the same shape as a
# document-store object id (e.g. "507f1f77bcf86cd799439011").
OBJECT_ID_LENGTH = 24
_OBJECT_ID_RE = re.compile(r"[0-9a-fA-F]{24}")


def new_object_id() -> str:
    return secrets.token_hex(OBJECT_ID_LENGTH // 2)


def is_valid_object_id(value) -> bool:
    return isinstance(value, str) and _OBJECT_ID_RE.fullmatch(value) is not None
