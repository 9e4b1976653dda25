import os
from pathlib import Path
from dotenv import load_dotenv

# Override=True so changes in backend/.env take effect on process reload (and not get
# stuck on old environment variables).
#
# For automated tests (SQLite), we need to prevent backend/.env from overriding the
# test DATABASE_URL and secrets. Set DISABLE_DOTENV=1 to skip loading .env.
if os.getenv("DISABLE_DOTENV") != "1":
    load_dotenv(override=True)

_raw_database_url = (os.getenv("DATABASE_URL") or "").strip()
# Default to a local SQLite DB for dev so the backend can start out-of-the-box.
# Use an absolute path so it works regardless of current working directory.
_default_sqlite_path = (Path(__file__).resolve().parent.parent / "dev.db").as_posix()
DATABASE_URL = _raw_database_url or f"sqlite:///{_default_sqlite_path}"

# Upper bound (seconds) for connecting, waiting on a pooled connection, or waiting on a
# locked SQLite file. A store call that exceeds it surfaces as a 503.
DB_TIMEOUT_S = float(os.getenv("DB_TIMEOUT_S", "10") or "10")

# Auth
# Static string appended to every password before it is hashed (a server-side pepper).
EXTRA_BCRYPT_STRING = os.getenv("EXTRA_BCRYPT_STRING", "")
JWT_SECRET = os.getenv("JWT_SECRET", "")
JWT_EXPIRE_DAYS = int(os.getenv("JWT_EXPIRE_DAYS", "7") or "7")
BCRYPT_ROUNDS = int(os.getenv("BCRYPT_ROUNDS", "12") or "12")

# Static front-end (served at "/" when the directory exists)
STATIC_DIR = os.getenv("STATIC_DIR") or (Path(__file__).resolve().parents[2] / "public").as_posix()

LOG_LEVEL = (os.getenv("LOG_LEVEL", "INFO") or "INFO").upper()

_REQUIRED_SECRETS = ("EXTRA_BCRYPT_STRING", "JWT_SECRET")


def require_secrets() -> None:
    """Fail fast when a secret the auth layer depends on is not configured."""
    missing = [name for name in _REQUIRED_SECRETS if not globals().get(name)]
    if missing:
        raise RuntimeError(f"Missing required environment variables: {', '.join(missing)}")
