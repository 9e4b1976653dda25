"""
Centralized error handling and user-facing error messages.
"""
import logging
from fastapi.responses import JSONResponse
from sqlalchemy.exc import OperationalError, TimeoutError as PoolTimeoutError

logger = logging.getLogger(__name__)


class AppError(Exception):
    """Base application error."""
    def __init__(self, message: str, status_code: int = 500, details: dict | None = None):
        self.message = message
        self.status_code = status_code
        self.details = details or {}
        super().__init__(self.message)


class ValidationError(AppError):
    """Malformed input or identifier."""
    def __init__(self, message: str, details: dict | None = None):
        super().__init__(message, status_code=400, details=details)


class DuplicateUsernameError(AppError):
    """Sign-up for a username that is already taken."""
    def __init__(self, message: str | None = None, details: dict | None = None):
        super().__init__(message or get_error_message("username_exists"), status_code=400, details=details)


class InvalidCredentialError(AppError):
    """Password does not match the stored hash."""
    def __init__(self, message: str | None = None, details: dict | None = None):
        super().__init__(message or get_error_message("invalid_password"), status_code=400, details=details)


class NotFoundError(AppError):
    """Resource not found error."""
    def __init__(self, message: str = "Resource not found", details: dict | None = None, status_code: int = 404):
        super().__init__(message, status_code=status_code, details=details)


class UnauthorizedError(AppError):
    """Missing, malformed, invalid or expired auth token."""
    def __init__(self, message: str = "Unauthorized", details: dict | None = None):
        super().__init__(message, status_code=401, details=details)


class DatabaseError(AppError):
    """Store or infrastructure failure."""
    def __init__(self, message: str = "Server error", details: dict | None = None):
        super().__init__(message, status_code=500, details=details)


class ServiceUnavailableError(AppError):
    """Store timed out or the connection was lost."""
    def __init__(self, message: str | None = None, details: dict | None = None):
        super().__init__(message or get_error_message("database_error"), status_code=503, details=details)


ERROR_MESSAGES = {
    # Authentication
    "credentials_required": "Username and password are required",
    "username_exists": "Username already exists",
    "user_not_found": "User not found",
    "invalid_password": "Invalid password",
    "password_too_long": "Password is too long",
    "unauthorized": "Unauthorized",
    "invalid_token": "Invalid or expired token",

    # Jobs
    "job_not_found": "Job not found",
    "invalid_id": "Invalid ID format",
    "invalid_user_id": "Invalid user ID format",
    "user_or_job_not_found": "User or job not found",
    "saved_job_not_found": "Job not found in saved jobs",
    "save_failed": "Failed to save job",

    # General
    "not_found": "The requested resource was not found.",
    "server_error": "Server error",
    "database_error": "Database connection issue. Please try again later.",
    "validation_error": "Please check your input and try again.",
}


def get_error_message(error_key: str, default: str | None = None) -> str:
    """Get a user-facing error message."""
    return ERROR_MESSAGES.get(error_key, default or ERROR_MESSAGES["server_error"])


def handle_database_error(error: Exception, operation: str = "") -> AppError:
    """Map a store failure to the error the API reports for it."""
    logger.error(f"Database error during {operation}: {error}")

    if isinstance(error, (OperationalError, PoolTimeoutError)):
        return ServiceUnavailableError()

    error_str = str(error).lower()

    if "timeout" in error_str or "timed out" in error_str or "locked" in error_str:
        return ServiceUnavailableError()

    if "connection" in error_str or "operational" in error_str:
        return ServiceUnavailableError()

    return DatabaseError(get_error_message("server_error"))


def create_error_response(
    status_code: int,
    message: str,
    details: dict | None = None
) -> JSONResponse:
    """Create a standardized error response."""
    content = {
        "success": False,
        "error": message,
    }

    if details:
        content["details"] = details

    return JSONResponse(
        status_code=status_code,
        content=content
    )

