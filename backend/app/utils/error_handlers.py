"""
Centralized error handling and user-friendly error messages.

Every error a client can see is an ``AppError`` subclass carrying a stable
``kind`` tag, so persistence-layer exception shapes never reach a response body.
"""
import logging

from fastapi.responses import JSONResponse
from sqlalchemy.exc import DataError, IntegrityError, OperationalError, StatementError

logger = logging.getLogger(__name__)


class AppError(Exception):
    """Base application error."""
    kind = "error"

    def __init__(self, message: str, status_code: int = 500, details: dict | None = None):
        self.message = message
        self.status_code = status_code
        self.details = details or {}
        super().__init__(self.message)


class ValidationError(AppError):
    """Validation error."""
    kind = "validation_failure"

    def __init__(self, message: str, details: dict | None = None):
        super().__init__(message, status_code=400, details=details)


class NotFoundError(AppError):
    """Resource not found error.

    Reported as 400 rather than 404: clients of the todo endpoints treat a
    missing id like any other rejected write.
    """
    kind = "not_found"

    def __init__(self, message: str = "Resource not found", details: dict | None = None):
        super().__init__(message, status_code=400, details=details)


class StoreUnavailableError(AppError):
    """Database unreachable or refusing connections."""
    kind = "store_unavailable"

    def __init__(self, message: str = "Database operation failed", details: dict | None = None):
        super().__init__(message, status_code=503, details=details)


# User-friendly error messages
ERROR_MESSAGES = {
    "todo_not_found": "Todo not found. It may have been deleted.",
    "invalid_todo_id": "Todo id must be a positive integer.",
    "invalid_todo_data": "Todo data is invalid. Please check title and isCompleted.",

    # General
    "server_error": "Something went wrong on our end. Please try again later.",
    "database_error": "Database connection issue. Please try again later.",
}


def get_error_message(error_key: str, default: str | None = None) -> str:
    """Get a user-friendly error message."""
    return ERROR_MESSAGES.get(error_key, default or ERROR_MESSAGES["server_error"])


def handle_database_error(error: Exception, operation: str = "") -> AppError:
    """Translate a SQLAlchemy error raised during a write into a tagged AppError."""
    if isinstance(error, OperationalError):
        logger.error("Database unavailable during %s: %s", operation, error)
        return StoreUnavailableError(get_error_message("database_error"))

    if isinstance(error, (IntegrityError, DataError, StatementError)):
        logger.warning("Rejected data during %s: %s", operation, error)
        return ValidationError(get_error_message("invalid_todo_data"))

    logger.error("Database error during %s: %s", operation, error)
    return AppError(get_error_message("server_error"), status_code=500)


def create_error_response(
    status_code: int,
    message: str,
    kind: str = "error",
    details: dict | None = None,
) -> JSONResponse:
    """Create a standardized error response."""
    content = {
        "success": False,
        "error": message,
        "kind": kind,
    }

    if details:
        content["details"] = details

    return JSONResponse(
        status_code=status_code,
        content=content
    )
