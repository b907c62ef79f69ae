"""
Application error taxonomy and the handlers that turn it into JSON responses.

Services raise these; routes let them propagate. Every error body has the
shape {"error": "<message>"}.
"""
import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

logger = logging.getLogger(__name__)


class AppError(Exception):
    """Base class for errors that map to a client-facing response."""
    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Bad request"

    def __init__(self, message: str = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class ValidationError(AppError):
    """Missing or malformed input."""
    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Invalid request"


class AuthError(AppError):
    """Missing or invalid credential."""
    status_code = status.HTTP_401_UNAUTHORIZED
    default_message = "Unauthorized"


class AuthzError(AppError):
    """Authenticated but not entitled to the resource or route."""
    status_code = status.HTTP_401_UNAUTHORIZED
    default_message = "Unauthorized"


class NotFoundError(AppError):
    """Resource absent or not owned by the caller."""
    status_code = status.HTTP_404_NOT_FOUND
    default_message = "Not found"


class ConflictError(AppError):
    status_code = status.HTTP_409_CONFLICT
    default_message = "Conflict"


class StateError(AppError):
    """Resource is in a state that does not allow the operation."""
    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Operation not allowed in the current state"


class PreconditionError(AppError):
    """A prerequisite owned by the caller is missing (e.g. profile)."""
    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Precondition failed"


def is_missing_table_error(exc: Exception) -> bool:
    """Detect 'table does not exist' across PostgreSQL and SQLite."""
    text = str(exc).lower()
    return ("relation" in text and "does not exist" in text) or "no such table" in text


async def app_error_handler(request: Request, exc: AppError):
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})


async def request_validation_handler(request: Request, exc: RequestValidationError):
    errors = exc.errors()
    if any(err.get("type") == "missing" for err in errors):
        message = "Missing required fields"
    elif errors:
        first = errors[0]
        field = ".".join(str(part) for part in first.get("loc", ())[1:])
        message = f"{field}: {first.get('msg')}" if field else first.get("msg", "Invalid request")
    else:
        message = "Invalid request"
    logger.debug(f"Request validation failed: path={request.url.path}, errors={errors}")
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"error": message})


async def database_error_handler(request: Request, exc: SQLAlchemyError):
    if is_missing_table_error(exc):
        logger.error(f"Database not initialized: path={request.url.path}, error={exc}")
        message = "Database not initialized. Run `alembic upgrade head` before starting the API."
    else:
        logger.exception(f"Database error: path={request.url.path}")
        message = "Internal server error"
    return JSONResponse(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, content={"error": message})


async def unhandled_error_handler(request: Request, exc: Exception):
    logger.exception(f"Unhandled error: path={request.url.path}")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"error": "Internal server error"},
    )


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(AppError, app_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(SQLAlchemyError, database_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)
