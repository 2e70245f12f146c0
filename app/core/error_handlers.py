"""
Map application exceptions to JSON responses of the form {"message": "..."}.
"""
import logging
import re

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.core.exceptions import (
    AuthenticationError,
    BaseAppException,
    DatabaseError,
    NotFoundError,
    ValidationError,
)

logger = logging.getLogger(__name__)

GENERIC_ERROR_MESSAGE = "Server error"

_STATUS_BY_EXCEPTION = {
    ValidationError: status.HTTP_400_BAD_REQUEST,
    NotFoundError: status.HTTP_404_NOT_FOUND,
    AuthenticationError: status.HTTP_401_UNAUTHORIZED,
}


def _field_label(name: str) -> str:
    # targetAmount / target_amount -> "Target amount"
    words = re.sub(r"(?<!^)(?=[A-Z])", " ", str(name)).replace("_", " ").lower().split()
    return " ".join(words).capitalize() if words else "Value"


def first_error_message(exc: RequestValidationError) -> str:
    """Human-readable message for the first violated rule."""
    errors = exc.errors()
    if not errors:
        return "Invalid request"
    error = errors[0]
    loc = [part for part in error.get("loc", ()) if part not in ("body", "query", "path")]
    field = loc[-1] if loc else None

    if error.get("type") == "missing" and field is not None:
        return f"{_field_label(field)} is required"

    ctx_error = (error.get("ctx") or {}).get("error")
    if isinstance(ctx_error, Exception) and str(ctx_error):
        return str(ctx_error)

    message = error.get("msg", "Invalid request")
    if message.startswith("Value error, "):
        message = message[len("Value error, "):]
    if field is not None and error.get("type") != "value_error":
        return f"{_field_label(field)}: {message}"
    return message


def _message(content: str, status_code: int) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"message": content})


def register_exception_handlers(app: FastAPI) -> None:
    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError):
        message = first_error_message(exc)
        logger.info("Rejected %s %s: %s", request.method, request.url.path, message)
        return _message(message, status.HTTP_400_BAD_REQUEST)

    @app.exception_handler(DatabaseError)
    async def database_error_handler(request: Request, exc: DatabaseError):
        logger.error("Database error on %s %s: %s (%s)", request.method, request.url.path, exc.message, exc.details)
        return _message(GENERIC_ERROR_MESSAGE, status.HTTP_500_INTERNAL_SERVER_ERROR)

    @app.exception_handler(BaseAppException)
    async def app_exception_handler(request: Request, exc: BaseAppException):
        status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
        for exc_type, code in _STATUS_BY_EXCEPTION.items():
            if isinstance(exc, exc_type):
                status_code = code
                break
        if status_code == status.HTTP_500_INTERNAL_SERVER_ERROR:
            logger.error("Unhandled application error: %s", exc.message)
            return _message(GENERIC_ERROR_MESSAGE, status_code)
        return _message(exc.message, status_code)

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        return JSONResponse(
            status_code=exc.status_code,
            content={"message": str(exc.detail)},
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(Exception)
    async def unexpected_exception_handler(request: Request, exc: Exception):
        logger.exception("Unexpected error on %s %s", request.method, request.url.path)
        return _message(GENERIC_ERROR_MESSAGE, status.HTTP_500_INTERNAL_SERVER_ERROR)
