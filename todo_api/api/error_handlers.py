"""Error Handlers — global exception handlers for the todo API.

Invariants:
    - TodoError → plain-text message with the error's HTTP status
    - RequestValidationError → 400; a bad path id gets the invalid-id message
    - Exception (catch-all) → 500, never leaks internal details
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import PlainTextResponse

from todo_api.core.errors import (
    DatabaseError, ErrorSeverity, InvalidTodoIdError, TodoError,
)

logger = logging.getLogger(__name__)

INTERNAL_ERROR_MESSAGE = "Internal server error"

_SEVERITY_LEVELS = {
    ErrorSeverity.INFO: logging.INFO,
    ErrorSeverity.WARNING: logging.WARNING,
    ErrorSeverity.ERROR: logging.ERROR,
    ErrorSeverity.CRITICAL: logging.ERROR,
}


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_todo_error_handler(app)
    _register_validation_error_handler(app)
    _register_generic_error_handler(app)


def _register_todo_error_handler(app: FastAPI) -> None:
    """Register todo domain/infrastructure error handler."""

    @app.exception_handler(TodoError)
    async def todo_error_handler(request: Request, exc: TodoError):
        extra = {
            "error_code": exc.code,
            "path": request.url.path,
            "method": request.method,
            "todo_id": exc.context.todo_id,
        }
        if isinstance(exc, DatabaseError):
            logger.error(
                f"Database {exc.operation} failed: {exc.detail}",
                extra={**extra, "operation": exc.operation},
            )
        else:
            logger.log(
                _SEVERITY_LEVELS[exc.severity], f"TodoError: {exc.message}",
                extra=extra,
            )
        return PlainTextResponse(
            exc.to_response(), status_code=exc.http_status,
        )


def _register_validation_error_handler(app: FastAPI) -> None:
    """Register Pydantic validation error handler."""

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError,
    ):
        logger.warning(
            f"Validation error on {request.url.path}: {exc.errors()}",
            extra={"path": request.url.path, "method": request.method},
        )
        return PlainTextResponse(
            build_validation_message(exc.errors()),
            status_code=status.HTTP_400_BAD_REQUEST,
        )


def _register_generic_error_handler(app: FastAPI) -> None:
    """Register catch-all error handler."""

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all — never leaks internal details."""
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            exc_info=True,
            extra={"path": request.url.path, "method": request.method},
        )
        return PlainTextResponse(
            INTERNAL_ERROR_MESSAGE,
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        )


def build_validation_message(errors: list[dict]) -> str:
    """One-line plain-text description of the first validation error."""
    if not errors:
        return "Invalid request"
    first = errors[0]
    loc = tuple(first.get("loc", ()))
    if loc[:1] == ("path",):
        return InvalidTodoIdError().message
    field = ".".join(str(part) for part in loc[1:])
    if first.get("type") == "json_invalid":
        return f"Invalid JSON body: {first.get('msg', '')}"
    if field:
        return f"Invalid request body: {field}: {first.get('msg', '')}"
    return f"Invalid request body: {first.get('msg', '')}"
