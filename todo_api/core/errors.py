"""Error Hierarchy — typed, categorized exceptions for all todo API failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Client errors are 400-level; storage errors are 500-level
    - to_response() produces the plain-text body sent to the caller
    - Storage error details are logged, never placed in the response body
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum


class ErrorSeverity(str, Enum):
    """Error severity for observability."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    VALIDATION = "validation"
    RESOURCE_NOT_FOUND = "resource_not_found"
    CONFLICT = "conflict"
    DATABASE = "database"


@dataclass
class ErrorContext:
    """Context attached to an error for logging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    todo_id: int | None = None


class TodoError(Exception):
    """Base exception for all todo API errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        context: ErrorContext | None = None,
        http_status: int = 500,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.context = context or ErrorContext()
        self.http_status = http_status

    def to_response(self) -> str:
        """Plain-text body for the HTTP response."""
        return self.message


# ─── Client Errors (400-level) ───────────────────────────────────

class InvalidTodoIdError(TodoError):
    """Path identifier is not a 64-bit integer."""
    def __init__(self, context: ErrorContext | None = None):
        super().__init__(
            "Invalid ID! ID must be an integer",
            "INVALID_ID", ErrorCategory.VALIDATION,
            ErrorSeverity.WARNING, context, 400,
        )


class EmptyTaskError(TodoError):
    """Task text is empty."""
    def __init__(self, context: ErrorContext | None = None):
        super().__init__(
            "Task is empty",
            "EMPTY_TASK", ErrorCategory.VALIDATION,
            ErrorSeverity.WARNING, context, 400,
        )


class TaskTooLongError(TodoError):
    """Task text exceeds the stored column width."""
    def __init__(self, max_length: int, context: ErrorContext | None = None):
        super().__init__(
            f"Task is longer than {max_length} characters",
            "TASK_TOO_LONG", ErrorCategory.VALIDATION,
            ErrorSeverity.WARNING, context, 400,
        )
        self.max_length = max_length


class TodoIdMismatchError(TodoError):
    """Identifier in the body differs from the one in the URL."""
    def __init__(self, path_id: int, body_id: int, context: ErrorContext | None = None):
        ctx = context or ErrorContext(todo_id=path_id)
        super().__init__(
            "Id in url doesn't match the id in the body",
            "ID_MISMATCH", ErrorCategory.CONFLICT,
            ErrorSeverity.WARNING, ctx, 409,
        )
        self.path_id = path_id
        self.body_id = body_id


class TodoNotFoundError(TodoError):
    """No todo with the requested identifier."""
    def __init__(self, todo_id: int, context: ErrorContext | None = None):
        ctx = context or ErrorContext(todo_id=todo_id)
        super().__init__(
            "Todo not found",
            "TODO_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.INFO, ctx, 404,
        )
        self.todo_id = todo_id


# ─── Infrastructure Errors (500-level) ───────────────────────────

class DatabaseError(TodoError):
    """Database operation failed. `detail` is for logs only."""
    def __init__(
        self, detail: str, operation: str, context: ErrorContext | None = None,
    ):
        super().__init__(
            "Internal server error",
            "DATABASE_ERROR", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, context, 500,
        )
        self.detail = detail
        self.operation = operation
