"""Todo Rules — pure validation applied by handlers before touching storage.

Invariants:
    - Functions are PURE: they raise or return, never mutate
    - Identifier agreement is checked before existence (409 wins over 404)
"""

from todo_api.core.domain_types import MAX_TASK_LENGTH
from todo_api.core.errors import (
    EmptyTaskError, TaskTooLongError, TodoIdMismatchError,
)


def require_task(task: str) -> str:
    """Reject empty or oversized task text. Returns the task unchanged."""
    if task == "":
        raise EmptyTaskError()
    if len(task) > MAX_TASK_LENGTH:
        raise TaskTooLongError(MAX_TASK_LENGTH)
    return task


def require_matching_id(path_id: int, body_id: int) -> None:
    """Body identifier must equal the path identifier."""
    if path_id != body_id:
        raise TodoIdMismatchError(path_id, body_id)
