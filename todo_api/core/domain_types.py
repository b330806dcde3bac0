"""Domain Types — identity and limits for todo items.

Invariants:
    - TodoId wraps int — assigned by storage, never by the client
    - Client-supplied ids outside MIN_TODO_ID..MAX_TODO_ID (64-bit) are invalid input
    - Stored ids fit the 32-bit `id` column; larger valid ids simply match nothing
    - MAX_TASK_LENGTH matches the `task` column width
"""

from typing import NewType


TodoId = NewType("TodoId", int)

MIN_TODO_ID: int = -2**63
MAX_TODO_ID: int = 2**63 - 1

MIN_STORED_ID: int = -2**31
MAX_STORED_ID: int = 2**31 - 1

MAX_TASK_LENGTH: int = 255


def is_storable_id(todo_id: int) -> bool:
    """True if todo_id fits the integer `id` column."""
    return MIN_STORED_ID <= todo_id <= MAX_STORED_ID
