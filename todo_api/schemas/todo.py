"""Todo Schemas — JSON bodies for create, update and responses.

Invariants:
    - Strict types: "true" is not a bool, 1.5 is not an int
    - Missing fields decode to zero values (id 0, task "", done false)
    - TodoUpdate.id must fit in 64 bits, like the path id
    - Unknown fields are ignored; TodoCreate ignores any client-sent id
"""

from pydantic import BaseModel, ConfigDict, Field

from todo_api.core.domain_types import MAX_TODO_ID, MIN_TODO_ID


class TodoCreate(BaseModel):
    """Create body — identifier is assigned by storage."""
    model_config = ConfigDict(strict=True)

    task: str = ""
    done: bool = False


class TodoUpdate(BaseModel):
    """Update body — full replacement, identifier must match the path."""
    model_config = ConfigDict(strict=True)

    id: int = Field(0, ge=MIN_TODO_ID, le=MAX_TODO_ID)
    task: str = ""
    done: bool = False


class TodoResponse(BaseModel):
    """Todo as returned to clients."""
    model_config = ConfigDict(from_attributes=True)

    id: int
    task: str
    done: bool
