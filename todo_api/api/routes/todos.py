"""Todo Routes — list, read, create, update and delete over the injected store.

Invariants:
    - Path ids are validated as 64-bit ints by FastAPI; failures map to 400 in error_handlers
    - Update checks id agreement before existence: a mismatch never touches storage
    - Mutations log at INFO with the affected id
"""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, Path, Response, status

from todo_api.api.dependencies import get_store
from todo_api.core.domain_types import MAX_TODO_ID, MIN_TODO_ID, TodoId
from todo_api.core.enforce_todo import require_matching_id, require_task
from todo_api.core.errors import TodoNotFoundError
from todo_api.core.repository_protocols import TodoRepository
from todo_api.schemas.todo import TodoCreate, TodoResponse, TodoUpdate

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/todos", tags=["todos"])

# Out-of-range ids fail validation like non-integers (400)
TodoIdPath = Annotated[int, Path(ge=MIN_TODO_ID, le=MAX_TODO_ID)]


@router.get("", response_model=list[TodoResponse])
async def list_todos(store: TodoRepository = Depends(get_store)):
    """All todos in id order."""
    todos = await store.list_all()
    return [TodoResponse.model_validate(t) for t in todos]


@router.get("/{todo_id}", response_model=TodoResponse)
async def read_todo(
    todo_id: TodoIdPath, store: TodoRepository = Depends(get_store),
):
    todo = await store.get(TodoId(todo_id))
    if todo is None:
        raise TodoNotFoundError(todo_id)
    return TodoResponse.model_validate(todo)


@router.post(
    "", response_model=TodoResponse, status_code=status.HTTP_201_CREATED,
)
async def create_todo(
    body: TodoCreate, store: TodoRepository = Depends(get_store),
):
    """Create a todo; the store assigns its id."""
    task = require_task(body.task)
    todo = await store.create(task, body.done)
    logger.info(
        f"Added new todo: {todo.task!r} (done={todo.done})",
        extra={"todo_id": todo.id},
    )
    return TodoResponse.model_validate(todo)


@router.put("/{todo_id}", response_model=TodoResponse)
async def update_todo(
    todo_id: TodoIdPath, body: TodoUpdate,
    store: TodoRepository = Depends(get_store),
):
    """Replace task and done of an existing todo."""
    require_matching_id(todo_id, body.id)
    task = require_task(body.task)
    todo = await store.update(TodoId(todo_id), task, body.done)
    if todo is None:
        raise TodoNotFoundError(todo_id)
    logger.info(
        f"Updated todo: {todo.task!r} (done={todo.done})",
        extra={"todo_id": todo.id},
    )
    return TodoResponse.model_validate(todo)


@router.delete("/{todo_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_todo(
    todo_id: TodoIdPath, store: TodoRepository = Depends(get_store),
):
    if not await store.delete(TodoId(todo_id)):
        raise TodoNotFoundError(todo_id)
    logger.info("Deleted todo", extra={"todo_id": todo_id})
    return Response(status_code=status.HTTP_204_NO_CONTENT)
