"""Boundary Protocols — contract between handlers and storage backends.

Invariants:
    - Handlers depend on TodoRepository only, never on a concrete store
    - Lookups return None / False for a missing id; handlers decide the 404
    - Implementations raise DatabaseError for storage failures

Design Decisions:
    - Protocol over ABC: InMemoryTodoStore and SqlTodoStore share no base class
    - Async methods: the SQL implementation does IO
"""

from typing import Protocol

from todo_api.core.domain_types import TodoId


class TodoLike(Protocol):
    """Structural contract for a stored todo item."""
    id: int
    task: str
    done: bool


class TodoRepository(Protocol):
    """Contract for todo persistence — implemented by storage/."""
    async def connect(self) -> None: ...
    async def close(self) -> None: ...
    async def health_check(self) -> bool: ...
    async def list_all(self) -> list[TodoLike]: ...
    async def get(self, todo_id: TodoId) -> TodoLike | None: ...
    async def create(self, task: str, done: bool) -> TodoLike: ...
    async def update(
        self, todo_id: TodoId, task: str, done: bool,
    ) -> TodoLike | None: ...
    async def delete(self, todo_id: TodoId) -> bool: ...
