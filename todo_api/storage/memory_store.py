"""In-Memory Store — ordered list of todo items guarded by an asyncio.Lock.

Invariants:
    - Every read and mutation holds _lock; concurrent handlers never interleave
    - Items kept in insertion order, which is also ascending id order
    - Ids are last-assigned + 1 and never reused, even after deleting the newest item
    - Callers receive copies; stored items are only changed through this class
"""

import asyncio
from dataclasses import dataclass, replace

from todo_api.core.domain_types import TodoId


@dataclass
class TodoItem:
    id: int
    task: str
    done: bool = False


class InMemoryTodoStore:
    """TodoRepository backed by a process-local list."""

    def __init__(self, items: list[TodoItem] | None = None):
        self._items: list[TodoItem] = [replace(i) for i in items or []]
        self._last_id = max((i.id for i in self._items), default=0)
        self._lock = asyncio.Lock()

    async def connect(self) -> None:
        return None

    async def close(self) -> None:
        return None

    async def health_check(self) -> bool:
        return True

    def _find(self, todo_id: int) -> int | None:
        for index, item in enumerate(self._items):
            if item.id == todo_id:
                return index
        return None

    async def list_all(self) -> list[TodoItem]:
        async with self._lock:
            return [replace(i) for i in self._items]

    async def get(self, todo_id: TodoId) -> TodoItem | None:
        async with self._lock:
            index = self._find(todo_id)
            return None if index is None else replace(self._items[index])

    async def create(self, task: str, done: bool) -> TodoItem:
        async with self._lock:
            self._last_id += 1
            item = TodoItem(id=self._last_id, task=task, done=done)
            self._items.append(item)
            return replace(item)

    async def update(
        self, todo_id: TodoId, task: str, done: bool,
    ) -> TodoItem | None:
        async with self._lock:
            index = self._find(todo_id)
            if index is None:
                return None
            item = self._items[index]
            item.task = task
            item.done = done
            return replace(item)

    async def delete(self, todo_id: TodoId) -> bool:
        async with self._lock:
            index = self._find(todo_id)
            if index is None:
                return False
            del self._items[index]
            return True
