"""SQL Store — todos table through DatabaseSessionManager.

Invariants:
    - connect() pings the database and creates the table; failures propagate
    - One session and at most one commit per operation
    - Ids come from the engine's autoincrement
    - Ids that do not fit the `id` column never reach the driver; they match nothing
    - Storage failures surface as DatabaseError with details logged
"""

import logging

from sqlalchemy import delete, select
from sqlalchemy.engine import URL

from todo_api.core.domain_types import TodoId, is_storable_id
from todo_api.infrastructure.database import DatabaseSessionManager
from todo_api.models.todo import Todo

logger = logging.getLogger(__name__)


class SqlTodoStore:
    """TodoRepository backed by a relational table."""

    def __init__(
        self, database_url: URL | str, pool_size: int = 5, max_overflow: int = 10,
    ):
        self.db = DatabaseSessionManager(
            database_url, pool_size=pool_size, max_overflow=max_overflow,
        )

    async def connect(self) -> None:
        await self.db.ping()
        logger.info("DB connected")
        await self.db.create_tables()
        logger.info("Table created or already exists")

    async def close(self) -> None:
        await self.db.dispose()

    async def health_check(self) -> bool:
        return await self.db.health_check()

    async def list_all(self) -> list[Todo]:
        async with self.db.session("list") as session:
            result = await session.execute(select(Todo).order_by(Todo.id))
            return list(result.scalars().all())

    async def get(self, todo_id: TodoId) -> Todo | None:
        if not is_storable_id(todo_id):
            return None
        async with self.db.session("read") as session:
            return await session.get(Todo, todo_id)

    async def create(self, task: str, done: bool) -> Todo:
        async with self.db.session("insert") as session:
            todo = Todo(task=task, done=done)
            session.add(todo)
            await session.commit()
            return todo

    async def update(
        self, todo_id: TodoId, task: str, done: bool,
    ) -> Todo | None:
        if not is_storable_id(todo_id):
            return None
        async with self.db.session("update") as session:
            todo = await session.get(Todo, todo_id)
            if todo is None:
                return None
            todo.task = task
            todo.done = done
            await session.commit()
            return todo

    async def delete(self, todo_id: TodoId) -> bool:
        if not is_storable_id(todo_id):
            return False
        async with self.db.session("delete") as session:
            result = await session.execute(
                delete(Todo).where(Todo.id == todo_id),
            )
            await session.commit()
            return result.rowcount > 0
