"""Storage Backends — factory for the configured TodoRepository.

Supported backends:
    - "memory" (default): lock-guarded in-process list
    - "sql": `todos` table through an async SQLAlchemy engine
"""

from todo_api.config import Settings
from todo_api.core.repository_protocols import TodoRepository
from todo_api.storage.memory_store import InMemoryTodoStore
from todo_api.storage.sql_store import SqlTodoStore

__all__ = [
    "InMemoryTodoStore",
    "SqlTodoStore",
    "build_store",
]


def build_store(settings: Settings) -> TodoRepository:
    """Construct the store named by settings.storage_backend (not yet connected)."""
    if settings.storage_backend == "sql":
        return SqlTodoStore(
            settings.resolved_database_url,
            pool_size=settings.database_pool_size,
            max_overflow=settings.database_max_overflow,
        )
    return InMemoryTodoStore()
