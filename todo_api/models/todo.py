"""Todo ORM — the single persisted entity.

Invariants:
    - id is an autoincrement integer primary key assigned by the engine
    - ids are never reused after deletes (AUTOINCREMENT on SQLite, sequence elsewhere)
    - task is required and bounded to MAX_TASK_LENGTH
    - done defaults to false on both the Python and server side
"""

from sqlalchemy import Boolean, Integer, String, false
from sqlalchemy.orm import Mapped, mapped_column

from todo_api.core.domain_types import MAX_TASK_LENGTH
from todo_api.db.base import Base


class Todo(Base):
    """Todo row — id, task text, completion flag."""
    __tablename__ = "todos"
    __table_args__ = {"sqlite_autoincrement": True}

    id: Mapped[int] = mapped_column(
        Integer, primary_key=True, autoincrement=True,
    )
    task: Mapped[str] = mapped_column(String(MAX_TASK_LENGTH), nullable=False)
    done: Mapped[bool] = mapped_column(
        Boolean, nullable=False, default=False, server_default=false(),
    )
