"""ORM Models — imported here so Base.metadata is populated before create_all."""

from todo_api.models.todo import Todo  # noqa: F401
