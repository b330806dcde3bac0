"""Storage failures — database errors become a generic 500, details only in logs."""

import logging

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy import text

from todo_api.config import Settings
from todo_api.main import create_app
from todo_api.storage import SqlTodoStore


@pytest.fixture
async def broken_client():
    """Client over a SQL store whose table has been dropped."""
    store = SqlTodoStore("sqlite+aiosqlite:///:memory:")
    await store.connect()
    async with store.db.engine.begin() as conn:
        await conn.execute(text("DROP TABLE todos"))
    app = create_app(Settings(log_format="text"), store=store)
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c
    await store.close()


async def test_list_storage_failure_returns_generic_500(broken_client, caplog):
    with caplog.at_level(logging.ERROR):
        res = await broken_client.get("/todos")

    assert res.status_code == 500
    assert res.text == "Internal server error"
    assert "todos" not in res.text
    assert any("Database list failed" in r.getMessage() for r in caplog.records)


async def test_create_storage_failure_returns_500(broken_client):
    res = await broken_client.post("/todos", json={"task": "t"})
    assert res.status_code == 500
    assert res.text == "Internal server error"


async def test_client_errors_still_reported_when_storage_broken(broken_client):
    res = await broken_client.get("/todos/abc")
    assert res.status_code == 400


async def test_storage_failure_logged_once_with_detail(broken_client, caplog):
    with caplog.at_level(logging.ERROR):
        await broken_client.get("/todos")

    errors = [r for r in caplog.records if r.levelno >= logging.ERROR]
    assert len(errors) == 1
    assert "no such table" in errors[0].getMessage()
    assert errors[0].operation == "list"
