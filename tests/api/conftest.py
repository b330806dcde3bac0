"""API test fixtures — isolated app per test, run against both stores.

Invariants:
    - Every test gets a fresh store and a fresh FastAPI app
    - `client` is parametrized: each route test runs on memory and sql backends
    - The sql backend uses in-memory SQLite through aiosqlite

Design Decisions:
    - ASGITransport does not run the lifespan, so fixtures connect/close the store
"""

import pytest
from httpx import ASGITransport, AsyncClient

from todo_api.config import Settings
from todo_api.main import create_app
from todo_api.storage import InMemoryTodoStore, SqlTodoStore

SQLITE_URL = "sqlite+aiosqlite:///:memory:"


@pytest.fixture(params=["memory", "sql"])
async def store(request):
    if request.param == "sql":
        s = SqlTodoStore(SQLITE_URL)
    else:
        s = InMemoryTodoStore()
    await s.connect()
    yield s
    await s.close()


@pytest.fixture
def app(store):
    return create_app(Settings(log_format="text"), store=store)


@pytest.fixture
async def client(app):
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c


@pytest.fixture
async def seed_todo(store):
    """Insert a todo directly through the store."""
    async def _seed(task: str = "some task", done: bool = False):
        return await store.create(task, done)
    return _seed
