"""Todo API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map TodoError → plain-text responses
    - The store is built and connected once in the lifespan, closed at shutdown
    - Startup failures (connect, create table) are logged and abort the process
"""

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI

from todo_api import __version__
from todo_api.api.error_handlers import register_error_handlers
from todo_api.api.routes import health, todos
from todo_api.config import Settings, get_settings
from todo_api.core.repository_protocols import TodoRepository
from todo_api.infrastructure.observability import setup_logging
from todo_api.storage import build_store

logger = logging.getLogger(__name__)


def create_app(
    settings: Settings | None = None, store: TodoRepository | None = None,
) -> FastAPI:
    """Build the application. A given store is used as-is; otherwise one is
    built from settings at startup."""
    settings = settings or get_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        setup_logging(settings.log_level, settings.log_format)
        if getattr(app.state, "store", None) is None:
            app.state.store = build_store(settings)
        try:
            await app.state.store.connect()
        except Exception:
            logger.error(
                f"Failed to initialize {settings.storage_backend} storage",
                exc_info=True,
            )
            raise
        logger.info(
            f"Todo API started with {settings.storage_backend} storage",
        )
        try:
            yield
        finally:
            await app.state.store.close()
            logger.info("Todo API shutting down")

    app = FastAPI(title="Todo API", version=__version__, lifespan=lifespan)
    app.state.store = store

    app.include_router(health.router)
    app.include_router(todos.router)
    register_error_handlers(app)
    return app


app = create_app()


def run() -> None:
    """Serve the application on the configured port."""
    settings = get_settings()
    uvicorn.run(
        "todo_api.main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    run()
