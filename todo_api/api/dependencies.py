"""Request Dependencies — hand the application's store to route handlers.

Invariants:
    - The store lives on app.state, set by create_app or the lifespan
    - Handlers never import a store instance directly
"""

from fastapi import Request

from todo_api.core.repository_protocols import TodoRepository


def get_store(request: Request) -> TodoRepository:
    """FastAPI dependency for the configured TodoRepository."""
    store = getattr(request.app.state, "store", None)
    if store is None:
        raise RuntimeError("Store not initialized")
    return store
