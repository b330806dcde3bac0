"""Health & Readiness Probes — liveness and storage readiness endpoints.

Invariants:
    - GET /health/ always returns 200 if process is up (liveness)
    - GET /health/ready returns 503 if the store is unreachable (readiness)
"""

import logging

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from todo_api import __version__
from todo_api.api.dependencies import get_store
from todo_api.core.repository_protocols import TodoRepository

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/health", tags=["health"])


@router.get("/", status_code=status.HTTP_200_OK)
async def health_check():
    """Basic liveness probe. Returns 200 if the process is up."""
    return {
        "status": "healthy",
        "service": "todo-api",
        "version": __version__,
    }


@router.get("/ready")
async def readiness_check(store: TodoRepository = Depends(get_store)):
    """Readiness probe — includes storage connectivity."""
    if not await store.health_check():
        logger.warning("Readiness check failed: storage unavailable")
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={
                "status": "not_ready",
                "reason": "storage_unavailable",
            },
        )
    return {"status": "ready", "checks": {"storage": "healthy"}}
