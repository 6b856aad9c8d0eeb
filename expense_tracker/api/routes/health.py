"""Health & Readiness Probes - liveness and readiness endpoints.

Invariants:
    - GET /health always returns 200 if process is up (liveness)
    - GET /health/ready returns 503 if database is unreachable (readiness)

Design Decisions:
    - Liveness never touches the database; readiness runs SELECT 1
"""

import logging

from fastapi import APIRouter, Request, status
from fastapi.responses import JSONResponse

from expense_tracker import __version__

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/health", tags=["health"])


@router.get("", status_code=status.HTTP_200_OK)
async def health_check():
    """Basic liveness probe. Returns 200 if the process is up."""
    return {
        "status": "healthy",
        "service": "expense-tracker-api",
        "version": __version__,
    }


@router.get("/ready")
async def readiness_check(request: Request):
    """Readiness probe - includes database connectivity."""
    db_manager = getattr(request.app.state, "db_manager", None)
    db_ok = await db_manager.health_check() if db_manager else False
    if not db_ok:
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={
                "status": "not_ready",
                "reason": "database_unavailable",
            },
        )
    return {"status": "ready", "checks": {"database": "healthy"}}
