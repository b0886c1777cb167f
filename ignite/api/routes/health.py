"""Health & Readiness Probes — liveness and readiness endpoints for container orchestration.

Invariants:
    - GET /health/ always returns 200 if process is up (liveness)
    - GET /health/ready returns 503 if the ledger is not initialized, or if snapshots are
      enabled and the database is unreachable (readiness)
"""

import logging
from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

import ignite.infrastructure.database as db_module
import ignite.services.ignite_ledger as ledger_module
from ignite.config import Settings, get_settings

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/health", tags=["health"])


@router.get("/", status_code=status.HTTP_200_OK)
async def health_check():
    """Basic liveness probe. Returns 200 if the process is up."""
    return {
        "status": "healthy",
        "service": "ignite-api",
        "version": "1.0.0",
    }


def _not_ready(reason: str) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
        content={"status": "not_ready", "reason": reason},
    )


@router.get("/ready")
async def readiness_check(settings: Settings = Depends(get_settings)):
    """Readiness probe — ledger loaded, database reachable when snapshots are on."""
    if ledger_module.ledger is None:
        return _not_ready("ledger_uninitialized")
    checks = {"ledger": "ready"}
    if settings.snapshot_enabled:
        manager = db_module.db_manager
        if not manager or not await manager.health_check():
            return _not_ready("database_unavailable")
        checks["database"] = "healthy"
    return {"status": "ready", "checks": checks}
