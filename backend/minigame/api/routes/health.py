"""Health, Readiness & Info - probes for container orchestration plus service identity.

Invariants:
    - GET /api/v1/health/ always returns 200 if process is up (liveness)
    - GET /api/v1/health/ready returns 503 if database is unreachable (readiness)
    - GET /public/info reports service name and version
"""

import logging
from fastapi import APIRouter, status
from fastapi.responses import JSONResponse

from minigame.config import SERVICE_NAME, SERVICE_VERSION, get_settings
from minigame.infrastructure import database
from minigame.schemas.tournament import InfoResponse

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/health", tags=["health"])
info_router = APIRouter(prefix="/public", tags=["info"])


@router.get("/", status_code=status.HTTP_200_OK)
async def health_check():
    """Basic liveness probe. Returns 200 if the process is up."""
    return {"status": "healthy", "service": SERVICE_NAME}


@router.get("/ready")
async def readiness_check():
    """Readiness probe - includes database connectivity."""
    manager = database.db_manager
    db_ok = await manager.health_check() if manager else False
    if not db_ok:
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={
                "status": "not_ready",
                "reason": "database_unavailable",
            },
        )
    return {"status": "ready", "checks": {"database": "healthy"}}


@info_router.get("/info", response_model=InfoResponse)
async def info():
    major, minor, rev = SERVICE_VERSION
    return InfoResponse(
        service=SERVICE_NAME,
        version_major=major,
        version_minor=minor,
        version_rev=rev,
        site_external_url=get_settings().site_external_url,
    )
