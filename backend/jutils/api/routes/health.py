"""Health & Readiness Probes — liveness and readiness endpoints for container orchestration.

Invariants:
    - GET /health/ always returns 200 if process is up (liveness)
    - GET /health/ready returns 503 if Pillow cannot render sized text (readiness)
"""

import logging
from fastapi import APIRouter, status
from fastapi.responses import JSONResponse

from jutils.infrastructure.pillow_surface import renderer_available

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/health", tags=["health"])


@router.get("/", status_code=status.HTTP_200_OK)
async def health_check():
    """Basic liveness check. Returns 200 if the process is up."""
    return {
        "status": "healthy",
        "service": "jutils-api",
        "version": "1.0.0",
    }


@router.get("/ready")
async def readiness_check():
    """Readiness check: avatar rendering needs FreeType support in Pillow."""
    if not renderer_available():
        logger.warning("Pillow built without FreeType, avatars unavailable")
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={
                "status": "not_ready",
                "reason": "renderer_unavailable",
            },
        )
    return {"status": "ready", "checks": {"renderer": "healthy"}}
