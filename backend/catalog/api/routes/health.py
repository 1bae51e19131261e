"""Health & Readiness Probes: liveness and readiness endpoints.

Invariants:
    - GET /api/v1/health/ always returns 200 if the process is up (liveness)
    - GET /api/v1/health/ready returns 503 until a catalog source is wired (readiness)
"""

import logging
from fastapi import APIRouter, Request, status
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/health", tags=["health"])


@router.get("/", status_code=status.HTTP_200_OK)
async def health_check():
    """Basic liveness probe."""
    return {
        "status": "healthy",
        "service": "edu-catalog-api",
        "version": "1.0.0",
    }


@router.get("/ready")
async def readiness_check(request: Request):
    """Readiness probe: the lifespan has built the catalog source."""
    source = getattr(request.app.state, "catalog_source", None)
    if source is None:
        logger.warning("Readiness check failed: catalog source missing")
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={
                "status": "not_ready",
                "reason": "catalog_source_unavailable",
            },
        )
    return {
        "status": "ready",
        "checks": {"catalog_source": type(source).__name__},
    }
