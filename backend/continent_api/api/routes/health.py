"""Health Probe — liveness endpoint for container orchestration.

Invariants:
    - GET /api/v1/health/ always returns 200 if process is up (liveness)

Design Decisions:
    - No readiness probe: the service has no external dependencies to check
"""

from fastapi import APIRouter, status

from continent_api import __version__

router = APIRouter(prefix="/api/v1/health", tags=["health"])


@router.get("/", status_code=status.HTTP_200_OK)
async def health_check():
    """Basic liveness probe. Returns 200 if the process is up."""
    return {
        "status": "healthy",
        "service": "continent-api",
        "version": __version__,
    }
