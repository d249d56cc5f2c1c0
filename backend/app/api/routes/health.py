"""Health - liveness endpoint for container orchestration.

Invariants:
    - GET {api_prefix}/health/ always returns 200 if the process is up
    - No readiness check: the service has no backing store to check
"""

from fastapi import APIRouter, status

from app.config import get_settings

router = APIRouter(prefix=f"{get_settings().api_prefix}/health", tags=["health"])


@router.get("/", status_code=status.HTTP_200_OK)
async def health_check():
    """Basic liveness check. Returns 200 if the process is up."""
    settings = get_settings()
    return {
        "status": "healthy",
        "service": settings.app_name,
        "version": settings.app_version,
    }
