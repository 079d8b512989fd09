"""
Health Check Endpoints - Application health and status monitoring.
"""

from fastapi import APIRouter, Depends

from devgate.core.config import get_settings, Settings
from devgate.models.responses import HealthResponse


router = APIRouter(tags=["Health"])


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Health Check",
    description="Check if the gateway is running"
)
async def health_check(
    settings: Settings = Depends(get_settings)
) -> HealthResponse:
    return HealthResponse(
        status="ok",
        version=settings.app_version,
        environment=settings.environment
    )
