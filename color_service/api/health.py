"""
Health check endpoint for Color Service monitoring.
"""

from fastapi import APIRouter, Depends

from color_service.api.dependencies import get_color_registry
from color_service.core.config import get_settings
from color_service.schemas.api_schemas import HealthResponse
from color_service.services.color_registry import ColorRegistry

router = APIRouter()


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Basic Health Check",
    description="Check the basic health status of the Color service"
)
async def health_check(registry: ColorRegistry = Depends(get_color_registry)):
    settings = get_settings()
    return HealthResponse(
        status="healthy",
        service=settings.APP_NAME,
        version=settings.APP_VERSION,
        recent_colors=len(registry)
    )
