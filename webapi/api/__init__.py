"""Main API router that combines all endpoint modules."""

from fastapi import APIRouter, Depends

from webapi.api.deps import get_app_settings
from webapi.api.routers import health, weather
from webapi.core.config import Settings

api_router = APIRouter()

# Include all endpoint routers
api_router.include_router(weather.router)
api_router.include_router(health.router)


@api_router.get("/")
async def root(settings: Settings = Depends(get_app_settings)):
    """API root endpoint with basic information."""
    return {
        "message": settings.APP_NAME,
        "version": settings.APP_VERSION,
        "docs_url": "/docs" if settings.ENABLE_DOCS else None,
        "available_endpoints": {
            "weatherforecast": "/weatherforecast",
            "health": "/health"
        }
    }
