"""Health check endpoints."""

from datetime import datetime, timezone
from fastapi import APIRouter, Depends

from webapi.api.deps import get_app_settings
from webapi.core.config import Settings

router = APIRouter(prefix="/health", tags=["Health"])

@router.get("")
def health_check(settings: Settings = Depends(get_app_settings)):
    """Basic health check endpoint."""
    return {
        "status": "healthy",
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "service": settings.APP_NAME
    }

@router.get("/live")
def liveness_check():
    """Kubernetes liveness probe endpoint."""
    return {"status": "alive"}

@router.get("/ready")
def readiness_check():
    """Kubernetes readiness probe endpoint."""
    return {"status": "ready"}
