"""Application factory and logging setup."""

import logging
from contextlib import asynccontextmanager
from typing import Optional
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from webapi.api import api_router
from webapi.api.deps import get_app_settings
from webapi.core.config import Settings, get_settings

logger = logging.getLogger(__name__)

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'

def configure_logging(level: str = "INFO") -> None:
    """Configure root logging for the service."""
    logging.basicConfig(level=level.upper(), format=LOG_FORMAT)

def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """
    Build the application with its middleware and routes.

    Args:
        settings: Settings to serve with, defaults to the cached environment settings

    Returns:
        Configured FastAPI application
    """
    settings = settings or get_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Application lifespan handler."""
        logger.info(f"Starting {settings.APP_NAME} {settings.APP_VERSION}")
        yield
        logger.info(f"Stopping {settings.APP_NAME}")

    app = FastAPI(
        title=settings.APP_NAME,
        description="Rolling weather forecast API",
        version=settings.APP_VERSION,
        debug=settings.DEBUG,
        docs_url="/docs" if settings.ENABLE_DOCS else None,
        redoc_url="/redoc" if settings.ENABLE_DOCS else None,
        openapi_url="/openapi.json" if settings.ENABLE_DOCS else None,
        lifespan=lifespan,
    )
    app.state.settings = settings

    # Serve the settings this app was built with
    app.dependency_overrides[get_app_settings] = lambda: settings

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.get_cors_origins(),
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(api_router)
    return app
