"""FastAPI dependencies for settings, logging and services."""

import logging
from fastapi import Depends

from webapi.core.config import Settings, get_settings
from webapi.services.forecast import ForecastService


def get_app_settings() -> Settings:
    """
    Settings dependency.

    The test host overrides this to boot the app with its own values.
    """
    return get_settings()


def get_forecast_logger() -> logging.Logger:
    """Logger used by the forecast service."""
    return logging.getLogger("webapi.services.forecast")


def get_forecast_service(
    settings: Settings = Depends(get_app_settings),
    log: logging.Logger = Depends(get_forecast_logger),
) -> ForecastService:
    """
    Forecast service dependency.

    Args:
        settings: Application settings
        log: Logger handed to the service

    Returns:
        ForecastService instance for the current request
    """
    return ForecastService(settings, log=log)


# Dependencies that must resolve for the app to serve requests
REQUIRED_DEPENDENCIES = (
    get_app_settings,
    get_forecast_logger,
    get_forecast_service,
)
