"""Test configuration and fixtures."""

import random
from datetime import date

import pytest

from webapi.core.config import Settings
from webapi.schemas.forecast import WeatherForecast
from webapi.services.forecast import ForecastService
from webapi.testing.factory import WebApplicationFactory


@pytest.fixture(scope="session")
def test_settings() -> Settings:
    """Settings used by every test host, independent of any local .env file."""
    return Settings(
        _env_file=None,
        APP_NAME="Weather Forecast API (test)",
        APP_VERSION="1.0.0-test",
        LOG_LEVEL="DEBUG",
        ENABLE_DOCS=True,
        FORECAST_DAYS=5,
        FORECAST_MIN_TEMPERATURE_C=-20,
        FORECAST_MAX_TEMPERATURE_C=55,
    )


@pytest.fixture(scope="class")
def factory(test_settings):
    """One in-process host shared by all tests of a class, closed afterwards."""
    with WebApplicationFactory(settings=test_settings) as web_factory:
        yield web_factory


@pytest.fixture
def client(factory):
    """Create test client bound to the shared host."""
    return factory.create_client()


@pytest.fixture
def seeded_service(test_settings) -> ForecastService:
    """Forecast service with a fixed random seed."""
    return ForecastService(test_settings, rng=random.Random(1234))


@pytest.fixture
def fixed_forecasts():
    """Known forecasts served by substituted services."""
    return [
        WeatherForecast(date=date(2024, 1, 1), temperature_c=-20, summary="Freezing"),
        WeatherForecast(date=date(2024, 1, 2), temperature_c=0, summary="Chilly"),
        WeatherForecast(date=date(2024, 1, 3), temperature_c=15, summary="Mild"),
        WeatherForecast(date=date(2024, 1, 4), temperature_c=30, summary="Hot"),
        WeatherForecast(date=date(2024, 1, 5), temperature_c=55, summary="Scorching"),
    ]
