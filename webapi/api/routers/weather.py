"""Weather forecast endpoint."""

from typing import List
from fastapi import APIRouter, Depends

from webapi.api.deps import get_forecast_service
from webapi.schemas.forecast import WeatherForecast
from webapi.services.forecast import ForecastService

router = APIRouter(tags=["Weather"])

@router.get(
    "/weatherforecast",
    response_model=List[WeatherForecast],
    name="GetWeatherForecast",
    operation_id="GetWeatherForecast",
)
def get_weather_forecast(service: ForecastService = Depends(get_forecast_service)):
    """Return the forecast for the next few days."""
    return service.get_forecasts()
