"""Forecast generation service."""

import logging
import random
from datetime import date, timedelta
from typing import List, Optional

from webapi.core.config import Settings
from webapi.schemas.forecast import WeatherForecast

logger = logging.getLogger(__name__)

SUMMARIES = (
    "Freezing",
    "Bracing",
    "Chilly",
    "Cool",
    "Mild",
    "Warm",
    "Balmy",
    "Hot",
    "Sweltering",
    "Scorching",
)


class ForecastService:
    """Produces the rolling daily forecast served by the API."""

    def __init__(
        self,
        settings: Settings,
        log: Optional[logging.Logger] = None,
        rng: Optional[random.Random] = None,
    ):
        self.settings = settings
        self.log = log or logger
        self._rng = rng or random.Random()

    def get_forecasts(self, today: Optional[date] = None) -> List[WeatherForecast]:
        """
        Build one forecast per configured day, starting tomorrow.

        Args:
            today: Reference date, defaults to the current local date

        Returns:
            List of ``FORECAST_DAYS`` forecasts ordered by date
        """
        start = today or date.today()
        low, high = self.settings.temperature_range()

        forecasts = [
            WeatherForecast(
                date=start + timedelta(days=index),
                temperature_c=self._rng.randint(low, high),
                summary=self._rng.choice(SUMMARIES),
            )
            for index in range(1, self.settings.FORECAST_DAYS + 1)
        ]

        first_day = start + timedelta(days=1)
        self.log.info(f"Generated {len(forecasts)} forecasts starting {first_day.isoformat()}")
        return forecasts
