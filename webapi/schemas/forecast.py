"""Forecast record schema shared by the API and the test contract."""

import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, computed_field

# Date value treated as "never set" when checking responses.
UNSET_DATE = datetime.date.min


class WeatherForecast(BaseModel):
    """One day of forecast as served by ``GET /weatherforecast``."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    date: datetime.date
    temperature_c: int = Field(alias="temperatureC")
    summary: Optional[str] = None

    @computed_field(alias="temperatureF")
    @property
    def temperature_f(self) -> int:
        """Fahrenheit value derived from ``temperature_c``."""
        return 32 + int(self.temperature_c / 0.5556)
