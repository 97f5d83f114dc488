"""App settings and config loader."""

from functools import lru_cache
from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

class Settings(BaseSettings):
	# Service
	APP_NAME: str = Field(default="Weather Forecast API")
	APP_VERSION: str = Field(default="1.0.0")
	DEBUG: bool = Field(default=False)
	LOG_LEVEL: str = Field(default="INFO")
	ENABLE_DOCS: bool = Field(default=True)
	CORS_ORIGINS: str = Field(default="*")  # Comma-separated origins

	# Forecast generation
	FORECAST_DAYS: int = Field(default=5)
	FORECAST_MIN_TEMPERATURE_C: int = Field(default=-20)
	FORECAST_MAX_TEMPERATURE_C: int = Field(default=55)

	model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", case_sensitive=False)

	@model_validator(mode="after")
	def check_forecast_bounds(self) -> "Settings":
		"""Reject forecast settings that cannot produce a valid response."""
		if self.FORECAST_DAYS < 1:
			raise ValueError("FORECAST_DAYS must be at least 1")
		if self.FORECAST_MIN_TEMPERATURE_C > self.FORECAST_MAX_TEMPERATURE_C:
			raise ValueError(
				"FORECAST_MIN_TEMPERATURE_C must not exceed FORECAST_MAX_TEMPERATURE_C"
			)
		return self

	def get_cors_origins(self) -> list[str]:
		"""Get list of allowed CORS origins."""
		if not self.CORS_ORIGINS:
			return []
		return [origin.strip() for origin in self.CORS_ORIGINS.split(",") if origin.strip()]

	def temperature_range(self) -> tuple[int, int]:
		return self.FORECAST_MIN_TEMPERATURE_C, self.FORECAST_MAX_TEMPERATURE_C

@lru_cache(maxsize=1)
def get_settings() -> Settings:
	"""Return cached settings instance."""
	return Settings()
