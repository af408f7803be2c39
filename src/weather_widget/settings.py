"""Widget configuration."""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from dotenv import load_dotenv
from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

ENV_FILE = Path(__file__).resolve().parents[2] / ".env"
load_dotenv(ENV_FILE, override=False)

VISUALCROSSING_BASE_URL = (
    "https://weather.visualcrossing.com/VisualCrossingWebServices/rest/services/timeline"
)


class WidgetSettings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="WEATHER_WIDGET_", env_file=str(ENV_FILE), extra="ignore")

    host: str = "0.0.0.0"
    port: int = 7010

    visualcrossing_api_key: str | None = Field(
        default=None,
        validation_alias=AliasChoices("VISUALCROSSING_API_KEY", "WEATHER_WIDGET_VISUALCROSSING_API_KEY"),
    )
    visualcrossing_base_url: str = VISUALCROSSING_BASE_URL

    request_timeout_s: float = 10.0
    initial_location: str = "New York"
    forecast_days: int = Field(default=5, ge=1, le=14)
    log_level: str = "INFO"


@lru_cache(maxsize=1)
def get_settings() -> WidgetSettings:
    return WidgetSettings()
