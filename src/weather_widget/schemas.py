"""Shared widget schemas.

Provider models mirror the Visual Crossing timeline payload and are only used
by the adapter. Everything downstream works on the internal snapshot and the
display models.
"""

from __future__ import annotations

from datetime import date
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class TemperatureUnit(str, Enum):
    CELSIUS = "celsius"
    FAHRENHEIT = "fahrenheit"


# Provider wire schema


class ProviderCurrentConditions(BaseModel):
    model_config = ConfigDict(extra="ignore", allow_inf_nan=False)

    datetime: str | None = None
    temp: float
    feelslike: float
    humidity: float
    windspeed: float
    pressure: float
    conditions: str
    icon: str


class ProviderDay(BaseModel):
    model_config = ConfigDict(extra="ignore", allow_inf_nan=False)

    datetime: date
    tempmax: float
    tempmin: float
    icon: str
    conditions: str | None = None


class ProviderTimeline(BaseModel):
    """Subset of the timeline response the widget relies on."""
    model_config = ConfigDict(extra="ignore")

    resolvedAddress: str
    timezone: str
    currentConditions: ProviderCurrentConditions
    days: list[ProviderDay] = Field(default_factory=list)


# Internal snapshot


class CurrentConditions(BaseModel):
    model_config = ConfigDict(frozen=True)

    temperature_c: float
    feels_like_c: float
    humidity_pct: float
    wind_speed_kph: float
    pressure_hpa: float
    condition_text: str
    condition_icon_key: str


class DayForecast(BaseModel):
    model_config = ConfigDict(frozen=True)

    date_iso: str = Field(description="Calendar date, YYYY-MM-DD")
    temp_max_c: float
    temp_min_c: float
    condition_icon_key: str


class WeatherSnapshot(BaseModel):
    """Current conditions plus forecast for one resolved location.

    Values stay in metric units; conversion and rounding happen at render time.
    """
    model_config = ConfigDict(frozen=True)

    resolved_location_label: str
    timezone_label: str
    current: CurrentConditions
    daily_forecast: tuple[DayForecast, ...] = ()


# Display models


class CurrentDisplay(BaseModel):
    location: str
    condition: str
    icon: str
    temperature: str
    feels_like: str
    humidity: str
    wind_speed: str
    pressure: str


class ForecastDayDisplay(BaseModel):
    day: str
    icon: str
    temperature: str


class CityCard(BaseModel):
    name: str
    country: str
    icon: str = "fas fa-city"


class WidgetView(BaseModel):
    """Everything the page needs to draw the widget."""
    unit: TemperatureUnit
    loading: bool = False
    current: CurrentDisplay | None = None
    forecast: list[ForecastDayDisplay] | None = None
    error: str | None = None
    cities: list[CityCard] = Field(default_factory=list)


class SearchRequest(BaseModel):
    query: str = Field(..., min_length=1)


class UnitRequest(BaseModel):
    unit: TemperatureUnit
