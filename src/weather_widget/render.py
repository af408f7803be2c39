"""Pure rendering of a snapshot into display strings.

Nothing here touches the network or widget state; rounding happens on every
render from the metric snapshot values.
"""

from __future__ import annotations

from datetime import date
from types import MappingProxyType

from .convert import display_speed, display_temperature
from .schemas import CurrentDisplay, ForecastDayDisplay, TemperatureUnit, WeatherSnapshot

DEFAULT_GLYPH = "fas fa-cloud"

ICON_GLYPHS = MappingProxyType(
    {
        "clear-day": "fas fa-sun",
        "clear-night": "fas fa-moon",
        "rain": "fas fa-cloud-rain",
        "snow": "fas fa-snowflake",
        "sleet": "fas fa-cloud-meatball",
        "wind": "fas fa-wind",
        "fog": "fas fa-smog",
        "cloudy": "fas fa-cloud",
        "partly-cloudy-day": "fas fa-cloud-sun",
        "partly-cloudy-night": "fas fa-cloud-moon",
        "thunderstorm": "fas fa-bolt",
    }
)

FORECAST_WINDOW = 5

# Fixed en-US names; strftime("%a") would follow the process locale.
_WEEKDAYS = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")


def icon_glyph(condition_key: str) -> str:
    return ICON_GLYPHS.get(condition_key, DEFAULT_GLYPH)


def short_weekday(date_iso: str) -> str:
    return _WEEKDAYS[date.fromisoformat(date_iso).weekday()]


def _format_number(value: float) -> str:
    # Provider values are shown as given: 65.0 -> "65", 65.3 -> "65.3".
    return str(int(value)) if value.is_integer() else str(value)


def _degrees(celsius: float, unit: TemperatureUnit) -> str:
    return f"{display_temperature(celsius, unit)}°"


def render_current(snapshot: WeatherSnapshot, unit: TemperatureUnit) -> CurrentDisplay:
    current = snapshot.current
    speed, speed_unit = display_speed(current.wind_speed_kph, unit)
    return CurrentDisplay(
        location=f"{snapshot.resolved_location_label}, {snapshot.timezone_label}",
        condition=current.condition_text,
        icon=icon_glyph(current.condition_icon_key),
        temperature=_degrees(current.temperature_c, unit),
        feels_like=_degrees(current.feels_like_c, unit),
        humidity=f"{_format_number(current.humidity_pct)}%",
        wind_speed=f"{speed} {speed_unit}",
        pressure=f"{_format_number(current.pressure_hpa)} hPa",
    )


def render_forecast(
    snapshot: WeatherSnapshot,
    unit: TemperatureUnit,
    window_size: int = FORECAST_WINDOW,
    skip_today: bool = True,
) -> list[ForecastDayDisplay]:
    """Render up to ``window_size`` forecast days.

    Starts at index 1 when today is skipped, else at index 0. Indices past
    the end of the provider's forecast are omitted rather than padded.
    """
    start = 1 if skip_today else 0
    days = snapshot.daily_forecast
    rendered: list[ForecastDayDisplay] = []
    for index in range(start, start + window_size):
        if index >= len(days):
            break
        day = days[index]
        rendered.append(
            ForecastDayDisplay(
                day=short_weekday(day.date_iso),
                icon=icon_glyph(day.condition_icon_key),
                temperature=f"{_degrees(day.temp_max_c, unit)} / {_degrees(day.temp_min_c, unit)}",
            )
        )
    return rendered
