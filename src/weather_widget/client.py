"""Weather client: one provider request per lookup, normalized into a snapshot.

Provider field names stop here; callers only ever see ``WeatherSnapshot``.
"""

from __future__ import annotations

import time
from dataclasses import dataclass

import httpx
from pydantic import ValidationError

from .adapters import FetchError, MalformedResponse
from .adapters.visualcrossing import fetch_timeline
from .logging import get_logger
from .schemas import CurrentConditions, DayForecast, ProviderTimeline, WeatherSnapshot
from .settings import WidgetSettings

logger = get_logger("client")


@dataclass(frozen=True)
class FetchResult:
    """Outcome of a single fetch: exactly one of snapshot or error is set."""

    snapshot: WeatherSnapshot | None = None
    error: FetchError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


def to_snapshot(data: dict) -> WeatherSnapshot:
    try:
        timeline = ProviderTimeline.model_validate(data)
    except ValidationError as exc:
        raise MalformedResponse(
            "Weather data did not match the expected format",
            {"errors": exc.errors(include_url=False)},
        ) from exc

    current = timeline.currentConditions
    return WeatherSnapshot(
        resolved_location_label=timeline.resolvedAddress,
        timezone_label=timeline.timezone,
        current=CurrentConditions(
            temperature_c=current.temp,
            feels_like_c=current.feelslike,
            humidity_pct=current.humidity,
            wind_speed_kph=current.windspeed,
            pressure_hpa=current.pressure,
            condition_text=current.conditions,
            condition_icon_key=current.icon,
        ),
        daily_forecast=tuple(
            DayForecast(
                date_iso=day.datetime.isoformat(),
                temp_max_c=day.tempmax,
                temp_min_c=day.tempmin,
                condition_icon_key=day.icon,
            )
            for day in timeline.days
        ),
    )


class WeatherClient:
    def __init__(
        self,
        settings: WidgetSettings,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._settings = settings
        # Tests inject httpx.MockTransport here.
        self._transport = transport

    async def fetch(self, location_query: str) -> FetchResult:
        location = location_query.strip()
        if not location:
            raise ValueError("location_query must not be blank")

        start = time.time()
        status_code: int | None = None
        try:
            status_code, data = await fetch_timeline(
                api_key=self._settings.visualcrossing_api_key,
                location=location,
                base_url=self._settings.visualcrossing_base_url,
                timeout_s=self._settings.request_timeout_s,
                transport=self._transport,
            )
            snapshot = to_snapshot(data)
        except FetchError as exc:
            latency_ms = int((time.time() - start) * 1000)
            logger.info(
                "weather_fetch_failed",
                extra={
                    "extra": {
                        "location": location,
                        "status_code": status_code,
                        "latency_ms": latency_ms,
                        "ok": False,
                        "error_code": exc.code,
                        "error": exc.message,
                        **exc.details,
                    }
                },
            )
            return FetchResult(error=exc)

        latency_ms = int((time.time() - start) * 1000)
        logger.info(
            "weather_fetch",
            extra={
                "extra": {
                    "location": location,
                    "resolved": snapshot.resolved_location_label,
                    "days": len(snapshot.daily_forecast),
                    "status_code": status_code,
                    "latency_ms": latency_ms,
                    "ok": True,
                }
            },
        )
        return FetchResult(snapshot=snapshot)
