"""Widget state and the transitions that change it.

The controller owns the only live snapshot and unit selection. Fetches are
tagged with a sequence number; a reply that is not for the most recently
started fetch is dropped, so a slow stale response never overwrites a newer one.
"""

from __future__ import annotations

from dataclasses import dataclass

from .cities import POPULAR_CITIES, find_city
from .client import FetchResult, WeatherClient
from .logging import get_logger
from .render import FORECAST_WINDOW, render_current, render_forecast
from .schemas import TemperatureUnit, WeatherSnapshot, WidgetView

logger = get_logger("state")


@dataclass
class WidgetState:
    unit: TemperatureUnit = TemperatureUnit.CELSIUS
    snapshot: WeatherSnapshot | None = None
    loading: bool = False
    error: str | None = None
    fetch_seq: int = 0


class WidgetController:
    def __init__(self, client: WeatherClient, forecast_days: int = FORECAST_WINDOW) -> None:
        self._client = client
        self._forecast_days = forecast_days
        self.state = WidgetState()

    def view(self) -> WidgetView:
        state = self.state
        current = render_current(state.snapshot, state.unit) if state.snapshot is not None else None
        forecast = None
        if state.snapshot is not None and not state.loading and state.error is None:
            forecast = render_forecast(state.snapshot, state.unit, window_size=self._forecast_days)
        return WidgetView(
            unit=state.unit,
            loading=state.loading,
            current=current,
            forecast=forecast,
            error=state.error,
            cities=list(POPULAR_CITIES),
        )

    async def search(self, query: str) -> WidgetView:
        location = query.strip()
        if not location:
            return self.view()
        await self._fetch(location)
        return self.view()

    async def select_city(self, name: str) -> WidgetView:
        city = find_city(name)
        await self._fetch(city.name)
        return self.view()

    def toggle_unit(self, unit: TemperatureUnit) -> WidgetView:
        # Re-render from the stored metric snapshot; nothing stored is converted.
        if self.state.unit is not unit:
            self.state.unit = unit
            logger.info("unit_toggled", extra={"extra": {"unit": unit.value}})
        return self.view()

    async def _fetch(self, location: str) -> None:
        self.state.fetch_seq += 1
        seq = self.state.fetch_seq
        self.state.loading = True
        self.state.error = None

        result = await self._client.fetch(location)
        self._resolve(seq, location, result)

    def _resolve(self, seq: int, location: str, result: FetchResult) -> None:
        if seq != self.state.fetch_seq:
            logger.info(
                "stale_response_discarded",
                extra={"extra": {"location": location, "seq": seq, "latest_seq": self.state.fetch_seq}},
            )
            return

        self.state.loading = False
        if result.ok:
            self.state.snapshot = result.snapshot
            self.state.error = None
            return

        # Current conditions stay as they were; only the forecast area shows the error.
        self.state.error = result.error.message or "Error fetching weather data"
