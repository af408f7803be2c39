import httpx
import pytest

from weather_widget.client import WeatherClient, to_snapshot
from weather_widget.settings import WidgetSettings, get_settings

SAMPLE_TIMELINE = {
    "resolvedAddress": "New York, NY, USA",
    "timezone": "America/New_York",
    "currentConditions": {
        "datetime": "10:00:00",
        "temp": 24.5,
        "feelslike": 26.2,
        "humidity": 65.3,
        "windspeed": 12.8,
        "pressure": 1015.2,
        "conditions": "Partly cloudy",
        "icon": "partly-cloudy-day",
    },
    "days": [
        {"datetime": "2025-08-08", "tempmax": 27.8, "tempmin": 19.3, "icon": "partly-cloudy-day", "conditions": "Partly cloudy"},
        {"datetime": "2025-08-09", "tempmax": 29.1, "tempmin": 20.5, "icon": "clear-day", "conditions": "Sunny"},
        {"datetime": "2025-08-10", "tempmax": 26.7, "tempmin": 21.2, "icon": "rain", "conditions": "Rain"},
        {"datetime": "2025-08-11", "tempmax": 25.3, "tempmin": 18.9, "icon": "cloudy", "conditions": "Cloudy"},
        {"datetime": "2025-08-12", "tempmax": 28.4, "tempmin": 19.7, "icon": "partly-cloudy-day", "conditions": "Partly cloudy"},
        {"datetime": "2025-08-13", "tempmax": 30.2, "tempmin": 21.5, "icon": "clear-day", "conditions": "Sunny"},
    ],
}


def timeline_for(address: str, temp: float = 24.5, days: int = 6) -> dict:
    data = {**SAMPLE_TIMELINE, "resolvedAddress": address}
    data["currentConditions"] = {**SAMPLE_TIMELINE["currentConditions"], "temp": temp}
    data["days"] = SAMPLE_TIMELINE["days"][:days]
    return data


@pytest.fixture(autouse=True)
def _isolated_settings(monkeypatch):
    for name in ("VISUALCROSSING_API_KEY", "WEATHER_WIDGET_VISUALCROSSING_API_KEY"):
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def sample_snapshot():
    return to_snapshot(SAMPLE_TIMELINE)


@pytest.fixture
def settings():
    return WidgetSettings(VISUALCROSSING_API_KEY="test-key", visualcrossing_base_url="https://weather.test/timeline")


@pytest.fixture
def recorded_requests():
    return []


@pytest.fixture
def make_client(settings, recorded_requests):
    """Build a WeatherClient whose transport answers with ``handler``."""

    def _make(handler) -> WeatherClient:
        def _record(request: httpx.Request) -> httpx.Response:
            recorded_requests.append(request)
            return handler(request)

        return WeatherClient(settings, transport=httpx.MockTransport(_record))

    return _make
