"""FastAPI app serving the weather widget.

The page is static; all widget behavior goes through the JSON endpoints,
which delegate to a single process-wide controller.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from fastapi import Depends, FastAPI, HTTPException
from fastapi.responses import FileResponse

from . import __version__
from .cities import POPULAR_CITIES
from .client import WeatherClient
from .logging import configure_logging, get_logger
from .schemas import CityCard, SearchRequest, UnitRequest, WidgetView
from .settings import get_settings
from .state import WidgetController

logger = get_logger("server")

INDEX_HTML = Path(__file__).parent / "static" / "index.html"

app = FastAPI(title="Weather Widget", version=__version__)


@lru_cache(maxsize=1)
def get_controller() -> WidgetController:
    settings = get_settings()
    return WidgetController(WeatherClient(settings), forecast_days=settings.forecast_days)


@app.on_event("startup")
async def startup() -> None:
    settings = get_settings()
    configure_logging(settings.log_level)
    logger.info(
        "widget_server_config",
        extra={
            "extra": {
                "visualcrossing_key_set": bool(settings.visualcrossing_api_key),
                "base_url": settings.visualcrossing_base_url,
                "request_timeout_s": settings.request_timeout_s,
                "initial_location": settings.initial_location,
            }
        },
    )
    # Without a key the first lookup would only show MISSING_API_KEY; wait for the user instead.
    if settings.visualcrossing_api_key and settings.initial_location.strip():
        await get_controller().search(settings.initial_location)


@app.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok"}


@app.get("/", include_in_schema=False)
def index() -> FileResponse:
    return FileResponse(INDEX_HTML, media_type="text/html")


@app.get("/api/view")
def get_view(controller: WidgetController = Depends(get_controller)) -> WidgetView:
    return controller.view()


@app.get("/api/cities")
def list_cities() -> list[CityCard]:
    return list(POPULAR_CITIES)


@app.post("/api/search")
async def search(payload: SearchRequest, controller: WidgetController = Depends(get_controller)) -> WidgetView:
    return await controller.search(payload.query)


@app.post("/api/cities/{name}")
async def select_city(name: str, controller: WidgetController = Depends(get_controller)) -> WidgetView:
    try:
        return await controller.select_city(name)
    except KeyError as exc:
        raise HTTPException(status_code=404, detail=f"Unknown city: {name}") from exc


@app.post("/api/unit")
async def set_unit(payload: UnitRequest, controller: WidgetController = Depends(get_controller)) -> WidgetView:
    return controller.toggle_unit(payload.unit)


def main() -> None:
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "weather_widget.server:app",
        host=settings.host,
        port=settings.port,
        reload=False,
    )


if __name__ == "__main__":
    main()
