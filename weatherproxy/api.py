"""Weather proxy HTTP API: current conditions plus a five-day outlook."""

import logging
import os
from collections.abc import Callable

from fastapi import Depends, FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from weatherproxy.config.defaults import CONFIG_PATH_ENV_VAR
from weatherproxy.config.loader import load_config
from weatherproxy.config.schema import ProxyConfig
from weatherproxy.models.errors import UpstreamError, WeatherError
from weatherproxy.models.forecast import AggregateResponse
from weatherproxy.pipeline.weather_pipeline import WeatherPipeline, build_pipeline

logger = logging.getLogger(__name__)


def get_pipeline(request: Request) -> WeatherPipeline:
    return request.app.state.pipeline


def get_config(request: Request) -> ProxyConfig:
    return request.app.state.config


def create_app(config: ProxyConfig | None = None) -> FastAPI:
    config = config or ProxyConfig()
    app = FastAPI(title="Weather Proxy", version="0.1.0")
    app.state.config = config
    app.state.pipeline = build_pipeline(config)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.server.cors_origins,
        allow_methods=["GET"],
        allow_headers=["*"],
    )
    app.add_exception_handler(WeatherError, _weather_error_handler)

    if not config.provider.api_key:
        logger.warning("No OpenWeather API key configured; upstream calls will fail")

    @app.get("/weather")
    def weather_by_city(
        city: str | None = None,
        unit: str | None = None,
        pipeline: WeatherPipeline = Depends(get_pipeline),
        cfg: ProxyConfig = Depends(get_config),
    ):
        """Current conditions and daily forecast for a place name."""
        return _run(pipeline.by_name, city, unit or cfg.default_unit)

    @app.get("/weather/coords")
    def weather_by_coords(
        lat: str | None = None,
        lon: str | None = None,
        unit: str | None = None,
        pipeline: WeatherPipeline = Depends(get_pipeline),
        cfg: ProxyConfig = Depends(get_config),
    ):
        """Current conditions and daily forecast for a coordinate pair."""
        return _run(pipeline.by_coordinate, lat, lon, unit or cfg.default_unit)

    @app.get("/health")
    def health(cfg: ProxyConfig = Depends(get_config)):
        return {"status": "ok", "provider_configured": bool(cfg.provider.api_key)}

    return app


def _run(fetch: Callable[..., AggregateResponse], *args) -> dict:
    try:
        return fetch(*args).to_dict()
    except WeatherError:
        raise
    except Exception as e:
        logger.exception("Unexpected error handling weather request")
        raise UpstreamError("Unexpected error") from e


async def _weather_error_handler(request: Request, exc: WeatherError) -> JSONResponse:
    if isinstance(exc, UpstreamError):
        logger.error("%s %s failed upstream: %s", request.method, request.url.path, exc)
        message = exc.public_message
    else:
        message = exc.message
    return JSONResponse(status_code=exc.status_code, content={"error": message})


app = create_app(load_config(os.environ.get(CONFIG_PATH_ENV_VAR)))
