"""Weather pipeline: current conditions plus daily forecast for one request."""

import logging
from concurrent.futures import ThreadPoolExecutor
from typing import Any

from weatherproxy.config.schema import ProxyConfig
from weatherproxy.forecast.aggregator import MAX_FORECAST_DAYS, MIDDAY, aggregate
from weatherproxy.ingest.openweather_client import OpenWeatherClient
from weatherproxy.models.common import (
    Coordinate,
    UnitSystem,
    coordinate_from_params,
    parse_unit,
)
from weatherproxy.models.errors import InvalidInput
from weatherproxy.models.forecast import AggregateResponse, ForecastSample

logger = logging.getLogger(__name__)


class WeatherPipeline:
    def __init__(
        self,
        client: OpenWeatherClient,
        max_days: int = MAX_FORECAST_DAYS,
        midday: str = MIDDAY,
        concurrent: bool = False,
    ):
        self.client = client
        self.max_days = max_days
        self.midday = midday
        self.concurrent = concurrent

    def by_name(
        self, city: str | None, unit: str | UnitSystem | None = None
    ) -> AggregateResponse:
        """Look up a place by name, then forecast at its coordinate."""
        if city is None or not city.strip():
            raise InvalidInput("City required")
        units = parse_unit(unit)

        current = self.client.fetch_current_by_name(city, units)
        coord = Coordinate.from_current(current)
        samples = self.client.fetch_forecast(coord, units)
        logger.info(
            "Weather for %r resolved to (%.4f, %.4f), %d forecast samples",
            city.strip(), coord.latitude, coord.longitude, len(samples),
        )
        return self._respond(current, samples)

    def by_coordinate(
        self, lat: Any, lon: Any, unit: str | UnitSystem | None = None
    ) -> AggregateResponse:
        """Current conditions and forecast for a coordinate pair.

        Sequential by default, so a failed current-conditions lookup never
        reaches the forecast endpoint. With `concurrent` set both calls run
        together; if both fail the current-conditions error is raised.
        """
        coord = coordinate_from_params(lat, lon)
        units = parse_unit(unit)

        if self.concurrent:
            current, samples = self._fetch_concurrently(coord, units)
        else:
            current = self.client.fetch_current_by_coordinate(coord, units)
            samples = self.client.fetch_forecast(coord, units)

        logger.info(
            "Weather for (%.4f, %.4f), %d forecast samples",
            coord.latitude, coord.longitude, len(samples),
        )
        return self._respond(current, samples)

    def _fetch_concurrently(
        self, coord: Coordinate, units: UnitSystem
    ) -> tuple[dict[str, Any], list[ForecastSample]]:
        with ThreadPoolExecutor(max_workers=2) as pool:
            current_future = pool.submit(
                self.client.fetch_current_by_coordinate, coord, units
            )
            forecast_future = pool.submit(self.client.fetch_forecast, coord, units)
            current_error = current_future.exception()
            forecast_error = forecast_future.exception()

        if current_error is not None:
            if forecast_error is not None:
                logger.warning(
                    "Forecast also failed for (%s, %s): %s",
                    coord.latitude, coord.longitude, forecast_error,
                )
            raise current_error
        if forecast_error is not None:
            raise forecast_error
        return current_future.result(), forecast_future.result()

    def _respond(
        self, current: dict[str, Any], samples: list[ForecastSample]
    ) -> AggregateResponse:
        return AggregateResponse(
            current=current,
            forecast=aggregate(samples, self.max_days, self.midday),
        )


def build_pipeline(config: ProxyConfig) -> WeatherPipeline:
    client = OpenWeatherClient(
        api_key=config.provider.api_key,
        base_url=config.provider.base_url,
        timeout=config.provider.timeout,
    )
    return WeatherPipeline(
        client,
        max_days=config.forecast.max_days,
        midday=config.forecast.midday,
        concurrent=config.provider.concurrent_requests,
    )
