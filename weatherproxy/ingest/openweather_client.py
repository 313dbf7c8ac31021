"""OpenWeatherMap client for current conditions and the 5 day / 3 hour forecast.

One GET per call. Nothing is retried or cached.
"""

import logging
import math
from typing import Any

import httpx

from weatherproxy.models.common import Coordinate, UnitSystem
from weatherproxy.models.errors import InvalidInput, NotFound, UpstreamError
from weatherproxy.models.forecast import ForecastSample

logger = logging.getLogger(__name__)

OPENWEATHER_BASE_URL = "https://api.openweathermap.org/data/2.5"


class OpenWeatherClient:
    def __init__(
        self,
        api_key: str,
        base_url: str = OPENWEATHER_BASE_URL,
        timeout: float = 10.0,
    ):
        self.api_key = api_key
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout

    def fetch_current_by_name(self, name: str, units: UnitSystem) -> dict[str, Any]:
        """Current conditions for a place name."""
        q = (name or "").strip()
        if not q:
            raise InvalidInput("City required")
        return self._get_current({"q": q}, units, not_found="City not found")

    def fetch_current_by_coordinate(
        self, coord: Coordinate, units: UnitSystem
    ) -> dict[str, Any]:
        """Current conditions for a coordinate pair."""
        params = _coordinate_params(coord)
        return self._get_current(params, units, not_found="Location not found")

    def fetch_forecast(
        self, coord: Coordinate, units: UnitSystem
    ) -> list[ForecastSample]:
        """Full 3-hour interval list for a coordinate, in provider order."""
        params = _coordinate_params(coord)
        resp = self._get("/forecast", params, units)
        if not resp.is_success:
            logger.error(
                "Forecast request failed for %s: HTTP %d",
                params, resp.status_code,
            )
            raise UpstreamError(f"Forecast returned HTTP {resp.status_code}")

        data = _json(resp)
        items = data.get("list") if isinstance(data, dict) else None
        if not isinstance(items, list):
            raise UpstreamError("Forecast payload has no 'list' array")
        return [ForecastSample.from_raw(item) for item in items]

    def _get_current(
        self, params: dict[str, Any], units: UnitSystem, not_found: str
    ) -> dict[str, Any]:
        resp = self._get("/weather", params, units)
        if resp.status_code >= 500:
            logger.error(
                "Current conditions request failed for %s: HTTP %d",
                params, resp.status_code,
            )
            raise UpstreamError(f"Current conditions returned HTTP {resp.status_code}")
        if not resp.is_success:
            logger.info(
                "Current conditions not found for %s: HTTP %d",
                params, resp.status_code,
            )
            raise NotFound(not_found)

        data = _json(resp)
        if not isinstance(data, dict):
            raise UpstreamError("Current conditions payload is not an object")
        return data

    def _get(
        self, path: str, params: dict[str, Any], units: UnitSystem
    ) -> httpx.Response:
        url = f"{self.base_url}{path}"
        logger.debug("GET %s %s units=%s", url, params, units)
        query = {**params, "appid": self.api_key, "units": UnitSystem(units).value}
        try:
            return httpx.get(url, params=query, timeout=self.timeout)
        except httpx.RequestError as e:
            logger.error("OpenWeather request to %s failed: %s", path, e)
            raise UpstreamError(f"Request to {path} failed") from e


def _coordinate_params(coord: Coordinate) -> dict[str, float]:
    try:
        params = {"lat": float(coord.latitude), "lon": float(coord.longitude)}
    except (AttributeError, TypeError, ValueError) as e:
        raise InvalidInput("Invalid coordinates") from e
    if not all(math.isfinite(v) for v in params.values()):
        raise InvalidInput("Invalid coordinates")
    return params


def _json(resp: httpx.Response) -> Any:
    try:
        return resp.json()
    except ValueError as e:
        raise UpstreamError("Provider returned a non-JSON body") from e
