"""Common types and helpers shared across models."""

import math
from dataclasses import dataclass
from enum import StrEnum
from typing import Any

from weatherproxy.models.errors import InvalidInput, UpstreamError


class UnitSystem(StrEnum):
    METRIC = "metric"
    IMPERIAL = "imperial"


@dataclass(frozen=True)
class Coordinate:
    latitude: float
    longitude: float

    @classmethod
    def from_current(cls, current: dict[str, Any]) -> "Coordinate":
        """Extract the coordinate from a current-conditions payload."""
        coord = current.get("coord") or {}
        try:
            return cls(float(coord["lat"]), float(coord["lon"]))
        except (KeyError, TypeError, ValueError) as e:
            raise UpstreamError("Current conditions payload has no coordinate") from e


def parse_unit(value: str | UnitSystem | None) -> UnitSystem:
    """Parse a unit query value. Absent means metric."""
    if value is None or value == "":
        return UnitSystem.METRIC
    try:
        return UnitSystem(str(value).strip().lower())
    except ValueError as e:
        raise InvalidInput(f"Unsupported unit: {value}") from e


def coordinate_from_params(lat: Any, lon: Any) -> Coordinate:
    """Build a Coordinate from raw client input (query strings or numbers)."""
    if lat is None or lon is None or lat == "" or lon == "":
        raise InvalidInput("Coordinates required")
    try:
        latitude, longitude = float(lat), float(lon)
    except (TypeError, ValueError) as e:
        raise InvalidInput("Invalid coordinates") from e
    if not (math.isfinite(latitude) and math.isfinite(longitude)):
        raise InvalidInput("Invalid coordinates")
    return Coordinate(latitude, longitude)
