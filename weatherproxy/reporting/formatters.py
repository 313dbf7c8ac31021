"""Output formatters for weather responses."""

import json
from typing import Any

from weatherproxy.models.common import UnitSystem
from weatherproxy.models.forecast import AggregateResponse


def format_temp(value: float | None, unit: UnitSystem) -> str:
    """Rounded temperature with its unit symbol, e.g. '21°C'."""
    if value is None:
        return "--"
    symbol = "°F" if unit == UnitSystem.IMPERIAL else "°C"
    return f"{round(value)}{symbol}"


def format_response_text(r: AggregateResponse, unit: UnitSystem) -> str:
    """Plain text summary for the terminal."""
    current = r.current
    main = current.get("main") or {}
    place = current.get("name") or "Unknown location"
    country = (current.get("sys") or {}).get("country")
    if country:
        place = f"{place}, {country}"

    lines = [
        f"=== {place} ===",
        f"Now: {format_temp(main.get('temp'), unit)} {_describe(current)}".rstrip(),
    ]
    if "feels_like" in main:
        lines.append(f"Feels like: {format_temp(main['feels_like'], unit)}")
    if "humidity" in main:
        lines.append(f"Humidity: {main['humidity']}%")

    if r.forecast:
        lines.append("Forecast:")
    for day in r.forecast:
        sample_main = day.sample.raw.get("main") or {}
        lines.append(
            f"  {day.date}: {format_temp(sample_main.get('temp'), unit)} "
            f"{_describe(day.sample.raw)}".rstrip()
        )
    return "\n".join(lines)


def format_response_json(r: AggregateResponse) -> str:
    """JSON response, identical to the HTTP body."""
    return json.dumps(r.to_dict(), indent=2)


def _describe(payload: dict[str, Any]) -> str:
    conditions = payload.get("weather") or []
    if not conditions:
        return ""
    first = conditions[0]
    return str(first.get("description") or first.get("main") or "")
