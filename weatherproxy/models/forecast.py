"""Forecast data models."""

from dataclasses import dataclass, field
from typing import Any

from weatherproxy.models.errors import UpstreamError


@dataclass(frozen=True)
class ForecastSample:
    dt_txt: str  # "YYYY-MM-DD HH:MM:SS", provider local
    dt: int | None  # epoch seconds
    raw: dict[str, Any] = field(repr=False, compare=False)

    @classmethod
    def from_raw(cls, item: dict[str, Any]) -> "ForecastSample":
        try:
            dt_txt = str(item["dt_txt"])
            dt = int(item["dt"]) if item.get("dt") is not None else None
        except (KeyError, TypeError, ValueError, AttributeError) as e:
            raise UpstreamError(f"Malformed forecast sample: {item!r}") from e
        return cls(dt_txt=dt_txt, dt=dt, raw=item)

    @property
    def date_key(self) -> str:
        return self.dt_txt.split(" ")[0]

    @property
    def time_of_day(self) -> str:
        _, _, time_part = self.dt_txt.partition(" ")
        return time_part


@dataclass(frozen=True)
class DailySummary:
    date: str  # YYYY-MM-DD
    sample: ForecastSample


@dataclass(frozen=True)
class AggregateResponse:
    current: dict[str, Any]
    forecast: list[DailySummary]

    def to_dict(self) -> dict[str, Any]:
        """Wire shape: the raw current payload and the raw chosen samples."""
        return {
            "current": self.current,
            "forecast": [d.sample.raw for d in self.forecast],
        }
