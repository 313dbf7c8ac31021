"""Collapse 3-hour forecast samples into one summary per calendar day."""

from collections.abc import Iterable

from weatherproxy.models.forecast import DailySummary, ForecastSample

MAX_FORECAST_DAYS = 5
MIDDAY = "12:00:00"


def aggregate(
    samples: Iterable[ForecastSample],
    max_days: int = MAX_FORECAST_DAYS,
    midday: str = MIDDAY,
) -> list[DailySummary]:
    """Pick the midday sample for each date, in first-seen date order.

    A date is recorded only by a sample stamped exactly `midday`; dates
    without one are dropped rather than filled from another hour. The first
    midday sample for a date wins. At most `max_days` summaries are returned.
    """
    daily: dict[str, DailySummary] = {}
    for sample in samples:
        date = sample.date_key
        if date not in daily and sample.time_of_day == midday:
            daily[date] = DailySummary(date=date, sample=sample)
    return list(daily.values())[:max_days]
