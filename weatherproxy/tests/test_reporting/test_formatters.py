"""Tests for response formatters."""

import json

from weatherproxy.models.common import UnitSystem
from weatherproxy.models.forecast import AggregateResponse, DailySummary, ForecastSample
from weatherproxy.reporting.formatters import (
    format_response_json,
    format_response_text,
    format_temp,
)


def _response(current: dict) -> AggregateResponse:
    raw = {
        "dt": 1714651200,
        "dt_txt": "2024-05-02 12:00:00",
        "main": {"temp": 17.8},
        "weather": [{"main": "Rain", "description": "light rain"}],
    }
    return AggregateResponse(
        current=current,
        forecast=[DailySummary("2024-05-02", ForecastSample.from_raw(raw))],
    )


class TestFormatTemp:
    def test_metric(self):
        assert format_temp(21.2, UnitSystem.METRIC) == "21°C"

    def test_imperial(self):
        assert format_temp(69.8, UnitSystem.IMPERIAL) == "70°F"

    def test_missing(self):
        assert format_temp(None, UnitSystem.METRIC) == "--"


class TestFormatResponse:
    def test_text(self, london_current: dict):
        text = format_response_text(_response(london_current), UnitSystem.METRIC)
        assert "=== London, GB ===" in text
        assert "Now: 14°C broken clouds" in text
        assert "Humidity: 74%" in text
        assert "2024-05-02: 18°C light rain" in text

    def test_text_minimal_payload(self):
        text = format_response_text(
            AggregateResponse(current={}, forecast=[]), UnitSystem.IMPERIAL
        )
        assert "Unknown location" in text
        assert "Forecast:" not in text

    def test_json_matches_wire_shape(self, london_current: dict):
        data = json.loads(format_response_json(_response(london_current)))
        assert data["current"]["name"] == "London"
        assert data["forecast"][0]["dt_txt"] == "2024-05-02 12:00:00"
