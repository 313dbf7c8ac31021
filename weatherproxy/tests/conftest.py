"""Shared test fixtures."""

import json
from collections.abc import Callable
from datetime import UTC, datetime, timedelta
from pathlib import Path

import pytest
import yaml

from weatherproxy.config.schema import ProxyConfig
from weatherproxy.ingest.openweather_client import OpenWeatherClient

TEST_BASE_URL = "https://test-owm.example.com/data/2.5"


def _sample(at: datetime, temp: float) -> dict:
    return {
        "dt": int(at.timestamp()),
        "main": {"temp": temp, "feels_like": temp - 0.5, "humidity": 60},
        "weather": [{"id": 800, "main": "Clear", "description": "clear sky"}],
        "dt_txt": at.strftime("%Y-%m-%d %H:%M:%S"),
    }


@pytest.fixture
def make_feed() -> Callable[..., list[dict]]:
    """Return a builder for provider-style 3-hour forecast `list` entries."""

    def build(
        start: str = "2024-05-01 00:00:00", count: int = 40, step_hours: int = 3
    ) -> list[dict]:
        at = datetime.strptime(start, "%Y-%m-%d %H:%M:%S").replace(tzinfo=UTC)
        return [
            _sample(at + timedelta(hours=step_hours * i), 10.0 + i * 0.25)
            for i in range(count)
        ]

    return build


@pytest.fixture
def fixtures_dir() -> Path:
    """Return the path to the test fixtures directory."""
    return Path(__file__).parent / "fixtures"


@pytest.fixture
def london_current(fixtures_dir: Path) -> dict:
    with open(fixtures_dir / "owm_current_london.json") as f:
        return json.load(f)


@pytest.fixture
def owm() -> OpenWeatherClient:
    return OpenWeatherClient(api_key="test-key", base_url=TEST_BASE_URL, timeout=5.0)


@pytest.fixture
def default_config() -> ProxyConfig:
    return ProxyConfig(provider={"api_key": "test-key", "base_url": TEST_BASE_URL})


@pytest.fixture
def config_yaml_path(tmp_path: Path) -> Path:
    """Write a minimal valid config YAML and return its path."""
    data = {
        "provider": {"api_key": "yaml-key", "timeout": 3.0},
        "server": {"port": 8080},
        "favorites": {"path": str(tmp_path / "favorites.json")},
    }
    path = tmp_path / "test_config.yaml"
    with open(path, "w") as f:
        yaml.dump(data, f)
    return path
