"""Pydantic v2 configuration schema with strict validation."""

from pydantic import BaseModel, Field

from weatherproxy.ingest.openweather_client import OPENWEATHER_BASE_URL
from weatherproxy.models.common import UnitSystem


class ProviderConfig(BaseModel):
    model_config = {"extra": "forbid"}

    api_key: str = ""
    base_url: str = OPENWEATHER_BASE_URL
    timeout: float = Field(default=10.0, gt=0.0)
    concurrent_requests: bool = False


class ServerConfig(BaseModel):
    model_config = {"extra": "forbid"}

    host: str = "127.0.0.1"
    port: int = Field(default=5000, ge=1, le=65535)
    cors_origins: list[str] = ["*"]


class ForecastConfig(BaseModel):
    model_config = {"extra": "forbid"}

    max_days: int = Field(default=5, ge=1, le=5)
    midday: str = Field(default="12:00:00", pattern=r"^\d{2}:\d{2}:\d{2}$")


class FavoritesConfig(BaseModel):
    model_config = {"extra": "forbid"}

    path: str = "data/favorites.json"


class ProxyConfig(BaseModel):
    model_config = {"extra": "forbid"}

    provider: ProviderConfig = ProviderConfig()
    server: ServerConfig = ServerConfig()
    forecast: ForecastConfig = ForecastConfig()
    favorites: FavoritesConfig = FavoritesConfig()
    default_unit: UnitSystem = UnitSystem.METRIC
    log_level: str = "INFO"
