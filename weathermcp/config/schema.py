"""Pydantic v2 configuration schema with strict validation."""

from pydantic import BaseModel, Field

NWS_BASE_URL = "https://api.weather.gov"
DEFAULT_USER_AGENT = "weather-mcp-server/2.0"


class UpstreamConfig(BaseModel):
    model_config = {"extra": "forbid"}

    base_url: str = NWS_BASE_URL
    user_agent: str = DEFAULT_USER_AGENT
    accept: str = "application/geo+json"
    timeout_seconds: float = Field(default=30.0, gt=0.0)


class CacheConfig(BaseModel):
    model_config = {"extra": "forbid"}

    ttl_seconds: float = Field(default=300.0, gt=0.0)


class ForecastConfig(BaseModel):
    model_config = {"extra": "forbid"}

    city_period_limit: int = Field(default=6, ge=1)


class SummaryConfig(BaseModel):
    model_config = {"extra": "forbid"}

    max_cities: int = Field(default=2, ge=0)
    max_alert_types: int = Field(default=5, ge=1)


class ServerConfig(BaseModel):
    model_config = {"extra": "forbid"}

    name: str = "weather"


class AppConfig(BaseModel):
    model_config = {"extra": "forbid"}

    upstream: UpstreamConfig = UpstreamConfig()
    cache: CacheConfig = CacheConfig()
    forecast: ForecastConfig = ForecastConfig()
    summary: SummaryConfig = SummaryConfig()
    server: ServerConfig = ServerConfig()
