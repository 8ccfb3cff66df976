"""MCP tool surface: five weather tools sharing one cached NWS client."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from typing import Annotated

from mcp.server.fastmcp import FastMCP
from pydantic import Field

from weathermcp.cache.store import TtlCache
from weathermcp.config.schema import AppConfig
from weathermcp.ingest.nws_client import NwsClient
from weathermcp.models.location import Coordinate
from weathermcp.pipeline.chains import WeatherPipeline
from weathermcp.reporting.formatters import (
    format_alerts,
    format_city_forecast,
    format_current_weather,
    format_forecast,
    format_state_summary,
)

StateCode = Annotated[
    str,
    Field(min_length=2, max_length=2, description="Two-letter US state code (e.g. CA, NY, TX, FL)"),
]
Latitude = Annotated[float, Field(ge=-90, le=90, description="Latitude of the location (US only)")]
Longitude = Annotated[float, Field(ge=-180, le=180, description="Longitude of the location (US only)")]
CityName = Annotated[
    str,
    Field(description="City name in English, e.g. 'New York', 'Los Angeles', 'Chicago', 'Sacramento'"),
]


class WeatherTools:
    """Tool handlers: run a pipeline chain and render its outcome as text."""

    def __init__(self, pipeline: WeatherPipeline):
        self.pipeline = pipeline

    async def get_alerts(self, state: str) -> str:
        return format_alerts(await self.pipeline.alerts(state.upper()))

    async def get_forecast(self, latitude: float, longitude: float) -> str:
        outcome = await self.pipeline.forecast(Coordinate(latitude, longitude))
        return format_forecast(outcome, latitude, longitude)

    async def get_city_forecast(self, city_name: str) -> str:
        outcome = await self.pipeline.city_forecast(city_name)
        return format_city_forecast(outcome, city_name)

    async def get_current_weather(self, latitude: float, longitude: float) -> str:
        outcome = await self.pipeline.current_observation(Coordinate(latitude, longitude))
        return format_current_weather(outcome, latitude, longitude)

    async def get_weather_summary(self, state: str) -> str:
        summary = await self.pipeline.state_summary(state.upper())
        return format_state_summary(
            summary, self.pipeline.config.summary.max_alert_types
        )


def build_server(config: AppConfig, client: NwsClient | None = None) -> FastMCP:
    if client is None:
        client = NwsClient(config.upstream, TtlCache(config.cache.ttl_seconds))
    tools = WeatherTools(WeatherPipeline(client, config))

    @asynccontextmanager
    async def lifespan(_server: FastMCP) -> AsyncIterator[None]:
        try:
            yield
        finally:
            await client.aclose()

    mcp = FastMCP(config.server.name, lifespan=lifespan)

    @mcp.tool(
        name="get-alerts",
        description=(
            "Get active weather alerts for a US state, including floods, "
            "storms, heat and other hazards."
        ),
    )
    async def get_alerts(state: StateCode) -> str:
        return await tools.get_alerts(state)

    @mcp.tool(
        name="get-forecast",
        description=(
            "Get the detailed multi-day forecast (temperature, wind, conditions) "
            "for any location in the US."
        ),
    )
    async def get_forecast(latitude: Latitude, longitude: Longitude) -> str:
        return await tools.get_forecast(latitude, longitude)

    @mcp.tool(
        name="get-city-forecast",
        description=(
            "Get the forecast for a major US city by name, e.g. New York, "
            "Los Angeles or Chicago."
        ),
    )
    async def get_city_forecast(cityName: CityName) -> str:  # noqa: N803
        return await tools.get_city_forecast(cityName)

    @mcp.tool(
        name="get-current-weather",
        description=(
            "Get current observed conditions (temperature, humidity, wind, "
            "visibility, pressure) for a location."
        ),
    )
    async def get_current_weather(latitude: Latitude, longitude: Longitude) -> str:
        return await tools.get_current_weather(latitude, longitude)

    @mcp.tool(
        name="get-weather-summary",
        description=(
            "Get a weather summary for a US state: active alerts plus a "
            "forecast snapshot for its major cities."
        ),
    )
    async def get_weather_summary(state: StateCode) -> str:
        return await tools.get_weather_summary(state)

    return mcp
