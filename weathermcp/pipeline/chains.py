"""Chain orchestration: dependent NWS lookups and the per-state fan-out.

Each chain runs Resolving -> Fetching(step)... and stops at the first
broken link with a degraded outcome. There are no retries.
"""

import asyncio
import dataclasses
import logging

from weathermcp.aggregate.ranking import digest_alerts
from weathermcp.config.schema import AppConfig
from weathermcp.ingest.nws_client import NwsClient
from weathermcp.ingest.parsers import parse_alerts, parse_first_station, parse_observation, parse_periods
from weathermcp.models.location import City, Coordinate
from weathermcp.models.outcome import (
    AlertsOutcome,
    CitySummary,
    FailureReason,
    ForecastOutcome,
    ObservationOutcome,
    StateSummary,
)
from weathermcp.resolve.location import LocationResolver, cities_for_state, resolve_city

logger = logging.getLogger(__name__)


class WeatherPipeline:
    def __init__(self, client: NwsClient, config: AppConfig | None = None):
        self.client = client
        self.config = config or AppConfig()
        self.resolver = LocationResolver(client)

    async def forecast(self, coord: Coordinate, city: City | None = None) -> ForecastOutcome:
        """points -> forecast URL -> periods."""
        grid = await self.resolver.resolve_grid(coord)
        if isinstance(grid, FailureReason):
            return self._degraded_forecast(grid, coord, city)

        payload = await self.client.fetch(grid.forecast_url)
        if payload is None:
            return self._degraded_forecast(
                FailureReason.FORECAST_UNAVAILABLE, coord, city
            )

        periods = parse_periods(payload)
        if not periods:
            return self._degraded_forecast(FailureReason.NO_PERIODS, coord, city)

        return ForecastOutcome(
            failure=None, coordinate=coord, city=city, grid=grid, periods=periods
        )

    async def city_forecast(self, name: str) -> ForecastOutcome:
        city = resolve_city(name)
        if city is None:
            logger.info("No coordinates on record for city %r", name)
            return ForecastOutcome(failure=FailureReason.CITY_NOT_FOUND)

        outcome = await self.forecast(city.coordinate, city=city)
        if not outcome.complete:
            return outcome
        limit = self.config.forecast.city_period_limit
        return dataclasses.replace(outcome, periods=outcome.periods[:limit])

    async def current_observation(self, coord: Coordinate) -> ObservationOutcome:
        """points -> grid stations -> first station's latest observation."""
        grid = await self.resolver.resolve_grid(coord)
        if isinstance(grid, FailureReason):
            return self._degraded_observation(grid, coord)

        base = self.client.base_url
        stations = await self.client.fetch(
            f"{base}/gridpoints/{grid.grid_id}/{grid.grid_x},{grid.grid_y}/stations"
        )
        station_id = parse_first_station(stations)
        if station_id is None:
            return self._degraded_observation(FailureReason.NO_STATIONS, coord, grid)

        latest = await self.client.fetch(
            f"{base}/stations/{station_id}/observations/latest"
        )
        observation = parse_observation(latest, station_id)
        if observation is None:
            return self._degraded_observation(
                FailureReason.OBSERVATION_UNAVAILABLE, coord, grid
            )

        return ObservationOutcome(
            failure=None, coordinate=coord, grid=grid, observation=observation
        )

    async def alerts(self, state: str) -> AlertsOutcome:
        state = state.upper()
        payload = await self.client.fetch(f"{self.client.base_url}/alerts?area={state}")
        if payload is None:
            logger.info("Alerts unavailable for %s", state)
            return AlertsOutcome(failure=FailureReason.ALERTS_UNAVAILABLE, state=state)
        return AlertsOutcome(
            failure=None, state=state, digest=digest_alerts(parse_alerts(payload))
        )

    async def state_summary(self, state: str) -> StateSummary:
        """Alerts plus a current-period snapshot for the state's main cities.

        All branches run concurrently and are all awaited; a failed city
        becomes an unavailable entry without affecting the others.
        """
        state = state.upper()
        mapped = cities_for_state(state)
        cities = mapped[: self.config.summary.max_cities]

        alerts, *city_summaries = await asyncio.gather(
            self.alerts(state),
            *(self._city_summary(city) for city in cities),
        )
        logger.info(
            "Summary for %s: %d/%d cities available",
            state, sum(1 for c in city_summaries if c.available), len(cities),
        )
        return StateSummary(
            state=state,
            alerts=alerts,
            cities=city_summaries,
            has_city_mapping=bool(mapped),
        )

    async def _city_summary(self, city: City) -> CitySummary:
        try:
            outcome = await self.forecast(city.coordinate, city=city)
        except Exception:
            logger.exception("Forecast branch failed for %s", city.name)
            return CitySummary(city=city, period=None)
        if not outcome.complete:
            return CitySummary(city=city, period=None)
        return CitySummary(city=city, period=outcome.periods[0])

    def _degraded_forecast(
        self, reason: FailureReason, coord: Coordinate, city: City | None
    ) -> ForecastOutcome:
        outcome = ForecastOutcome(failure=reason, coordinate=coord, city=city)
        logger.info(
            "Forecast chain %s at %s for %.4f,%.4f",
            outcome.status, reason, coord.latitude, coord.longitude,
        )
        return outcome

    def _degraded_observation(
        self, reason: FailureReason, coord: Coordinate, grid=None
    ) -> ObservationOutcome:
        outcome = ObservationOutcome(failure=reason, coordinate=coord, grid=grid)
        logger.info(
            "Observation chain %s at %s for %.4f,%.4f",
            outcome.status, reason, coord.latitude, coord.longitude,
        )
        return outcome
