"""Location resolution: city names to coordinates, coordinates to NWS grids."""

import logging
from typing import Any

from weathermcp.config.defaults import CITY_TABLE, STATE_CITIES
from weathermcp.ingest.nws_client import NwsClient
from weathermcp.ingest.parsers import number, properties_of, text
from weathermcp.models.location import City, Coordinate, GridReference
from weathermcp.models.outcome import FailureReason

logger = logging.getLogger(__name__)


def resolve_city(name: str, table: dict[str, City] = CITY_TABLE) -> City | None:
    """Exact, case-insensitive match against the city table. No network I/O."""
    return table.get(name.strip().lower())


def city_suggestions(limit: int = 10, table: dict[str, City] = CITY_TABLE) -> list[str]:
    """Distinct display names in table order, for 'not found' messages."""
    names: list[str] = []
    for city in table.values():
        if city.name not in names:
            names.append(city.name)
        if len(names) >= limit:
            break
    return names


def cities_for_state(
    state: str,
    limit: int | None = None,
    table: dict[str, City] = CITY_TABLE,
    state_cities: dict[str, list[str]] = STATE_CITIES,
) -> list[City]:
    """Representative cities for a two-letter state code, deduplicated."""
    cities: list[City] = []
    for key in state_cities.get(state.upper(), []):
        city = table.get(key)
        if city is None or city in cities:
            continue
        cities.append(city)
        if limit is not None and len(cities) >= limit:
            break
    return cities


def parse_grid(payload: Any) -> GridReference | None:
    """Build a GridReference from a points response.

    gridX/gridY are checked for presence, not truthiness: 0 is a valid
    grid index.
    """
    props = properties_of(payload)
    forecast_url = text(props, "forecast")
    grid_id = text(props, "gridId")
    grid_x = number(props, "gridX")
    grid_y = number(props, "gridY")
    if forecast_url is None or grid_id is None or grid_x is None or grid_y is None:
        return None
    return GridReference(
        grid_id=grid_id,
        grid_x=int(grid_x),
        grid_y=int(grid_y),
        forecast_url=forecast_url,
    )


class LocationResolver:
    def __init__(self, client: NwsClient):
        self.client = client

    def points_url(self, coord: Coordinate) -> str:
        # 4 decimals (~11 m) keeps cache keys stable for near-identical input
        return f"{self.client.base_url}/points/{coord.latitude:.4f},{coord.longitude:.4f}"

    async def resolve_grid(self, coord: Coordinate) -> GridReference | FailureReason:
        """Look up the grid for a coordinate.

        Returns the GridReference, or the FailureReason naming why none is
        available (lookup failed, or the response lacked grid fields).
        """
        payload = await self.client.fetch(self.points_url(coord))
        if payload is None:
            return FailureReason.POINT_UNAVAILABLE
        grid = parse_grid(payload)
        if grid is None:
            logger.warning(
                "Points response for %.4f,%.4f is missing grid fields",
                coord.latitude, coord.longitude,
            )
            return FailureReason.GRID_INCOMPLETE
        return grid
