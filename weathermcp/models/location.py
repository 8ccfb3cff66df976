"""Location value types: coordinates, cities and NWS grid references."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Coordinate:
    latitude: float
    longitude: float


@dataclass(frozen=True)
class City:
    name: str
    latitude: float
    longitude: float

    @property
    def coordinate(self) -> Coordinate:
        return Coordinate(self.latitude, self.longitude)


@dataclass(frozen=True)
class GridReference:
    grid_id: str
    grid_x: int
    grid_y: int
    forecast_url: str
