"""Chain outcome models: explicit complete/degraded results, never exceptions."""

from dataclasses import dataclass, field
from enum import StrEnum

from weathermcp.models.location import City, Coordinate, GridReference
from weathermcp.models.weather import AlertFeature, ForecastPeriod, Observation


class ChainStatus(StrEnum):
    COMPLETE = "complete"
    DEGRADED = "degraded"


class FailureReason(StrEnum):
    CITY_NOT_FOUND = "city_not_found"
    POINT_UNAVAILABLE = "point_unavailable"
    GRID_INCOMPLETE = "grid_incomplete"
    FORECAST_UNAVAILABLE = "forecast_unavailable"
    NO_PERIODS = "no_periods"
    NO_STATIONS = "no_stations"
    OBSERVATION_UNAVAILABLE = "observation_unavailable"
    ALERTS_UNAVAILABLE = "alerts_unavailable"


@dataclass(frozen=True)
class _Outcome:
    failure: FailureReason | None

    @property
    def status(self) -> ChainStatus:
        return ChainStatus.COMPLETE if self.failure is None else ChainStatus.DEGRADED

    @property
    def complete(self) -> bool:
        return self.failure is None


@dataclass(frozen=True)
class ForecastOutcome(_Outcome):
    coordinate: Coordinate | None = None
    city: City | None = None
    grid: GridReference | None = None
    periods: list[ForecastPeriod] = field(default_factory=list)


@dataclass(frozen=True)
class ObservationOutcome(_Outcome):
    coordinate: Coordinate
    grid: GridReference | None = None
    observation: Observation | None = None


@dataclass(frozen=True)
class AlertDigest:
    ranked: list[AlertFeature]
    total: int
    severe_count: int
    event_types: list[str]

    @property
    def empty(self) -> bool:
        return self.total == 0


@dataclass(frozen=True)
class AlertsOutcome(_Outcome):
    state: str
    digest: AlertDigest | None = None


@dataclass(frozen=True)
class CitySummary:
    city: City
    period: ForecastPeriod | None  # None means data unavailable

    @property
    def available(self) -> bool:
        return self.period is not None


@dataclass(frozen=True)
class StateSummary:
    state: str
    alerts: AlertsOutcome
    cities: list[CitySummary]
    has_city_mapping: bool
