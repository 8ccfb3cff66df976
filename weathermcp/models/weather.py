"""NWS payload models. Every field is optional; upstream omits freely."""

from dataclasses import dataclass
from enum import StrEnum


class Severity(StrEnum):
    SEVERE = "Severe"
    MODERATE = "Moderate"
    MINOR = "Minor"
    UNKNOWN = "Unknown"


@dataclass(frozen=True)
class ForecastPeriod:
    name: str | None = None
    temperature: float | None = None
    temperature_unit: str | None = None
    wind_speed: str | None = None
    wind_direction: str | None = None
    short_forecast: str | None = None


@dataclass(frozen=True)
class AlertFeature:
    event: str | None = None
    area_desc: str | None = None
    severity: str | None = None
    status: str | None = None
    headline: str | None = None


@dataclass(frozen=True)
class Observation:
    station_id: str
    timestamp: str | None = None
    temperature_c: float | None = None
    relative_humidity: float | None = None
    wind_speed_ms: float | None = None
    wind_direction_deg: float | None = None
    visibility_m: float | None = None
    pressure_pa: float | None = None
    text_description: str | None = None
