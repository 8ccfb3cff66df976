"""Extract typed models from raw NWS GeoJSON payloads.

Each accessor checks presence and type explicitly; a missing or mistyped
field becomes None rather than raising.
"""

import math
from typing import Any

from weathermcp.models.weather import AlertFeature, ForecastPeriod, Observation


def properties_of(payload: Any) -> dict[str, Any]:
    """Return ``payload["properties"]`` when it is an object, else ``{}``."""
    if isinstance(payload, dict):
        props = payload.get("properties")
        if isinstance(props, dict):
            return props
    return {}


def features_of(payload: Any) -> list[dict[str, Any]]:
    if isinstance(payload, dict):
        features = payload.get("features")
        if isinstance(features, list):
            return [f for f in features if isinstance(f, dict)]
    return []


def text(obj: dict[str, Any], key: str) -> str | None:
    value = obj.get(key)
    if isinstance(value, str) and value:
        return value
    return None


def number(obj: dict[str, Any], key: str) -> float | None:
    value = obj.get(key)
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    # json accepts NaN/Infinity tokens
    if not math.isfinite(value):
        return None
    return value


def quantity(obj: dict[str, Any], key: str) -> float | None:
    """Read a ``{"value": ..., "unitCode": ...}`` measurement."""
    measurement = obj.get(key)
    if not isinstance(measurement, dict):
        return None
    return number(measurement, "value")


def parse_periods(payload: Any) -> list[ForecastPeriod]:
    periods = properties_of(payload).get("periods")
    if not isinstance(periods, list):
        return []
    return [
        ForecastPeriod(
            name=text(p, "name"),
            temperature=number(p, "temperature"),
            temperature_unit=text(p, "temperatureUnit"),
            wind_speed=text(p, "windSpeed"),
            wind_direction=text(p, "windDirection"),
            short_forecast=text(p, "shortForecast"),
        )
        for p in periods
        if isinstance(p, dict)
    ]


def parse_alerts(payload: Any) -> list[AlertFeature]:
    alerts = []
    for feature in features_of(payload):
        props = properties_of(feature)
        alerts.append(
            AlertFeature(
                event=text(props, "event"),
                area_desc=text(props, "areaDesc"),
                severity=text(props, "severity"),
                status=text(props, "status"),
                headline=text(props, "headline"),
            )
        )
    return alerts


def parse_first_station(payload: Any) -> str | None:
    """Station identifier of the first listed station.

    The stations endpoint orders by its own criteria; the first entry is
    used as-is, with no distance computation.
    """
    features = features_of(payload)
    if not features:
        return None
    return text(properties_of(features[0]), "stationIdentifier")


def parse_observation(payload: Any, station_id: str) -> Observation | None:
    props = properties_of(payload)
    if not props:
        return None
    return Observation(
        station_id=station_id,
        timestamp=text(props, "timestamp"),
        temperature_c=quantity(props, "temperature"),
        relative_humidity=quantity(props, "relativeHumidity"),
        wind_speed_ms=quantity(props, "windSpeed"),
        wind_direction_deg=quantity(props, "windDirection"),
        visibility_m=quantity(props, "visibility"),
        pressure_pa=quantity(props, "barometricPressure"),
        text_description=text(props, "textDescription"),
    )
