"""Unit conversions for forecast and observation values.

Every formatter takes an optional source value and renders UNKNOWN when it
is absent, so a missing reading never turns into 0 or NaN.
"""

import math

UNKNOWN = "Unknown"


def round_half_up(value: float) -> int:
    """Round to the nearest integer, .5 going up (not banker's rounding)."""
    return math.floor(value + 0.5)


def _display(value: float) -> int | float:
    return int(value) if float(value).is_integer() else value


def fahrenheit_to_celsius(value: float) -> int:
    return round_half_up((value - 32) * 5 / 9)


def celsius_to_fahrenheit(value: float) -> int:
    return round_half_up(value * 9 / 5 + 32)


def to_celsius(value: float | None, unit: str | None) -> int | float | None:
    """Celsius equivalent of a forecast temperature.

    A missing unit is taken as Fahrenheit; any other unit passes through.
    """
    if value is None:
        return None
    if (unit or "F") == "F":
        return fahrenheit_to_celsius(value)
    return _display(value)


def format_temperature(value: float | None, unit: str | None) -> str:
    if value is None:
        return UNKNOWN
    unit = unit or "F"
    return f"{_display(value)}°{unit} ({to_celsius(value, unit)}°C)"


def format_wind(speed: str | None, direction: str | None) -> str:
    if speed and direction:
        return f"{speed} {direction}"
    return speed or UNKNOWN


def format_observed_temperature(celsius: float | None) -> str:
    if celsius is None:
        return UNKNOWN
    return f"{round_half_up(celsius)}°C ({celsius_to_fahrenheit(celsius)}°F)"


def format_humidity(percent: float | None) -> str:
    if percent is None:
        return UNKNOWN
    return f"{round_half_up(percent)}%"


def format_wind_speed(meters_per_second: float | None) -> str:
    if meters_per_second is None:
        return UNKNOWN
    return f"{round_half_up(meters_per_second * 3.6)} km/h"


def format_wind_direction(degrees: float | None) -> str:
    if degrees is None:
        return UNKNOWN
    return f"{round_half_up(degrees)}°"


def format_visibility(meters: float | None) -> str:
    if meters is None:
        return UNKNOWN
    return f"{round_half_up(meters / 1000)} km"


def format_pressure(pascals: float | None) -> str:
    if pascals is None:
        return UNKNOWN
    return f"{round_half_up(pascals / 100)} hPa"
