"""Tests for temperature and observation unit conversions."""

from weathermcp.aggregate.units import (
    UNKNOWN,
    celsius_to_fahrenheit,
    format_humidity,
    format_observed_temperature,
    format_pressure,
    format_temperature,
    format_visibility,
    format_wind,
    format_wind_direction,
    format_wind_speed,
    round_half_up,
    to_celsius,
)


class TestRoundHalfUp:
    def test_halves_go_up(self):
        assert round_half_up(0.5) == 1
        assert round_half_up(2.5) == 3
        assert round_half_up(-2.5) == -2

    def test_ordinary(self):
        assert round_half_up(1.4) == 1
        assert round_half_up(-1.6) == -2


class TestForecastTemperature:
    def test_freezing(self):
        assert to_celsius(32, "F") == 0
        assert format_temperature(32, "F") == "32°F (0°C)"

    def test_absent_value(self):
        assert to_celsius(None, "F") is None
        assert format_temperature(None, "F") == UNKNOWN

    def test_missing_unit_defaults_to_fahrenheit(self):
        assert format_temperature(212, None) == "212°F (100°C)"

    def test_rounding(self):
        assert to_celsius(38, "F") == 3
        assert to_celsius(-40, "F") == -40

    def test_celsius_passthrough(self):
        assert to_celsius(21, "C") == 21
        assert format_temperature(21, "C") == "21°C (21°C)"

    def test_zero_fahrenheit_is_not_unknown(self):
        assert format_temperature(0, "F") == "0°F (-18°C)"


class TestWind:
    def test_speed_and_direction(self):
        assert format_wind("10 mph", "NW") == "10 mph NW"

    def test_speed_only(self):
        assert format_wind("10 mph", None) == "10 mph"

    def test_none(self):
        assert format_wind(None, "NW") == UNKNOWN


class TestObservationConversions:
    def test_temperature(self):
        assert celsius_to_fahrenheit(100) == 212
        assert format_observed_temperature(2.8) == "3°C (37°F)"
        assert format_observed_temperature(None) == UNKNOWN

    def test_humidity(self):
        assert format_humidity(54.3) == "54%"
        assert format_humidity(None) == UNKNOWN

    def test_wind_speed_kmh(self):
        assert format_wind_speed(5.0) == "18 km/h"
        assert format_wind_speed(None) == UNKNOWN

    def test_wind_direction(self):
        assert format_wind_direction(310) == "310°"
        assert format_wind_direction(None) == UNKNOWN

    def test_visibility_km(self):
        assert format_visibility(16090) == "16 km"
        assert format_visibility(None) == UNKNOWN

    def test_pressure_hpa(self):
        assert format_pressure(101830) == "1018 hPa"
        assert format_pressure(None) == UNKNOWN

    def test_zero_readings_are_present(self):
        assert format_wind_speed(0) == "0 km/h"
        assert format_wind_direction(0) == "0°"
        assert format_observed_temperature(0) == "0°C (32°F)"
