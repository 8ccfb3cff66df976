"""Text formatters for tool results (markdown-flavoured plain text)."""

from datetime import UTC, datetime

from weathermcp.aggregate.units import (
    UNKNOWN,
    format_humidity,
    format_observed_temperature,
    format_pressure,
    format_temperature,
    format_visibility,
    format_wind,
    format_wind_direction,
    format_wind_speed,
)
from weathermcp.models.outcome import (
    AlertsOutcome,
    FailureReason,
    ForecastOutcome,
    ObservationOutcome,
    StateSummary,
)
from weathermcp.models.weather import AlertFeature, ForecastPeriod
from weathermcp.resolve.location import city_suggestions

SUMMARY_TIP = (
    "Tip: use get-alerts for alert details and get-city-forecast "
    "for a specific city's forecast."
)


def format_alert(alert: AlertFeature) -> str:
    return "\n".join([
        f"Event: {alert.event or UNKNOWN}",
        f"Area: {alert.area_desc or UNKNOWN}",
        f"Severity: {alert.severity or UNKNOWN}",
        f"Status: {alert.status or UNKNOWN}",
        f"Headline: {alert.headline or 'No headline'}",
        "---",
    ])


def format_alerts(outcome: AlertsOutcome) -> str:
    state = outcome.state
    digest = outcome.digest
    if digest is None:
        return f"Unable to retrieve weather alerts for {state}. Please try again later."
    if digest.empty:
        return f"No active weather alerts for {state}."

    if digest.severe_count > 0:
        header = (
            f"{state} has {digest.total} active alerts, "
            f"{digest.severe_count} of them severe"
        )
    else:
        header = f"{state} has {digest.total} active alerts"
    body = "\n".join(format_alert(a) for a in digest.ranked)
    return f"{header}\n\n{body}"


def format_period(period: ForecastPeriod) -> str:
    return "\n".join([
        f"**{period.name or UNKNOWN}**",
        f"Temperature: {format_temperature(period.temperature, period.temperature_unit)}",
        f"Wind: {format_wind(period.wind_speed, period.wind_direction)}",
        f"Forecast: {period.short_forecast or 'No forecast available'}",
        "---",
    ])


def format_forecast(outcome: ForecastOutcome, latitude: float, longitude: float) -> str:
    failure = outcome.failure
    if failure == FailureReason.POINT_UNAVAILABLE:
        return (
            f"Unable to retrieve grid point data for {latitude}, {longitude}.\n\n"
            "Possible causes:\n"
            "- The location is outside the United States "
            "(the NWS API only covers US territory)\n"
            "- The coordinates are malformed\n"
            "- A network problem\n\n"
            "Please check that the coordinates are correct and inside the US."
        )
    elif failure == FailureReason.GRID_INCOMPLETE:
        return "The grid point data did not include a forecast location. Please try again later."
    elif failure == FailureReason.FORECAST_UNAVAILABLE:
        return "Unable to retrieve forecast data. Please try again later."
    elif failure == FailureReason.NO_PERIODS:
        return "No forecast periods are available for this location."

    periods = "\n".join(format_period(p) for p in outcome.periods)
    return f"**Weather forecast for {latitude}, {longitude}**\n\n{periods}"


def format_city_forecast(outcome: ForecastOutcome, city_name: str) -> str:
    if outcome.failure == FailureReason.CITY_NOT_FOUND or outcome.city is None:
        suggestions = ", ".join(city_suggestions())
        return (
            f'No coordinates found for city "{city_name}".\n\n'
            f"Supported cities include: {suggestions}\n\n"
            "If your city is not listed, use get-forecast with its "
            "latitude and longitude."
        )

    city = outcome.city
    failure = outcome.failure
    if failure in (FailureReason.POINT_UNAVAILABLE, FailureReason.GRID_INCOMPLETE):
        return f"Unable to retrieve weather data for {city.name}. Please try again later."
    elif failure == FailureReason.FORECAST_UNAVAILABLE:
        return f"Unable to retrieve forecast data for {city.name}. Please try again later."
    elif failure == FailureReason.NO_PERIODS:
        return f"No forecast periods are available for {city.name}."

    periods = "\n".join(format_period(p) for p in outcome.periods)
    return (
        f"**Weather forecast for {city.name}**\n"
        f"Coordinates: {city.latitude}, {city.longitude}\n\n"
        f"{periods}"
    )


def format_current_weather(
    outcome: ObservationOutcome, latitude: float, longitude: float
) -> str:
    failure = outcome.failure
    if failure == FailureReason.POINT_UNAVAILABLE:
        return (
            f"Unable to retrieve grid point data for {latitude}, {longitude}. "
            "Please check that the coordinates are inside the US."
        )
    elif failure == FailureReason.GRID_INCOMPLETE:
        return "Unable to retrieve grid information. Please try again later."
    elif failure == FailureReason.NO_STATIONS:
        return "No weather observation stations are available near this location."
    elif failure == FailureReason.OBSERVATION_UNAVAILABLE:
        return "Unable to retrieve current observations. Please try again later."

    obs = outcome.observation
    assert obs is not None
    return "\n".join([
        f"**Current weather for {latitude}, {longitude}**",
        f"Station: {obs.station_id}",
        f"Observed: {format_timestamp(obs.timestamp)}",
        "",
        f"**Temperature**: {format_observed_temperature(obs.temperature_c)}",
        f"**Humidity**: {format_humidity(obs.relative_humidity)}",
        f"**Wind speed**: {format_wind_speed(obs.wind_speed_ms)}",
        f"**Wind direction**: {format_wind_direction(obs.wind_direction_deg)}",
        f"**Visibility**: {format_visibility(obs.visibility_m)}",
        f"**Pressure**: {format_pressure(obs.pressure_pa)}",
        "",
        f"**Conditions**: {obs.text_description or 'No description'}",
    ])


def format_state_summary(summary: StateSummary, max_alert_types: int = 5) -> str:
    lines = [f"**Weather summary for {summary.state}**", "", _alerts_line(summary, max_alert_types)]

    if summary.cities:
        lines.append("")
        lines.append("**Major cities**:")
        for entry in summary.cities:
            if entry.period is None:
                lines.append(f"- **{entry.city.name}**: data unavailable")
                continue
            period = entry.period
            temp = format_temperature(period.temperature, period.temperature_unit)
            lines.append(
                f"- **{entry.city.name}**: {temp}, "
                f"{period.short_forecast or 'No description'}"
            )
    elif not summary.has_city_mapping:
        lines.append("")
        lines.append(f"**Major cities**: none on record for {summary.state}")

    lines.append("")
    lines.append(SUMMARY_TIP)
    return "\n".join(lines)


def _alerts_line(summary: StateSummary, max_alert_types: int) -> str:
    digest = summary.alerts.digest
    if digest is None:
        return "**Alerts**: unavailable (the alert feed could not be retrieved)"
    if digest.empty:
        return "**Alerts**: no active weather alerts"

    if digest.severe_count > 0:
        status = f"**Alerts**: {digest.total} active ({digest.severe_count} severe)"
    else:
        status = f"**Alerts**: {digest.total} active"
    types = ", ".join(digest.event_types[:max_alert_types])
    if len(digest.event_types) > max_alert_types:
        types += ", ..."
    return f"{status}\n**Alert types**: {types}"


def format_timestamp(iso_str: str | None) -> str:
    """Render an ISO timestamp as 'YYYY-MM-DD HH:MM UTC'; unparsable input is echoed."""
    if iso_str is None:
        return UNKNOWN
    try:
        dt = datetime.fromisoformat(iso_str)
    except ValueError:
        return iso_str
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=UTC)
    return dt.astimezone(UTC).strftime("%Y-%m-%d %H:%M UTC")
