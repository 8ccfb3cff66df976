"""Alert ranking and digest."""

from weathermcp.models.outcome import AlertDigest
from weathermcp.models.weather import AlertFeature, Severity

SEVERITY_RANK: dict[str, int] = {
    Severity.SEVERE: 3,
    Severity.MODERATE: 2,
    Severity.MINOR: 1,
}


def severity_rank(severity: str | None) -> int:
    """Rank of a severity label; anything unlisted (including None) is 0."""
    if severity is None:
        return 0
    return SEVERITY_RANK.get(severity, 0)


def rank_alerts(alerts: list[AlertFeature]) -> list[AlertFeature]:
    """Most severe first. Stable: equal ranks keep upstream order."""
    return sorted(alerts, key=lambda a: severity_rank(a.severity), reverse=True)


def distinct_events(alerts: list[AlertFeature]) -> list[str]:
    """Non-empty event names in first-seen order."""
    seen: list[str] = []
    for alert in alerts:
        if alert.event and alert.event not in seen:
            seen.append(alert.event)
    return seen


def digest_alerts(alerts: list[AlertFeature]) -> AlertDigest:
    return AlertDigest(
        ranked=rank_alerts(alerts),
        total=len(alerts),
        severe_count=sum(1 for a in alerts if a.severity == Severity.SEVERE),
        event_types=distinct_events(alerts),
    )
