"""Tests for config schema validation."""

import pytest
from pydantic import ValidationError

from weathermcp.config.schema import (
    DEFAULT_USER_AGENT,
    AppConfig,
    CacheConfig,
    ForecastConfig,
    SummaryConfig,
    UpstreamConfig,
)


class TestAppConfig:
    def test_defaults(self):
        config = AppConfig()
        assert config.upstream.user_agent == DEFAULT_USER_AGENT
        assert config.upstream.timeout_seconds == 30.0
        assert config.forecast.city_period_limit == 6
        assert config.summary.max_cities == 2
        assert config.server.name == "weather"

    def test_extra_fields_rejected(self):
        with pytest.raises(ValidationError, match="Extra inputs are not permitted"):
            AppConfig(unknown_field="bad")

    def test_nested_extra_fields_rejected(self):
        with pytest.raises(ValidationError, match="Extra inputs are not permitted"):
            UpstreamConfig(proxy="http://localhost")


class TestBounds:
    def test_ttl_must_be_positive(self):
        with pytest.raises(ValidationError):
            CacheConfig(ttl_seconds=0)

    def test_timeout_must_be_positive(self):
        with pytest.raises(ValidationError):
            UpstreamConfig(timeout_seconds=0)

    def test_period_limit_at_least_one(self):
        with pytest.raises(ValidationError):
            ForecastConfig(city_period_limit=0)

    def test_summary_may_skip_cities(self):
        assert SummaryConfig(max_cities=0).max_cities == 0
        with pytest.raises(ValidationError):
            SummaryConfig(max_cities=-1)
        with pytest.raises(ValidationError):
            SummaryConfig(max_alert_types=0)
