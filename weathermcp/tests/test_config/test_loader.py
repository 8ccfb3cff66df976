"""Tests for config loading and dotted-key get/set."""

from pathlib import Path

import pytest
from pydantic import ValidationError

from weathermcp.config.loader import (
    config_hash,
    get_config_value,
    load_config,
    set_config_value,
)
from weathermcp.config.schema import NWS_BASE_URL, AppConfig, CacheConfig


class TestLoadConfig:
    def test_no_path_uses_defaults(self):
        config = load_config()
        assert config.upstream.base_url == NWS_BASE_URL
        assert config.cache.ttl_seconds == 300.0

    def test_load_from_yaml(self, config_yaml_path: Path):
        config = load_config(config_yaml_path)
        assert config.cache.ttl_seconds == 120
        assert config.summary.max_cities == 1
        assert config.summary.max_alert_types == 5

    def test_empty_yaml_uses_defaults(self, tmp_path: Path):
        path = tmp_path / "empty.yaml"
        path.write_text("")
        assert load_config(path) == AppConfig()

    def test_fixtures_config(self, fixtures_dir: Path):
        config = load_config(fixtures_dir / "config_default.yaml")
        assert config.upstream.timeout_seconds == 20
        assert config.forecast.city_period_limit == 6

    def test_unknown_section_rejected(self, tmp_path: Path):
        path = tmp_path / "bad.yaml"
        path.write_text("storage:\n  path: x.db\n")
        with pytest.raises(ValidationError):
            load_config(path)


class TestConfigHash:
    def test_deterministic(self):
        assert config_hash(AppConfig()) == config_hash(AppConfig())

    def test_different_config_different_hash(self):
        c2 = AppConfig(cache=CacheConfig(ttl_seconds=60))
        assert config_hash(AppConfig()) != config_hash(c2)


class TestGetConfigValue:
    def test_dotted_key(self):
        assert get_config_value(AppConfig(), "summary.max_cities") == 2

    def test_section(self):
        val = get_config_value(AppConfig(), "upstream")
        assert val.accept == "application/geo+json"

    def test_invalid_key(self):
        with pytest.raises(KeyError):
            get_config_value(AppConfig(), "nonexistent.key")


class TestSetConfigValue:
    def test_set_and_revalidate(self):
        new_config = set_config_value(AppConfig(), "cache.ttl_seconds", 60.0)
        assert new_config.cache.ttl_seconds == 60.0

    def test_string_coercion(self):
        config = AppConfig()
        assert set_config_value(config, "summary.max_cities", "3").summary.max_cities == 3
        assert set_config_value(config, "cache.ttl_seconds", "90").cache.ttl_seconds == 90.0

    def test_original_untouched(self):
        config = AppConfig()
        set_config_value(config, "server.name", "other")
        assert config.server.name == "weather"

    def test_missing_key(self):
        with pytest.raises(KeyError):
            set_config_value(AppConfig(), "cache.bogus", 1)

    def test_invalid_value_raises(self):
        with pytest.raises(ValidationError):
            set_config_value(AppConfig(), "cache.ttl_seconds", -1.0)
