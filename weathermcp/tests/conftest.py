"""Shared test fixtures."""

import json
from collections.abc import Callable
from pathlib import Path
from typing import Any

import pytest
import yaml

from weathermcp.cache.store import TtlCache
from weathermcp.config.schema import AppConfig, UpstreamConfig
from weathermcp.ingest.nws_client import NwsClient

TEST_BASE_URL = "https://test-nws.example.com"


class FakeClock:
    """Manually advanced monotonic clock."""

    def __init__(self, start: float = 1000.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def fixtures_dir() -> Path:
    """Return the path to the test fixtures directory."""
    return Path(__file__).parent / "fixtures"


@pytest.fixture
def load_fixture(fixtures_dir: Path) -> Callable[[str], Any]:
    def _load(name: str) -> Any:
        with open(fixtures_dir / name) as f:
            return json.load(f)
    return _load


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def test_config() -> AppConfig:
    return AppConfig(upstream=UpstreamConfig(base_url=TEST_BASE_URL))


@pytest.fixture
def make_client(clock: FakeClock, test_config: AppConfig) -> Callable[[], NwsClient]:
    """Factory for clients against the test base URL with a fake-clock cache."""
    def _make() -> NwsClient:
        cache = TtlCache(test_config.cache.ttl_seconds, clock=clock)
        return NwsClient(test_config.upstream, cache)
    return _make


@pytest.fixture
def config_yaml_path(tmp_path: Path) -> Path:
    """Write a minimal valid config YAML and return its path."""
    data = {
        "cache": {"ttl_seconds": 120},
        "summary": {"max_cities": 1},
    }
    path = tmp_path / "test_config.yaml"
    with open(path, "w") as f:
        yaml.dump(data, f)
    return path
