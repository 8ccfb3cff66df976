"""Tests for the TTL cache store with a simulated clock."""

import threading

from weathermcp.cache.store import DEFAULT_TTL_SECONDS, TtlCache
from weathermcp.tests.conftest import FakeClock


class TestTtlCache:
    def test_miss_on_empty(self, clock: FakeClock):
        cache = TtlCache(clock=clock)
        assert cache.get("https://x/alerts") is None

    def test_put_then_get(self, clock: FakeClock):
        cache = TtlCache(clock=clock)
        cache.put("k", {"a": 1})
        assert cache.get("k") == {"a": 1}

    def test_default_ttl_is_five_minutes(self):
        assert DEFAULT_TTL_SECONDS == 300.0
        assert TtlCache().ttl_seconds == 300.0

    def test_fresh_within_ttl(self, clock: FakeClock):
        cache = TtlCache(ttl_seconds=300, clock=clock)
        cache.put("k", "v")
        clock.advance(299)
        assert cache.get("k") == "v"

    def test_boundary_exact_ttl_is_fresh(self, clock: FakeClock):
        cache = TtlCache(ttl_seconds=300, clock=clock)
        cache.put("k", "v")
        clock.advance(300)
        # Exactly 300s old = not expired (>300 is expired)
        assert cache.get("k") == "v"

    def test_expired_after_ttl(self, clock: FakeClock):
        cache = TtlCache(ttl_seconds=300, clock=clock)
        cache.put("k", "v")
        clock.advance(300.001)
        assert cache.get("k") is None

    def test_expired_entry_not_removed(self, clock: FakeClock):
        cache = TtlCache(ttl_seconds=10, clock=clock)
        cache.put("k", "v")
        clock.advance(60)
        assert cache.get("k") is None
        assert len(cache) == 1

    def test_put_replaces_and_refreshes(self, clock: FakeClock):
        cache = TtlCache(ttl_seconds=300, clock=clock)
        cache.put("k", "old")
        clock.advance(250)
        cache.put("k", "new")
        clock.advance(250)
        assert cache.get("k") == "new"
        assert len(cache) == 1

    def test_keys_independent(self, clock: FakeClock):
        cache = TtlCache(ttl_seconds=300, clock=clock)
        cache.put("a", 1)
        clock.advance(200)
        cache.put("b", 2)
        clock.advance(200)
        assert cache.get("a") is None
        assert cache.get("b") == 2

    def test_clear(self, clock: FakeClock):
        cache = TtlCache(clock=clock)
        cache.put("a", 1)
        cache.clear()
        assert len(cache) == 0
        assert cache.get("a") is None

    def test_instances_do_not_share_state(self, clock: FakeClock):
        c1 = TtlCache(clock=clock)
        c2 = TtlCache(clock=clock)
        c1.put("k", 1)
        assert c2.get("k") is None

    def test_concurrent_puts(self):
        cache = TtlCache()

        def writer(prefix: str) -> None:
            for i in range(200):
                cache.put(f"{prefix}-{i % 50}", i)
                cache.get(f"{prefix}-{i % 50}")

        threads = [threading.Thread(target=writer, args=(f"t{n}",)) for n in range(8)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()
        assert len(cache) == 8 * 50
