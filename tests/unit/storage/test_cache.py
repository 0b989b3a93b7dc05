"""Tests for the in-memory result cache."""

import threading

import pytest

from intent_router.inference import classify
from intent_router.storage import ResultCache


@pytest.fixture
def vitamin():
    return classify("ビタミンD")


@pytest.fixture
def product():
    return classify("DHC")


class TestConstruction:
    def test_defaults(self) -> None:
        cache = ResultCache()
        assert cache.ttl_seconds == 3600
        assert cache.max_entries == 10_000
        assert len(cache) == 0

    @pytest.mark.parametrize("ttl", [0, -1])
    def test_rejects_non_positive_ttl(self, ttl: float) -> None:
        with pytest.raises(ValueError, match="ttl_seconds"):
            ResultCache(ttl_seconds=ttl)

    def test_rejects_zero_capacity(self) -> None:
        with pytest.raises(ValueError, match="max_entries"):
            ResultCache(max_entries=0)


class TestGetSet:
    def test_round_trip(self, result_cache: ResultCache, vitamin) -> None:
        result_cache.set("k", vitamin)
        assert result_cache.get("k") == vitamin

    def test_missing_key(self, result_cache: ResultCache) -> None:
        assert result_cache.get("absent") is None

    def test_overwrite_replaces_value(self, result_cache: ResultCache, vitamin, product) -> None:
        result_cache.set("k", vitamin)
        result_cache.set("k", product)
        assert result_cache.get("k") == product
        assert len(result_cache) == 1


class TestExpiry:
    def test_entry_alive_at_ttl_boundary(self, result_cache: ResultCache, clock, vitamin) -> None:
        result_cache.set("k", vitamin)
        clock.advance(60)
        assert result_cache.get("k") == vitamin

    def test_entry_expires_after_ttl(self, result_cache: ResultCache, clock, vitamin) -> None:
        result_cache.set("k", vitamin)
        clock.advance(60.5)
        assert result_cache.get("k") is None
        # Expired entries are dropped on read
        assert len(result_cache) == 0

    def test_overwrite_refreshes_timestamp(
        self, result_cache: ResultCache, clock, vitamin
    ) -> None:
        result_cache.set("k", vitamin)
        clock.advance(50)
        result_cache.set("k", vitamin)
        clock.advance(50)
        assert result_cache.get("k") == vitamin

    def test_has_respects_ttl(self, result_cache: ResultCache, clock, vitamin) -> None:
        result_cache.set("k", vitamin)
        assert result_cache.has("k")
        clock.advance(61)
        assert not result_cache.has("k")

    def test_purge_expired(self, result_cache: ResultCache, clock, vitamin) -> None:
        result_cache.set("old", vitamin)
        clock.advance(40)
        result_cache.set("new", vitamin)
        clock.advance(30)
        assert result_cache.purge_expired() == 1
        assert not result_cache.has("old")
        assert result_cache.has("new")


class TestEviction:
    def test_capacity_is_bounded(self, result_cache: ResultCache, vitamin) -> None:
        for i in range(10):
            result_cache.set(f"k{i}", vitamin)
        assert len(result_cache) == 3

    def test_evicts_first_inserted(self, result_cache: ResultCache, vitamin) -> None:
        for key in ("a", "b", "c", "d"):
            result_cache.set(key, vitamin)
        assert not result_cache.has("a")
        assert all(result_cache.has(key) for key in ("b", "c", "d"))

    def test_reads_do_not_reorder(self, result_cache: ResultCache, vitamin) -> None:
        for key in ("a", "b", "c"):
            result_cache.set(key, vitamin)
        # A read would save "a" under LRU; FIFO still evicts it
        assert result_cache.get("a") == vitamin
        result_cache.set("d", vitamin)
        assert not result_cache.has("a")
        assert result_cache.has("b")

    def test_overwrite_moves_key_to_back(self, result_cache: ResultCache, vitamin) -> None:
        for key in ("a", "b", "c"):
            result_cache.set(key, vitamin)
        result_cache.set("a", vitamin)
        assert len(result_cache) == 3
        result_cache.set("d", vitamin)
        assert result_cache.has("a")
        assert not result_cache.has("b")


class TestMaintenance:
    def test_delete(self, result_cache: ResultCache, vitamin) -> None:
        result_cache.set("k", vitamin)
        assert result_cache.delete("k") is True
        assert result_cache.delete("k") is False
        assert result_cache.get("k") is None

    def test_clear_resets_counters(self, result_cache: ResultCache, vitamin) -> None:
        result_cache.set("a", vitamin)
        result_cache.set("b", vitamin)
        result_cache.get("a")
        result_cache.get("zzz")
        assert result_cache.clear() == 2
        stats = result_cache.stats()
        assert stats.entries == 0
        assert stats.hits == 0
        assert stats.misses == 0


class TestStats:
    def test_counts_hits_and_misses(self, result_cache: ResultCache, vitamin) -> None:
        result_cache.set("k", vitamin)
        result_cache.get("k")
        result_cache.get("k")
        result_cache.get("absent")
        stats = result_cache.stats()
        assert stats.hits == 2
        assert stats.misses == 1
        assert stats.hit_rate == pytest.approx(2 / 3)
        assert stats.entries == 1
        assert stats.max_entries == 3
        assert stats.ttl_seconds == 60

    def test_hit_rate_without_lookups(self, result_cache: ResultCache) -> None:
        assert result_cache.stats().hit_rate == 0.0

    def test_has_does_not_count(self, result_cache: ResultCache, vitamin) -> None:
        result_cache.set("k", vitamin)
        result_cache.has("k")
        result_cache.has("absent")
        stats = result_cache.stats()
        assert stats.hits == 0
        assert stats.misses == 0

    def test_expired_read_counts_as_miss(self, result_cache: ResultCache, clock, vitamin) -> None:
        result_cache.set("k", vitamin)
        clock.advance(120)
        result_cache.get("k")
        assert result_cache.stats().misses == 1


class TestConcurrency:
    def test_concurrent_sets_respect_capacity(self, vitamin) -> None:
        cache = ResultCache(ttl_seconds=60, max_entries=50)

        def writer(offset: int) -> None:
            for i in range(200):
                cache.set(f"{offset}-{i}", vitamin)
                cache.get(f"{offset}-{i}")

        threads = [threading.Thread(target=writer, args=(n,)) for n in range(8)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert len(cache) == 50
        stats = cache.stats()
        assert stats.hits + stats.misses == 8 * 200
