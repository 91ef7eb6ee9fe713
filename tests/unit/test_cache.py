"""
Unit tests for caches and cache snapshots.

Tests cover:
- GeometryCache insertion, lookup and LRU eviction
- CacheRegistry registration
- Snapshot capacity conversion and unavailable caches
"""

import pytest

from renderstats.cache import (
    BYTES_PER_MB,
    CacheRegistry,
    CacheSnapshot,
    GeometryCache,
    read_cache_snapshots,
    take_snapshot,
)


class TestGeometryCache:
    """Tests for GeometryCache."""

    def test_insert_and_get(self) -> None:
        cache = GeometryCache(max_size_mb=1)
        assert cache.insert("a", "value", cost=10)
        assert cache.get("a") == "value"
        assert cache.contains("a")
        assert cache.size() == 1
        assert cache.total_cost() == 10

    def test_get_missing(self) -> None:
        assert GeometryCache().get("nothing") is None

    def test_replace_updates_cost(self) -> None:
        cache = GeometryCache(max_size_mb=1)
        cache.insert("a", 1, cost=10)
        cache.insert("a", 2, cost=30)
        assert cache.size() == 1
        assert cache.total_cost() == 30
        assert cache.get("a") == 2

    def test_oversized_entry_rejected(self) -> None:
        cache = GeometryCache(max_size_mb=1)
        assert not cache.insert("big", object(), cost=BYTES_PER_MB + 1)
        assert cache.size() == 0

    def test_evicts_least_recently_used(self) -> None:
        cache = GeometryCache(max_size_mb=1)
        half = BYTES_PER_MB // 2
        cache.insert("a", 1, cost=half)
        cache.insert("b", 2, cost=half)
        cache.get("a")
        cache.insert("c", 3, cost=half)
        assert cache.contains("a")
        assert not cache.contains("b")
        assert cache.contains("c")
        assert cache.total_cost() == 2 * half

    def test_shrinking_evicts(self) -> None:
        cache = GeometryCache(max_size_mb=2)
        cache.insert("a", 1, cost=BYTES_PER_MB)
        cache.insert("b", 2, cost=BYTES_PER_MB)
        cache.set_max_size_mb(1)
        assert cache.size() == 1
        assert cache.contains("b")

    def test_remove_and_clear(self) -> None:
        cache = GeometryCache()
        cache.insert("a", 1, cost=5)
        cache.insert("b", 2, cost=5)
        assert cache.remove("a")
        assert not cache.remove("a")
        assert cache.total_cost() == 5
        cache.clear()
        assert len(cache) == 0
        assert cache.total_cost() == 0

    def test_negative_values_rejected(self) -> None:
        with pytest.raises(ValueError):
            GeometryCache(max_size_mb=-1)
        with pytest.raises(ValueError):
            GeometryCache().insert("a", 1, cost=-5)


class TestCacheRegistry:
    """Tests for CacheRegistry."""

    def test_register_and_get(self) -> None:
        registry = CacheRegistry()
        cache = GeometryCache()
        registry.register("geometry_cache", cache)
        assert registry.get("geometry_cache") is cache
        assert "geometry_cache" in registry
        assert registry.names() == ["geometry_cache"]

    def test_unavailable_slot(self) -> None:
        registry = CacheRegistry()
        registry.register("cgal_cache", None)
        assert "cgal_cache" in registry
        assert not registry.is_available("cgal_cache")
        assert registry.get("cgal_cache") is None
        assert len(registry) == 1

    def test_empty_name_rejected(self) -> None:
        with pytest.raises(ValueError):
            CacheRegistry().register("", GeometryCache())

    def test_unregister(self) -> None:
        registry = CacheRegistry()
        registry.register("geometry_cache", GeometryCache())
        assert registry.unregister("geometry_cache")
        assert not registry.unregister("geometry_cache")

    def test_unregister_unavailable_slot(self) -> None:
        registry = CacheRegistry()
        registry.register("cgal_cache", None)
        assert registry.unregister("cgal_cache")
        assert "cgal_cache" not in registry
        assert registry.names() == []
        assert not registry.unregister("cgal_cache")


class TestSnapshots:
    """Tests for cache snapshots."""

    def test_capacity_in_bytes(self) -> None:
        cache = GeometryCache(max_size_mb=100, title="Geometry cache")
        cache.insert("a", 1, cost=1234)
        snapshot = take_snapshot("geometry_cache", cache)
        assert snapshot == CacheSnapshot(
            name="geometry_cache",
            title="Geometry cache",
            entry_count=1,
            bytes_used=1234,
            byte_capacity=100 * 1024 * 1024,
        )
        assert snapshot.to_dict() == {"entries": 1, "bytes": 1234, "max_size": 104_857_600}

    def test_unavailable_cache_omitted(self, caches: CacheRegistry) -> None:
        snapshots = read_cache_snapshots(caches)
        assert [s.name for s in snapshots] == ["geometry_cache"]
        assert snapshots[0].entry_count == 2
        assert snapshots[0].bytes_used == 3500

    def test_plain_mapping(self) -> None:
        snapshots = read_cache_snapshots({"cgal_cache": GeometryCache(max_size_mb=1, title=""), "other": None})
        assert len(snapshots) == 1
        assert snapshots[0].title == "Cgal cache"

    def test_no_caches(self) -> None:
        assert read_cache_snapshots(None) == []
