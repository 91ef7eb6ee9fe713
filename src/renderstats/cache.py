"""
Caches and cache occupancy snapshots.

The geometry engine keeps computed results in cost-bounded caches. The
reporting layer only reads their occupancy: entry count, bytes used and the
configured capacity. Capacity is configured in megabytes and reported in
bytes.

Design:
    - Caches are passed in explicitly through a CacheRegistry (no globals)
    - A registry slot may hold None when its backend isn't available;
      such caches are skipped, not reported as errors
    - Snapshots are immutable copies taken at report time

Usage:
    registry = CacheRegistry()
    registry.register("geometry_cache", GeometryCache(max_size_mb=100))

    for snapshot in read_cache_snapshots(registry):
        print(snapshot.name, snapshot.entry_count)
"""

from collections import OrderedDict
from collections.abc import Iterator, Mapping
from dataclasses import dataclass
from typing import Any

BYTES_PER_MB = 1024 * 1024


class GeometryCache:
    """
    Least-recently-used cache bounded by total cost in bytes.

    Each entry is inserted with a cost (its approximate size in bytes).
    Inserting evicts the oldest entries until the new one fits; an entry
    larger than the whole cache is rejected.

    Attributes:
        title: Display name used in log reports
    """

    def __init__(self, max_size_mb: int = 100, title: str = "Geometry cache") -> None:
        if max_size_mb < 0:
            msg = f"Cache size must be non-negative, got {max_size_mb}"
            raise ValueError(msg)
        self.title = title
        self._max_size_mb = max_size_mb
        self._entries: OrderedDict[str, tuple[Any, int]] = OrderedDict()
        self._total_cost = 0

    def insert(self, key: str, value: Any, cost: int) -> bool:
        """
        Insert or replace an entry.

        Returns:
            True if the entry was stored, False if it can never fit
        """
        if cost < 0:
            msg = f"Entry cost must be non-negative, got {cost}"
            raise ValueError(msg)
        if cost > self.max_size_bytes():
            return False

        self.remove(key)
        self._entries[key] = (value, cost)
        self._total_cost += cost
        self._evict()
        return True

    def get(self, key: str) -> Any:
        """Return the cached value (or None) and mark it recently used."""
        entry = self._entries.get(key)
        if entry is None:
            return None
        self._entries.move_to_end(key)
        return entry[0]

    def contains(self, key: str) -> bool:
        return key in self._entries

    def remove(self, key: str) -> bool:
        entry = self._entries.pop(key, None)
        if entry is None:
            return False
        self._total_cost -= entry[1]
        return True

    def clear(self) -> None:
        self._entries.clear()
        self._total_cost = 0

    def size(self) -> int:
        """Number of entries."""
        return len(self._entries)

    def total_cost(self) -> int:
        """Bytes used by all entries."""
        return self._total_cost

    def max_size_mb(self) -> int:
        return self._max_size_mb

    def max_size_bytes(self) -> int:
        return self._max_size_mb * BYTES_PER_MB

    def set_max_size_mb(self, max_size_mb: int) -> None:
        """Change the capacity, evicting entries that no longer fit."""
        if max_size_mb < 0:
            msg = f"Cache size must be non-negative, got {max_size_mb}"
            raise ValueError(msg)
        self._max_size_mb = max_size_mb
        self._evict()

    def _evict(self) -> None:
        while self._total_cost > self.max_size_bytes() and self._entries:
            _, (_, cost) = self._entries.popitem(last=False)
            self._total_cost -= cost

    def __len__(self) -> int:
        return self.size()

    def __repr__(self) -> str:
        return (
            f"GeometryCache(title={self.title!r}, entries={self.size()}, "
            f"bytes={self._total_cost}, max_size_mb={self._max_size_mb})"
        )


class CacheRegistry:
    """
    Named caches handed to the reporting layer.

    Registration order is report order. A name registered with None stands
    for a cache whose backend isn't available in this build.
    """

    def __init__(self) -> None:
        self._caches: dict[str, GeometryCache | None] = {}

    def register(self, name: str, cache: GeometryCache | None) -> None:
        """
        Register a cache under a name, replacing any previous one.

        Raises:
            ValueError: If name is empty
        """
        if not name:
            msg = "Cache must have a non-empty name"
            raise ValueError(msg)
        self._caches[name] = cache

    def unregister(self, name: str) -> bool:
        """Remove a name, available or not. Returns False if it wasn't registered."""
        if name not in self._caches:
            return False
        del self._caches[name]
        return True

    def get(self, name: str) -> GeometryCache | None:
        return self._caches.get(name)

    def is_available(self, name: str) -> bool:
        """True if the name is registered with an actual cache."""
        return self._caches.get(name) is not None

    def names(self) -> list[str]:
        return list(self._caches)

    def items(self) -> Iterator[tuple[str, GeometryCache | None]]:
        return iter(list(self._caches.items()))

    def __contains__(self, name: str) -> bool:
        return name in self._caches

    def __len__(self) -> int:
        return len(self._caches)


@dataclass(frozen=True)
class CacheSnapshot:
    """
    Occupancy of one cache at report time.

    Attributes:
        name: Registry name, used as the JSON key
        title: Display name used in log reports
        entry_count: Number of cached entries
        bytes_used: Total cost of all entries in bytes
        byte_capacity: Configured capacity in bytes
    """

    name: str
    title: str
    entry_count: int
    bytes_used: int
    byte_capacity: int

    def to_dict(self) -> dict[str, int]:
        return {
            "entries": self.entry_count,
            "bytes": self.bytes_used,
            "max_size": self.byte_capacity,
        }


def _title_from_name(name: str) -> str:
    return name.replace("_", " ").capitalize()


def take_snapshot(name: str, cache: Any) -> CacheSnapshot:
    """Read one cache's occupancy."""
    return CacheSnapshot(
        name=name,
        title=getattr(cache, "title", None) or _title_from_name(name),
        entry_count=cache.size(),
        bytes_used=cache.total_cost(),
        byte_capacity=cache.max_size_mb() * BYTES_PER_MB,
    )


def read_cache_snapshots(
    caches: "CacheRegistry | Mapping[str, Any] | None",
) -> list[CacheSnapshot]:
    """Snapshot every available cache, skipping unavailable (None) ones."""
    if caches is None:
        return []
    return [take_snapshot(name, cache) for name, cache in caches.items() if cache is not None]
