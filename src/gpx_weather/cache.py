"""In-memory caching of forecast responses."""

import time
from typing import Any


class ForecastCache:
    """Dictionary-based LRU cache with optional TTL.

    A hit moves the entry to the most recently used end, so eviction drops
    the least recently used entries first. TTL counts from when the entry
    was stored.

    Keys are (lat, lon, date) tuples; values are raw hourly forecast dicts.
    """

    def __init__(self, max_size: int = 256, ttl_seconds: float | None = 3600.0):
        self.max_size = max_size
        self.ttl = ttl_seconds
        self._cache: dict[Any, tuple[Any, float]] = {}
        self._stats = {"hits": 0, "misses": 0}

    def get(self, key) -> Any | None:
        """Get cached value if available and not expired."""
        if key in self._cache:
            value, timestamp = self._cache[key]
            if self.ttl is None or (time.time() - timestamp < self.ttl):
                self._stats["hits"] += 1
                # Reinsert to mark as most recently used
                del self._cache[key]
                self._cache[key] = (value, timestamp)
                return value
            else:
                # Expired, remove it
                del self._cache[key]
        self._stats["misses"] += 1
        return None

    def set(self, key, value: Any) -> None:
        """Store value in cache with LRU eviction."""
        self._cache.pop(key, None)
        self._cache[key] = (value, time.time())
        # Dict order runs from least to most recently used
        while len(self._cache) > self.max_size:
            del self._cache[next(iter(self._cache))]

    def clear(self) -> int:
        """Clear all cached entries. Returns number of entries cleared."""
        count = len(self._cache)
        self._cache.clear()
        self._stats = {"hits": 0, "misses": 0}
        return count

    def __len__(self) -> int:
        return len(self._cache)

    def stats(self) -> dict:
        """Return cache statistics."""
        total = self._stats["hits"] + self._stats["misses"]
        hit_rate = (self._stats["hits"] / total * 100) if total > 0 else 0
        return {
            "hit_rate": f"{hit_rate:.1f}%",
            "hits": self._stats["hits"],
            "max_size": self.max_size,
            "misses": self._stats["misses"],
            "size": len(self._cache),
        }
