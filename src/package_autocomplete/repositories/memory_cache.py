"""In-process implementation of QueryCache.

Entries live in a plain dict for the lifetime of the process. There is no
eviction besides overwrite; an editor session types a bounded number of
distinct queries.
"""

import time
from collections.abc import Callable

from package_autocomplete.config import settings
from package_autocomplete.entities import CacheEntryEntity, PackageRecord


class MemoryQueryCache:
    """Time-expiring memoization of package search results.

    This class satisfies the QueryCache protocol through structural
    typing - no explicit inheritance needed.

    Keys are lowercased, so ``"ABC"`` and ``"abc"`` share an entry. Each
    store replaces the whole entry, so concurrent stores for the same key
    resolve to last-store-wins.
    """

    def __init__(
        self,
        ttl: float | None = None,
        clock: Callable[[], float] | None = None,
    ) -> None:
        """Initialize the cache.

        Args:
            ttl: Validity window in seconds (positive). Defaults to settings.
            clock: Monotonic time source. Defaults to time.monotonic.
        """
        if ttl is not None and ttl <= 0:
            raise ValueError("ttl must be positive")
        self._ttl = ttl if ttl is not None else settings.package_cache_ttl
        self._clock = clock or time.monotonic
        self._entries: dict[str, CacheEntryEntity] = {}
        self._hits = 0
        self._misses = 0

    @classmethod
    def create(cls, ttl: float | None = None) -> "MemoryQueryCache":
        """Factory method to create MemoryQueryCache with defaults.

        Args:
            ttl: Validity window in seconds. If None, uses settings.

        Returns:
            Configured MemoryQueryCache
        """
        return cls(ttl=ttl)

    @staticmethod
    def normalize(query: str) -> str:
        """Build the cache key for a query."""
        return query.lower()

    def lookup(self, query: str) -> list[PackageRecord] | None:
        """Return cached packages if the entry exists and has not expired.

        Args:
            query: The search text (any case)

        Returns:
            The cached packages, or None (absent and expired look the same)
        """
        entry = self._entries.get(self.normalize(query))
        if entry is None or not entry.is_valid(self._clock()):
            self._misses += 1
            return None
        self._hits += 1
        return list(entry.packages)

    def store(self, query: str, packages: list[PackageRecord]) -> None:
        """Insert or overwrite the entry for ``query``.

        Args:
            query: The search text (any case)
            packages: Search results to cache
        """
        key = self.normalize(query)
        self._entries[key] = CacheEntryEntity(
            query=key,
            packages=tuple(packages),
            expires_at=self._clock() + self._ttl,
        )

    def clear(self) -> int:
        """Drop all entries.

        Returns:
            Number of entries removed
        """
        count = len(self._entries)
        self._entries = {}
        return count

    def stats(self) -> dict:
        """Get cache statistics.

        Returns:
            Dictionary with entry count, hit/miss counters and TTL
        """
        now = self._clock()
        return {
            "total_entries": len(self._entries),
            "live_entries": sum(1 for e in self._entries.values() if e.is_valid(now)),
            "hits": self._hits,
            "misses": self._misses,
            "ttl": self._ttl,
        }

    @property
    def ttl(self) -> float:
        """Get the validity window in seconds."""
        return self._ttl
