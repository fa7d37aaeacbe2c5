"""Package query cache entry."""

from dataclasses import dataclass

from .package_record import PackageRecord


@dataclass(frozen=True)
class CacheEntryEntity:
    """Search results cached for one normalized query.

    Attributes:
        query: Lowercased query text (the cache key)
        packages: Search results in remote relevance order
        expires_at: Clock reading at which the entry stops being valid
    """

    query: str
    packages: tuple[PackageRecord, ...]
    expires_at: float

    def is_valid(self, now: float) -> bool:
        """Return True while ``now`` is strictly before ``expires_at``."""
        return now < self.expires_at
