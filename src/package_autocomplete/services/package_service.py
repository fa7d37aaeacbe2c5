"""Package lookups with caching and failure isolation.

This service is the boundary between the suggestion layer and the remote
feed: feed errors are logged and turned into empty results here, and never
reach the editor.
"""

from package_autocomplete.config import settings
from package_autocomplete.entities import PackageRecord
from package_autocomplete.errors import NuGetClientError
from package_autocomplete.logger import get_logger
from package_autocomplete.protocols import PackageSource, QueryCache
from package_autocomplete.versioning import filter_versions

logger = get_logger(__name__)


class PackageService:
    """Cached package search, version listing and single-package lookup.

    This service depends on PROTOCOLS, not concrete implementations:
    - PackageSource: the public NuGet client, or a fake in tests
    - QueryCache: the in-process TTL cache

    Example:
        ```python
        from package_autocomplete.repositories import MemoryQueryCache, NuGetClient
        from package_autocomplete.services import PackageService

        packages = PackageService.create(
            source=NuGetClient.create(),
            cache=MemoryQueryCache.create(),
        )
        results = await packages.search_packages("json")
        ```
    """

    def __init__(
        self,
        source: PackageSource,
        cache: QueryCache,
        version_limit: int | None = None,
    ) -> None:
        """Initialize the package service.

        Args:
            source: Remote package feed (required).
            cache: Search result cache (required).
            version_limit: Max version suggestions. Defaults to settings.
        """
        self._source = source
        self._cache = cache
        self._version_limit = version_limit or settings.version_suggestion_limit

    @classmethod
    def create(
        cls,
        source: PackageSource,
        cache: QueryCache,
        version_limit: int | None = None,
    ) -> "PackageService":
        """Factory method to create PackageService with sensible defaults.

        Args:
            source: Remote package feed (required).
            cache: Search result cache (required).
            version_limit: Max version suggestions. If None, uses settings.

        Returns:
            Configured PackageService instance
        """
        return cls(source=source, cache=cache, version_limit=version_limit)

    async def search_packages(self, query: str) -> list[PackageRecord]:
        """Search packages, serving repeated queries from the cache.

        Business logic:
        1. Return the cached results if the entry is still valid
        2. Otherwise query the feed
        3. Cache the results only when the feed call succeeded

        Args:
            query: Non-empty search text

        Returns:
            Packages in the feed's relevance order; empty on failure
        """
        cached = self._cache.lookup(query)
        if cached is not None:
            logger.debug("Package cache hit for %r", query)
            return cached

        try:
            packages = await self._source.search(query)
        except NuGetClientError as e:
            logger.warning("Failed to search packages for %r: %s", query, e)
            return []

        self._cache.store(query, packages)
        return packages

    async def fetch_versions(self, package_id: str) -> list[str]:
        """Fetch every published version of a package (never cached).

        Args:
            package_id: Package identifier

        Returns:
            Raw version strings; empty on failure
        """
        try:
            return await self._source.versions(package_id)
        except NuGetClientError as e:
            logger.warning("Failed to get versions for %s: %s", package_id, e)
            return []

    async def suggest_versions(self, package_id: str, prefix: str) -> list[str]:
        """Stable versions of a package starting with ``prefix``, newest first.

        Args:
            package_id: Package identifier
            prefix: Partial version typed after '@'

        Returns:
            At most ``version_limit`` versions
        """
        versions = await self.fetch_versions(package_id)
        return filter_versions(versions, prefix, limit=self._version_limit)

    async def get_package(self, package_id: str) -> PackageRecord | None:
        """Look up one package for hover documentation.

        Args:
            package_id: Package identifier

        Returns:
            The package, or None if unknown or the lookup failed
        """
        try:
            return await self._source.lookup(package_id)
        except NuGetClientError as e:
            logger.warning("Failed to fetch package info for %s: %s", package_id, e)
            return None

    def clear_cache(self) -> int:
        """Drop all cached search results.

        Returns:
            Number of entries removed
        """
        return self._cache.clear()

    def get_stats(self) -> dict:
        """Get cache statistics."""
        stats = self._cache.stats()
        stats["version_limit"] = self._version_limit
        return stats

    @property
    def source(self) -> PackageSource:
        """Get the underlying package source (for testing)."""
        return self._source

    @property
    def cache(self) -> QueryCache:
        """Get the underlying cache (for testing)."""
        return self._cache
