"""Query cache protocol."""

from typing import Protocol, runtime_checkable

from package_autocomplete.entities import PackageRecord


@runtime_checkable
class QueryCache(Protocol):
    """Protocol for package search result caches."""

    def lookup(self, query: str) -> list[PackageRecord] | None:
        """Return cached results for ``query``, or None on a miss or expired entry."""
        ...

    def store(self, query: str, packages: list[PackageRecord]) -> None:
        """Insert or overwrite the entry for ``query``."""
        ...

    def clear(self) -> int:
        """Drop every entry and return how many were removed."""
        ...

    def stats(self) -> dict:
        """Return cache statistics (implementation-specific)."""
        ...
