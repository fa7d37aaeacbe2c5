"""Package source protocol.

Defines the interface for a remote package feed that can search packages,
list the versions of one package and look up a single package by id.
"""

from typing import Protocol, runtime_checkable

from package_autocomplete.entities import PackageRecord


@runtime_checkable
class PackageSource(Protocol):
    """Protocol for package feed clients.

    Implementations raise ``NuGetClientError`` on any failure. Turning
    failures into empty results is the caller's job.

    Example:
        ```python
        source: PackageSource = NuGetClient.create()
        packages = await source.search("json")
        ```
    """

    async def search(self, query: str) -> list[PackageRecord]:
        """Search packages, most relevant first.

        Args:
            query: Non-empty search text

        Returns:
            Matching packages in the feed's relevance order
        """
        ...

    async def versions(self, package_id: str) -> list[str]:
        """List every published version of a package.

        Args:
            package_id: Package identifier (any case)

        Returns:
            Raw version strings as published
        """
        ...

    async def lookup(self, package_id: str) -> PackageRecord | None:
        """Look up one package by exact id.

        Args:
            package_id: Package identifier

        Returns:
            The package, or None if the feed does not know it
        """
        ...
