"""Package record domain entity."""

from dataclasses import dataclass


@dataclass(frozen=True)
class PackageRecord:
    """A NuGet package as returned by the search service.

    Attributes:
        id: NuGet package identifier (case-insensitive)
        latest_version: Latest listed version
        description: Package description, if the feed has one
        total_downloads: Download count, used only for ranking
    """

    id: str
    latest_version: str
    description: str | None = None
    total_downloads: int | None = None
