"""Protocol interfaces for swappable implementations.

Protocols enable:
- Swapping the package feed client (public NuGet, a recorded fixture, etc.)
- Unit testing with fake implementations
- Clear separation of concerns
"""

from .package_source import PackageSource
from .query_cache import QueryCache

__all__ = [
    "PackageSource",
    "QueryCache",
]
