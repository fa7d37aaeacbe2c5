"""Repository layer for data access.

This layer abstracts external dependencies (the NuGet feed, the in-process
query cache) behind protocol-based interfaces. This enables:
- Easy swapping of implementations
- Unit testing with fake implementations
- Clear separation of concerns

The repositories are protocol-based (structural typing), not inheritance-based.
Any class implementing the required methods will satisfy the protocol.
"""

from package_autocomplete.protocols import PackageSource, QueryCache

from .memory_cache import MemoryQueryCache
from .nuget_client import NuGetClient

__all__ = [
    "PackageSource",
    "QueryCache",
    "MemoryQueryCache",
    "NuGetClient",
]
