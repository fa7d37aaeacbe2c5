"""Package Autocomplete - completion and hover for .NET file-based app directives.

Covers the ``#:package``, ``#:sdk`` and ``#:property`` directives of
single-file C# programs. Package names and versions come from the public
NuGet feed; SDKs and properties come from static registries.

Layers:
    - protocols: Interface contracts (PackageSource, QueryCache)
    - repositories: Data access implementations (NuGet client, memory cache)
    - services: Business logic (resolution, completion, hover)
    - handlers: HTTP endpoint handlers
    - lsp: Language server surface
    - dto: Data transfer objects (API contracts)
    - entities: Domain models (internal)

Usage:
    ```python
    from package_autocomplete.repositories import MemoryQueryCache, NuGetClient
    from package_autocomplete.services import CompletionService, PackageService

    packages = PackageService.create(
        source=NuGetClient.create(),
        cache=MemoryQueryCache.create(),
    )
    completions = CompletionService(package_service=packages)
    result = await completions.complete("#:package Humani")
    ```

Language server:
    ```bash
    package-autocomplete-lsp
    ```
"""

__version__ = "0.1.0"

from package_autocomplete.config import get_settings, settings
from package_autocomplete.entities import CacheEntryEntity, DirectiveContext, DirectiveKind, PackageRecord
from package_autocomplete.errors import NuGetClientError, PackageAutocompleteError
from package_autocomplete.protocols import PackageSource, QueryCache
from package_autocomplete.repositories import MemoryQueryCache, NuGetClient
from package_autocomplete.services import CompletionService, HoverService, PackageService
from package_autocomplete.versioning import compare_versions, filter_versions

__all__ = [
    "__version__",
    # Configuration
    "settings",
    "get_settings",
    # Protocols (interfaces)
    "PackageSource",
    "QueryCache",
    # Services (business logic)
    "PackageService",
    "CompletionService",
    "HoverService",
    # Repositories (data access)
    "NuGetClient",
    "MemoryQueryCache",
    # Entities (domain models)
    "PackageRecord",
    "CacheEntryEntity",
    "DirectiveContext",
    "DirectiveKind",
    # Versions
    "compare_versions",
    "filter_versions",
    # Errors
    "PackageAutocompleteError",
    "NuGetClientError",
]
