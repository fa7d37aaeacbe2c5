"""NuGet v3 implementation of PackageSource.

Talks to two public endpoints:
- the search service (``azuresearch-usnc.nuget.org/query``) for fuzzy
  search and single-package lookup
- the flat container (``api.nuget.org/v3-flatcontainer``) for the full
  version index of one package

Every request is bounded by the configured timeout (5 seconds by default).
"""

from typing import Any, TypeVar

import httpx
from pydantic import BaseModel, ValidationError

from package_autocomplete.config import settings
from package_autocomplete.dto.nuget import SearchResponse, SearchResultItem, VersionIndex
from package_autocomplete.entities import PackageRecord
from package_autocomplete.errors import NuGetClientError
from package_autocomplete.logger import get_logger

logger = get_logger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)


class NuGetClient:
    """NuGet implementation of the PackageSource protocol.

    This class satisfies the PackageSource protocol through structural
    typing - no explicit inheritance needed.

    All failures (transport errors, timeouts, non-2xx statuses and
    payloads that do not match the expected shape) are raised as
    NuGetClientError.

    Example:
        ```python
        client = NuGetClient.create()
        packages = await client.search("humanizer")
        versions = await client.versions("Humanizer")
        await client.close()
        ```
    """

    def __init__(
        self,
        search_url: str | None = None,
        flat_container_url: str | None = None,
        timeout: float | None = None,
        take: int | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Initialize the NuGet client.

        Args:
            search_url: Search service query endpoint. Defaults to settings.
            flat_container_url: Flat container base URL. Defaults to settings.
            timeout: Request timeout in seconds. Defaults to settings.
            take: Maximum search results per query. Defaults to settings.
            transport: Optional httpx transport (tests use httpx.MockTransport).
        """
        self._search_url = search_url or settings.nuget_search_url
        self._flat_container_url = (flat_container_url or settings.nuget_flat_container_url).rstrip("/")
        self._timeout = timeout or settings.nuget_timeout
        self._take = take or settings.nuget_search_take
        self._transport = transport
        self._client: httpx.AsyncClient | None = None

    @classmethod
    def create(
        cls,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> "NuGetClient":
        """Factory method to create NuGetClient with defaults.

        Args:
            timeout: Request timeout in seconds. If None, uses settings.
            transport: Optional httpx transport.

        Returns:
            Configured NuGetClient
        """
        return cls(timeout=timeout, transport=transport)

    @property
    def client(self) -> httpx.AsyncClient:
        """Lazy-load the async HTTP client.

        Returns:
            The httpx.AsyncClient instance
        """
        if self._client is None:
            self._client = httpx.AsyncClient(
                timeout=self._timeout,
                transport=self._transport,
                limits=httpx.Limits(max_connections=20, max_keepalive_connections=10),
                headers={"Accept": "application/json"},
            )
        return self._client

    async def search(self, query: str) -> list[PackageRecord]:
        """Search for stable packages matching ``query``.

        Args:
            query: Non-empty search text

        Returns:
            Up to ``take`` packages in the service's relevance order

        Raises:
            NuGetClientError: If the request fails or the payload is malformed
        """
        params = {"q": query, "take": str(self._take), "prerelease": "false"}
        payload = await self._get_json(self._search_url, params, SearchResponse)
        return [self._to_record(item) for item in payload.data]

    async def versions(self, package_id: str) -> list[str]:
        """Fetch the full version index for one package.

        Args:
            package_id: Package identifier (lowercased for the request)

        Returns:
            All published versions, as listed by the flat container

        Raises:
            NuGetClientError: If the request fails or the payload is malformed
        """
        url = f"{self._flat_container_url}/{package_id.lower()}/index.json"
        payload = await self._get_json(url, None, VersionIndex)
        return list(payload.versions)

    async def lookup(self, package_id: str) -> PackageRecord | None:
        """Look up a single package by exact id.

        Args:
            package_id: Package identifier

        Returns:
            The package, or None when the search service has no match

        Raises:
            NuGetClientError: If the request fails or the payload is malformed
        """
        params = {"q": f"packageid:{package_id}", "take": "1"}
        payload = await self._get_json(self._search_url, params, SearchResponse)
        if not payload.data:
            return None
        return self._to_record(payload.data[0])

    async def _get_json(
        self,
        url: str,
        params: dict[str, Any] | None,
        model: type[ModelT],
    ) -> ModelT:
        """GET ``url`` and validate the JSON body against ``model``."""
        logger.debug("GET %s params=%s", url, params)
        try:
            response = await self.client.get(url, params=params)
            response.raise_for_status()
            return model.model_validate(response.json())
        except httpx.TimeoutException as e:
            raise NuGetClientError(f"NuGet request timed out after {self._timeout}s", url=url) from e
        except httpx.HTTPError as e:
            raise NuGetClientError(f"NuGet request failed: {e}", url=url) from e
        except (ValidationError, ValueError) as e:
            raise NuGetClientError(f"Unexpected NuGet response format: {e}", url=url) from e

    @staticmethod
    def _to_record(item: SearchResultItem) -> PackageRecord:
        return PackageRecord(
            id=item.id,
            latest_version=item.version,
            description=item.description,
            total_downloads=item.total_downloads,
        )

    async def close(self) -> None:
        """Close the async HTTP client.

        Should be called when shutting down the application.
        """
        if self._client is not None:
            await self._client.aclose()
            self._client = None
