"""Pytest configuration and shared fixtures."""

import asyncio
from collections.abc import Callable

import httpx
import pytest

from package_autocomplete.entities import PackageRecord
from package_autocomplete.repositories import MemoryQueryCache, NuGetClient
from package_autocomplete.services import CompletionService, HoverService, PackageService

SEARCH_URL = "https://search.test/query"
FLAT_CONTAINER_URL = "https://flat.test/v3-flatcontainer"


class FakeClock:
    """Manually advanced monotonic clock."""

    def __init__(self, start: float = 1000.0) -> None:
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


class FakeNuGet:
    """Records requests and answers them like the NuGet v3 APIs.

    ``search_results`` maps a lowercased query to the ``data`` list returned;
    ``versions`` maps a lowercased package id to its version index. Set
    ``fail_with`` to an exception or a callable returning an httpx.Response
    to simulate failures.
    """

    def __init__(self) -> None:
        self.search_results: dict[str, list[dict]] = {}
        self.versions: dict[str, list[str]] = {}
        self.requests: list[httpx.Request] = []
        self.fail_with: Exception | Callable[[httpx.Request], httpx.Response] | None = None

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)

        if isinstance(self.fail_with, Exception):
            raise self.fail_with
        if self.fail_with is not None:
            return self.fail_with(request)

        if request.url.host == "search.test":
            q = request.url.params.get("q", "")
            if q.startswith("packageid:"):
                package_id = q.split(":", 1)[1].lower()
                data = [
                    item
                    for items in self.search_results.values()
                    for item in items
                    if item["id"].lower() == package_id
                ][:1]
                return httpx.Response(200, json={"totalHits": len(data), "data": data})
            data = self.search_results.get(q.lower(), [])
            return httpx.Response(200, json={"totalHits": len(data), "data": data})

        if request.url.host == "flat.test":
            package_id = request.url.path.split("/")[-2]
            if package_id not in self.versions:
                return httpx.Response(404)
            return httpx.Response(200, json={"versions": self.versions[package_id]})

        return httpx.Response(404)

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handler)


class GatedSource:
    """Package source whose searches finish in the order they are released."""

    def __init__(self) -> None:
        self.gates: dict[str, asyncio.Event] = {}
        self.started: list[str] = []

    def _gate(self, query: str) -> asyncio.Event:
        return self.gates.setdefault(query, asyncio.Event())

    def release(self, query: str) -> None:
        self._gate(query).set()

    async def wait_started(self, count: int) -> None:
        """Wait until ``count`` searches are in flight."""
        while len(self.started) < count:
            await asyncio.sleep(0.001)

    async def search(self, query: str) -> list[PackageRecord]:
        self.started.append(query)
        await self._gate(query).wait()
        return [PackageRecord(id=query, latest_version="1.0.0")]

    async def versions(self, package_id: str) -> list[str]:
        return []

    async def lookup(self, package_id: str) -> PackageRecord | None:
        return None


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def fake_nuget() -> FakeNuGet:
    """A fake feed preloaded with a few packages."""
    feed = FakeNuGet()
    feed.search_results["humanizer"] = [
        {
            "id": "Humanizer.Core.uk",
            "version": "2.14.1",
            "description": "Humanizer Locale (uk)",
            "totalDownloads": 1200,
        },
        {
            "id": "Humanizer",
            "version": "2.14.1",
            "description": "A micro-framework that turns your normal strings into human friendly strings.",
            "totalDownloads": 500000000,
        },
    ]
    feed.search_results["json"] = [
        {"id": "Newtonsoft.Json", "version": "13.0.3", "totalDownloads": 4000000000},
        {"id": "System.Text.Json", "version": "9.0.0", "totalDownloads": 2000000000},
    ]
    feed.versions["humanizer"] = ["1.0.0", "2.0.0", "2.14.0", "2.14.1", "3.0.0-beta.54"]
    return feed


@pytest.fixture
def nuget_client(fake_nuget: FakeNuGet) -> NuGetClient:
    return NuGetClient(
        search_url=SEARCH_URL,
        flat_container_url=FLAT_CONTAINER_URL,
        timeout=5.0,
        take=20,
        transport=fake_nuget.transport,
    )


@pytest.fixture
def query_cache(clock: FakeClock) -> MemoryQueryCache:
    return MemoryQueryCache(ttl=300, clock=clock)


@pytest.fixture
def package_service(nuget_client: NuGetClient, query_cache: MemoryQueryCache) -> PackageService:
    return PackageService.create(source=nuget_client, cache=query_cache, version_limit=10)


@pytest.fixture
def completion_service(package_service: PackageService) -> CompletionService:
    return CompletionService(package_service=package_service)


@pytest.fixture
def hover_service(package_service: PackageService) -> HoverService:
    return HoverService(package_service=package_service)


@pytest.fixture
def gated_source() -> GatedSource:
    return GatedSource()
