"""Tests for cached package lookups and failure isolation."""

import httpx

from package_autocomplete.entities import PackageRecord


async def test_repeated_query_within_window_hits_network_once(package_service, fake_nuget, clock):
    first = await package_service.search_packages("json")
    clock.advance(0.5)
    second = await package_service.search_packages("json")

    assert first == second
    assert len(fake_nuget.requests) == 1


async def test_query_case_shares_cache_entry(package_service, fake_nuget):
    await package_service.search_packages("JSON")
    await package_service.search_packages("json")

    assert len(fake_nuget.requests) == 1


async def test_expired_entry_is_refetched(package_service, fake_nuget, clock):
    await package_service.search_packages("json")
    clock.advance(300)
    await package_service.search_packages("json")

    assert len(fake_nuget.requests) == 2


async def test_failed_search_returns_empty_and_is_not_cached(package_service, fake_nuget, query_cache):
    fake_nuget.fail_with = httpx.ReadTimeout("timed out")

    assert await package_service.search_packages("json") == []
    assert query_cache.lookup("json") is None

    fake_nuget.fail_with = None
    packages = await package_service.search_packages("json")

    assert [p.id for p in packages] == ["Newtonsoft.Json", "System.Text.Json"]
    assert len(fake_nuget.requests) == 2


async def test_malformed_response_is_not_cached(package_service, fake_nuget, query_cache):
    fake_nuget.fail_with = lambda request: httpx.Response(200, content=b"{not json")

    assert await package_service.search_packages("json") == []
    assert query_cache.lookup("json") is None


async def test_zero_results_are_cached(package_service, fake_nuget):
    assert await package_service.search_packages("zzz-nothing") == []
    assert await package_service.search_packages("zzz-nothing") == []

    assert len(fake_nuget.requests) == 1


async def test_suggest_versions_filters_and_sorts(package_service):
    assert await package_service.suggest_versions("Humanizer", "2") == ["2.14.1", "2.14.0", "2.0.0"]


async def test_versions_are_not_cached(package_service, fake_nuget):
    await package_service.fetch_versions("Humanizer")
    await package_service.fetch_versions("Humanizer")

    assert len(fake_nuget.requests) == 2


async def test_failed_version_fetch_returns_empty(package_service):
    assert await package_service.fetch_versions("Unknown.Package") == []
    assert await package_service.suggest_versions("Unknown.Package", "") == []


async def test_get_package(package_service):
    package = await package_service.get_package("humanizer")

    assert isinstance(package, PackageRecord)
    assert package.id == "Humanizer"


async def test_get_package_failure_returns_none(package_service, fake_nuget):
    fake_nuget.fail_with = httpx.ConnectError("down")

    assert await package_service.get_package("Humanizer") is None


async def test_stats_and_clear(package_service):
    await package_service.search_packages("json")

    stats = package_service.get_stats()
    assert stats["total_entries"] == 1
    assert stats["version_limit"] == 10

    assert package_service.clear_cache() == 1
