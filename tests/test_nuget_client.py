"""Tests for the NuGet client (against a mocked transport)."""

import httpx
import pytest

from package_autocomplete.entities import PackageRecord
from package_autocomplete.errors import NuGetClientError
from package_autocomplete.protocols import PackageSource


def test_satisfies_protocol(nuget_client):
    assert isinstance(nuget_client, PackageSource)


async def test_search_maps_records_and_keeps_remote_order(nuget_client, fake_nuget):
    packages = await nuget_client.search("Humanizer")

    assert [p.id for p in packages] == ["Humanizer.Core.uk", "Humanizer"]
    assert packages[1] == PackageRecord(
        id="Humanizer",
        latest_version="2.14.1",
        description="A micro-framework that turns your normal strings into human friendly strings.",
        total_downloads=500000000,
    )

    params = fake_nuget.requests[0].url.params
    assert params["q"] == "Humanizer"
    assert params["take"] == "20"
    assert params["prerelease"] == "false"


async def test_search_tolerates_missing_optional_fields(nuget_client, fake_nuget):
    fake_nuget.search_results["bare"] = [{"id": "Bare", "version": "1.0.0", "extra": {"x": 1}}]

    packages = await nuget_client.search("bare")

    assert packages == [PackageRecord(id="Bare", latest_version="1.0.0")]


async def test_versions_requests_lowercased_id(nuget_client, fake_nuget):
    versions = await nuget_client.versions("Humanizer")

    assert versions == ["1.0.0", "2.0.0", "2.14.0", "2.14.1", "3.0.0-beta.54"]
    assert fake_nuget.requests[0].url.path == "/v3-flatcontainer/humanizer/index.json"


async def test_lookup_by_package_id(nuget_client, fake_nuget):
    package = await nuget_client.lookup("Humanizer")

    assert package is not None
    assert package.id == "Humanizer"
    params = fake_nuget.requests[0].url.params
    assert params["q"] == "packageid:Humanizer"
    assert params["take"] == "1"


async def test_lookup_unknown_package_returns_none(nuget_client):
    assert await nuget_client.lookup("Does.Not.Exist") is None


async def test_timeout_raises_client_error(nuget_client, fake_nuget):
    fake_nuget.fail_with = httpx.ReadTimeout("timed out")

    with pytest.raises(NuGetClientError, match="timed out"):
        await nuget_client.search("json")


async def test_transport_error_raises_client_error(nuget_client, fake_nuget):
    fake_nuget.fail_with = httpx.ConnectError("connection refused")

    with pytest.raises(NuGetClientError):
        await nuget_client.versions("Humanizer")


async def test_http_error_status_raises_client_error(nuget_client):
    with pytest.raises(NuGetClientError) as exc_info:
        await nuget_client.versions("Unknown.Package")

    assert exc_info.value.url.endswith("/unknown.package/index.json")


async def test_malformed_json_raises_client_error(nuget_client, fake_nuget):
    fake_nuget.fail_with = lambda request: httpx.Response(200, content=b"<html>oops</html>")

    with pytest.raises(NuGetClientError, match="Unexpected NuGet response format"):
        await nuget_client.search("json")


async def test_unexpected_shape_raises_client_error(nuget_client, fake_nuget):
    fake_nuget.fail_with = lambda request: httpx.Response(200, json={"data": [{"id": "NoVersion"}]})

    with pytest.raises(NuGetClientError):
        await nuget_client.search("json")


async def test_negative_downloads_rejected(nuget_client, fake_nuget):
    fake_nuget.search_results["neg"] = [{"id": "Neg", "version": "1.0.0", "totalDownloads": -5}]

    with pytest.raises(NuGetClientError):
        await nuget_client.search("neg")


async def test_close_is_idempotent(nuget_client):
    await nuget_client.search("json")
    await nuget_client.close()
    await nuget_client.close()
