"""
Tests for the package autocomplete API.
"""

import asyncio

import httpx
import pytest
from fastapi.testclient import TestClient

from package_autocomplete.api.app import create_app
from package_autocomplete.repositories import MemoryQueryCache


@pytest.fixture
def client(nuget_client, clock):
    """Create a test client backed by the fake feed."""
    app = create_app(source=nuget_client, cache=MemoryQueryCache(ttl=300, clock=clock))
    with TestClient(app) as test_client:
        yield test_client


def test_root(client):
    """Test root endpoint."""
    response = client.get("/")
    assert response.status_code == 200
    data = response.json()
    assert data["name"] == "Package Autocomplete API"


def test_health(client):
    """Test health check endpoint."""
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json()["status"] == "healthy"


def test_complete_package(client):
    """Test package name completion."""
    response = client.post("/complete", json={"line": "#:package Humanizer"})
    assert response.status_code == 200
    data = response.json()
    assert data["context"] == "package-name"
    assert data["stale"] is False
    humanizer = next(item for item in data["items"] if item["label"] == "Humanizer")
    assert humanizer["insert_text"] == "Humanizer@2.14.1"
    assert humanizer["kind"] == "module"


def test_complete_uses_cursor_column(client):
    """Only the text before the cursor is classified."""
    response = client.post(
        "/complete",
        json={"line": "#:property Nullable=enable", "character": len("#:property Null")},
    )
    assert response.status_code == 200
    data = response.json()
    assert data["context"] == "property-name"
    assert [item["label"] for item in data["items"]] == ["Nullable"]


def test_complete_rejects_cursor_past_line(client):
    response = client.post("/complete", json={"line": "#:sdk", "character": 40})
    assert response.status_code == 422


def test_complete_outside_directive(client):
    response = client.post("/complete", json={"line": "var x = 1;"})
    assert response.status_code == 200
    assert response.json() == {"context": None, "items": [], "stale": False}


def test_hover(client):
    response = client.post("/hover", json={"line": "#:sdk Microsoft.NET.Sdk.Worker", "character": 7})
    assert response.status_code == 200
    hover = response.json()["hover"]
    assert hover["contents"].startswith("**Microsoft.NET.Sdk.Worker**")
    assert hover["start"] == 6


def test_hover_nothing(client):
    response = client.post("/hover", json={"line": "// comment", "character": 3})
    assert response.status_code == 200
    assert response.json() == {"hover": None}


def test_feed_failure_degrades_to_empty(client, fake_nuget):
    fake_nuget.fail_with = httpx.ReadTimeout("timed out")
    response = client.post("/complete", json={"line": "#:package json"})
    assert response.status_code == 200
    assert response.json()["items"] == []


def test_cache_stats_and_clear(client, fake_nuget):
    client.post("/complete", json={"line": "#:package json"})
    client.post("/complete", json={"line": "#:package JSON"})
    assert len(fake_nuget.requests) == 1

    stats = client.get("/cache/stats").json()
    assert stats["total_entries"] == 1
    assert stats["hits"] == 1
    assert stats["ttl_seconds"] == 300

    response = client.delete("/cache")
    assert response.json()["deleted_count"] == 1


async def _post_concurrently(app, source, first: dict, second: dict) -> tuple[dict, dict]:
    """Send two completions so the second starts before the first returns.

    The second search is released first, so the first response arrives last.
    """
    transport = httpx.ASGITransport(app=app)
    async with app.router.lifespan_context(app):
        async with httpx.AsyncClient(transport=transport, base_url="http://api.test") as http:
            first_task = asyncio.create_task(http.post("/complete", json=first))
            await source.wait_started(1)
            second_task = asyncio.create_task(http.post("/complete", json=second))
            await source.wait_started(2)

            source.release(second["line"].split()[-1])
            second_response = await second_task
            source.release(first["line"].split()[-1])
            first_response = await first_task

    return first_response.json(), second_response.json()


async def test_concurrent_completions_without_session_both_return_items(gated_source, query_cache):
    app = create_app(source=gated_source, cache=query_cache)

    first, second = await _post_concurrently(
        app,
        gated_source,
        {"line": "#:package Alpha"},
        {"line": "#:package Beta"},
    )

    assert first["stale"] is False
    assert [item["label"] for item in first["items"]] == ["Alpha"]
    assert second["stale"] is False
    assert [item["label"] for item in second["items"]] == ["Beta"]


async def test_newer_completion_in_same_session_supersedes(gated_source, query_cache):
    app = create_app(source=gated_source, cache=query_cache)

    first, second = await _post_concurrently(
        app,
        gated_source,
        {"line": "#:package Hum", "session": "file:///a.cs"},
        {"line": "#:package Huma", "session": "file:///a.cs"},
    )

    assert first == {"context": "package-name", "items": [], "stale": True}
    assert [item["label"] for item in second["items"]] == ["Huma"]
