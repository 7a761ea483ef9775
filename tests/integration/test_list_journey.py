"""
End-to-end flows over SQLite.

The HTTP journey drives the API directly; the client journey drives the
client caches, which reach the same app through httpx.ASGITransport.
"""

import httpx
import pytest
from fastapi.testclient import TestClient

from urllist.api.deps import get_list_repo, get_rules, get_site_url
from urllist.api.main import app
from urllist.rules.models import Rules
from urllist.ui.api_client import ListsApiClient, build_async_client
from urllist.ui.list_cache import ListCache
from urllist.ui.sharing import SharingCache
from urllist.ui.url_cache import UrlCache


def test_http_journey(sqlite_api_client: TestClient, site_url: str):
    # Create
    response = sqlite_api_client.post("/api/lists", json={"name": "Dev Tools"})
    assert response.status_code == 201
    created = response.json()
    assert created["slug"] is None
    list_id = created["id"]

    # Add a url
    response = sqlite_api_client.post(f"/api/lists/{list_id}", json={"url": "https://example.com"})
    assert response.status_code == 201
    assert response.json()["list_id"] == list_id

    # Publish
    response = sqlite_api_client.post(f"/api/lists/{list_id}/publish")
    assert response.status_code == 200
    assert response.json()["shareUrl"] == f"{site_url}/list/{list_id}"
    assert response.json()["shareUrl"].endswith(f"/list/{list_id}")

    # Custom url
    response = sqlite_api_client.put("/api/lists", json={"id": list_id, "slug": "dev-tools"})
    assert response.status_code == 200
    assert response.json()["slug"] == "dev-tools"
    assert response.json()["published"] is True

    # Delete
    response = sqlite_api_client.delete(f"/api/lists?id={list_id}")
    assert response.status_code == 204

    response = sqlite_api_client.get(f"/api/lists/{list_id}")
    assert response.status_code == 404
    assert response.json() == {"error": "List not found."}


@pytest.fixture
def asgi_api(sqlite_repo, site_url):
    app.dependency_overrides[get_list_repo] = lambda: sqlite_repo
    app.dependency_overrides[get_rules] = lambda: Rules()
    app.dependency_overrides[get_site_url] = lambda: site_url
    client = build_async_client("http://testserver", transport=httpx.ASGITransport(app=app))
    try:
        yield ListsApiClient(client)
    finally:
        app.dependency_overrides.clear()


@pytest.mark.asyncio
async def test_client_journey(asgi_api: ListsApiClient, site_url: str):
    lists = ListCache(asgi_api)
    refreshes = []
    urls = UrlCache(asgi_api, lists.ui, on_change=lambda: refreshes.append(True))
    sharing = SharingCache(lists, site_url)

    await lists.initialize_store()
    assert lists.state.get().lists == ()

    created = await lists.create_list("Dev Tools")
    assert created is not None
    assert created.slug is None

    added = await urls.add_url_to_list(created.id, {"url": "example.com"})
    assert added is not None
    assert added.url == "https://example.com"
    assert refreshes == [True]

    lists.set_active_list(created.id)
    share_url = await sharing.share_list("dev-tools")
    assert share_url == f"{site_url}/list/dev-tools"
    assert sharing.state.get().is_published is True

    await lists.fetch_lists()
    (reloaded,) = lists.state.get().lists
    assert reloaded.slug == "dev-tools"
    assert reloaded.published is True
    assert [u.url for u in reloaded.urls] == ["https://example.com"]

    assert await lists.delete_list(created.id) is True
    assert lists.state.get().lists == ()
    assert lists.ui.get().error is None

    await asgi_api.aclose()


@pytest.mark.asyncio
async def test_client_taken_custom_url(asgi_api: ListsApiClient):
    lists = ListCache(asgi_api)
    first = await lists.create_list("First", slug="dev-tools")
    second = await lists.create_list("Second")
    assert first is not None and second is not None

    assert await lists.update_custom_url(second.id, "dev-tools") is False
    assert lists.ui.get().error == "Failed to update custom URL. This URL might already be taken."

    await asgi_api.aclose()
