"""
Cross-component invariants.

R1: server and client compute the same share URL for a list
R2: deleting a list removes its urls
R3: publishing is idempotent
R4: url removal is chosen by body structure, not by text matching
"""

import pytest
from fastapi.testclient import TestClient

from urllist.components.publish import PublishComponent, PublishListInput
from urllist.components.sharing import get_shareable_url


# --- R1: Share URL parity ---
@pytest.mark.parametrize("slug", [None, "dev-tools"])
def test_R1_share_url_parity(sqlite_repo, site_url, slug):
    """R1: The publish response and the client helper agree."""
    lst = sqlite_repo.create_list("Dev Tools", slug=slug)

    server = PublishComponent(repo=sqlite_repo, site_url=site_url).run_publish(
        PublishListInput(list_id=lst.id)
    )
    client_side = get_shareable_url(server.list, site_url)
    client_side_json = get_shareable_url(server.list.model_dump(), site_url)

    expected = f"{site_url}/list/{slug or lst.id}"
    assert server.share_url == expected
    assert client_side == expected
    assert client_side_json == expected


# --- R2: Cascade ---
def test_R2_delete_cascades(sqlite_api_client: TestClient, sqlite_repo):
    """R2: No url survives its list."""
    list_id = sqlite_api_client.post("/api/lists", json={"name": "A"}).json()["id"]
    url_ids = [
        sqlite_api_client.post(f"/api/lists/{list_id}", json={"url": f"https://{i}.example"}).json()[
            "id"
        ]
        for i in range(3)
    ]

    assert sqlite_api_client.delete(f"/api/lists/{list_id}").status_code == 204

    assert all(sqlite_repo.get_url_by_id(url_id) is None for url_id in url_ids)
    assert sqlite_api_client.get("/api/links", params={"listId": list_id}).status_code == 404


# --- R3: Idempotent publish ---
def test_R3_publish_twice(sqlite_api_client: TestClient):
    """R3: A second publish changes nothing."""
    list_id = sqlite_api_client.post("/api/lists", json={"name": "A"}).json()["id"]

    first = sqlite_api_client.post(f"/api/lists/{list_id}/publish").json()
    second = sqlite_api_client.post(f"/api/lists/{list_id}/publish").json()

    assert first == second
    assert second["published"] is True


# --- R4: Structural url removal ---
def test_R4_text_containing_url_id_is_not_a_removal(sqlite_api_client: TestClient):
    """R4: Only a JSON object with a urlId key removes a url."""
    list_id = sqlite_api_client.post("/api/lists", json={"name": "A"}).json()["id"]
    sqlite_api_client.post(f"/api/lists/{list_id}", json={"url": "https://a.example"})

    response = sqlite_api_client.request(
        "DELETE", f"/api/lists/{list_id}", json=["urlId", 1]
    )

    assert response.status_code == 204
    assert sqlite_api_client.get(f"/api/lists/{list_id}").status_code == 404
