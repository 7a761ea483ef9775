"""Unit tests for the /api/links resource."""

import pytest
from fastapi.testclient import TestClient


@pytest.fixture
def list_id(api_client: TestClient) -> int:
    return api_client.post("/api/lists", json={"name": "Dev Tools"}).json()["id"]


def test_get_links_requires_list_id(api_client: TestClient) -> None:
    response = api_client.get("/api/links")
    assert response.status_code == 400
    assert response.json() == {"error": "List ID is required."}


def test_get_links_for_missing_list_is_404(api_client: TestClient) -> None:
    response = api_client.get("/api/links", params={"listId": 42})
    assert response.status_code == 404


def test_create_and_list_links(api_client: TestClient, list_id: int) -> None:
    response = api_client.post(
        "/api/links",
        json={"url": "https://example.com", "list_id": list_id, "title": "Example"},
    )
    assert response.status_code == 201
    assert response.json()["title"] == "Example"

    links = api_client.get("/api/links", params={"listId": list_id}).json()
    assert [link["url"] for link in links] == ["https://example.com"]


@pytest.mark.parametrize("body", [{}, {"url": "https://example.com"}, {"list_id": 1}])
def test_create_link_requires_url_and_list(api_client: TestClient, body) -> None:
    response = api_client.post("/api/links", json=body)
    assert response.status_code == 400
    assert response.json() == {"error": "URL and List ID are required."}


def test_create_link_for_missing_list_is_404(api_client: TestClient) -> None:
    response = api_client.post("/api/links", json={"url": "https://example.com", "list_id": 42})
    assert response.status_code == 404
    assert response.json() == {"error": "List not found."}


def test_update_link(api_client: TestClient, list_id: int) -> None:
    link = api_client.post(
        "/api/links", json={"url": "https://example.com", "list_id": list_id}
    ).json()

    response = api_client.put(
        f"/api/links/{link['id']}",
        json={"id": link["id"], "title": "Example", "description": "An example"},
    )
    assert response.status_code == 200
    body = response.json()
    assert body["url"] == "https://example.com"
    assert body["title"] == "Example"
    assert body["description"] == "An example"


def test_update_link_id_mismatch_is_400(api_client: TestClient, list_id: int) -> None:
    link = api_client.post(
        "/api/links", json={"url": "https://example.com", "list_id": list_id}
    ).json()

    response = api_client.put(f"/api/links/{link['id']}", json={"id": link["id"] + 1})
    assert response.status_code == 400


def test_update_missing_link_is_404(api_client: TestClient) -> None:
    response = api_client.put("/api/links/42", json={"title": "Nope"})
    assert response.status_code == 404
    assert response.json() == {"error": "URL not found."}


def test_delete_link(api_client: TestClient, list_id: int) -> None:
    link = api_client.post(
        "/api/links", json={"url": "https://example.com", "list_id": list_id}
    ).json()

    assert api_client.delete(f"/api/links/{link['id']}").status_code == 204
    response = api_client.delete(f"/api/links/{link['id']}")
    assert response.status_code == 404
    assert response.json() == {"error": "URL not found."}
