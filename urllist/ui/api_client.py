"""
HTTP client for the URL List API.

Thin wrapper over httpx.AsyncClient: every non-success status becomes an
ApiError, every body is decoded into domain entities.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

import httpx

from urllist.domain.entities import Url, UrlList

DEFAULT_TIMEOUT_SECONDS = 10.0


class ApiError(Exception):
    """The API answered with a non-success status."""

    def __init__(self, status_code: int, message: str) -> None:
        super().__init__(f"{status_code}: {message}")
        self.status_code = status_code
        self.message = message


def build_async_client(
    base_url: str,
    *,
    timeout: float = DEFAULT_TIMEOUT_SECONDS,
    transport: httpx.AsyncBaseTransport | None = None,
) -> httpx.AsyncClient:
    """Create an `httpx.AsyncClient` pointed at the API origin."""
    return httpx.AsyncClient(
        base_url=base_url,
        timeout=httpx.Timeout(timeout),
        headers={"Accept": "application/json"},
        transport=transport,
    )


def _error_message(response: httpx.Response) -> str:
    try:
        body = response.json()
    except ValueError:
        return response.text or response.reason_phrase
    if isinstance(body, dict) and body.get("error"):
        return str(body["error"])
    return response.reason_phrase


class ListsApiClient:
    def __init__(self, client: httpx.AsyncClient, api_prefix: str = "/api") -> None:
        self._client = client
        self._prefix = api_prefix.rstrip("/")

    async def aclose(self) -> None:
        await self._client.aclose()

    async def _request(
        self,
        method: str,
        path: str,
        *,
        json: Any = None,
        params: Mapping[str, Any] | None = None,
    ) -> Any:
        response = await self._client.request(
            method, f"{self._prefix}{path}", json=json, params=params
        )
        if response.is_error:
            raise ApiError(response.status_code, _error_message(response))
        if response.status_code == 204 or not response.content:
            return None
        return response.json()

    # --- Lists ---

    async def get_lists(self) -> list[UrlList]:
        data = await self._request("GET", "/lists")
        return [UrlList.model_validate(item) for item in data]

    async def create_list(
        self,
        name: str,
        title: str | None = None,
        description: str | None = None,
        slug: str | None = None,
    ) -> UrlList:
        body = {"name": name, "title": title, "description": description, "slug": slug}
        return UrlList.model_validate(await self._request("POST", "/lists", json=body))

    async def update_list(self, list_id: int, **fields: Any) -> UrlList:
        body = {"id": list_id, **fields}
        return UrlList.model_validate(await self._request("PUT", "/lists", json=body))

    async def delete_list(self, list_id: int) -> None:
        await self._request("DELETE", "/lists", params={"id": list_id})

    # --- Urls ---

    async def add_url(self, data: Mapping[str, Any]) -> Url:
        return Url.model_validate(await self._request("POST", "/links", json=dict(data)))

    async def update_url(self, url_id: int, data: Mapping[str, Any]) -> Url:
        body = {**data, "id": url_id}
        return Url.model_validate(await self._request("PUT", f"/links/{url_id}", json=body))

    async def delete_url(self, url_id: int) -> None:
        await self._request("DELETE", f"/links/{url_id}")

    # --- Publishing ---

    async def publish_list(self, list_id: int) -> tuple[UrlList, str]:
        data = await self._request("POST", f"/lists/{list_id}/publish")
        return UrlList.model_validate(data), str(data["shareUrl"])

    async def unpublish_list(self, list_id: int) -> UrlList:
        return UrlList.model_validate(await self._request("POST", f"/lists/{list_id}/unpublish"))
