"""Client operations on the Urls of a list."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterator, Mapping
from contextlib import contextmanager
from typing import Any

from urllist.domain.entities import Url
from urllist.domain.urls import normalize_url

from .api_client import ListsApiClient
from .state import UIState
from .store import Store

logger = logging.getLogger(__name__)

ADD_ERROR = "Failed to add URL. Please try again."
UPDATE_ERROR = "Failed to update URL. Please try again."
DELETE_ERROR = "Failed to delete URL. Please try again."
INVALID_LIST_ID = "Invalid list ID"


class UrlCache:
    """
    Add, edit and remove Urls.

    The owning list is not refreshed here. `on_change` is called after every
    successful mutation so the caller can reload whatever it displays.
    """

    def __init__(
        self,
        api: ListsApiClient,
        ui_state: Store[UIState],
        on_change: Callable[[], None] | None = None,
    ) -> None:
        self.api = api
        self.ui = ui_state
        self.on_change = on_change

    @contextmanager
    def _loading(self) -> Iterator[None]:
        self.ui.update(is_loading=True, error=None)
        try:
            yield
        finally:
            self.ui.set_key("is_loading", False)

    def _changed(self) -> None:
        if self.on_change is not None:
            self.on_change()

    async def add_url_to_list(self, list_id: int, url_data: Mapping[str, Any]) -> Url | None:
        if not list_id:
            self.ui.set_key("error", INVALID_LIST_ID)
            return None

        payload = {**url_data, "list_id": list_id}
        if isinstance(payload.get("url"), str):
            payload["url"] = normalize_url(payload["url"])

        with self._loading():
            try:
                created = await self.api.add_url(payload)
            except Exception:
                logger.exception("Failed to add URL to list %s", list_id)
                self.ui.set_key("error", ADD_ERROR)
                return None
        self._changed()
        return created

    async def update_url(self, url_id: int, url_data: Mapping[str, Any]) -> bool:
        payload = dict(url_data)
        if isinstance(payload.get("url"), str):
            payload["url"] = normalize_url(payload["url"])

        with self._loading():
            try:
                await self.api.update_url(url_id, payload)
            except Exception:
                logger.exception("Failed to update URL %s", url_id)
                self.ui.set_key("error", UPDATE_ERROR)
                return False
        self._changed()
        return True

    async def delete_url(self, url_id: int) -> bool:
        with self._loading():
            try:
                await self.api.delete_url(url_id)
            except Exception:
                logger.exception("Failed to delete URL %s", url_id)
                self.ui.set_key("error", DELETE_ERROR)
                return False
        self._changed()
        return True
