"""
Client publishing and sharing.

Keeps the publish status of the list being shared in a SharingState store
and keeps the list cache in step with the server after each change.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from contextlib import contextmanager

from urllist.components.sharing import DEFAULT_PATH_PREFIX, generate_slug, get_shareable_url
from urllist.domain.entities import UrlList

from .list_cache import ListCache
from .state import SharingState
from .store import Store

logger = logging.getLogger(__name__)

PUBLISH_ERROR = "Failed to publish the list. Please try again."
UNPUBLISH_ERROR = "Failed to make the list private. Please try again."
SHARE_ERROR = "Failed to share list."


class SharingCache:
    def __init__(
        self,
        list_cache: ListCache,
        origin: str,
        path_prefix: str = DEFAULT_PATH_PREFIX,
    ) -> None:
        self.list_cache = list_cache
        self.api = list_cache.api
        self.origin = origin
        self.path_prefix = path_prefix
        self.state: Store[SharingState] = Store(SharingState())

    @contextmanager
    def _loading(self) -> Iterator[None]:
        self.state.update(is_loading=True, error=None)
        try:
            yield
        finally:
            self.state.set_key("is_loading", False)

    def get_shareable_url(self, lst: UrlList | None) -> str | None:
        return get_shareable_url(lst, self.origin, self.path_prefix)

    def suggest_custom_url(self, lst: UrlList, max_length: int = 50) -> str:
        """Slug proposal for the share dialog, derived from the list name."""
        return generate_slug(lst.name, max_length=max_length)

    async def _publish(self, list_id: int) -> UrlList | None:
        try:
            published, share_url = await self.api.publish_list(list_id)
        except Exception:
            logger.exception("Failed to publish list %s", list_id)
            return None
        self.list_cache.replace_list(published)
        self.state.update(is_published=True, share_url=share_url)
        return published

    async def publish_list(self, list_id: int) -> UrlList | None:
        with self._loading():
            published = await self._publish(list_id)
            if published is None:
                self.state.set_key("error", PUBLISH_ERROR)
            return published

    async def unpublish_list(self, list_id: int) -> UrlList | None:
        with self._loading():
            try:
                unpublished = await self.api.unpublish_list(list_id)
            except Exception:
                logger.exception("Failed to unpublish list %s", list_id)
                self.state.set_key("error", UNPUBLISH_ERROR)
                return None
            self.list_cache.replace_list(unpublished)
            self.state.update(is_published=False, share_url=None)
            return unpublished

    async def share_list(self, custom_url: str | None = None) -> str | None:
        """
        Publish the active list and return its public URL.

        When `custom_url` is given it is saved as the list's slug first, so
        the returned URL already uses it.
        """
        active = self.list_cache.get_active_list()
        if active is None:
            self.state.set_key("error", f"{SHARE_ERROR} List not found")
            return None

        with self._loading():
            published = await self._publish(active.id)
            if published is None:
                self.state.set_key("error", f"{SHARE_ERROR} {PUBLISH_ERROR}")
                return None

            if custom_url and custom_url != published.slug:
                saved = await self.list_cache.update_custom_url(active.id, custom_url)
                if not saved:
                    self.state.set_key(
                        "error", self.list_cache.ui.get().error or SHARE_ERROR
                    )
                    return None

            share_url = self.get_shareable_url(self.list_cache.get_active_list())
            self.state.set_key("share_url", share_url)
            return share_url
