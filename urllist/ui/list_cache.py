"""
Client-side cache of the user's lists.

Holds the lists and the active selection in a ListState store, and the
shared loading/error flags in a UIState store. Operations talk to the API
through ListsApiClient and never let a failure escape: it is logged and
turned into one user-facing message per operation.

Invariants:
- Local validation runs before any await and never toggles is_loading
- is_loading is released on every exit path, cancellation included
- Duplicate concurrent calls with the same key share one request
"""

from __future__ import annotations

import asyncio
import logging
import re
from collections.abc import Awaitable, Callable, Hashable, Iterator
from contextlib import contextmanager
from typing import Any, TypeVar

from urllist.domain.entities import UrlList
from urllist.rules.models import SlugRules

from .api_client import ListsApiClient
from .state import ListState, UIState
from .store import Store

logger = logging.getLogger(__name__)

T = TypeVar("T")

LOAD_ERROR = "Failed to load lists. Please try again."
CREATE_ERROR = "Failed to create list. Please try again."
UPDATE_ERROR = "Failed to update list. Please try again."
DELETE_ERROR = "Failed to delete list. Please try again."
CUSTOM_URL_ERROR = "Failed to update custom URL. This URL might already be taken."

LIST_ID_REQUIRED = "List ID is required"
LIST_NOT_FOUND = "List not found"
CUSTOM_URL_REQUIRED = "Custom URL is required"
CUSTOM_URL_INVALID = "Custom URL cannot contain spaces or special characters"
CUSTOM_URL_TOO_SHORT = "Custom URL must be at least {min_length} characters long"
CUSTOM_URL_TOO_LONG = "Custom URL must be less than {max_length} characters long"

CUSTOM_URL_PATTERN = re.compile(r"[a-z0-9-]+")


class SingleFlight:
    """
    Joins concurrent calls with the same key onto one running task.

    Each caller waits on the shared task through asyncio.shield, so
    cancelling one caller leaves the others waiting. The shared task is
    cancelled only when its last caller is.
    """

    def __init__(self) -> None:
        self._inflight: dict[Hashable, asyncio.Task[Any]] = {}
        self._waiters: dict[Hashable, int] = {}

    async def run(self, key: Hashable, factory: Callable[[], Awaitable[T]]) -> T:
        task = self._inflight.get(key)
        if task is None:
            task = asyncio.ensure_future(factory())
            self._inflight[key] = task
            self._waiters[key] = 0

            def _forget(done: asyncio.Task[Any], key: Hashable = key) -> None:
                if self._inflight.get(key) is done:
                    del self._inflight[key]
                    del self._waiters[key]

            task.add_done_callback(_forget)
        else:
            logger.debug("Joining in-flight operation %r", key)

        self._waiters[key] += 1
        try:
            return await asyncio.shield(task)
        except asyncio.CancelledError:
            if not task.done() and self._inflight.get(key) is task:
                self._waiters[key] -= 1
                if self._waiters[key] == 0:
                    task.cancel()
                    await asyncio.wait([task])
            raise


class ListCache:
    def __init__(
        self,
        api: ListsApiClient,
        ui_state: Store[UIState] | None = None,
        slug_rules: SlugRules | None = None,
    ) -> None:
        self.api = api
        self.slug_rules = slug_rules or SlugRules()
        self.state: Store[ListState] = Store(ListState())
        self.ui: Store[UIState] = ui_state or Store(UIState())
        self._flights = SingleFlight()

    # --- Helpers ---

    @contextmanager
    def _loading(self) -> Iterator[None]:
        self.ui.update(is_loading=True, error=None)
        try:
            yield
        finally:
            self.ui.set_key("is_loading", False)

    def _fail(self, message: str) -> None:
        self.ui.set_key("error", message)

    def _find(self, list_id: int) -> UrlList | None:
        return next((lst for lst in self.state.get().lists if lst.id == list_id), None)

    def replace_list(self, updated: UrlList) -> None:
        """Swap the cached entry that has the same id for `updated`."""
        current = self.state.get()
        lists = tuple(updated if lst.id == updated.id else lst for lst in current.lists)
        self.state.set(ListState(lists=lists, active_list_id=current.active_list_id))

    # --- Loading ---

    async def initialize_store(self) -> None:
        await self._flights.run(("fetch_lists",), self._fetch_lists)

    async def fetch_lists(self) -> None:
        await self.initialize_store()

    async def _fetch_lists(self) -> None:
        with self._loading():
            try:
                lists = await self.api.get_lists()
            except Exception:
                logger.exception("Failed to load lists")
                self._fail(LOAD_ERROR)
                return
            self.state.set(ListState(lists=tuple(lists), active_list_id=None))

    # --- Selection ---

    def set_active_list(self, list_id: int | None) -> None:
        self.state.set_key("active_list_id", list_id)

    def get_active_list(self) -> UrlList | None:
        active_id = self.state.get().active_list_id
        if active_id is None:
            return None
        return self._find(active_id)

    # --- Mutations ---

    async def create_list(
        self,
        name: str,
        title: str | None = None,
        description: str | None = None,
        slug: str | None = None,
    ) -> UrlList | None:
        key = ("create_list", name, title, description, slug)
        return await self._flights.run(
            key, lambda: self._create_list(name, title, description, slug)
        )

    async def _create_list(
        self,
        name: str,
        title: str | None,
        description: str | None,
        slug: str | None,
    ) -> UrlList | None:
        with self._loading():
            try:
                created = await self.api.create_list(name, title, description, slug)
            except Exception:
                logger.exception("Failed to create list %r", name)
                self._fail(CREATE_ERROR)
                return None
            current = self.state.get()
            self.state.set(
                ListState(
                    lists=current.lists + (created,),
                    active_list_id=current.active_list_id,
                )
            )
            return created

    async def update_list(self, list_id: int, **fields: Any) -> UrlList | None:
        """Update name, title or description of a cached list."""
        if not list_id:
            self._fail(LIST_ID_REQUIRED)
            return None
        if self._find(list_id) is None:
            self._fail(LIST_NOT_FOUND)
            return None

        key = ("update_list", list_id, tuple(sorted(fields.items())))
        return await self._flights.run(key, lambda: self._update_list(list_id, fields))

    async def _update_list(self, list_id: int, fields: dict[str, Any]) -> UrlList | None:
        with self._loading():
            try:
                updated = await self.api.update_list(list_id, **fields)
            except Exception:
                logger.exception("Failed to update list %s", list_id)
                self._fail(UPDATE_ERROR)
                return None
            self.replace_list(updated)
            return updated

    async def delete_list(self, list_id: int) -> bool:
        if not list_id:
            self._fail(LIST_ID_REQUIRED)
            return False
        if self._find(list_id) is None:
            self._fail(LIST_NOT_FOUND)
            return False

        return await self._flights.run(
            ("delete_list", list_id), lambda: self._delete_list(list_id)
        )

    async def _delete_list(self, list_id: int) -> bool:
        with self._loading():
            try:
                await self.api.delete_list(list_id)
            except Exception:
                logger.exception("Failed to delete list %s", list_id)
                self._fail(DELETE_ERROR)
                return False
            current = self.state.get()
            active = None if current.active_list_id == list_id else current.active_list_id
            self.state.set(
                ListState(
                    lists=tuple(lst for lst in current.lists if lst.id != list_id),
                    active_list_id=active,
                )
            )
            return True

    async def update_custom_url(self, list_id: int, custom_url: str) -> bool:
        if not list_id:
            self._fail(LIST_ID_REQUIRED)
            return False
        if not custom_url:
            self._fail(CUSTOM_URL_REQUIRED)
            return False
        if self._find(list_id) is None:
            self._fail(LIST_NOT_FOUND)
            return False
        if not CUSTOM_URL_PATTERN.fullmatch(custom_url):
            self._fail(CUSTOM_URL_INVALID)
            return False
        if len(custom_url) < self.slug_rules.min_length:
            self._fail(CUSTOM_URL_TOO_SHORT.format(min_length=self.slug_rules.min_length))
            return False
        if len(custom_url) > self.slug_rules.max_length:
            self._fail(CUSTOM_URL_TOO_LONG.format(max_length=self.slug_rules.max_length))
            return False

        return await self._flights.run(
            ("update_custom_url", list_id, custom_url),
            lambda: self._update_custom_url(list_id, custom_url),
        )

    async def _update_custom_url(self, list_id: int, custom_url: str) -> bool:
        with self._loading():
            try:
                updated = await self.api.update_list(list_id, slug=custom_url)
            except Exception:
                logger.exception("Failed to set custom URL %r on list %s", custom_url, list_id)
                self._fail(CUSTOM_URL_ERROR)
                return False
            self.replace_list(updated)
            return True
