from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from urllist.adapters.sqlite.migrator import SQLiteMigrator
from urllist.adapters.sqlite.repos import SQLiteListRepo
from urllist.api.deps import get_list_repo, get_rules, get_site_url
from urllist.api.main import app
from urllist.domain.entities import Url, UrlList, utcnow
from urllist.domain.errors import ListNotFoundError, SlugConflictError
from urllist.rules.models import Rules

TEST_SITE_URL = "https://lists.example.com"


class InMemoryListRepo:
    """
    Dict-backed list repository with the same contract as SQLiteListRepo.

    Records calls so tests can assert that an operation never reached storage.
    """

    def __init__(self) -> None:
        self._lists: dict[int, UrlList] = {}
        self._urls: dict[int, Url] = {}
        self._next_list_id = 1
        self._next_url_id = 1
        self.calls: list[str] = []

    def _with_urls(self, lst: UrlList) -> UrlList:
        urls = sorted(
            (u for u in self._urls.values() if u.list_id == lst.id), key=lambda u: u.id
        )
        return lst.model_copy(update={"urls": urls})

    def _check_slug(self, slug: str | None, list_id: int | None = None) -> None:
        if slug is None:
            return
        for other in self._lists.values():
            if other.slug == slug and other.id != list_id:
                raise SlugConflictError(slug)

    # --- Lists ---

    def get_lists(self) -> list[UrlList]:
        self.calls.append("get_lists")
        ordered = sorted(self._lists.values(), key=lambda lst: lst.id, reverse=True)
        return [self._with_urls(lst) for lst in ordered]

    def get_list_by_id(self, list_id: int) -> UrlList | None:
        self.calls.append("get_list_by_id")
        lst = self._lists.get(list_id)
        return self._with_urls(lst) if lst else None

    def create_list(
        self,
        name: str,
        title: str | None = None,
        description: str | None = None,
        slug: str | None = None,
    ) -> UrlList:
        self.calls.append("create_list")
        self._check_slug(slug)
        lst = UrlList(
            id=self._next_list_id, name=name, title=title, description=description, slug=slug
        )
        self._lists[lst.id] = lst
        self._next_list_id += 1
        return self._with_urls(lst)

    def update_list(
        self,
        list_id: int,
        name: str | None = None,
        title: str | None = None,
        description: str | None = None,
        slug: str | None = None,
    ) -> UrlList | None:
        self.calls.append("update_list")
        lst = self._lists.get(list_id)
        if lst is None:
            return None
        self._check_slug(slug, list_id)
        changes = {
            k: v
            for k, v in {
                "name": name,
                "title": title,
                "description": description,
                "slug": slug,
            }.items()
            if v is not None
        }
        self._lists[list_id] = lst.model_copy(update=changes)
        return self._with_urls(self._lists[list_id])

    def delete_list(self, list_id: int) -> bool:
        self.calls.append("delete_list")
        if self._lists.pop(list_id, None) is None:
            return False
        for url_id in [u.id for u in self._urls.values() if u.list_id == list_id]:
            del self._urls[url_id]
        return True

    def publish_list(self, list_id: int) -> UrlList | None:
        self.calls.append("publish_list")
        lst = self._lists.get(list_id)
        if lst is None:
            return None
        self._lists[list_id] = lst.model_copy(
            update={"published": True, "published_at": lst.published_at or utcnow()}
        )
        return self._with_urls(self._lists[list_id])

    def unpublish_list(self, list_id: int) -> UrlList | None:
        self.calls.append("unpublish_list")
        lst = self._lists.get(list_id)
        if lst is None:
            return None
        self._lists[list_id] = lst.model_copy(update={"published": False})
        return self._with_urls(self._lists[list_id])

    # --- Urls ---

    def add_url_to_list(
        self,
        list_id: int,
        url: str,
        title: str | None = None,
        description: str | None = None,
        image_url: str | None = None,
    ) -> Url:
        self.calls.append("add_url_to_list")
        if list_id not in self._lists:
            raise ListNotFoundError(list_id)
        created = Url(
            id=self._next_url_id,
            list_id=list_id,
            url=url,
            title=title,
            description=description,
            image_url=image_url,
        )
        self._urls[created.id] = created
        self._next_url_id += 1
        return created

    def get_urls_for_list(self, list_id: int) -> list[Url]:
        self.calls.append("get_urls_for_list")
        return sorted((u for u in self._urls.values() if u.list_id == list_id), key=lambda u: u.id)

    def get_url_by_id(self, url_id: int) -> Url | None:
        self.calls.append("get_url_by_id")
        return self._urls.get(url_id)

    def update_url(
        self,
        url_id: int,
        url: str | None = None,
        title: str | None = None,
        description: str | None = None,
        image_url: str | None = None,
    ) -> Url | None:
        self.calls.append("update_url")
        existing = self._urls.get(url_id)
        if existing is None:
            return None
        changes = {
            k: v
            for k, v in {
                "url": url,
                "title": title,
                "description": description,
                "image_url": image_url,
            }.items()
            if v is not None
        }
        self._urls[url_id] = existing.model_copy(update=changes)
        return self._urls[url_id]

    def delete_url(self, url_id: int) -> bool:
        self.calls.append("delete_url")
        return self._urls.pop(url_id, None) is not None


@pytest.fixture
def memory_repo() -> InMemoryListRepo:
    return InMemoryListRepo()


@pytest.fixture
def rules() -> Rules:
    return Rules()


@pytest.fixture
def site_url() -> str:
    return TEST_SITE_URL


@pytest.fixture
def api_client(memory_repo: InMemoryListRepo, rules: Rules):
    """TestClient over the real app, backed by the in-memory repository."""
    app.dependency_overrides[get_list_repo] = lambda: memory_repo
    app.dependency_overrides[get_rules] = lambda: rules
    app.dependency_overrides[get_site_url] = lambda: TEST_SITE_URL
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()


@pytest.fixture
def db_path(tmp_path) -> str:
    return str(tmp_path / "urllist.db")


@pytest.fixture
def sqlite_repo(db_path: str) -> SQLiteListRepo:
    SQLiteMigrator(db_path).run_migrations()
    return SQLiteListRepo(db_path)


@pytest.fixture
def sqlite_api_client(sqlite_repo: SQLiteListRepo, rules: Rules):
    """TestClient over the real app, backed by a migrated SQLite file."""
    app.dependency_overrides[get_list_repo] = lambda: sqlite_repo
    app.dependency_overrides[get_rules] = lambda: rules
    app.dependency_overrides[get_site_url] = lambda: TEST_SITE_URL
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()
