"""
Publish component unit tests.

Tests for publishing, re-publishing and unpublishing lists.
"""

from __future__ import annotations

from datetime import UTC, datetime

import pytest

from urllist.components.publish import (
    PublishComponent,
    PublishListInput,
    UnpublishListInput,
)
from urllist.domain.entities import UrlList

SITE_URL = "https://lists.example.com"

# --- Mock Implementations ---


class MockPublishRepo:
    """In-memory publish repository for testing."""

    def __init__(self) -> None:
        self._lists: dict[int, UrlList] = {}
        self.publish_calls = 0

    def add(self, lst: UrlList) -> None:
        self._lists[lst.id] = lst

    def get_list_by_id(self, list_id: int) -> UrlList | None:
        return self._lists.get(list_id)

    def publish_list(self, list_id: int) -> UrlList | None:
        self.publish_calls += 1
        lst = self._lists.get(list_id)
        if lst is None:
            return None
        stamp = lst.published_at or datetime(2026, 1, 1, tzinfo=UTC)
        self._lists[list_id] = lst.model_copy(update={"published": True, "published_at": stamp})
        return self._lists[list_id]

    def unpublish_list(self, list_id: int) -> UrlList | None:
        lst = self._lists.get(list_id)
        if lst is None:
            return None
        self._lists[list_id] = lst.model_copy(update={"published": False})
        return self._lists[list_id]


class VanishingRepo(MockPublishRepo):
    """The list disappears between the lookup and the update."""

    def publish_list(self, list_id: int) -> UrlList | None:
        return None

    def unpublish_list(self, list_id: int) -> UrlList | None:
        return None


@pytest.fixture
def repo() -> MockPublishRepo:
    repo = MockPublishRepo()
    repo.add(UrlList(id=1, name="No slug"))
    repo.add(UrlList(id=2, name="Slugged", slug="dev-tools"))
    return repo


@pytest.fixture
def component(repo: MockPublishRepo) -> PublishComponent:
    return PublishComponent(repo=repo, site_url=SITE_URL)


class TestPublish:
    """Test publishing."""

    def test_publish_uses_id_without_slug(self, component: PublishComponent) -> None:
        result = component.run(PublishListInput(list_id=1))

        assert result.success is True
        assert result.list is not None and result.list.published is True
        assert result.share_url == f"{SITE_URL}/list/1"

    def test_publish_uses_slug(self, component: PublishComponent) -> None:
        result = component.run_publish(PublishListInput(list_id=2))
        assert result.share_url == f"{SITE_URL}/list/dev-tools"

    def test_publish_is_idempotent(self, component: PublishComponent) -> None:
        first = component.run_publish(PublishListInput(list_id=1))
        second = component.run_publish(PublishListInput(list_id=1))

        assert first.list is not None and second.list is not None
        assert second.list.published is True
        assert first.list.published_at == second.list.published_at
        assert first.share_url == second.share_url

    def test_publish_missing_list(self, component: PublishComponent, repo: MockPublishRepo) -> None:
        result = component.run_publish(PublishListInput(list_id=99))

        assert result.success is False
        assert result.errors[0].code == "LIST_NOT_FOUND"
        assert repo.publish_calls == 0

    def test_publish_list_deleted_mid_flight(self) -> None:
        repo = VanishingRepo()
        repo.add(UrlList(id=1, name="Gone"))
        result = PublishComponent(repo=repo, site_url=SITE_URL).run_publish(
            PublishListInput(list_id=1)
        )
        assert result.success is False

    def test_custom_path_prefix(self, repo: MockPublishRepo) -> None:
        component = PublishComponent(repo=repo, site_url=SITE_URL, path_prefix="/l")
        assert component.run_publish(PublishListInput(list_id=1)).share_url == f"{SITE_URL}/l/1"


class TestUnpublish:
    """Test unpublishing."""

    def test_unpublish(self, component: PublishComponent) -> None:
        component.run_publish(PublishListInput(list_id=1))
        result = component.run(UnpublishListInput(list_id=1))

        assert result.success is True
        assert result.list is not None and result.list.published is False

    def test_unpublish_missing_list(self, component: PublishComponent) -> None:
        result = component.run_unpublish(UnpublishListInput(list_id=99))
        assert result.success is False
        assert result.errors[0].code == "LIST_NOT_FOUND"


def test_unknown_input(component: PublishComponent) -> None:
    with pytest.raises(TypeError):
        component.run("nope")  # type: ignore[arg-type]
