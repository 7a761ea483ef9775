"""Publish component port definitions - protocols for dependencies."""

from typing import Protocol

from urllist.domain.entities import UrlList


class PublishRepoPort(Protocol):
    """Protocol for list visibility operations."""

    def get_list_by_id(self, list_id: int) -> UrlList | None:
        """Retrieve a list by ID."""
        ...

    def publish_list(self, list_id: int) -> UrlList | None:
        """Set published=true; stamp published_at on first publish only."""
        ...

    def unpublish_list(self, list_id: int) -> UrlList | None:
        """Set published=false."""
        ...
