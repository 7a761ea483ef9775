"""
Lists component - Port interfaces.
"""

from __future__ import annotations

from typing import Protocol

from urllist.domain.entities import Url, UrlList


class ListRepoPort(Protocol):
    """
    Repository interface for lists and their urls.

    create_list/update_list raise SlugConflictError when the slug is taken.
    add_url_to_list raises ListNotFoundError when the list does not exist.
    """

    def get_lists(self) -> list[UrlList]:
        """List all lists with their urls."""
        ...

    def get_list_by_id(self, list_id: int) -> UrlList | None:
        """Get a list with its urls."""
        ...

    def create_list(
        self,
        name: str,
        title: str | None = None,
        description: str | None = None,
        slug: str | None = None,
    ) -> UrlList:
        """Insert a list."""
        ...

    def update_list(
        self,
        list_id: int,
        name: str | None = None,
        title: str | None = None,
        description: str | None = None,
        slug: str | None = None,
    ) -> UrlList | None:
        """Update non-None fields. Returns None if the list does not exist."""
        ...

    def delete_list(self, list_id: int) -> bool:
        """Delete a list and cascade to its urls."""
        ...

    def add_url_to_list(
        self,
        list_id: int,
        url: str,
        title: str | None = None,
        description: str | None = None,
        image_url: str | None = None,
    ) -> Url:
        """Insert a url into a list."""
        ...

    def get_urls_for_list(self, list_id: int) -> list[Url]:
        """Urls of a list, oldest first."""
        ...

    def get_url_by_id(self, url_id: int) -> Url | None:
        """Get a single url."""
        ...

    def update_url(
        self,
        url_id: int,
        url: str | None = None,
        title: str | None = None,
        description: str | None = None,
        image_url: str | None = None,
    ) -> Url | None:
        """Update non-None fields. Returns None if the url does not exist."""
        ...

    def delete_url(self, url_id: int) -> bool:
        """Delete a url."""
        ...
