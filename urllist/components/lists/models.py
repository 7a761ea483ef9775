"""
Lists component - Data models.
"""

from __future__ import annotations

from dataclasses import dataclass

from urllist.domain.entities import Url, UrlList

# --- Validation Errors ---


@dataclass(frozen=True)
class ListValidationError:
    """List validation error."""

    code: str
    message: str
    field: str | None = None


# --- Input Models ---


@dataclass(frozen=True)
class CreateListInput:
    """Input for creating a list."""

    name: str
    title: str | None = None
    description: str | None = None
    slug: str | None = None


@dataclass(frozen=True)
class UpdateListInput:
    """Input for updating a list. None leaves a field unchanged."""

    list_id: int
    name: str | None = None
    title: str | None = None
    description: str | None = None
    slug: str | None = None


@dataclass(frozen=True)
class DeleteListInput:
    """Input for deleting a list (and its urls)."""

    list_id: int


@dataclass(frozen=True)
class GetListInput:
    """Input for getting a list."""

    list_id: int


@dataclass(frozen=True)
class AddUrlInput:
    """Input for adding a url to a list."""

    list_id: int
    url: str
    title: str | None = None
    description: str | None = None
    image_url: str | None = None


@dataclass(frozen=True)
class UpdateUrlInput:
    """Input for updating a url. None leaves a field unchanged."""

    url_id: int
    url: str | None = None
    title: str | None = None
    description: str | None = None
    image_url: str | None = None


@dataclass(frozen=True)
class RemoveUrlInput:
    """
    Input for removing a url.

    When list_id is given the url must belong to that list.
    """

    url_id: int
    list_id: int | None = None


@dataclass(frozen=True)
class ListUrlsInput:
    """Input for listing the urls of a list."""

    list_id: int


# --- Output Models ---


@dataclass(frozen=True)
class ListOperationOutput:
    """Output from list operation."""

    list: UrlList | None
    errors: tuple[ListValidationError, ...]
    success: bool


@dataclass(frozen=True)
class ListCollectionOutput:
    """Output from list-all operation."""

    lists: tuple[UrlList, ...]
    total: int


@dataclass(frozen=True)
class UrlOperationOutput:
    """Output from url operation."""

    url: Url | None
    errors: tuple[ListValidationError, ...]
    success: bool


@dataclass(frozen=True)
class UrlCollectionOutput:
    """Output from listing urls."""

    urls: tuple[Url, ...]
    errors: tuple[ListValidationError, ...]
    success: bool
