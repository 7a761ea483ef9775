"""Publish component models - frozen dataclass inputs and outputs."""

from dataclasses import dataclass

from urllist.domain.entities import UrlList


@dataclass(frozen=True)
class PublishValidationError:
    """Validation error details for publish operations."""

    code: str
    message: str
    field: str


@dataclass(frozen=True)
class PublishListInput:
    """Input for publishing a list."""

    list_id: int


@dataclass(frozen=True)
class PublishListOutput:
    """Output for publishing a list. share_url is set on success."""

    list: UrlList | None
    share_url: str | None
    errors: list[PublishValidationError]
    success: bool


@dataclass(frozen=True)
class UnpublishListInput:
    """Input for unpublishing a list."""

    list_id: int


@dataclass(frozen=True)
class UnpublishListOutput:
    """Output for unpublishing a list."""

    list: UrlList | None
    errors: list[PublishValidationError]
    success: bool
