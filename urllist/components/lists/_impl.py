"""
ListService - List and url management.

Handles list/url creation, updates, deletion and validation.

Functional Core - business rules over the repository port.
"""

from __future__ import annotations

from urllist.components.sharing import validate_custom_url
from urllist.domain.entities import Url, UrlList
from urllist.domain.errors import ListNotFoundError, SlugConflictError
from urllist.rules.models import Rules

from .models import ListValidationError
from .ports import ListRepoPort

# --- Validation Functions ---


def validate_list_data(
    name: str | None = None,
    slug: str | None = None,
    rules: Rules | None = None,
) -> list[ListValidationError]:
    """Validate list data. None means the field is not being set."""
    rules = rules or Rules()
    errors: list[ListValidationError] = []

    if name is not None:
        if not name.strip():
            errors.append(
                ListValidationError(
                    code="name_required",
                    message="List name is required.",
                    field="name",
                )
            )
        elif len(name) > rules.lists.name_max_length:
            errors.append(
                ListValidationError(
                    code="name_too_long",
                    message=(
                        f"List name must be {rules.lists.name_max_length} characters or less."
                    ),
                    field="name",
                )
            )

    if slug is not None:
        for err in validate_custom_url(
            slug,
            min_length=rules.slugs.min_length,
            max_length=rules.slugs.max_length,
            pattern=rules.slugs.pattern,
        ):
            errors.append(
                ListValidationError(code=err.code.lower(), message=err.message, field="slug")
            )

    return errors


def validate_url_data(url: str | None = None) -> list[ListValidationError]:
    """Validate url data."""
    errors: list[ListValidationError] = []

    if url is not None and not url.strip():
        errors.append(
            ListValidationError(
                code="url_required",
                message="URL is required.",
                field="url",
            )
        )

    return errors


def _clean(value: str | None) -> str | None:
    """Strip a value; blank strings become None."""
    if value is None:
        return None
    value = value.strip()
    return value or None


def _list_not_found(list_id: int) -> ListValidationError:
    return ListValidationError(
        code="list_not_found",
        message=f"List with ID {list_id} not found",
    )


def _url_not_found(url_id: int) -> ListValidationError:
    return ListValidationError(
        code="url_not_found",
        message=f"URL with ID {url_id} not found",
    )


def _slug_taken(slug: str) -> ListValidationError:
    return ListValidationError(
        code="slug_taken",
        message=f"Custom URL '{slug}' is already taken",
        field="slug",
    )


# --- List Service ---


class ListService:
    """
    List service.

    Manages lists and the urls they own.
    """

    def __init__(self, repo: ListRepoPort, rules: Rules | None = None) -> None:
        """Initialize service."""
        self._repo = repo
        self._rules = rules or Rules()

    # --- Lists ---

    def get_all(self) -> list[UrlList]:
        """Get all lists."""
        return self._repo.get_lists()

    def get_by_id(self, list_id: int) -> UrlList | None:
        """Get list by ID."""
        return self._repo.get_list_by_id(list_id)

    def create(
        self,
        name: str,
        title: str | None = None,
        description: str | None = None,
        slug: str | None = None,
    ) -> tuple[UrlList | None, list[ListValidationError]]:
        """
        Create a new list.

        Returns:
            Tuple of (list, errors). List is None if validation fails.
        """
        slug = _clean(slug)
        errors = validate_list_data(name=name or "", slug=slug, rules=self._rules)
        if errors:
            return None, errors

        try:
            created = self._repo.create_list(
                name=name.strip(),
                title=_clean(title),
                description=_clean(description),
                slug=slug,
            )
        except SlugConflictError:
            return None, [_slug_taken(slug or "")]

        return created, []

    def update(
        self,
        list_id: int,
        name: str | None = None,
        title: str | None = None,
        description: str | None = None,
        slug: str | None = None,
    ) -> tuple[UrlList | None, list[ListValidationError]]:
        """
        Update an existing list.

        Returns:
            Tuple of (list, errors). List is None if not found or validation fails.
        """
        slug = _clean(slug)
        errors = validate_list_data(name=name, slug=slug, rules=self._rules)
        if errors:
            return None, errors

        try:
            updated = self._repo.update_list(
                list_id,
                name=name.strip() if name is not None else None,
                title=_clean(title),
                description=_clean(description),
                slug=slug,
            )
        except SlugConflictError:
            return None, [_slug_taken(slug or "")]

        if updated is None:
            return None, [_list_not_found(list_id)]

        return updated, []

    def delete(self, list_id: int) -> tuple[bool, list[ListValidationError]]:
        """
        Delete a list and its urls.

        Returns:
            Tuple of (deleted, errors).
        """
        if not self._repo.delete_list(list_id):
            return False, [_list_not_found(list_id)]
        return True, []

    # --- Urls ---

    def get_urls(self, list_id: int) -> tuple[list[Url], list[ListValidationError]]:
        """Get the urls of a list."""
        if self._repo.get_list_by_id(list_id) is None:
            return [], [_list_not_found(list_id)]
        return self._repo.get_urls_for_list(list_id), []

    def add_url(
        self,
        list_id: int,
        url: str,
        title: str | None = None,
        description: str | None = None,
        image_url: str | None = None,
    ) -> tuple[Url | None, list[ListValidationError]]:
        """Add a url to a list."""
        errors = validate_url_data(url=url or "")
        if errors:
            return None, errors

        try:
            created = self._repo.add_url_to_list(
                list_id,
                url.strip(),
                title=_clean(title),
                description=_clean(description),
                image_url=_clean(image_url),
            )
        except ListNotFoundError:
            return None, [_list_not_found(list_id)]

        return created, []

    def update_url(
        self,
        url_id: int,
        url: str | None = None,
        title: str | None = None,
        description: str | None = None,
        image_url: str | None = None,
    ) -> tuple[Url | None, list[ListValidationError]]:
        """Update a url."""
        errors = validate_url_data(url=url)
        if errors:
            return None, errors

        updated = self._repo.update_url(
            url_id,
            url=url.strip() if url is not None else None,
            title=_clean(title),
            description=_clean(description),
            image_url=_clean(image_url),
        )
        if updated is None:
            return None, [_url_not_found(url_id)]

        return updated, []

    def remove_url(
        self,
        url_id: int,
        list_id: int | None = None,
    ) -> tuple[bool, list[ListValidationError]]:
        """
        Remove a url.

        When list_id is given, a url owned by another list counts as not found.
        """
        if list_id is not None:
            existing = self._repo.get_url_by_id(url_id)
            if existing is None or existing.list_id != list_id:
                return False, [_url_not_found(url_id)]

        if not self._repo.delete_url(url_id):
            return False, [_url_not_found(url_id)]
        return True, []
