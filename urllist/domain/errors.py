"""
Domain errors raised by repository adapters.

Components translate these into validation errors on their outputs;
nothing above the component layer should see them.
"""


class UrlListError(Exception):
    """Base class for list/url domain errors."""


class ListNotFoundError(UrlListError):
    def __init__(self, list_id: int) -> None:
        super().__init__(f"List with ID {list_id} not found")
        self.list_id = list_id


class SlugConflictError(UrlListError):
    """Another list already owns the slug (enforced by the store's unique constraint)."""

    def __init__(self, slug: str) -> None:
        super().__init__(f"Slug '{slug}' is already taken")
        self.slug = slug
