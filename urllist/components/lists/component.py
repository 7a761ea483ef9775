"""
Lists component - Named link collections.

Handles list and url CRUD operations.

Shell Layer - converts service results into component outputs.
"""

from __future__ import annotations

from ._impl import ListService
from .models import (
    AddUrlInput,
    CreateListInput,
    DeleteListInput,
    GetListInput,
    ListCollectionOutput,
    ListOperationOutput,
    ListUrlsInput,
    ListValidationError,
    RemoveUrlInput,
    UpdateListInput,
    UpdateUrlInput,
    UrlCollectionOutput,
    UrlOperationOutput,
)

# --- Shell Layer Functions ---


def run_create(
    input_data: CreateListInput,
    service: ListService,
) -> ListOperationOutput:
    """Create a new list."""
    created, errors = service.create(
        name=input_data.name,
        title=input_data.title,
        description=input_data.description,
        slug=input_data.slug,
    )

    return ListOperationOutput(
        list=created,
        errors=tuple(errors),
        success=created is not None,
    )


def run_update(
    input_data: UpdateListInput,
    service: ListService,
) -> ListOperationOutput:
    """Update an existing list."""
    updated, errors = service.update(
        input_data.list_id,
        name=input_data.name,
        title=input_data.title,
        description=input_data.description,
        slug=input_data.slug,
    )

    return ListOperationOutput(
        list=updated,
        errors=tuple(errors),
        success=updated is not None,
    )


def run_delete(
    input_data: DeleteListInput,
    service: ListService,
) -> ListOperationOutput:
    """Delete a list."""
    success, errors = service.delete(input_data.list_id)

    return ListOperationOutput(
        list=None,
        errors=tuple(errors),
        success=success,
    )


def run_get(
    input_data: GetListInput,
    service: ListService,
) -> ListOperationOutput:
    """Get a list by ID."""
    found = service.get_by_id(input_data.list_id)

    if found is None:
        return ListOperationOutput(
            list=None,
            errors=(
                ListValidationError(
                    code="list_not_found",
                    message=f"List with ID {input_data.list_id} not found",
                ),
            ),
            success=False,
        )

    return ListOperationOutput(
        list=found,
        errors=(),
        success=True,
    )


def run_list(service: ListService) -> ListCollectionOutput:
    """List all lists."""
    lists = service.get_all()
    return ListCollectionOutput(
        lists=tuple(lists),
        total=len(lists),
    )


def run_add_url(
    input_data: AddUrlInput,
    service: ListService,
) -> UrlOperationOutput:
    """Add a url to a list."""
    created, errors = service.add_url(
        input_data.list_id,
        input_data.url,
        title=input_data.title,
        description=input_data.description,
        image_url=input_data.image_url,
    )

    return UrlOperationOutput(
        url=created,
        errors=tuple(errors),
        success=created is not None,
    )


def run_update_url(
    input_data: UpdateUrlInput,
    service: ListService,
) -> UrlOperationOutput:
    """Update a url."""
    updated, errors = service.update_url(
        input_data.url_id,
        url=input_data.url,
        title=input_data.title,
        description=input_data.description,
        image_url=input_data.image_url,
    )

    return UrlOperationOutput(
        url=updated,
        errors=tuple(errors),
        success=updated is not None,
    )


def run_remove_url(
    input_data: RemoveUrlInput,
    service: ListService,
) -> UrlOperationOutput:
    """Remove a url."""
    success, errors = service.remove_url(input_data.url_id, list_id=input_data.list_id)

    return UrlOperationOutput(
        url=None,
        errors=tuple(errors),
        success=success,
    )


def run_list_urls(
    input_data: ListUrlsInput,
    service: ListService,
) -> UrlCollectionOutput:
    """List the urls of a list."""
    urls, errors = service.get_urls(input_data.list_id)

    return UrlCollectionOutput(
        urls=tuple(urls),
        errors=tuple(errors),
        success=not errors,
    )
