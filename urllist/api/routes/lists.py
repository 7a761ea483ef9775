"""
List resource routes.

Collection: /lists (list all, create-or-update, update, delete by query id)
Single list: /lists/{list_id} (get, add url, update url address, delete)
Url removal: /lists/{list_id}/urls/{url_id}

Every route returns {"error": message} on failure and never lets an
exception reach the transport layer.
"""

import json
import logging
from collections.abc import Sequence
from typing import Annotated

from fastapi import APIRouter, Body, Depends, Query, Request, Response
from fastapi.responses import JSONResponse
from pydantic import ValidationError

from urllist.api.deps import get_list_service
from urllist.api.schemas import (
    AddUrlRequest,
    ErrorResponse,
    ListResponse,
    ListWriteRequest,
    RemoveUrlRequest,
    UpdateListRequest,
    UpdateUrlAddressRequest,
    UrlResponse,
    error_response,
)
from urllist.components.lists import (
    AddUrlInput,
    CreateListInput,
    DeleteListInput,
    GetListInput,
    ListService,
    ListValidationError,
    RemoveUrlInput,
    UpdateListInput,
    UpdateUrlInput,
    run_add_url,
    run_create,
    run_delete,
    run_get,
    run_list,
    run_remove_url,
    run_update,
    run_update_url,
)

logger = logging.getLogger(__name__)

router = APIRouter()

ERROR_RESPONSES: dict[int | str, dict[str, object]] = {
    400: {"model": ErrorResponse},
    404: {"model": ErrorResponse},
    409: {"model": ErrorResponse},
    500: {"model": ErrorResponse},
}


def errors_to_response(errors: Sequence[ListValidationError]) -> JSONResponse:
    """Map component errors to a status code and message."""
    codes = {err.code for err in errors}
    if "list_not_found" in codes:
        return error_response(404, "List not found.")
    if "url_not_found" in codes:
        return error_response(404, "URL not found.")
    if "slug_taken" in codes:
        return error_response(409, "Custom URL is already taken.")
    message = errors[0].message if errors else "Invalid request."
    return error_response(400, message)


def _update_list(data: UpdateListRequest, service: ListService) -> ListResponse | JSONResponse:
    assert data.id is not None
    result = run_update(
        UpdateListInput(
            list_id=data.id,
            name=data.name,
            title=data.title,
            description=data.description,
            slug=data.slug,
        ),
        service,
    )
    if not result.success:
        return errors_to_response(result.errors)

    assert result.list is not None
    return ListResponse.from_entity(result.list)


# --- Collection ---


@router.get("/lists", response_model=list[ListResponse], responses=ERROR_RESPONSES)
def list_lists(
    service: ListService = Depends(get_list_service),
) -> list[ListResponse] | JSONResponse:
    """List all lists with their urls."""
    try:
        result = run_list(service)
        return [ListResponse.from_entity(lst) for lst in result.lists]
    except Exception:
        logger.exception("API Error: Failed to get lists")
        return error_response(500, "Failed to fetch lists")


@router.post(
    "/lists", response_model=ListResponse, status_code=201, responses=ERROR_RESPONSES
)
def create_or_update_list(
    response: Response,
    payload: Annotated[ListWriteRequest | None, Body()] = None,
    service: ListService = Depends(get_list_service),
) -> ListResponse | JSONResponse:
    """
    Create a list, or update one when the body carries an id.

    Create answers 201, update answers 200.
    """
    try:
        if isinstance(payload, UpdateListRequest):
            response.status_code = 200
            return _update_list(payload, service)

        name = payload.name if payload is not None else None
        if not name or not name.strip():
            return error_response(400, "List name is required.")

        assert payload is not None
        result = run_create(
            CreateListInput(
                name=name,
                title=payload.title or None,
                description=payload.description or None,
                slug=payload.slug or None,
            ),
            service,
        )
        if not result.success:
            return errors_to_response(result.errors)

        assert result.list is not None
        return ListResponse.from_entity(result.list)
    except Exception:
        logger.exception("API Error: Failed to create list")
        return error_response(500, "Failed to create list")


@router.put("/lists", response_model=ListResponse, responses=ERROR_RESPONSES)
def update_list(
    payload: Annotated[UpdateListRequest | None, Body()] = None,
    service: ListService = Depends(get_list_service),
) -> ListResponse | JSONResponse:
    """Update a list identified by the id in the body."""
    try:
        if payload is None or payload.id is None:
            return error_response(400, "List ID is required.")
        return _update_list(payload, service)
    except Exception:
        logger.exception("Error updating list")
        return error_response(500, "Failed to update list. Please try again later.")


@router.delete("/lists", status_code=204, responses=ERROR_RESPONSES)
def delete_list(
    id: int | None = Query(default=None),
    service: ListService = Depends(get_list_service),
) -> Response:
    """Delete a list and all of its urls."""
    try:
        if id is None:
            return error_response(400, "List ID is required.")
        # Deleting a missing list is not an error
        run_delete(DeleteListInput(list_id=id), service)
        return Response(status_code=204)
    except Exception:
        logger.exception("Error deleting list")
        return error_response(500, "Failed to delete list. Please try again later.")


# --- Single list ---


@router.get("/lists/{list_id}", response_model=ListResponse, responses=ERROR_RESPONSES)
def get_list(
    list_id: int,
    service: ListService = Depends(get_list_service),
) -> ListResponse | JSONResponse:
    """Get a list with its urls."""
    try:
        result = run_get(GetListInput(list_id=list_id), service)
        if not result.success:
            return error_response(404, "List not found.")

        assert result.list is not None
        return ListResponse.from_entity(result.list)
    except Exception:
        logger.exception("Error fetching list")
        return error_response(500, "Failed to fetch list. Please try again later.")


@router.post(
    "/lists/{list_id}", response_model=UrlResponse, status_code=201, responses=ERROR_RESPONSES
)
def add_url(
    list_id: int,
    payload: Annotated[AddUrlRequest | None, Body()] = None,
    service: ListService = Depends(get_list_service),
) -> UrlResponse | JSONResponse:
    """Add a url to the list."""
    try:
        if payload is None or not payload.url:
            return error_response(400, "List ID and URL are required.")

        result = run_add_url(
            AddUrlInput(
                list_id=list_id,
                url=payload.url,
                title=payload.title,
                description=payload.description,
                image_url=payload.image_url,
            ),
            service,
        )
        if not result.success:
            return errors_to_response(result.errors)

        assert result.url is not None
        return UrlResponse.from_entity(result.url)
    except Exception:
        logger.exception("Error adding URL to list")
        return error_response(500, "Failed to add URL to list. Please try again later.")


@router.put("/lists/{list_id}", response_model=UrlResponse, responses=ERROR_RESPONSES)
def update_url_address(
    list_id: int,
    payload: Annotated[UpdateUrlAddressRequest | None, Body()] = None,
    service: ListService = Depends(get_list_service),
) -> UrlResponse | JSONResponse:
    """Replace the address of one url. Other url fields are not touched."""
    try:
        if payload is None or payload.urlId is None or not payload.newUrl:
            return error_response(400, "List ID, URL ID, and new URL are required.")

        result = run_update_url(UpdateUrlInput(url_id=payload.urlId, url=payload.newUrl), service)
        if not result.success:
            return errors_to_response(result.errors)

        assert result.url is not None
        return UrlResponse.from_entity(result.url)
    except Exception:
        logger.exception("Error updating URL")
        return error_response(500, "Failed to update URL. Please try again later.")


@router.delete("/lists/{list_id}", status_code=204, responses=ERROR_RESPONSES)
async def delete_list_or_url(
    list_id: int,
    request: Request,
    service: ListService = Depends(get_list_service),
) -> Response:
    """
    Delete the list, or one of its urls when the body is {"urlId": ...}.

    A body that is missing or not JSON deletes the whole list. A urlId owned
    by another list is a 404.
    Prefer DELETE /lists/{list_id}/urls/{url_id} for url removal.
    """
    try:
        try:
            body = await request.body()
        except Exception:
            logger.debug("No readable body on DELETE /lists/%s", list_id)
            body = b""

        data = None
        if body.strip():
            try:
                data = json.loads(body)
            except ValueError:
                logger.warning("Ignoring unparseable body on DELETE /lists/%s", list_id)

        if isinstance(data, dict) and "urlId" in data:
            try:
                remove = RemoveUrlRequest.model_validate(data)
            except ValidationError:
                return error_response(400, "List ID and URL ID are required.")

            result = run_remove_url(
                RemoveUrlInput(url_id=remove.urlId, list_id=list_id), service
            )
            if not result.success:
                return errors_to_response(result.errors)
            return Response(status_code=204)

        run_delete(DeleteListInput(list_id=list_id), service)
        return Response(status_code=204)
    except Exception:
        logger.exception("Error deleting list or URL")
        return error_response(500, "Failed to delete. Please try again later.")


@router.delete("/lists/{list_id}/urls/{url_id}", status_code=204, responses=ERROR_RESPONSES)
def remove_url(
    list_id: int,
    url_id: int,
    service: ListService = Depends(get_list_service),
) -> Response:
    """Remove one url from the list."""
    try:
        result = run_remove_url(RemoveUrlInput(url_id=url_id, list_id=list_id), service)
        if not result.success:
            return errors_to_response(result.errors)
        return Response(status_code=204)
    except Exception:
        logger.exception("Error removing URL from list")
        return error_response(500, "Failed to remove URL. Please try again later.")
