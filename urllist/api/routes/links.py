"""Link routes - urls addressed by their own id."""

import logging
from typing import Annotated

from fastapi import APIRouter, Body, Depends, Query, Response
from fastapi.responses import JSONResponse

from urllist.api.deps import get_list_service
from urllist.api.routes.lists import ERROR_RESPONSES, errors_to_response
from urllist.api.schemas import LinkCreateRequest, LinkUpdateRequest, UrlResponse, error_response
from urllist.components.lists import (
    AddUrlInput,
    ListService,
    ListUrlsInput,
    RemoveUrlInput,
    UpdateUrlInput,
    run_add_url,
    run_list_urls,
    run_remove_url,
    run_update_url,
)

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/links", response_model=list[UrlResponse], responses=ERROR_RESPONSES)
def list_links(
    list_id: int | None = Query(default=None, alias="listId"),
    service: ListService = Depends(get_list_service),
) -> list[UrlResponse] | JSONResponse:
    """List the urls of one list."""
    try:
        if list_id is None:
            return error_response(400, "List ID is required.")

        result = run_list_urls(ListUrlsInput(list_id=list_id), service)
        if not result.success:
            return errors_to_response(result.errors)
        return [UrlResponse.from_entity(url) for url in result.urls]
    except Exception:
        logger.exception("API Error: Failed to get links")
        return error_response(500, "Failed to fetch links")


@router.post("/links", response_model=UrlResponse, status_code=201, responses=ERROR_RESPONSES)
def create_link(
    payload: Annotated[LinkCreateRequest | None, Body()] = None,
    service: ListService = Depends(get_list_service),
) -> UrlResponse | JSONResponse:
    """Create a url in the list named by list_id."""
    try:
        if payload is None or not payload.url or payload.list_id is None:
            return error_response(400, "URL and List ID are required.")

        result = run_add_url(
            AddUrlInput(
                list_id=payload.list_id,
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
        logger.exception("API Error: Failed to create link")
        return error_response(500, "Failed to create link")


@router.put("/links/{url_id}", response_model=UrlResponse, responses=ERROR_RESPONSES)
def update_link(
    url_id: int,
    payload: Annotated[LinkUpdateRequest | None, Body()] = None,
    service: ListService = Depends(get_list_service),
) -> UrlResponse | JSONResponse:
    """Update a url's address, title, description or image."""
    try:
        if payload is None:
            return error_response(400, "URL data is required.")
        if payload.id is not None and payload.id != url_id:
            return error_response(400, "URL ID does not match the path.")

        result = run_update_url(
            UpdateUrlInput(
                url_id=url_id,
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
        logger.exception("API Error: Failed to update link")
        return error_response(500, "Failed to update link")


@router.delete("/links/{url_id}", status_code=204, responses=ERROR_RESPONSES)
def delete_link(
    url_id: int,
    service: ListService = Depends(get_list_service),
) -> Response:
    """Delete a url."""
    try:
        result = run_remove_url(RemoveUrlInput(url_id=url_id), service)
        if not result.success:
            return errors_to_response(result.errors)
        return Response(status_code=204)
    except Exception:
        logger.exception("API Error: Failed to delete link")
        return error_response(500, "Failed to delete link")
