"""
Publish routes.

POST /lists/{list_id}/publish   - make a list public, answer with its shareUrl
POST /lists/{list_id}/unpublish - make a list private again
"""

import logging

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from urllist.api.deps import get_publish_component
from urllist.api.routes.lists import ERROR_RESPONSES
from urllist.api.schemas import ListResponse, PublishedListResponse, error_response
from urllist.components.publish import PublishComponent, PublishListInput, UnpublishListInput

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post(
    "/lists/{list_id}/publish",
    response_model=PublishedListResponse,
    responses=ERROR_RESPONSES,
)
def publish_list(
    list_id: int,
    component: PublishComponent = Depends(get_publish_component),
) -> PublishedListResponse | JSONResponse:
    """Publish a list. Publishing an already published list changes nothing."""
    try:
        result = component.run_publish(PublishListInput(list_id=list_id))
        if not result.success:
            return error_response(404, "List not found.")

        assert result.list is not None and result.share_url is not None
        return PublishedListResponse.from_published(result.list, result.share_url)
    except Exception:
        logger.exception("Error publishing list")
        return error_response(500, "Failed to publish list. Please try again later.")


@router.post(
    "/lists/{list_id}/unpublish",
    response_model=ListResponse,
    responses=ERROR_RESPONSES,
)
def unpublish_list(
    list_id: int,
    component: PublishComponent = Depends(get_publish_component),
) -> ListResponse | JSONResponse:
    """Unpublish a list."""
    try:
        result = component.run_unpublish(UnpublishListInput(list_id=list_id))
        if not result.success:
            return error_response(404, "List not found.")

        assert result.list is not None
        return ListResponse.from_entity(result.list)
    except Exception:
        logger.exception("Error unpublishing list")
        return error_response(500, "Failed to unpublish list. Please try again later.")
