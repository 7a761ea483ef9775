"""Publish component - flips list visibility and computes the share URL."""

from urllist.components.publish.models import (
    PublishListInput,
    PublishListOutput,
    PublishValidationError,
    UnpublishListInput,
    UnpublishListOutput,
)
from urllist.components.publish.ports import PublishRepoPort
from urllist.components.sharing import DEFAULT_PATH_PREFIX, build_share_url

# Type alias for all supported inputs
PublishInput = PublishListInput | UnpublishListInput
PublishOutput = PublishListOutput | UnpublishListOutput


class PublishComponent:
    """Component for managing list publishing."""

    def __init__(
        self,
        repo: PublishRepoPort,
        site_url: str,
        path_prefix: str = DEFAULT_PATH_PREFIX,
    ) -> None:
        self._repo = repo
        self._site_url = site_url
        self._path_prefix = path_prefix

    def run(self, input_data: PublishInput) -> PublishOutput:
        """Main dispatcher - routes to appropriate handler based on input type."""
        if isinstance(input_data, PublishListInput):
            return self.run_publish(input_data)
        elif isinstance(input_data, UnpublishListInput):
            return self.run_unpublish(input_data)
        else:
            raise TypeError(f"Unknown input type: {type(input_data)}")

    def run_publish(self, input_data: PublishListInput) -> PublishListOutput:
        """
        Publish a list.

        Re-publishing an already published list leaves it unchanged and
        returns the same shape.
        """
        if self._repo.get_list_by_id(input_data.list_id) is None:
            return PublishListOutput(
                list=None,
                share_url=None,
                errors=[
                    PublishValidationError(
                        code="LIST_NOT_FOUND",
                        message="List not found",
                        field="list_id",
                    )
                ],
                success=False,
            )

        published = self._repo.publish_list(input_data.list_id)
        if published is None:
            # Deleted between the existence check and the update
            return PublishListOutput(
                list=None,
                share_url=None,
                errors=[
                    PublishValidationError(
                        code="LIST_NOT_FOUND",
                        message="List not found",
                        field="list_id",
                    )
                ],
                success=False,
            )

        share_url = build_share_url(
            self._site_url, published.id, published.slug, self._path_prefix
        )
        return PublishListOutput(list=published, share_url=share_url, errors=[], success=True)

    def run_unpublish(self, input_data: UnpublishListInput) -> UnpublishListOutput:
        """Unpublish a list (make it private again)."""
        if self._repo.get_list_by_id(input_data.list_id) is None:
            return UnpublishListOutput(
                list=None,
                errors=[
                    PublishValidationError(
                        code="LIST_NOT_FOUND",
                        message="List not found",
                        field="list_id",
                    )
                ],
                success=False,
            )

        unpublished = self._repo.unpublish_list(input_data.list_id)
        if unpublished is None:
            return UnpublishListOutput(
                list=None,
                errors=[
                    PublishValidationError(
                        code="LIST_NOT_FOUND",
                        message="List not found",
                        field="list_id",
                    )
                ],
                success=False,
            )

        return UnpublishListOutput(list=unpublished, errors=[], success=True)
