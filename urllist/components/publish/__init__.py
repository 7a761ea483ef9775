"""Publish component - handles list publishing operations."""

from urllist.components.publish.component import PublishComponent, PublishInput, PublishOutput
from urllist.components.publish.models import (
    PublishListInput,
    PublishListOutput,
    PublishValidationError,
    UnpublishListInput,
    UnpublishListOutput,
)
from urllist.components.publish.ports import PublishRepoPort

__all__ = [
    # Component
    "PublishComponent",
    "PublishInput",
    "PublishOutput",
    # Models
    "PublishListInput",
    "PublishListOutput",
    "PublishValidationError",
    "UnpublishListInput",
    "UnpublishListOutput",
    # Ports
    "PublishRepoPort",
]
