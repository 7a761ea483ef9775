"""
Lists component - Named link collections and their urls.
"""

from ._impl import ListService, validate_list_data, validate_url_data
from .component import (
    run_add_url,
    run_create,
    run_delete,
    run_get,
    run_list,
    run_list_urls,
    run_remove_url,
    run_update,
    run_update_url,
)
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
from .ports import ListRepoPort

__all__ = [
    # Entry points
    "run_create",
    "run_update",
    "run_delete",
    "run_get",
    "run_list",
    "run_add_url",
    "run_update_url",
    "run_remove_url",
    "run_list_urls",
    # Input models
    "CreateListInput",
    "UpdateListInput",
    "DeleteListInput",
    "GetListInput",
    "AddUrlInput",
    "UpdateUrlInput",
    "RemoveUrlInput",
    "ListUrlsInput",
    # Output models
    "ListOperationOutput",
    "ListCollectionOutput",
    "UrlOperationOutput",
    "UrlCollectionOutput",
    "ListValidationError",
    # Ports
    "ListRepoPort",
    # Service
    "ListService",
    "validate_list_data",
    "validate_url_data",
]
