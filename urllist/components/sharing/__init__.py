"""
Sharing component - Public list URLs and custom slug checks.
"""

from .component import (
    DEFAULT_PATH_PREFIX,
    build_share_url,
    generate_slug,
    get_shareable_url,
    run,
    run_share_url,
    run_validate_custom_url,
    validate_base_url,
    validate_custom_url,
)
from .models import (
    SharingValidationError,
    ShareUrlInput,
    ShareUrlOutput,
    ValidateCustomUrlInput,
    ValidateCustomUrlOutput,
)

__all__ = [
    # Entry points
    "run",
    "run_share_url",
    "run_validate_custom_url",
    # Pure functions
    "build_share_url",
    "generate_slug",
    "get_shareable_url",
    "validate_base_url",
    "validate_custom_url",
    "DEFAULT_PATH_PREFIX",
    # Models
    "SharingValidationError",
    "ShareUrlInput",
    "ShareUrlOutput",
    "ValidateCustomUrlInput",
    "ValidateCustomUrlOutput",
]
