"""
Sharing component input/output models.
"""

from __future__ import annotations

from dataclasses import dataclass, field

# --- Validation Error ---


@dataclass(frozen=True)
class SharingValidationError:
    """Sharing validation error."""

    code: str
    message: str
    field_name: str | None = None


# --- Input Models ---


@dataclass(frozen=True)
class ShareUrlInput:
    """
    Input for building the public URL of a list.

    The slug wins over the id when both are present.
    """

    list_id: int
    base_url: str  # e.g., "https://lists.example.com"
    slug: str | None = None
    path_prefix: str = "/list"


@dataclass(frozen=True)
class ValidateCustomUrlInput:
    """Input for checking a candidate slug."""

    slug: str
    min_length: int = 3
    max_length: int = 50
    pattern: str = r"^[A-Za-z0-9-]+$"


# --- Output Models ---


@dataclass(frozen=True)
class ShareUrlOutput:
    """Output from share URL generation."""

    share_url: str | None
    errors: list[SharingValidationError] = field(default_factory=list)
    success: bool = True


@dataclass(frozen=True)
class ValidateCustomUrlOutput:
    """Output from slug validation."""

    errors: list[SharingValidationError] = field(default_factory=list)
    success: bool = True
