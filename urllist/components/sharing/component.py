"""
Sharing component - Public list URLs and custom slug checks.

Builds the shareable URL of a list. The same formula is used by the
publish handler (server) and by the client cache, so a link handed out by
either side always resolves to the same list.

Invariants:
- Share URL is {origin}{prefix}/{slug} when the list has a slug
- Otherwise it is {origin}{prefix}/{id}
- Slugs are letters, digits and hyphens only
"""

from __future__ import annotations

import re
from collections.abc import Mapping
from typing import Any
from urllib.parse import urlparse

from urllist.domain.entities import UrlList

from .models import (
    SharingValidationError,
    ShareUrlInput,
    ShareUrlOutput,
    ValidateCustomUrlInput,
    ValidateCustomUrlOutput,
)

DEFAULT_PATH_PREFIX = "/list"


# --- Pure Functions (Functional Core) ---


def validate_base_url(base_url: str) -> list[SharingValidationError]:
    """
    Validate that base_url is a valid absolute URL.

    Args:
        base_url: The base URL to validate

    Returns:
        List of validation errors (empty if valid)
    """
    errors: list[SharingValidationError] = []

    if not base_url:
        errors.append(
            SharingValidationError(
                code="EMPTY_BASE_URL",
                message="Base URL cannot be empty",
                field_name="base_url",
            )
        )
        return errors

    parsed = urlparse(base_url)

    if not parsed.scheme:
        errors.append(
            SharingValidationError(
                code="MISSING_SCHEME",
                message="Base URL must include scheme (http or https)",
                field_name="base_url",
            )
        )

    if not parsed.netloc:
        errors.append(
            SharingValidationError(
                code="MISSING_HOST",
                message="Base URL must include host",
                field_name="base_url",
            )
        )

    if parsed.scheme and parsed.scheme not in ("http", "https"):
        errors.append(
            SharingValidationError(
                code="INVALID_SCHEME",
                message="Base URL scheme must be http or https",
                field_name="base_url",
            )
        )

    return errors


def validate_custom_url(
    slug: str,
    min_length: int = 3,
    max_length: int = 50,
    pattern: str = r"^[A-Za-z0-9-]+$",
) -> list[SharingValidationError]:
    """
    Validate a candidate custom URL (slug).

    Only the format is checked here. Whether the slug is free is decided by
    the repository's unique constraint.
    """
    errors: list[SharingValidationError] = []

    if not slug or not slug.strip():
        errors.append(
            SharingValidationError(
                code="EMPTY_SLUG",
                message="Custom URL cannot be empty",
                field_name="slug",
            )
        )
        return errors

    if not re.fullmatch(pattern, slug):
        errors.append(
            SharingValidationError(
                code="INVALID_SLUG_CHARS",
                message="Custom URL can only contain letters, numbers, and hyphens",
                field_name="slug",
            )
        )

    if len(slug) < min_length:
        errors.append(
            SharingValidationError(
                code="SLUG_TOO_SHORT",
                message=f"Custom URL must be at least {min_length} characters long",
                field_name="slug",
            )
        )
    elif len(slug) > max_length:
        errors.append(
            SharingValidationError(
                code="SLUG_TOO_LONG",
                message=f"Custom URL must be less than {max_length} characters long",
                field_name="slug",
            )
        )

    return errors


def build_share_url(
    base_url: str,
    list_id: int | str,
    slug: str | None = None,
    path_prefix: str = DEFAULT_PATH_PREFIX,
) -> str:
    """
    Build the public URL of a list.

    Args:
        base_url: Site origin (e.g., "https://example.com")
        list_id: List ID, used when the list has no slug
        slug: Custom slug, preferred over the id
        path_prefix: Path prefix for public lists

    Returns:
        Full share URL
    """
    base = base_url.rstrip("/")

    if path_prefix.startswith("/"):
        prefix = path_prefix
    else:
        prefix = f"/{path_prefix}"

    segment = slug if slug else str(list_id)
    return f"{base}{prefix}/{segment.lstrip('/')}"


def get_shareable_url(
    lst: UrlList | Mapping[str, Any] | None,
    origin: str,
    path_prefix: str = DEFAULT_PATH_PREFIX,
) -> str | None:
    """
    Shareable URL for a list as seen by the client.

    Accepts an entity or its JSON mapping. Older clients send the slug as
    ``customUrl``; both keys are honoured. Returns None for a missing list.
    """
    if lst is None:
        return None

    if isinstance(lst, UrlList):
        return build_share_url(origin, lst.id, lst.slug, path_prefix)

    slug = lst.get("slug") or lst.get("customUrl")
    return build_share_url(origin, lst["id"], slug, path_prefix)


def generate_slug(text: str, max_length: int = 60) -> str:
    """
    Suggest a slug from free text such as a list name.

    Lowercases, drops special characters, collapses whitespace into single
    hyphens and truncates on a hyphen boundary.
    """
    if not text:
        return ""

    slug = text.lower().strip()
    slug = re.sub(r"[^\w\s-]", "", slug)
    slug = re.sub(r"[\s_]+", "-", slug)
    slug = re.sub(r"-+", "-", slug).strip("-")

    if len(slug) <= max_length:
        return slug

    truncated = slug[:max_length]
    last_hyphen = truncated.rfind("-")
    return truncated[:last_hyphen] if last_hyphen > 0 else truncated


# --- Component Entry Points ---


def run_share_url(inp: ShareUrlInput) -> ShareUrlOutput:
    """Build a share URL after validating the origin."""
    errors = validate_base_url(inp.base_url)
    if errors:
        return ShareUrlOutput(share_url=None, errors=errors, success=False)

    return ShareUrlOutput(
        share_url=build_share_url(inp.base_url, inp.list_id, inp.slug, inp.path_prefix),
        errors=[],
        success=True,
    )


def run_validate_custom_url(inp: ValidateCustomUrlInput) -> ValidateCustomUrlOutput:
    errors = validate_custom_url(inp.slug, inp.min_length, inp.max_length, inp.pattern)
    return ValidateCustomUrlOutput(errors=errors, success=not errors)


def run(
    inp: ShareUrlInput | ValidateCustomUrlInput,
) -> ShareUrlOutput | ValidateCustomUrlOutput:
    """
    Main component entry point.

    Args:
        inp: Input model (ShareUrlInput or ValidateCustomUrlInput)

    Returns:
        Output model (ShareUrlOutput or ValidateCustomUrlOutput)
    """
    if isinstance(inp, ShareUrlInput):
        return run_share_url(inp)
    elif isinstance(inp, ValidateCustomUrlInput):
        return run_validate_custom_url(inp)
    else:
        raise ValueError(f"Unknown input type: {type(inp)}")
