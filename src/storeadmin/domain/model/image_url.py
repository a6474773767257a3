"""Image URL normalisation for catalog payloads."""

from __future__ import annotations

import re

PLACEHOLDER_IMAGE = "https://placehold.co/400x400/EFEFEF/999999?text=No+Image"

_HAS_SCHEME = re.compile(r"^[a-zA-Z][a-zA-Z0-9+.-]*://")


def format_image_url(url: str | None) -> str:
    """Return *url* with ``https://`` prepended when it has no scheme.

    Blank input stays blank; callers decide whether a placeholder applies.
    """
    if not url:
        return ""
    if _HAS_SCHEME.match(url):
        return url
    return f"https://{url}"


def valid_image_url(url: str | None) -> str:
    """Like ``format_image_url`` but blank input becomes the placeholder."""
    if not url or not url.strip():
        return PLACEHOLDER_IMAGE
    return format_image_url(url.strip())
