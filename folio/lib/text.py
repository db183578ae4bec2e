"""Text helpers shared by the resource services."""

import re

_INVALID_CHARS = re.compile(r"[^a-z0-9\s-]")
_WHITESPACE = re.compile(r"\s+")
_DASHES = re.compile(r"-+")


def slugify(value: str) -> str:
    """Turn a display name into a URL slug.

    >>> slugify("  Brand Identity & Print ")
    'brand-identity-print'
    """
    slug = _INVALID_CHARS.sub("", value.lower())
    slug = _WHITESPACE.sub("-", slug.strip())
    slug = _DASHES.sub("-", slug)
    return slug.strip("-")
