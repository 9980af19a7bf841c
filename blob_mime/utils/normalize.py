"""Extension and mime-type string normalization."""

import re
from typing import Final

# Declared media type, e.g. "text/plain" or "image/svg+xml"
MIME_TYPE_PATTERN: Final[re.Pattern[str]] = re.compile(r"\w+/\w+")

# Full "type/subtype" shape accepted for override keys
MIME_KEY_PATTERN: Final[re.Pattern[str]] = re.compile(r"^[\w.+-]+/[\w.+-]+$")

# Unregistered-type prefix stripped when simplifying
UNREGISTERED_PREFIX: Final[re.Pattern[str]] = re.compile(r"^x-")


def normalize_extension(ext: str | None) -> str:
    """Normalize an extension for index lookups.

    Strips surrounding whitespace, lowercases, and removes at most
    one leading dot. ``None`` is treated as an empty string.

    Args:
        ext: Extension such as "html", ".HTML" or None

    Returns:
        Normalized extension (may be empty)
    """
    if not ext:
        return ""
    ext = ext.strip().lower()
    if ext.startswith("."):
        ext = ext[1:]
    return ext


def looks_like_mime_type(value: str | None) -> bool:
    """Check whether a query string is a declared media type."""
    return bool(value) and MIME_TYPE_PATTERN.search(value) is not None


def simplify_type(content_type: str) -> str:
    """Return the simplified form of a mime type.

    Lowercases both halves and drops ``x-`` prefixes, so
    "text/x-Python" becomes "text/python". Parameters after ";"
    are discarded.

    Args:
        content_type: Mime type string

    Returns:
        Simplified "type/subtype" string
    """
    base = content_type.split(";", 1)[0].strip().lower()
    if "/" not in base:
        return UNREGISTERED_PREFIX.sub("", base)
    media, subtype = base.split("/", 1)
    return f"{UNREGISTERED_PREFIX.sub('', media)}/{UNREGISTERED_PREFIX.sub('', subtype)}"


def media_type_of(content_type: str) -> str:
    """Return the media type ("text", "image", ...) of a mime type."""
    return content_type.split("/", 1)[0].strip().lower()
