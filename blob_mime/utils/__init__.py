"""Utilities for blob_mime."""

from blob_mime.utils.console import ColorfulFormatter, RequestFormatter
from blob_mime.utils.normalize import (
    looks_like_mime_type,
    media_type_of,
    normalize_extension,
    simplify_type,
)

__all__ = [
    "ColorfulFormatter",
    "looks_like_mime_type",
    "media_type_of",
    "normalize_extension",
    "RequestFormatter",
    "simplify_type",
]
