"""Data models for blob_mime."""

from blob_mime.models.classification import Classification
from blob_mime.models.overrides import (
    ContentTypeOverrides,
    MimeOverride,
    OverrideConfigError,
    parse_mime_overrides,
)
from blob_mime.models.query import ByExtension, ByMimeType, MimeQuery, parse_query
from blob_mime.models.record import BaseMimeType, MimeRecord

__all__ = [
    "BaseMimeType",
    "ByExtension",
    "ByMimeType",
    "Classification",
    "ContentTypeOverrides",
    "MimeOverride",
    "MimeQuery",
    "MimeRecord",
    "OverrideConfigError",
    "parse_mime_overrides",
    "parse_query",
]
