"""Mime type, content type and disposition resolution for served blobs."""

from blob_mime.mime import (
    classify,
    content_type_for,
    is_attachment,
    is_binary,
    lookup_mime_type_for,
    mime_for,
)
from blob_mime.models import Classification, MimeRecord, OverrideConfigError

__all__ = [
    "Classification",
    "MimeRecord",
    "OverrideConfigError",
    "classify",
    "content_type_for",
    "is_attachment",
    "is_binary",
    "lookup_mime_type_for",
    "mime_for",
]
