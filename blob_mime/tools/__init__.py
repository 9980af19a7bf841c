"""MCP tools for blob_mime."""

from blob_mime.tools.mime import (
    classify,
    content_type_for,
    is_attachment,
    is_binary,
    mime_for,
)

__all__ = ["classify", "content_type_for", "is_attachment", "is_binary", "mime_for"]
