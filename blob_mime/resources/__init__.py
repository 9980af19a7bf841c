"""MCP resources for blob_mime."""

from blob_mime.resources.mime import extension_resource, list_overrides_resource

__all__ = ["extension_resource", "list_overrides_resource"]
