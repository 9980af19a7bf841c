"""MCP tools for mime type lookups."""

import logging
from typing import Any

from blob_mime.services.state import get_dependencies

logger = logging.getLogger(__name__)


async def mime_for(extension: str = "") -> str:
    """Look up the mime type for a file extension.

    Args:
        extension: File extension, with or without a leading dot
            (e.g. "html" or ".html").

    Returns:
        Mime type such as "text/html"; unknown extensions return "text/plain".
    """
    return get_dependencies().resolver.mime_for(extension)


async def content_type_for(extension: str = "") -> str:
    """Look up the Content-Type header to serve a raw blob with.

    Args:
        extension: File extension, with or without a leading dot.

    Returns:
        Content-Type value; text types include "; charset=utf-8".
    """
    return get_dependencies().content_type_resolver.content_type_for(extension)


async def is_binary(ext_or_mime: str) -> bool:
    """Check whether an extension or mime type is binary.

    Args:
        ext_or_mime: A file extension (".png") or mime type ("image/png").

    Returns:
        True for binary content; unknown inputs are binary.
    """
    return get_dependencies().classifier.is_binary(ext_or_mime)


async def is_attachment(ext_or_mime: str) -> bool:
    """Check whether an extension or mime type should be downloaded.

    Args:
        ext_or_mime: A file extension (".zip") or mime type ("application/zip").

    Returns:
        True to serve as an attachment, False to display inline.
    """
    return get_dependencies().classifier.is_attachment(ext_or_mime)


async def classify(ext_or_mime: str) -> dict[str, Any]:
    """Resolve mime type, content type, binary and attachment in one call.

    Args:
        ext_or_mime: A file extension or mime type.

    Returns:
        Dict with query, mime_type, content_type, binary, attachment
        and disposition ("attachment" or "inline").
    """
    return get_dependencies().classifier.classify(ext_or_mime).to_dict()
