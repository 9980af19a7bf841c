"""Process-wide mime lookups.

Thin wrappers over the default dependencies, for callers that do not
manage their own registry:

    >>> mime_for(".html")
    'text/html'
    >>> content_type_for("png")
    'image/png'
"""

from blob_mime.models import Classification, MimeRecord
from blob_mime.services.state import get_dependencies


def mime_for(ext: str | None) -> str:
    """Look up the mime type for an extension, falling back to text/plain."""
    return get_dependencies().resolver.mime_for(ext)


def content_type_for(ext: str | None) -> str:
    """Look up the Content-Type header to serve for an extension."""
    return get_dependencies().content_type_resolver.content_type_for(ext)


def is_binary(ext_or_mime: str | None) -> bool:
    """Determine if an extension or mime type is binary."""
    return get_dependencies().classifier.is_binary(ext_or_mime)


def is_attachment(ext_or_mime: str | None) -> bool:
    """Determine if an extension or mime type should be downloaded."""
    return get_dependencies().classifier.is_attachment(ext_or_mime)


def lookup_mime_type_for(ext_or_mime: str | None) -> MimeRecord | None:
    """Look up the registry record for an extension or mime type."""
    return get_dependencies().classifier.lookup_mime_type_for(ext_or_mime)


def classify(ext_or_mime: str | None) -> Classification:
    """Resolve mime type, content type and flags in one call."""
    return get_dependencies().classifier.classify(ext_or_mime)
