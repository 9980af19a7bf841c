"""Content-Type header resolution."""

from typing import Final

from blob_mime.models import ContentTypeOverrides
from blob_mime.services.resolver import Resolver
from blob_mime.utils.normalize import media_type_of

DEFAULT_CHARSET: Final[str] = "utf-8"


def with_charset(content_type: str, charset: str = DEFAULT_CHARSET) -> str:
    """Append a charset parameter to text types.

    Non-text types and values that already declare a charset are
    returned unchanged.
    """
    # Case-insensitive media type match; an explicit charset parameter is kept as is
    if media_type_of(content_type) != "text":
        return content_type
    if "charset=" in content_type.lower():
        return content_type
    return f"{content_type}; charset={charset}"


class ContentTypeResolver:
    """Resolves the Content-Type header to serve for an extension.

    Used when serving raw blobs, e.g.:

        resolver.content_type_for(".html")
        # => "text/plain; charset=utf-8" with the default substitutions
    """

    def __init__(self, resolver: Resolver, overrides: ContentTypeOverrides | None = None) -> None:
        self.resolver = resolver
        self.overrides = overrides if overrides is not None else ContentTypeOverrides()

    def substitute(self, mime_type: str, ext: str | None = None) -> str:
        """Apply content-type substitutions to a resolved mime type.

        Tries the mime type key first, then the bare extension key.
        """
        substituted = self.overrides.lookup(mime_type, ext)
        return substituted if substituted is not None else mime_type

    def content_type_for(self, ext: str | None) -> str:
        """Look up the Content-Type header value for an extension.

        Args:
            ext: Extension, optionally dot-prefixed; None or empty
                resolves like text/plain

        Returns:
            Content-Type string, with "; charset=utf-8" for text types
        """
        mime_type = self.resolver.mime_for(ext)
        return with_charset(self.substitute(mime_type, ext))
