"""Tagged lookup queries."""

from dataclasses import dataclass

from blob_mime.utils.normalize import looks_like_mime_type, normalize_extension


@dataclass(frozen=True)
class ByExtension:
    """Look up by file extension (normalized, no leading dot)."""

    extension: str


@dataclass(frozen=True)
class ByMimeType:
    """Look up by declared "type/subtype" string."""

    mime_type: str


MimeQuery = ByExtension | ByMimeType


def parse_query(ext_or_mime: str | None) -> MimeQuery:
    """Classify a query string as an extension or a mime type.

    Strings containing ``word/word`` are mime types; anything else,
    including None, is an extension.
    """
    if ext_or_mime and looks_like_mime_type(ext_or_mime):
        return ByMimeType(mime_type=ext_or_mime.strip())
    return ByExtension(extension=normalize_extension(ext_or_mime))
