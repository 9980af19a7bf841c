"""Base mime-type database backed by the standard library tables."""

import logging
import mimetypes
from collections.abc import Sequence
from typing import Final

from blob_mime.models import BaseMimeType
from blob_mime.utils.normalize import media_type_of, normalize_extension, simplify_type

logger = logging.getLogger(__name__)

# Non-text types whose payloads are transferred as 8bit text
EIGHT_BIT_TYPES: Final[frozenset[str]] = frozenset(
    {
        "application/ecmascript",
        "application/javascript",
        "application/json",
        "application/postscript",
        "application/rtf",
        "application/x-csh",
        "application/x-javascript",
        "application/x-latex",
        "application/x-sh",
        "application/x-shar",
        "application/x-tcl",
        "application/x-tex",
        "application/x-texinfo",
        "application/x-troff",
        "application/x-troff-man",
        "application/x-troff-me",
        "application/x-troff-ms",
        "application/x-wais-source",
        "application/xml",
        "message/rfc822",
    }
)


def default_encoding(content_type: str) -> str:
    """Infer the transfer encoding of a mime type.

    Text types are quoted-printable, structured text types (``+xml``,
    ``+json`` and known script/markup types) are 8bit, everything
    else is base64.
    """
    lowered = content_type.lower()
    if media_type_of(lowered) == "text":
        return "quoted-printable"
    if lowered in EIGHT_BIT_TYPES or lowered.endswith(("+xml", "+json")):
        return "8bit"
    return "base64"


class MimetypesRegistry:
    """Read-only base registry built from :mod:`mimetypes` data.

    Uses a private :class:`mimetypes.MimeTypes` instance so system
    files and global state never change the result.
    """

    def __init__(self, include_common: bool = True, db: mimetypes.MimeTypes | None = None):
        """Initialize the registry.

        Args:
            include_common: Also include the non-strict common types
                (after the strict ones)
            db: Optional pre-populated MimeTypes database
        """
        self.include_common = include_common
        self._db = db or mimetypes.MimeTypes()
        self._types = self._collect()
        self._by_type: dict[str, list[BaseMimeType]] = {}
        self._by_ext: dict[str, list[BaseMimeType]] = {}
        for base in self._types:
            self._by_type.setdefault(simplify_type(base.content_type), []).append(base)
            for ext in base.extensions:
                self._by_ext.setdefault(ext, []).append(base)
        logger.debug(
            "Loaded %d base types (%d extensions) from mimetypes",
            len(self._types),
            len(self._by_ext),
        )

    def _collect(self) -> list[BaseMimeType]:
        strict_flags = (True, False) if self.include_common else (True,)
        grouped: dict[str, list[str]] = {}
        for strict in strict_flags:
            for content_type, exts in self._db.types_map_inv[strict].items():
                bucket = grouped.setdefault(content_type, [])
                for ext in exts:
                    normalized = normalize_extension(ext)
                    if normalized and normalized not in bucket:
                        bucket.append(normalized)
        return [
            BaseMimeType(
                content_type=content_type,
                extensions=tuple(exts),
                encoding=default_encoding(content_type),
            )
            for content_type, exts in grouped.items()
        ]

    def types(self) -> Sequence[BaseMimeType]:
        """Return all base types in database order."""
        return tuple(self._types)

    def for_extension(self, ext: str) -> Sequence[BaseMimeType]:
        """Find candidate types for an extension."""
        return tuple(self._by_ext.get(normalize_extension(ext), ()))

    def for_type(self, content_type: str) -> Sequence[BaseMimeType]:
        """Find candidate types for a mime type string."""
        return tuple(self._by_type.get(simplify_type(content_type), ()))
