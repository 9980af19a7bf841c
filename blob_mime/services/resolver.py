"""Extension to mime type resolution."""

from typing import Final

from blob_mime.protocols import MimeLookup

DEFAULT_MIME_TYPE: Final[str] = "text/plain"


class Resolver:
    """Resolves extensions to simplified mime type strings.

    Unknown extensions fall back to text/plain so unlabelled files are
    displayed as text.
    """

    def __init__(self, registry: MimeLookup, default: str = DEFAULT_MIME_TYPE) -> None:
        self.registry = registry
        self.default = default

    def mime_for(self, ext: str | None) -> str:
        """Look up the mime type for an extension.

        Args:
            ext: Extension, optionally dot-prefixed ("html", ".html").
                None or empty resolves to the default.

        Returns:
            Simplified mime type, e.g. "text/html", or the default
        """
        record = self.registry.for_extension(ext)
        if record is None:
            return self.default
        return record.simplified_type
