"""Binary and attachment classification."""

import logging
from typing import Final

from blob_mime.models import ByMimeType, Classification, MimeQuery, MimeRecord, parse_query
from blob_mime.protocols import MimeLookup
from blob_mime.services.content_type import ContentTypeResolver, with_charset
from blob_mime.services.resolver import DEFAULT_MIME_TYPE

logger = logging.getLogger(__name__)

UNKNOWN_CONTENT_TYPE: Final[str] = "application/octet-stream"


class Classifier:
    """Classifies extensions and mime types as binary and/or attachment.

    Unknown inputs are treated as binary attachments so unrecognized
    data is downloaded rather than rendered.
    """

    def __init__(
        self,
        registry: MimeLookup,
        content_types: ContentTypeResolver | None = None,
    ) -> None:
        self.registry = registry
        self.content_types = content_types

    def lookup(self, query: MimeQuery) -> MimeRecord | None:
        """Run a tagged query against the registry."""
        if isinstance(query, ByMimeType):
            return self.registry.for_type(query.mime_type)
        return self.registry.for_extension(query.extension)

    def lookup_mime_type_for(self, ext_or_mime: str | None) -> MimeRecord | None:
        """Look up the record for an extension or mime type.

        Args:
            ext_or_mime: A file extension (".txt") or mime type ("text/plain")

        Returns:
            Matching record or None
        """
        return self.lookup(parse_query(ext_or_mime))

    def is_binary(self, ext_or_mime: str | None) -> bool:
        """Determine if an extension or mime type is binary."""
        record = self.lookup_mime_type_for(ext_or_mime)
        return record is None or record.is_binary()

    def is_attachment(self, ext_or_mime: str | None) -> bool:
        """Determine if an extension or mime type is an attachment.

        Attachments are files that should be downloaded rather than
        displayed in the browser, i.e. served with
        ``Content-Disposition: attachment``. Attachments are generally
        binary, but non-attachments are not necessarily text: images
        display inline.
        """
        record = self.lookup_mime_type_for(ext_or_mime)
        return record is None or record.is_attachment()

    def classify(self, ext_or_mime: str | None) -> Classification:
        """Resolve every classification for a query in one pass.

        Args:
            ext_or_mime: A file extension or mime type

        Returns:
            Classification with mime type, content type and flags
        """
        query = parse_query(ext_or_mime)
        record = self.lookup(query)
        mime_type = record.simplified_type if record is not None else None

        if isinstance(query, ByMimeType):
            if mime_type is None:
                content_type = UNKNOWN_CONTENT_TYPE
            elif self.content_types is None:
                content_type = with_charset(mime_type)
            else:
                content_type = with_charset(self.content_types.substitute(mime_type))
        elif self.content_types is not None:
            content_type = self.content_types.content_type_for(query.extension)
        else:
            content_type = with_charset(mime_type or DEFAULT_MIME_TYPE)

        classification = Classification(
            query=ext_or_mime or "",
            mime_type=mime_type,
            content_type=content_type,
            binary=record is None or record.is_binary(),
            attachment=record is None or record.is_attachment(),
        )
        logger.debug("Classified %r: %s", classification.query, classification)
        return classification
