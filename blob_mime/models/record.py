"""Mime type record models."""

from dataclasses import dataclass, field

from blob_mime.utils.normalize import media_type_of, simplify_type


@dataclass(frozen=True)
class BaseMimeType:
    """A mime type as reported by the base registry."""

    content_type: str
    extensions: tuple[str, ...] = ()
    encoding: str | None = None


@dataclass(frozen=True)
class MimeRecord:
    """A registry entry wrapping base mime data with classification overrides.

    The override fields are tri-state: ``None`` means no override was
    configured and the classification is inferred instead.
    """

    canonical_type: str
    extensions: tuple[str, ...] = ()
    encoding_hint: str | None = None
    binary_override: bool | None = field(default=None)
    attachment_override: bool | None = field(default=None)

    @classmethod
    def from_base(cls, base: BaseMimeType) -> "MimeRecord":
        """Wrap a base registry type without any overrides."""
        return cls(
            canonical_type=base.content_type,
            extensions=base.extensions,
            encoding_hint=base.encoding,
        )

    @property
    def simplified_type(self) -> str:
        """Externally visible mime string (lowercase, no ``x-`` prefixes)."""
        return simplify_type(self.canonical_type)

    @property
    def media_type(self) -> str:
        """The ``type`` half of the canonical type."""
        return media_type_of(self.canonical_type)

    def is_binary(self) -> bool:
        """Whether content of this type is binary.

        Returns:
            The explicit override if set, False for text media,
            otherwise whether the base encoding is base64.
        """
        if self.binary_override is not None:
            return self.binary_override
        if self.media_type == "text":
            return False
        return self.encoding_hint == "base64"

    def is_attachment(self) -> bool:
        """Whether content of this type should be downloaded, not displayed.

        Returns:
            The explicit override if set, otherwise the binary classification.
        """
        if self.attachment_override is not None:
            return self.attachment_override
        return self.is_binary()
