"""Protocol interfaces for dependency inversion.

The merge engine depends on these abstractions rather than on a
concrete mime database, so any source of base types can be injected.

Usage Example:

    from blob_mime.protocols import BaseRegistry
    from blob_mime.registry import build_registry

    class StaticRegistry:
        def types(self):
            return [BaseMimeType("text/x-foo", ("foo",), "quoted-printable")]

        def for_extension(self, ext):
            return [t for t in self.types() if ext in t.extensions]

        def for_type(self, content_type):
            return [t for t in self.types() if t.content_type == content_type]

    registry = build_registry(StaticRegistry(), overrides=[])

Protocol Benefits:
    - Alternate base databases (stdlib mimetypes, static tables, fakes)
    - Tests can run against tiny deterministic registries
    - Runtime checking: @runtime_checkable enables isinstance() checks
"""

from collections.abc import Sequence
from typing import Protocol, runtime_checkable

from blob_mime.models import BaseMimeType, MimeRecord


@runtime_checkable
class BaseRegistry(Protocol):
    """Protocol for the external base mime-type database.

    Implementations return zero or more candidates per query; the
    first candidate is the preferred one.
    """

    def types(self) -> Sequence[BaseMimeType]:
        """Return every known type in database order.

        Returns:
            Sequence of base types; order decides extension ties
        """
        ...

    def for_extension(self, ext: str) -> Sequence[BaseMimeType]:
        """Find candidate types for an extension.

        Args:
            ext: Normalized extension without leading dot

        Returns:
            Matching types, preferred first (may be empty)
        """
        ...

    def for_type(self, content_type: str) -> Sequence[BaseMimeType]:
        """Find candidate types for a "type/subtype" string.

        Args:
            content_type: Mime type string

        Returns:
            Matching types, preferred first (may be empty)
        """
        ...


@runtime_checkable
class MimeLookup(Protocol):
    """Protocol for the merged, read-only registry view.

    Resolver components only read through this interface.
    """

    def for_extension(self, ext: str | None) -> MimeRecord | None:
        """Return the record indexed for an extension, if any."""
        ...

    def for_type(self, content_type: str) -> MimeRecord | None:
        """Return the record for a canonical or simplified type, if any."""
        ...
