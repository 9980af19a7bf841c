"""Override merge engine and the merged read-only registry.

The builder is used once at startup:

    builder = RegistryBuilder(MimetypesRegistry())
    builder.merge(overrides)
    registry = builder.build()

After ``build()`` the registry is immutable and safe to share
between any number of concurrent readers.
"""

import logging
from collections.abc import Iterable, Iterator, Mapping, Sequence
from dataclasses import replace
from types import MappingProxyType
from typing import Any

from blob_mime.models import MimeOverride, MimeRecord
from blob_mime.protocols import BaseRegistry
from blob_mime.registry.base import default_encoding
from blob_mime.utils.normalize import normalize_extension, simplify_type

logger = logging.getLogger(__name__)


class MimeRegistry:
    """Unified, read-only, indexed view of base types plus overrides."""

    def __init__(
        self,
        records: Sequence[MimeRecord],
        extension_index: Mapping[str, str],
    ) -> None:
        """Initialize the registry.

        Args:
            records: Records in registry order (canonical types unique)
            extension_index: Normalized extension -> canonical type
        """
        by_canonical: dict[str, MimeRecord] = {}
        by_simplified: dict[str, MimeRecord] = {}
        for record in records:
            by_canonical.setdefault(record.canonical_type, record)
            by_simplified.setdefault(record.simplified_type, record)

        by_extension: dict[str, MimeRecord] = {}
        for ext, canonical in extension_index.items():
            if canonical not in by_canonical:
                raise ValueError(f"Extension '{ext}' indexed to unknown type {canonical}")
            by_extension[ext] = by_canonical[canonical]

        self._by_canonical = MappingProxyType(by_canonical)
        self._by_simplified = MappingProxyType(by_simplified)
        self._by_extension = MappingProxyType(by_extension)

    @property
    def records(self) -> tuple[MimeRecord, ...]:
        """All records in registry order."""
        return tuple(self._by_canonical.values())

    @property
    def extension_index(self) -> Mapping[str, MimeRecord]:
        """Read-only extension -> record index."""
        return self._by_extension

    def for_extension(self, ext: str | None) -> MimeRecord | None:
        """Return the record indexed for an extension.

        Args:
            ext: Extension, optionally dot-prefixed; None is treated as empty

        Returns:
            Indexed record or None
        """
        key = normalize_extension(ext)
        if not key:
            return None
        return self._by_extension.get(key)

    def for_type(self, content_type: str) -> MimeRecord | None:
        """Return the record for a canonical or simplified mime type.

        An exact canonical match wins over a simplified match.
        """
        if not content_type:
            return None
        content_type = content_type.strip()
        record = self._by_canonical.get(content_type)
        if record is None:
            record = self._by_simplified.get(simplify_type(content_type))
        return record

    def __len__(self) -> int:
        return len(self._by_canonical)

    def __iter__(self) -> Iterator[MimeRecord]:
        return iter(self._by_canonical.values())

    def __contains__(self, content_type: Any) -> bool:
        return isinstance(content_type, str) and self.for_type(content_type) is not None

    def __repr__(self) -> str:
        return (
            f"MimeRegistry(types={len(self._by_canonical)}, "
            f"extensions={len(self._by_extension)})"
        )


class RegistryBuilder:
    """Merges override entries into a base registry.

    Not thread safe; run once during initialization and then call
    :meth:`build` to get the shared immutable registry.
    """

    def __init__(self, base: BaseRegistry) -> None:
        """Seed the working set from the base registry.

        Base extensions are indexed first-match in base order.

        Args:
            base: Base mime-type database
        """
        self._base = base
        self._records: dict[str, MimeRecord] = {}
        self._simplified: dict[str, str] = {}
        self._extension_index: dict[str, str] = {}
        self._merged = 0

        for base_type in base.types():
            record = MimeRecord.from_base(base_type)
            if record.canonical_type in self._records:
                continue
            self._store(record)
            for ext in record.extensions:
                self._extension_index.setdefault(ext, record.canonical_type)

    def _store(self, record: MimeRecord) -> None:
        self._records[record.canonical_type] = record
        self._simplified.setdefault(record.simplified_type, record.canonical_type)

    def _find(self, type_key: str) -> MimeRecord | None:
        """Find the working record for a type key.

        Checks the working set (so earlier merges are visible), then
        asks the base registry directly.
        """
        record = self._records.get(type_key)
        if record is not None:
            return record

        canonical = self._simplified.get(simplify_type(type_key))
        if canonical is not None:
            return self._records[canonical]

        candidates = self._base.for_type(type_key)
        if candidates:
            record = MimeRecord.from_base(candidates[0])
            return self._records.get(record.canonical_type, record)
        return None

    def merge_one(self, override: MimeOverride) -> MimeRecord:
        """Apply a single override entry.

        Args:
            override: Parsed override entry

        Returns:
            The record as it stands after the merge
        """
        record = self._find(override.type_key)
        if record is None:
            logger.debug("Registering new type %s", override.type_key)
            record = MimeRecord(
                canonical_type=override.type_key,
                encoding_hint=default_encoding(override.type_key),
            )

        extensions = list(record.extensions)
        for ext in override.extensions:
            if ext not in extensions:
                extensions.append(ext)

        changes: dict[str, Any] = {"extensions": tuple(extensions)}
        if override.binary is not None:
            changes["binary_override"] = override.binary
        if override.attachment is not None:
            changes["attachment_override"] = override.attachment
        record = replace(record, **changes)

        self._store(record)
        for ext in record.extensions:
            previous = self._extension_index.get(ext)
            if previous is not None and previous != record.canonical_type:
                logger.debug("Extension '%s' moved from %s to %s", ext, previous, record.canonical_type)
            self._extension_index[ext] = record.canonical_type

        self._merged += 1
        logger.debug(
            "Merged %s: extensions=%s binary=%s attachment=%s",
            record.canonical_type,
            ",".join(record.extensions) or "-",
            record.binary_override,
            record.attachment_override,
        )
        return record

    def merge(self, overrides: Iterable[MimeOverride]) -> "RegistryBuilder":
        """Apply override entries in order.

        Returns:
            The builder, for chaining
        """
        for override in overrides:
            self.merge_one(override)
        return self

    def build(self) -> MimeRegistry:
        """Freeze the working set into an immutable registry."""
        registry = MimeRegistry(
            records=list(self._records.values()),
            extension_index=dict(self._extension_index),
        )
        logger.info(
            "Built mime registry: %d types, %d extensions, %d override(s) merged",
            len(registry),
            len(registry.extension_index),
            self._merged,
        )
        return registry


def build_registry(base: BaseRegistry, overrides: Iterable[MimeOverride]) -> MimeRegistry:
    """Merge overrides into a base registry and return the frozen result."""
    return RegistryBuilder(base).merge(overrides).build()
