"""Override table models.

Two tables customize the base registry:

- mime overrides: mime type -> {extensions, binary, attachment}
- content-type overrides: mime type or extension -> literal Content-Type
"""

from collections.abc import Iterator, Mapping
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Final

from blob_mime.utils.normalize import (
    MIME_KEY_PATTERN,
    looks_like_mime_type,
    normalize_extension,
    simplify_type,
)

ALLOWED_OVERRIDE_KEYS: Final[frozenset[str]] = frozenset({"extensions", "binary", "attachment"})


class OverrideConfigError(ValueError):
    """Malformed override configuration."""

    pass


def _validate_type_key(type_key: Any) -> str:
    if not isinstance(type_key, str) or not MIME_KEY_PATTERN.match(type_key.strip()):
        raise OverrideConfigError(f"Invalid mime type key: {type_key!r}")
    return type_key.strip()


def _validate_flag(type_key: str, name: str, value: Any) -> bool:
    # bool only; 0/1 and "yes" are rejected
    if not isinstance(value, bool):
        raise OverrideConfigError(
            f"{type_key}: '{name}' must be true or false, got {value!r}"
        )
    return value


def _validate_extensions(type_key: str, value: Any) -> tuple[str, ...]:
    if not isinstance(value, (list, tuple)):
        raise OverrideConfigError(
            f"{type_key}: 'extensions' must be a list, got {type(value).__name__}"
        )
    extensions: list[str] = []
    for ext in value:
        if not isinstance(ext, str):
            raise OverrideConfigError(f"{type_key}: extension {ext!r} is not a string")
        normalized = normalize_extension(ext)
        if not normalized:
            raise OverrideConfigError(f"{type_key}: empty extension")
        if normalized not in extensions:
            extensions.append(normalized)
    return tuple(extensions)


@dataclass(frozen=True)
class MimeOverride:
    """One entry of the extension/classification override table."""

    type_key: str
    extensions: tuple[str, ...] = ()
    binary: bool | None = None
    attachment: bool | None = None

    @classmethod
    def from_mapping(cls, type_key: Any, options: Any) -> "MimeOverride":
        """Validate and build an override from parsed config data.

        Args:
            type_key: Mime type the entry applies to
            options: Mapping with optional extensions/binary/attachment keys,
                or None for an entry with no options

        Returns:
            Parsed override

        Raises:
            OverrideConfigError: If the entry is malformed
        """
        key = _validate_type_key(type_key)
        if options is None:
            return cls(type_key=key)
        if not isinstance(options, Mapping):
            raise OverrideConfigError(
                f"{key}: options must be a mapping, got {type(options).__name__}"
            )

        unknown = set(options) - ALLOWED_OVERRIDE_KEYS
        if unknown:
            raise OverrideConfigError(
                f"{key}: unknown option(s): {', '.join(sorted(map(str, unknown)))}"
            )

        return cls(
            type_key=key,
            extensions=_validate_extensions(key, options.get("extensions", [])),
            binary=_validate_flag(key, "binary", options["binary"]) if "binary" in options else None,
            attachment=(
                _validate_flag(key, "attachment", options["attachment"])
                if "attachment" in options
                else None
            ),
        )


def parse_mime_overrides(data: Mapping[Any, Any] | None) -> list[MimeOverride]:
    """Parse the extension/classification override table.

    Entries are returned in table order, which is also merge order.

    Raises:
        OverrideConfigError: If the table or any entry is malformed
    """
    if data is None:
        return []
    if not isinstance(data, Mapping):
        raise OverrideConfigError(
            f"Mime override table must be a mapping, got {type(data).__name__}"
        )
    return [MimeOverride.from_mapping(key, options) for key, options in data.items()]


def _content_type_key(key: str) -> str:
    if looks_like_mime_type(key):
        return simplify_type(key)
    return normalize_extension(key)


class ContentTypeOverrides(Mapping[str, str]):
    """Read-only table of literal Content-Type substitutions.

    Mime type keys and bare extension keys share one namespace. Mime
    keys are stored simplified, extension keys normalized.
    """

    def __init__(self, entries: Mapping[str, str] | None = None) -> None:
        table: dict[str, str] = {}
        for key, value in (entries or {}).items():
            table[_content_type_key(key)] = value
        self._table = MappingProxyType(table)

    @classmethod
    def from_mapping(cls, data: Mapping[Any, Any] | None) -> "ContentTypeOverrides":
        """Validate and build the table from parsed config data.

        Raises:
            OverrideConfigError: If a key or value is not a non-empty string
        """
        if data is None:
            return cls()
        if not isinstance(data, Mapping):
            raise OverrideConfigError(
                f"Content-type override table must be a mapping, got {type(data).__name__}"
            )
        for key, value in data.items():
            if not isinstance(key, str) or not key.strip():
                raise OverrideConfigError(f"Invalid content-type override key: {key!r}")
            if not isinstance(value, str) or not value.strip():
                raise OverrideConfigError(f"{key}: content type must be a string, got {value!r}")
        return cls(data)

    def lookup(self, mime_type: str, ext: str | None) -> str | None:
        """Find a substitution, trying the mime type first, then the extension."""
        found = self._table.get(simplify_type(mime_type))
        if found is None:
            ext_key = normalize_extension(ext)
            if ext_key:
                found = self._table.get(ext_key)
        return found

    def __getitem__(self, key: str) -> str:
        return self._table[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._table)

    def __len__(self) -> int:
        return len(self._table)

    def __repr__(self) -> str:
        return f"ContentTypeOverrides({dict(self._table)!r})"
