"""Dependency injection container for blob_mime.

Everything is built once here and then shared read-only.
"""

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from blob_mime.config import Config
from blob_mime.models import ContentTypeOverrides, MimeOverride, parse_mime_overrides
from blob_mime.protocols import BaseRegistry
from blob_mime.registry import MimeRegistry, MimetypesRegistry, build_registry
from blob_mime.services.classifier import Classifier
from blob_mime.services.content_type import ContentTypeResolver
from blob_mime.services.resolver import Resolver

logger = logging.getLogger(__name__)


@dataclass
class Dependencies:
    """Container for the merged registry and the resolvers built on it.

    Example:
        deps = Dependencies.create()
        deps.resolver.mime_for(".html")
    """

    config: Config
    registry: MimeRegistry
    content_types: ContentTypeOverrides
    overrides: tuple[MimeOverride, ...] = field(default=())
    resolver: Resolver = field(init=False)
    content_type_resolver: ContentTypeResolver = field(init=False)
    classifier: Classifier = field(init=False)

    def __post_init__(self) -> None:
        self.resolver = Resolver(self.registry)
        self.content_type_resolver = ContentTypeResolver(self.resolver, self.content_types)
        self.classifier = Classifier(self.registry, self.content_type_resolver)

    @classmethod
    def create(cls) -> "Dependencies":
        """Create dependencies with configuration from the environment.

        Returns:
            Initialized Dependencies instance

        Raises:
            OverrideConfigError: If an override table is malformed
        """
        return cls.from_config(Config.from_env())

    @classmethod
    def from_config(
        cls,
        config: Config,
        base: BaseRegistry | None = None,
    ) -> "Dependencies":
        """Create dependencies with custom configuration.

        Args:
            config: Config providing the override tables
            base: Base registry (default: stdlib mimetypes data)

        Returns:
            Dependencies with the registry merged from config
        """
        if base is None:
            base = MimetypesRegistry(include_common=config.include_common_types)
        overrides = tuple(config.get_mime_overrides())
        content_types = config.get_content_types()
        return cls(
            config=config,
            registry=build_registry(base, overrides),
            content_types=content_types,
            overrides=overrides,
        )

    @classmethod
    def from_tables(
        cls,
        mime_overrides: Mapping[Any, Any] | None = None,
        content_types: Mapping[Any, Any] | None = None,
        base: BaseRegistry | None = None,
    ) -> "Dependencies":
        """Create dependencies from already-parsed override mappings.

        Args:
            mime_overrides: Mime type -> {extensions, binary, attachment}
            content_types: Mime type or extension -> Content-Type
            base: Base registry (default: stdlib mimetypes data)

        Raises:
            OverrideConfigError: If a table is malformed
        """
        config = Config.from_files(None, None)
        if base is None:
            base = MimetypesRegistry(include_common=config.include_common_types)
        overrides = tuple(parse_mime_overrides(mime_overrides))
        return cls(
            config=config,
            registry=build_registry(base, overrides),
            content_types=ContentTypeOverrides.from_mapping(content_types),
            overrides=overrides,
        )
