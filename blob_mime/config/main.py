"""Application configuration.

Delegates to specialized components:
- Settings: Environment variables
- OverrideLoader: Reads the override tables
"""

import logging
from dataclasses import dataclass, field
from pathlib import Path

from blob_mime.config.loader import OverrideLoader
from blob_mime.config.settings import Settings
from blob_mime.models import ContentTypeOverrides, MimeOverride

logger = logging.getLogger(__name__)


@dataclass
class Config:
    """Application configuration.

    Aggregates environment settings and the override tables.
    """

    settings: Settings = field(default_factory=Settings)
    loader: OverrideLoader = field(default=None)  # type: ignore[assignment]
    _mime_overrides: list[MimeOverride] | None = field(default=None, init=False, repr=False)
    _content_types: ContentTypeOverrides | None = field(default=None, init=False, repr=False)

    def __post_init__(self) -> None:
        if self.loader is None:
            self.loader = OverrideLoader(
                overrides_path=self.settings.overrides_file,
                content_types_path=self.settings.content_types_file,
            )

    @classmethod
    def from_env(cls) -> "Config":
        """Create config from environment.

        Returns:
            Configured instance with all components initialized
        """
        return cls(settings=Settings.from_env())

    @classmethod
    def from_files(
        cls,
        overrides_path: Path | str | None = None,
        content_types_path: Path | str | None = None,
        include_common_types: bool = True,
    ) -> "Config":
        """Create config for explicit override files.

        Args:
            overrides_path: Mime override YAML (None for no overrides)
            content_types_path: Content-type YAML (None for no substitutions)
            include_common_types: Include non-strict base types

        Returns:
            Configured instance with default settings otherwise
        """
        settings = Settings(include_common_types=include_common_types)
        loader = OverrideLoader(
            overrides_path=overrides_path,
            content_types_path=content_types_path,
        )
        return cls(settings=settings, loader=loader)

    def get_mime_overrides(self) -> list[MimeOverride]:
        """Get the extension/classification overrides.

        Lazy loads and caches on first call.
        """
        if self._mime_overrides is None:
            self._mime_overrides = self.loader.load_mime_overrides()
        return self._mime_overrides

    def get_content_types(self) -> ContentTypeOverrides:
        """Get the content-type substitutions.

        Lazy loads and caches on first call.
        """
        if self._content_types is None:
            self._content_types = self.loader.load_content_types()
        return self._content_types

    # Delegate to settings for convenience
    @property
    def include_common_types(self) -> bool:
        """Whether non-strict base types are included."""
        return self.settings.include_common_types

    @property
    def transport(self) -> str:
        """Transport type (http or stdio)."""
        return self.settings.transport

    @property
    def http_host(self) -> str:
        """HTTP server bind address."""
        return self.settings.http_host

    @property
    def http_port(self) -> int:
        """HTTP server port."""
        return self.settings.http_port

    @property
    def log_payloads(self) -> bool:
        """Whether to log request/response payloads."""
        return self.settings.log_payloads

    @property
    def slow_threshold_ms(self) -> int:
        """Slow request warning threshold in milliseconds."""
        return self.settings.slow_threshold_ms

    @property
    def include_traceback(self) -> bool:
        """Whether error logs include tracebacks."""
        return self.settings.include_traceback
