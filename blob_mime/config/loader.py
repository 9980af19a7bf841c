"""Override table loader.

Reads the extension/classification table (mimes.yml) and the
content-type substitution table (content_types.yml) into typed models.
Any problem is fatal: a half-loaded override set is never returned.
"""

import logging
from pathlib import Path
from typing import Any

import yaml

from blob_mime.models import (
    ContentTypeOverrides,
    MimeOverride,
    OverrideConfigError,
    parse_mime_overrides,
)

logger = logging.getLogger(__name__)


class OverrideLoader:
    """Loader for the two static override tables."""

    def __init__(
        self,
        overrides_path: Path | str | None = None,
        content_types_path: Path | str | None = None,
    ):
        """Initialize the loader.

        Args:
            overrides_path: YAML file mapping mime type -> options
                (None to load no mime overrides)
            content_types_path: YAML file mapping mime type or extension
                -> Content-Type (None to load no substitutions)
        """
        self.overrides_path = Path(overrides_path) if overrides_path else None
        self.content_types_path = Path(content_types_path) if content_types_path else None

    @staticmethod
    def read_yaml(path: Path) -> Any:
        """Read and parse a YAML file.

        Raises:
            OverrideConfigError: If the file is missing, unreadable or invalid
        """
        if not path.exists():
            raise OverrideConfigError(f"Override file not found: {path}")

        try:
            content = path.read_text(encoding="utf-8")
            logger.debug("Reading override table from %s", path)
        except (OSError, UnicodeDecodeError) as e:
            raise OverrideConfigError(f"Cannot read override file {path}: {e}") from e

        try:
            return yaml.safe_load(content)
        except yaml.YAMLError as e:
            raise OverrideConfigError(f"Invalid YAML in {path}: {e}") from e

    def load_mime_overrides(self) -> list[MimeOverride]:
        """Load the extension/classification overrides.

        Returns:
            Override entries in file order

        Raises:
            OverrideConfigError: If the file or any entry is malformed
        """
        if self.overrides_path is None:
            return []
        try:
            overrides = parse_mime_overrides(self.read_yaml(self.overrides_path))
        except OverrideConfigError as e:
            logger.error("Failed to load mime overrides: %s", e)
            raise
        logger.info("Loaded %d mime override(s) from %s", len(overrides), self.overrides_path)
        return overrides

    def load_content_types(self) -> ContentTypeOverrides:
        """Load the content-type substitution table.

        Raises:
            OverrideConfigError: If the file or any entry is malformed
        """
        if self.content_types_path is None:
            return ContentTypeOverrides()
        try:
            table = ContentTypeOverrides.from_mapping(self.read_yaml(self.content_types_path))
        except OverrideConfigError as e:
            logger.error("Failed to load content-type overrides: %s", e)
            raise
        logger.info(
            "Loaded %d content-type substitution(s) from %s",
            len(table),
            self.content_types_path,
        )
        return table
