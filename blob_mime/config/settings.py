"""Environment-driven settings.

Every variable is read with the ``BLOB_MIME_`` prefix, e.g.
``BLOB_MIME_HTTP_PORT=9000``.
"""

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path

logger = logging.getLogger(__name__)

ENV_PREFIX = "BLOB_MIME_"
TRANSPORTS = ("http", "stdio")
TRUTHY = frozenset({"1", "true", "yes", "on"})

DATA_DIR = Path(__file__).resolve().parent.parent / "data"
DEFAULT_OVERRIDES_FILE = DATA_DIR / "mimes.yml"
DEFAULT_CONTENT_TYPES_FILE = DATA_DIR / "content_types.yml"


def _env(name: str) -> str | None:
    return os.getenv(ENV_PREFIX + name)


@dataclass
class Settings:
    """Process settings.

    Defaults serve the packaged override tables over HTTP on localhost.
    """

    overrides_file: Path = field(default=DEFAULT_OVERRIDES_FILE)
    content_types_file: Path = field(default=DEFAULT_CONTENT_TYPES_FILE)
    include_common_types: bool = field(default=True)

    transport: str = field(default="http")
    http_host: str = field(default="127.0.0.1")
    http_port: int = field(default=8000)

    log_level: str = field(default="INFO")
    log_colors: bool = field(default=True)
    log_payloads: bool = field(default=False)
    slow_threshold_ms: int = field(default=1000)
    include_traceback: bool = field(default=False)

    @classmethod
    def from_env(cls) -> "Settings":
        """Build settings from ``BLOB_MIME_*`` variables.

        Unset or unparseable values keep their defaults.
        """
        return cls(
            overrides_file=cls._get_path("OVERRIDES_FILE", DEFAULT_OVERRIDES_FILE),
            content_types_file=cls._get_path("CONTENT_TYPES_FILE", DEFAULT_CONTENT_TYPES_FILE),
            include_common_types=cls._get_bool("COMMON_TYPES", True),
            transport=cls._get_transport(),
            http_host=_env("HTTP_HOST") or "127.0.0.1",
            http_port=cls._get_int("HTTP_PORT", 8000),
            log_level=(_env("LOG_LEVEL") or "INFO").upper(),
            log_colors=cls._get_bool("LOG_COLORS", True),
            log_payloads=cls._get_bool("LOG_PAYLOADS", False),
            slow_threshold_ms=cls._get_int("SLOW_THRESHOLD_MS", 1000),
            include_traceback=cls._get_bool("INCLUDE_TRACEBACK", False),
        )

    @staticmethod
    def _get_int(name: str, default: int) -> int:
        raw = _env(name)
        if raw is None:
            return default
        try:
            return int(raw)
        except ValueError:
            logger.warning("Ignoring %s%s=%r (not an integer), using %d", ENV_PREFIX, name, raw, default)
            return default

    @staticmethod
    def _get_bool(name: str, default: bool) -> bool:
        """Anything outside 1/true/yes/on (any case) reads as False."""
        raw = _env(name)
        if raw is None:
            return default
        return raw.strip().lower() in TRUTHY

    @staticmethod
    def _get_path(name: str, default: Path) -> Path:
        raw = (_env(name) or "").strip()
        return Path(raw).expanduser() if raw else default

    @staticmethod
    def _get_transport() -> str:
        """``http`` or ``stdio``; unknown values fall back to ``http``."""
        transport = (_env("TRANSPORT") or "").strip().lower()
        return transport if transport in TRANSPORTS else "http"
