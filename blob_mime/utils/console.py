"""Console log formatting with ANSI highlighting."""

import logging
import re
from datetime import datetime

COLORS = {
    "reset": "\033[0m",
    "bold": "\033[1m",
    "dim": "\033[2m",
    "green": "\033[32m",
    "yellow": "\033[33m",
    "blue": "\033[34m",
    "cyan": "\033[36m",
    "white": "\033[37m",
    "grey": "\033[90m",
    "bright_red": "\033[91m",
    "bright_green": "\033[92m",
    "bright_yellow": "\033[93m",
    "bright_blue": "\033[94m",
    "bright_magenta": "\033[95m",
    "bright_cyan": "\033[96m",
    "bg_red": "\033[41m",
}

LEVEL_STYLES = {
    logging.DEBUG: COLORS["grey"],
    logging.INFO: COLORS["bright_green"],
    logging.WARNING: COLORS["bright_yellow"],
    logging.ERROR: COLORS["bright_red"],
    logging.CRITICAL: COLORS["bg_red"] + COLORS["white"] + COLORS["bold"],
}

# Keyed by the first subpackage under blob_mime
COMPONENT_STYLES = {
    "server": COLORS["bright_cyan"],
    "registry": COLORS["bright_magenta"],
    "services": COLORS["bright_blue"],
    "tools": COLORS["blue"],
    "resources": COLORS["cyan"],
    "middleware": COLORS["yellow"],
    "config": COLORS["green"],
}

PACKAGE_PREFIX = "blob_mime."

MIME_PATTERN = re.compile(r"\b([a-z]+/[\w.+-]+)")
DURATION_PATTERN = re.compile(r"(\d+\.?\d*ms)")
COUNT_PATTERN = re.compile(r"(\d+ (?:types?|extensions?|override\(s\)|substitution\(s\)))")

HIGHLIGHTS = (
    (MIME_PATTERN, COLORS["bright_blue"]),
    (DURATION_PATTERN, COLORS["bright_yellow"]),
    (COUNT_PATTERN, COLORS["cyan"]),
)


class ColorfulFormatter(logging.Formatter):
    """Formats records as ``time | level | component | message`` columns.

    Mime types, durations and registry counts in the message are
    highlighted when colors are enabled.
    """

    def __init__(self, use_colors: bool = True) -> None:
        super().__init__()
        self.use_colors = use_colors

    def paint(self, text: str, style: str) -> str:
        """Wrap text in an ANSI style, or return it as is without colors."""
        if not self.use_colors or not style:
            return text
        return f"{style}{text}{COLORS['reset']}"

    @staticmethod
    def component_of(name: str) -> str:
        """Logger name relative to the package root."""
        if name.startswith(PACKAGE_PREFIX):
            return name[len(PACKAGE_PREFIX) :]
        return name

    def _columns(self, record: logging.LogRecord) -> list[str]:
        created = datetime.fromtimestamp(record.created)
        component = self.component_of(record.name)
        component_style = COMPONENT_STYLES.get(component.split(".", 1)[0], COLORS["white"])
        return [
            self.paint(f"{created:%H:%M:%S}.{int(record.msecs):03d} {created:%m/%d}", COLORS["dim"]),
            self.paint(f"{record.levelname:<8}", LEVEL_STYLES.get(record.levelno, COLORS["white"])),
            self.paint(f"{component:<20}", component_style),
            self.highlight(record.getMessage()),
        ]

    def highlight(self, message: str) -> str:
        """Apply the message highlight rules."""
        if not self.use_colors:
            return message
        for pattern, style in HIGHLIGHTS:
            message = pattern.sub(lambda m, s=style: self.paint(m.group(1), s), message)
        return message

    def format(self, record: logging.LogRecord) -> str:
        sep = f" {self.paint('|', COLORS['dim'])} "
        line = sep.join(self._columns(record))
        if record.exc_info:
            line = f"{line}\n{self.formatException(record.exc_info)}"
        return line


# (keywords, marker, style), first match wins
MARKERS = (
    (("starting", "ready", "built"), ">>>", COLORS["bright_green"]),
    (("shutting down", "shutdown"), "<<<", COLORS["bright_red"]),
    (("error", "failed"), "!!", COLORS["bright_red"]),
    (("slow",), "!", COLORS["bright_yellow"]),
    (("loaded", "merged"), "+", COLORS["bright_cyan"]),
)


class RequestFormatter(ColorfulFormatter):
    """ColorfulFormatter with a lifecycle marker column for colored output."""

    def marker_for(self, message: str) -> tuple[str, str]:
        lowered = message.lower()
        for keywords, marker, style in MARKERS:
            if any(keyword in lowered for keyword in keywords):
                return marker, style
        return "", ""

    def format(self, record: logging.LogRecord) -> str:
        line = super().format(record)
        if not self.use_colors:
            return line

        marker, style = self.marker_for(record.getMessage())
        return f"{self.paint(f'{marker:<3}', style)} {line}"
