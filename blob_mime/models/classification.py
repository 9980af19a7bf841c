"""Classification result model."""

from dataclasses import asdict, dataclass
from typing import Any


@dataclass(frozen=True)
class Classification:
    """All answers for a single extension or mime type query."""

    query: str
    mime_type: str | None
    content_type: str
    binary: bool
    attachment: bool

    @property
    def disposition(self) -> str:
        """Content-Disposition type to serve with."""
        return "attachment" if self.attachment else "inline"

    def to_dict(self) -> dict[str, Any]:
        """Serialize for tool responses."""
        data = asdict(self)
        data["disposition"] = self.disposition
        return data
