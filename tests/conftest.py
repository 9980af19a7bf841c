"""Shared fixtures for blob_mime tests."""

from collections.abc import Iterator, Sequence

import pytest

from blob_mime.models import BaseMimeType
from blob_mime.services.state import reset_state


class StaticRegistry:
    """Deterministic in-memory base registry."""

    def __init__(self, types: Sequence[BaseMimeType]) -> None:
        self._types = list(types)

    def types(self) -> Sequence[BaseMimeType]:
        return tuple(self._types)

    def for_extension(self, ext: str) -> Sequence[BaseMimeType]:
        return tuple(t for t in self._types if ext in t.extensions)

    def for_type(self, content_type: str) -> Sequence[BaseMimeType]:
        return tuple(t for t in self._types if t.content_type == content_type)


BASE_TYPES = [
    BaseMimeType("text/plain", ("txt", "text"), "quoted-printable"),
    BaseMimeType("text/html", ("html", "htm"), "quoted-printable"),
    BaseMimeType("text/x-python", ("py",), "quoted-printable"),
    BaseMimeType("image/png", ("png",), "base64"),
    BaseMimeType("image/jpeg", ("jpg", "jpeg"), "base64"),
    BaseMimeType("image/jpg", ("jpg",), "base64"),
    BaseMimeType("application/json", ("json",), "8bit"),
    BaseMimeType("application/x-sh", ("sh",), "8bit"),
    BaseMimeType("application/octet-stream", ("bin", "exe"), "base64"),
    BaseMimeType("application/pdf", ("pdf",), "base64"),
]


@pytest.fixture
def static_base() -> StaticRegistry:
    """Small base registry with known contents."""
    return StaticRegistry(BASE_TYPES)


@pytest.fixture(autouse=True)
def clean_state() -> Iterator[None]:
    """Start and end every test without global dependencies."""
    reset_state()
    yield
    reset_state()
