"""Tests for extension to mime type resolution."""

import pytest

from blob_mime.models import MimeOverride
from blob_mime.registry import build_registry
from blob_mime.services import DEFAULT_MIME_TYPE, Resolver


@pytest.fixture
def resolver(static_base) -> Resolver:
    registry = build_registry(
        static_base,
        [
            MimeOverride("text/foo", ("foo",)),
            MimeOverride("text/x-first", ("dup",)),
            MimeOverride("text/x-second", ("dup",)),
        ],
    )
    return Resolver(registry)


class TestMimeFor:
    """Test Resolver.mime_for."""

    def test_known_extension(self, resolver):
        assert resolver.mime_for("html") == "text/html"

    def test_leading_dot_optional(self, resolver):
        assert resolver.mime_for("foo") == "text/foo"
        assert resolver.mime_for(".foo") == "text/foo"

    def test_case_insensitive(self, resolver):
        assert resolver.mime_for(".HTML") == resolver.mime_for("html")

    def test_returns_simplified_type(self, resolver):
        assert resolver.mime_for("py") == "text/python"
        assert resolver.mime_for("sh") == "application/sh"

    @pytest.mark.parametrize("ext", [None, "", "."])
    def test_empty_falls_back_to_text_plain(self, resolver, ext):
        assert resolver.mime_for(ext) == "text/plain"

    def test_unknown_falls_back_to_text_plain(self, resolver):
        assert resolver.mime_for("completely-unknown-ext-xyz") == DEFAULT_MIME_TYPE

    def test_only_one_dot_stripped(self, resolver):
        assert resolver.mime_for("..html") == "text/plain"

    def test_last_merged_duplicate_wins(self, resolver):
        assert resolver.mime_for("dup") == "text/second"

    def test_custom_default(self, static_base):
        resolver = Resolver(build_registry(static_base, []), default="application/octet-stream")
        assert resolver.mime_for("nope") == "application/octet-stream"
