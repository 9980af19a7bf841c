"""Tests for the mimetypes-backed base registry."""

import mimetypes

import pytest

from blob_mime.protocols import BaseRegistry
from blob_mime.registry import MimetypesRegistry, default_encoding


@pytest.fixture(scope="module")
def registry() -> MimetypesRegistry:
    """Registry over the default stdlib tables."""
    return MimetypesRegistry()


class TestDefaultEncoding:
    """Test transfer encoding inference."""

    def test_text_is_quoted_printable(self):
        assert default_encoding("text/plain") == "quoted-printable"
        assert default_encoding("TEXT/HTML") == "quoted-printable"

    def test_known_eight_bit_types(self):
        assert default_encoding("application/json") == "8bit"
        assert default_encoding("application/x-sh") == "8bit"

    def test_structured_suffixes_are_eight_bit(self):
        assert default_encoding("image/svg+xml") == "8bit"
        assert default_encoding("application/ld+json") == "8bit"

    def test_everything_else_is_base64(self):
        assert default_encoding("image/png") == "base64"
        assert default_encoding("application/octet-stream") == "base64"


class TestMimetypesRegistry:
    """Test lookups against stdlib data."""

    def test_satisfies_protocol(self, registry):
        assert isinstance(registry, BaseRegistry)

    def test_for_extension(self, registry):
        candidates = registry.for_extension("png")
        assert candidates[0].content_type == "image/png"
        assert candidates[0].encoding == "base64"

    def test_for_extension_normalizes(self, registry):
        assert registry.for_extension(".HTML")[0].content_type == "text/html"

    def test_for_extension_unknown(self, registry):
        assert registry.for_extension("no-such-ext-xyz") == ()

    def test_for_type(self, registry):
        candidates = registry.for_type("application/pdf")
        assert len(candidates) == 1
        assert "pdf" in candidates[0].extensions

    def test_for_type_matches_simplified(self, registry):
        assert registry.for_type("Image/PNG")[0].content_type == "image/png"

    def test_extensions_have_no_dots(self, registry):
        for base in registry.types():
            assert all(not ext.startswith(".") for ext in base.extensions)

    def test_types_unique(self, registry):
        content_types = [t.content_type for t in registry.types()]
        assert len(content_types) == len(set(content_types))


class TestCommonTypes:
    """Test the strict/common split."""

    @pytest.fixture
    def db(self) -> mimetypes.MimeTypes:
        db = mimetypes.MimeTypes()
        db.add_type("application/x-common-only", ".commononly", strict=False)
        return db

    def test_common_types_included_by_default(self, db):
        registry = MimetypesRegistry(db=db)
        assert registry.for_extension("commononly")[0].content_type == "application/x-common-only"

    def test_common_types_excluded(self, db):
        registry = MimetypesRegistry(include_common=False, db=db)
        assert registry.for_extension("commononly") == ()

    def test_strict_types_ordered_first(self, db):
        db.add_type("image/x-strict-first", ".dualext", strict=True)
        db.add_type("image/x-common-second", ".dualext", strict=False)
        registry = MimetypesRegistry(db=db)

        candidates = registry.for_extension("dualext")
        assert [c.content_type for c in candidates] == ["image/x-strict-first", "image/x-common-second"]
