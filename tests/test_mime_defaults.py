"""Tests for the module-level API with the packaged override tables."""

import pytest

import blob_mime


@pytest.fixture(autouse=True)
def default_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Use the packaged tables regardless of the caller's environment."""
    for var in (
        "BLOB_MIME_OVERRIDES_FILE",
        "BLOB_MIME_CONTENT_TYPES_FILE",
        "BLOB_MIME_COMMON_TYPES",
    ):
        monkeypatch.delenv(var, raising=False)


UNKNOWN = "completely-unknown-ext-xyz"


class TestMimeFor:
    """Test default mime type resolution."""

    def test_registry_types(self):
        assert blob_mime.mime_for("html") == "text/html"
        assert blob_mime.mime_for(".png") == "image/png"

    def test_added_extensions(self):
        assert blob_mime.mime_for("go") == "text/go"
        assert blob_mime.mime_for("md") == "text/markdown"
        assert blob_mime.mime_for("ipynb") == "application/ipynb+json"

    def test_override_claims_extension(self):
        assert blob_mime.mime_for("sh") == "text/shellscript"

    def test_fallback(self):
        assert blob_mime.mime_for(None) == "text/plain"
        assert blob_mime.mime_for(UNKNOWN) == "text/plain"


class TestContentTypeFor:
    """Test the default Content-Type policy."""

    @pytest.mark.parametrize("ext", ["html", "svg", "js", "css", "ps1"])
    def test_markup_served_as_plain_text(self, ext):
        assert blob_mime.content_type_for(ext) == "text/plain; charset=utf-8"

    def test_text_types_get_charset(self):
        assert blob_mime.content_type_for("md") == "text/markdown; charset=utf-8"

    def test_binary_types_unchanged(self):
        assert blob_mime.content_type_for("png") == "image/png"


class TestClassification:
    """Test the default binary and attachment flags."""

    def test_images_inline(self):
        assert blob_mime.is_binary("png") is True
        assert blob_mime.is_attachment("png") is False
        assert blob_mime.is_attachment("image/jpeg") is False

    def test_svg_is_text_but_downloaded(self):
        assert blob_mime.is_binary("svg") is False
        assert blob_mime.is_attachment("svg") is True

    def test_notebook_is_text_but_downloaded(self):
        assert blob_mime.is_binary("ipynb") is False
        assert blob_mime.is_attachment("ipynb") is True

    def test_archives_downloaded(self):
        assert blob_mime.is_binary("jar") is True
        assert blob_mime.is_attachment(".whl") is True

    def test_pdf_inline(self):
        assert blob_mime.is_binary("pdf") is True
        assert blob_mime.is_attachment("application/pdf") is False

    def test_text_inline(self):
        assert blob_mime.is_binary("txt") is False
        assert blob_mime.is_attachment("txt") is False
        assert blob_mime.is_binary("json") is False

    def test_unknown_is_binary_attachment(self):
        assert blob_mime.is_binary(UNKNOWN) is True
        assert blob_mime.is_attachment(UNKNOWN) is True

    def test_lookup_record(self):
        record = blob_mime.lookup_mime_type_for("go")
        assert isinstance(record, blob_mime.MimeRecord)
        assert record.canonical_type == "text/x-go"
        assert blob_mime.lookup_mime_type_for(UNKNOWN) is None

    def test_classify(self):
        result = blob_mime.classify(".svg")
        assert isinstance(result, blob_mime.Classification)
        assert result.mime_type == "image/svg+xml"
        assert result.content_type == "text/plain; charset=utf-8"
        assert result.disposition == "attachment"
