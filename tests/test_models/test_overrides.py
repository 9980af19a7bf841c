"""Tests for override table parsing and validation."""

import pytest

from blob_mime.models import (
    ContentTypeOverrides,
    MimeOverride,
    OverrideConfigError,
    parse_mime_overrides,
)


class TestMimeOverride:
    """Test parsing single override entries."""

    def test_full_entry(self):
        override = MimeOverride.from_mapping(
            "application/x-foo",
            {"extensions": ["foo", ".FOO", "bar"], "binary": True, "attachment": False},
        )

        assert override.type_key == "application/x-foo"
        assert override.extensions == ("foo", "bar")
        assert override.binary is True
        assert override.attachment is False

    def test_absent_flags_stay_none(self):
        override = MimeOverride.from_mapping("text/x-go", {"extensions": ["go"]})
        assert override.binary is None
        assert override.attachment is None

    def test_explicit_false_is_kept(self):
        override = MimeOverride.from_mapping("image/png", {"attachment": False})
        assert override.attachment is False
        assert override.binary is None

    def test_null_options(self):
        override = MimeOverride.from_mapping("text/plain", None)
        assert override == MimeOverride("text/plain")

    @pytest.mark.parametrize("key", [None, 42, "", "plain", "text/", "/plain", "text/plain/extra"])
    def test_rejects_bad_type_key(self, key):
        with pytest.raises(OverrideConfigError, match="Invalid mime type key"):
            MimeOverride.from_mapping(key, {})

    def test_rejects_non_mapping_options(self):
        with pytest.raises(OverrideConfigError, match="options must be a mapping"):
            MimeOverride.from_mapping("text/plain", ["txt"])

    def test_rejects_non_list_extensions(self):
        with pytest.raises(OverrideConfigError, match="must be a list"):
            MimeOverride.from_mapping("text/plain", {"extensions": "txt"})

    def test_rejects_non_string_extension(self):
        with pytest.raises(OverrideConfigError, match="not a string"):
            MimeOverride.from_mapping("text/plain", {"extensions": ["txt", 3]})

    def test_rejects_empty_extension(self):
        with pytest.raises(OverrideConfigError, match="empty extension"):
            MimeOverride.from_mapping("text/plain", {"extensions": ["."]})

    @pytest.mark.parametrize("value", ["yes", 1, 0, None])
    def test_rejects_non_boolean_flag(self, value):
        with pytest.raises(OverrideConfigError, match="'binary' must be true or false"):
            MimeOverride.from_mapping("text/plain", {"binary": value})

    def test_rejects_unknown_option(self):
        with pytest.raises(OverrideConfigError, match="unknown option"):
            MimeOverride.from_mapping("text/plain", {"binray": True})


class TestParseMimeOverrides:
    """Test parsing the whole table."""

    def test_preserves_order(self):
        overrides = parse_mime_overrides(
            {
                "text/x-a": {"extensions": ["dup"]},
                "text/x-b": {"extensions": ["dup"]},
            }
        )
        assert [o.type_key for o in overrides] == ["text/x-a", "text/x-b"]

    def test_none_is_empty(self):
        assert parse_mime_overrides(None) == []

    def test_rejects_non_mapping(self):
        with pytest.raises(OverrideConfigError, match="must be a mapping"):
            parse_mime_overrides(["text/plain"])

    def test_one_bad_entry_fails_whole_table(self):
        with pytest.raises(OverrideConfigError, match="text/x-bad"):
            parse_mime_overrides(
                {
                    "text/x-good": {"extensions": ["good"]},
                    "text/x-bad": {"binary": "no"},
                }
            )


class TestContentTypeOverrides:
    """Test the content-type substitution table."""

    def test_mime_key_first(self):
        table = ContentTypeOverrides({"text/html": "text/plain", "html": "application/x-other"})
        assert table.lookup("text/html", "html") == "text/plain"

    def test_extension_key_fallback(self):
        table = ContentTypeOverrides({"ps1": "text/plain"})
        assert table.lookup("application/octet-stream", ".ps1") == "text/plain"

    def test_no_match(self):
        table = ContentTypeOverrides({"ps1": "text/plain"})
        assert table.lookup("image/png", "png") is None
        assert table.lookup("image/png", None) is None

    def test_keys_normalized(self):
        table = ContentTypeOverrides({"Text/X-Script": "text/plain", ".PS1": "text/plain"})
        assert set(table) == {"text/script", "ps1"}
        assert table.lookup("text/x-script", None) == "text/plain"
        assert table.lookup("text/script", None) == "text/plain"

    def test_is_read_only_mapping(self):
        table = ContentTypeOverrides({"ps1": "text/plain"})
        assert len(table) == 1
        assert table["ps1"] == "text/plain"
        with pytest.raises(TypeError):
            table["ps2"] = "text/plain"  # type: ignore[index]

    def test_from_mapping_validates(self):
        with pytest.raises(OverrideConfigError, match="content type must be a string"):
            ContentTypeOverrides.from_mapping({"text/html": None})
        with pytest.raises(OverrideConfigError, match="Invalid content-type override key"):
            ContentTypeOverrides.from_mapping({3: "text/plain"})
        with pytest.raises(OverrideConfigError, match="must be a mapping"):
            ContentTypeOverrides.from_mapping("text/plain")

    def test_from_mapping_none_is_empty(self):
        assert len(ContentTypeOverrides.from_mapping(None)) == 0
