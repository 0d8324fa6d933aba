"""Tests for schema normalization."""

import json

import pytest

from agentcatalog.errors import DecodeError, ErrorKind
from agentcatalog.models import CatalogEntry, ModelDescriptor, SchemaKind
from agentcatalog.normalize import normalize, parse_directory_listing, parse_model_page


def _item(name, kind="dir", url=None):
    return {
        "name": name,
        "path": f"src/{name}",
        "type": kind,
        "html_url": url or f"https://github.com/org/repo/tree/main/src/{name}",
    }


class TestNormalizeDirectoryListing:
    """Tests for directory listing normalization."""

    def test_filters_non_directories(self):
        body = json.dumps([
            {"name": "filesystem", "path": "src/filesystem", "type": "dir", "html_url": "https://x"},
            {"name": "README.md", "path": "README.md", "type": "file", "html_url": "https://y"},
        ])

        entries = normalize(body, SchemaKind.DIRECTORY_LISTING)

        assert len(entries) == 1
        assert entries[0].name == "filesystem"
        assert entries[0].source_url == "https://x"

    def test_preserves_order(self):
        body = json.dumps([
            _item("zeta"),
            _item("notes.txt", "file"),
            _item("alpha"),
            _item("link", "symlink"),
            _item("mid"),
        ])

        names = [e.name for e in normalize(body)]

        assert names == ["zeta", "alpha", "mid"]

    def test_description_uses_label(self):
        entries = normalize(json.dumps([_item("fetch")]), label="MCP Server")
        assert entries[0].description == "Official MCP Server: fetch"

        entries = normalize(json.dumps([_item("pdf")]))
        assert entries[0].description == "Official Skill: pdf"

    def test_accepts_bytes(self):
        entries = normalize(json.dumps([_item("memory")]).encode("utf-8"))
        assert entries == [
            CatalogEntry(
                "memory",
                "Official Skill: memory",
                "https://github.com/org/repo/tree/main/src/memory",
            )
        ]

    def test_empty_is_not_an_error(self):
        assert normalize("[]") == []
        assert normalize(json.dumps([_item("a.md", "file")])) == []

    def test_malformed_json(self):
        with pytest.raises(DecodeError) as exc:
            normalize(b"<html>rate limited</html>")
        assert exc.value.kind is ErrorKind.DECODE_ERROR

    def test_object_instead_of_array(self):
        with pytest.raises(DecodeError, match="JSON array"):
            normalize(json.dumps({"message": "Not Found"}))

    def test_missing_field(self):
        body = json.dumps([{"name": "x", "type": "dir", "html_url": "https://x"}])
        with pytest.raises(DecodeError, match="path"):
            normalize(body)

    @pytest.mark.parametrize("field", ["name", "path", "type", "html_url"])
    def test_null_field_rejected(self, field):
        """JSON null never turns into the string 'None'."""
        item = _item("x")
        item[field] = None
        with pytest.raises(DecodeError, match=field):
            normalize(json.dumps([item]))

    def test_non_string_name_rejected(self):
        item = _item("x")
        item["name"] = 42
        with pytest.raises(DecodeError, match="must be a string"):
            normalize(json.dumps([item]))

    def test_deep_nesting_is_decode_error(self):
        with pytest.raises(DecodeError, match="nested"):
            normalize(b"[" * 100000 + b"]" * 100000)

    def test_relative_url_rejected(self):
        with pytest.raises(DecodeError):
            normalize(json.dumps([_item("x", url="/relative/x")]))

    def test_parse_keeps_raw_items(self):
        items = parse_directory_listing(json.dumps([_item("a"), _item("b.md", "file")]))
        assert [i.entry_type for i in items] == ["dir", "file"]
        assert items[0].is_dir and not items[1].is_dir


class TestParseModelPage:
    """Tests for model page decoding."""

    PAGE = {
        "data": [
            {
                "id": "claude-sonnet-4-5",
                "display_name": "Claude Sonnet 4.5",
                "created_at": "2025-09-29T00:00:00Z",
                "type": "model",
            },
            {
                "id": "claude-haiku-4-5",
                "display_name": "Claude Haiku 4.5",
                "created_at": "2025-10-01T00:00:00Z",
                "type": "model",
            },
        ],
        "has_more": True,
        "first_id": "claude-sonnet-4-5",
        "last_id": "claude-haiku-4-5",
    }

    def test_passes_fields_through(self):
        page = parse_model_page(json.dumps(self.PAGE))

        assert [m.id for m in page.entries] == ["claude-sonnet-4-5", "claude-haiku-4-5"]
        assert page.entries[0].display_name == "Claude Sonnet 4.5"
        assert page.entries[0].model_type == "model"
        assert page.has_more is True
        assert page.first_id == "claude-sonnet-4-5"
        assert page.last_id == "claude-haiku-4-5"

    def test_optional_ids(self):
        page = parse_model_page(json.dumps({"data": [], "has_more": False}))
        assert page.entries == ()
        assert page.first_id is None
        assert page.last_id is None

    def test_normalize_model_page(self):
        models = normalize(json.dumps(self.PAGE), SchemaKind.MODEL_PAGE)
        assert all(isinstance(m, ModelDescriptor) for m in models)
        assert len(models) == 2

    def test_missing_model_field(self):
        body = json.dumps({"data": [{"id": "x", "type": "model"}], "has_more": False})
        with pytest.raises(DecodeError, match="display_name"):
            parse_model_page(body)

    def test_null_display_name_rejected(self):
        model = dict(self.PAGE["data"][0], display_name=None)
        body = json.dumps({"data": [model], "has_more": False})
        with pytest.raises(DecodeError, match="display_name"):
            parse_model_page(body)

    def test_missing_has_more(self):
        with pytest.raises(DecodeError):
            parse_model_page(json.dumps({"data": []}))

    def test_round_trip_dict(self):
        assert parse_model_page(json.dumps(self.PAGE)).to_dict() == self.PAGE
