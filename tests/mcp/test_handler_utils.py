"""Tests for farcaster_dev_mcp.mcp.handlers._utils."""

from __future__ import annotations

import pytest

from farcaster_dev_mcp.mcp.handlers._utils import (
    CHECK,
    CROSS,
    bullets,
    camel_case,
    code_block,
    indent,
    join_blocks,
    js_identifier,
    mark,
    meta_content,
    numbered,
    pascal_case,
    slugify,
    to_json,
)


class TestMarkdownHelpers:
    """Tests for markdown building helpers."""

    def test_mark(self):
        assert mark(True) == CHECK
        assert mark(False) == CROSS

    def test_code_block_strips_outer_newlines(self):
        assert code_block("ts", "\nconst a = 1;\n\n") == "```ts\nconst a = 1;\n```"

    def test_bullets_and_numbered(self):
        assert bullets(["a", "b"]) == "- a\n- b"
        assert numbered(["a", "b"]) == "1. a\n2. b"

    def test_join_blocks_skips_empty(self):
        assert join_blocks("# Title", None, "", "  ", "body\n") == "# Title\n\nbody"

    def test_indent_keeps_blank_lines(self):
        assert indent("a\n\nb", 2) == "  a\n\n  b"

    def test_to_json_keeps_unicode(self):
        assert to_json({"icon": "✅"}) == '{\n  "icon": "✅"\n}'

    def test_meta_content_escapes_attribute_quotes(self):
        assert meta_content({"name": "Let's go", "q": "a&b"}) == '{"name":"Let&#39;s go","q":"a&amp;b"}'


class TestNaming:
    """Tests for identifier helpers."""

    @pytest.mark.parametrize(
        "value,expected",
        [("My App", "my-app"), ("  Spaced   Out ", "spaced-out"), ("already-slug", "already-slug")],
    )
    def test_slugify(self, value, expected):
        assert slugify(value) == expected

    def test_pascal_and_camel(self):
        assert pascal_case("user-action") == "UserAction"
        assert camel_case("user_action") == "userAction"

    @pytest.mark.parametrize(
        "value,expected",
        [("My L3", "myL3"), ("zora-testnet", "zoraTestnet"), ("1337 chain", "custom1337Chain"), ("!!!", "custom")],
    )
    def test_js_identifier(self, value, expected):
        assert js_identifier(value) == expected
