"""
Tests for the JSON text component codec.
"""

from __future__ import annotations

import json

import pytest

from signguard.domain.text import (
    KeybindContent,
    LiteralContent,
    OpaqueContent,
    Style,
    TextNode,
    TranslatableContent,
    literal,
)
from signguard.domain.text_json import (
    MAX_PARSE_DEPTH,
    TextParseError,
    dump_text,
    dumps_text,
    loads_text,
    parse_text,
)


class TestParse:
    """Decoded JSON -> TextNode."""

    def test_plain_string(self) -> None:
        assert parse_text("hi") == TextNode(LiteralContent("hi"))

    def test_text_object_with_style(self) -> None:
        node = parse_text({"text": "hi", "color": "red", "bold": True})
        assert node.content == LiteralContent("hi")
        assert node.style == Style(color="red", bold=True)

    def test_translate_with_args_and_extra(self) -> None:
        node = parse_text(
            {
                "translate": "chat.type.text",
                "with": [{"text": "Steve"}, 5],
                "extra": [{"keybind": "key.jump"}],
            }
        )
        assert isinstance(node.content, TranslatableContent)
        assert node.content.key == "chat.type.text"
        assert node.content.args == (TextNode(LiteralContent("Steve")), 5)
        assert node.siblings == (TextNode(KeybindContent("key.jump")),)

    def test_translate_fallback(self) -> None:
        node = parse_text({"translate": "mymod.x", "fallback": "X"})
        assert node.content == TranslatableContent("mymod.x", (), "X")

    def test_text_takes_precedence(self) -> None:
        node = parse_text({"text": "a", "translate": "gui.done"})
        assert node.content == LiteralContent("a")

    def test_list_form(self) -> None:
        node = parse_text(["a", {"text": "b"}, {"keybind": "key.use"}])
        assert node.content == LiteralContent("a")
        assert [s.content for s in node.siblings] == [
            LiteralContent("b"),
            KeybindContent("key.use"),
        ]

    def test_list_head_siblings_come_first(self) -> None:
        node = parse_text([{"text": "a", "extra": ["b"]}, "c"])
        assert [s.content for s in node.siblings] == [LiteralContent("b"), LiteralContent("c")]

    def test_opaque_score(self) -> None:
        node = parse_text({"score": {"name": "@p", "objective": "kills"}, "color": "red"})
        assert node.content == OpaqueContent("score", {"score": {"name": "@p", "objective": "kills"}})
        assert node.style == Style(color="red")

    def test_primitive(self) -> None:
        assert parse_text(3) == TextNode(LiteralContent("3"))
        assert parse_text(True) == TextNode(LiteralContent("true"))

    def test_click_and_hover_events(self) -> None:
        node = parse_text(
            {
                "text": "x",
                "clickEvent": {"action": "open_url", "value": "https://example.com"},
                "hoverEvent": {"action": "show_text", "contents": "tip"},
            }
        )
        assert node.style.click_event == {"action": "open_url", "value": "https://example.com"}
        assert node.style.hover_event == {"action": "show_text", "contents": "tip"}


class TestParseErrors:
    """Malformed components raise TextParseError."""

    def test_empty_list(self) -> None:
        with pytest.raises(TextParseError):
            parse_text([])

    def test_unknown_object(self) -> None:
        with pytest.raises(TextParseError, match="no recognised content"):
            parse_text({"color": "red"})

    def test_bad_extra(self) -> None:
        with pytest.raises(TextParseError):
            parse_text({"text": "a", "extra": "b"})

    def test_bad_with(self) -> None:
        with pytest.raises(TextParseError):
            parse_text({"translate": "gui.done", "with": "b"})

    def test_unsupported_type(self) -> None:
        with pytest.raises(TextParseError):
            parse_text(None)

    def test_invalid_json(self) -> None:
        with pytest.raises(TextParseError):
            loads_text("{not json")

    def test_is_value_error(self) -> None:
        with pytest.raises(ValueError):
            parse_text({})


class TestDump:
    """TextNode -> JSON-compatible values."""

    def test_bare_literal_is_string(self) -> None:
        assert dump_text(literal("hi")) == "hi"

    def test_styled_literal_is_object(self) -> None:
        assert dump_text(literal("hi", Style(color="red"))) == {"text": "hi", "color": "red"}

    def test_translatable(self) -> None:
        node = TextNode(TranslatableContent("chat.type.text", (literal("Steve"), 2), "fb"))
        assert dump_text(node) == {
            "translate": "chat.type.text",
            "with": ["Steve", 2],
            "fallback": "fb",
        }

    def test_keybind_with_extra(self) -> None:
        node = TextNode(KeybindContent("key.jump"), Style(bold=True), (literal("!"),))
        assert dump_text(node) == {"keybind": "key.jump", "bold": True, "extra": ["!"]}

    def test_dumps_text_compact(self) -> None:
        raw = dumps_text(TextNode(KeybindContent("key.use")))
        assert raw == '{"keybind":"key.use"}'

    def test_loads_dumps(self) -> None:
        raw = json.dumps(
            {
                "translate": "mymod.x",
                "italic": True,
                "extra": [{"score": {"name": "@s", "objective": "o"}}],
            }
        )
        assert json.loads(dumps_text(loads_text(raw))) == json.loads(raw)


def _nested_extra(levels: int) -> dict:
    value: dict = {"keybind": "mymod.key"}
    for _ in range(levels):
        value = {"text": "x", "extra": [value]}
    return value


def _nested_with(levels: int) -> dict:
    value: dict = {"text": "leaf"}
    for _ in range(levels):
        value = {"translate": "chat.type.text", "with": [1, value]}
    return value


class TestDepthLimit:
    """Nesting is bounded and never overflows the interpreter stack."""

    def test_deepest_allowed_extra(self) -> None:
        node = parse_text(_nested_extra(MAX_PARSE_DEPTH))
        for _ in range(MAX_PARSE_DEPTH):
            node = node.siblings[0]
        assert node.content == KeybindContent("mymod.key")

    def test_extra_past_limit(self) -> None:
        with pytest.raises(TextParseError, match=f"deeper than {MAX_PARSE_DEPTH}"):
            parse_text(_nested_extra(MAX_PARSE_DEPTH + 1))

    def test_very_deep_extra(self) -> None:
        with pytest.raises(TextParseError):
            parse_text(_nested_extra(2000))

    def test_very_deep_with_args(self) -> None:
        with pytest.raises(TextParseError):
            parse_text(_nested_with(2000))

    def test_with_args_keep_positions(self) -> None:
        node = parse_text(_nested_with(2))
        assert isinstance(node.content, TranslatableContent)
        first, inner = node.content.args
        assert first == 1
        assert isinstance(inner.content, TranslatableContent)
        assert inner.content.args[1] == TextNode(LiteralContent("leaf"))

    def test_custom_limit(self) -> None:
        parse_text(_nested_extra(3), max_depth=3)
        with pytest.raises(TextParseError):
            parse_text(_nested_extra(4), max_depth=3)

    def test_loads_text_very_deep(self) -> None:
        raw = "[" * 5000 + '"x"' + "]" * 5000
        with pytest.raises(TextParseError):
            loads_text(raw)

    def test_dump_deepest_allowed(self) -> None:
        dumped = dump_text(parse_text(_nested_extra(MAX_PARSE_DEPTH)))
        for _ in range(MAX_PARSE_DEPTH):
            assert isinstance(dumped, dict)
            dumped = dumped["extra"][0]
        assert dumped == {"keybind": "mymod.key"}


class TestStyleTypes:
    """Style values must have their JSON types."""

    def test_bool_field_rejects_string(self) -> None:
        with pytest.raises(TextParseError, match="'bold' must be bool"):
            parse_text({"text": "a", "bold": "yes"})

    def test_bool_field_rejects_number(self) -> None:
        with pytest.raises(TextParseError, match="'italic' must be bool"):
            parse_text({"text": "a", "italic": 1})

    def test_string_field_rejects_number(self) -> None:
        with pytest.raises(TextParseError, match="'color' must be str"):
            parse_text({"text": "a", "color": 5})

    def test_event_must_be_object(self) -> None:
        with pytest.raises(TextParseError, match="'clickEvent' must be dict"):
            parse_text({"text": "a", "clickEvent": "run"})

    def test_null_means_unset(self) -> None:
        node = parse_text({"text": "a", "bold": None})
        assert node.style == Style()

    def test_error_in_sibling(self) -> None:
        with pytest.raises(TextParseError):
            parse_text({"text": "a", "extra": [{"text": "b", "underlined": "no"}]})
