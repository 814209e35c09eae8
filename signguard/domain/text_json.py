"""
JSON text component codec.

Signs persist each line as a JSON text component. This module converts
between that wire form and TextNode trees.

Accepted shapes:
- "plain"                       -> literal
- ["parent", child, child, ...] -> parent with the rest appended as siblings
- {"text": ...} / {"translate": ..., "with": [...]} / {"keybind": ...}
- {"score": ...} / {"selector": ...} / {"nbt": ...} kept as opaque content

Both directions walk on an explicit stack; nesting depth never costs
Python frames. Parsing rejects components nested deeper than max_depth.
"""

from __future__ import annotations

import json
from collections.abc import Mapping
from typing import Any

from signguard.domain.text import (
    EMPTY_STYLE,
    Content,
    KeybindContent,
    LiteralContent,
    OpaqueContent,
    Style,
    TextNode,
    TranslatableContent,
)


class TextParseError(ValueError):
    """Raised when a value is not a valid text component."""


# Same bound the sanitizer applies to the trees produced here
MAX_PARSE_DEPTH = 512

# Opaque content kinds, checked after text/translate/keybind
OPAQUE_KINDS: tuple[str, ...] = ("score", "selector", "nbt")

# JSON key -> Style field
STYLE_FIELDS: dict[str, str] = {
    "color": "color",
    "bold": "bold",
    "italic": "italic",
    "underlined": "underlined",
    "strikethrough": "strikethrough",
    "obfuscated": "obfuscated",
    "font": "font",
    "insertion": "insertion",
    "clickEvent": "click_event",
    "hoverEvent": "hover_event",
}

# JSON key -> accepted JSON type
STYLE_TYPES: dict[str, type] = {
    "color": str,
    "bold": bool,
    "italic": bool,
    "underlined": bool,
    "strikethrough": bool,
    "obfuscated": bool,
    "font": str,
    "insertion": str,
    "clickEvent": dict,
    "hoverEvent": dict,
}


def _is_primitive(value: Any) -> bool:
    return isinstance(value, (bool, int, float))


# --- Parsing ---


def loads_text(raw: str, max_depth: int = MAX_PARSE_DEPTH) -> TextNode:
    """Parse a JSON-encoded text component."""
    try:
        data = json.loads(raw)
    except json.JSONDecodeError as e:
        raise TextParseError(f"Invalid JSON text component: {e}") from e
    except RecursionError as e:
        raise TextParseError("JSON text component nests too deeply") from e
    return parse_text(data, max_depth)


class _ParseFrame:
    """A component waiting for its nested components to be built."""

    def __init__(self, value: Any, depth: int) -> None:
        self.value = value
        self.depth = depth
        self.kind, self.children, self.arg_count = _plan(value)
        self.built: list[TextNode] = []

    def next_child(self) -> Any | None:
        if len(self.built) < len(self.children):
            return self.children[len(self.built)]
        return None

    def has_pending(self) -> bool:
        return len(self.built) < len(self.children)


def parse_text(value: Any, max_depth: int = MAX_PARSE_DEPTH) -> TextNode:
    """
    Build a TextNode tree from a decoded JSON text component.

    Raises:
        TextParseError: If the value is malformed or nests deeper than max_depth.
    """
    stack = [_ParseFrame(value, 0)]
    result: TextNode | None = None
    while stack:
        frame = stack[-1]
        if frame.has_pending():
            child_depth = frame.depth + 1
            if child_depth > max_depth:
                raise TextParseError(f"Text component nests deeper than {max_depth}")
            stack.append(_ParseFrame(frame.next_child(), child_depth))
            continue

        stack.pop()
        result = _build(frame)
        if stack:
            stack[-1].built.append(result)

    assert result is not None
    return result


def _plan(value: Any) -> tuple[str, list[Any], int]:
    """
    Validate one component and list its nested components.

    Returns (kind, nested components, how many of them are translation args).
    """
    if isinstance(value, str):
        return "string", [], 0

    if _is_primitive(value):
        return "primitive", [], 0

    if isinstance(value, list):
        if not value:
            raise TextParseError("Text component list must not be empty")
        return "list", list(value), 0

    if isinstance(value, dict):
        kind = _content_kind(value)
        extra = value.get("extra", [])
        if not isinstance(extra, list):
            raise TextParseError("'extra' must be a list")

        args: list[Any] = []
        if kind == "translate":
            with_args = value.get("with", [])
            if not isinstance(with_args, list):
                raise TextParseError("'with' must be a list")
            # Numbers and booleans stay plain values; everything else is a component
            args = [arg for arg in with_args if not _is_primitive(arg)]

        return kind, args + extra, len(args)

    raise TextParseError(f"Unsupported text component type: {type(value).__name__}")


def _content_kind(data: dict[str, Any]) -> str:
    for kind in ("text", "translate", "keybind", *OPAQUE_KINDS):
        if kind in data:
            return kind
    raise TextParseError(f"Text component has no recognised content: {sorted(data)}")


def _build(frame: _ParseFrame) -> TextNode:
    value = frame.value
    built = frame.built

    if frame.kind == "string":
        return TextNode(LiteralContent(value))

    if frame.kind == "primitive":
        # Vanilla accepts bare primitives and renders their string form
        return TextNode(LiteralContent(json.dumps(value)))

    if frame.kind == "list":
        head = built[0]
        return TextNode(head.content, head.style, head.siblings + tuple(built[1:]))

    content = _parse_content(value, frame.kind, built[: frame.arg_count])
    return TextNode(content, _parse_style(value), tuple(built[frame.arg_count :]))


def _parse_content(data: dict[str, Any], kind: str, parsed_args: list[TextNode]) -> Content:
    if kind == "text":
        return LiteralContent(str(data["text"]))

    if kind == "translate":
        components = iter(parsed_args)
        args = tuple(
            arg if _is_primitive(arg) else next(components) for arg in data.get("with", [])
        )
        return TranslatableContent(
            key=str(data["translate"]),
            args=args,
            fallback=data.get("fallback"),
        )

    if kind == "keybind":
        return KeybindContent(str(data["keybind"]))

    payload = {k: v for k, v in data.items() if k not in STYLE_FIELDS and k != "extra"}
    return OpaqueContent(kind=kind, data=payload)


def _parse_style(data: dict[str, Any]) -> Style:
    values: dict[str, Any] = {}
    for key, attr in STYLE_FIELDS.items():
        value = data.get(key)
        if value is None:
            continue
        expected = STYLE_TYPES[key]
        if not isinstance(value, expected):
            raise TextParseError(
                f"'{key}' must be {expected.__name__}, got {type(value).__name__}"
            )
        values[attr] = value

    if not values:
        return EMPTY_STYLE
    return Style(**values)


# --- Serialization ---


def dump_text(node: TextNode) -> dict[str, Any] | str:
    """
    Convert a TextNode tree to its JSON-compatible form.

    A literal with no style and no siblings becomes a bare string.
    """
    # Frames: node, its nested nodes (translation args then siblings), dumped so far
    stack: list[tuple[TextNode, list[TextNode], list[Any]]] = [(node, _nested(node), [])]
    result: dict[str, Any] | str = ""
    while stack:
        current, nested, done = stack[-1]
        if len(done) < len(nested):
            child = nested[len(done)]
            stack.append((child, _nested(child), []))
            continue

        stack.pop()
        result = _dump_node(current, done)
        if stack:
            stack[-1][2].append(result)

    return result


def dumps_text(node: TextNode) -> str:
    """Serialize a TextNode tree to a JSON string."""
    return json.dumps(dump_text(node), separators=(",", ":"))


def _node_args(node: TextNode) -> list[TextNode]:
    if isinstance(node.content, TranslatableContent):
        return [arg for arg in node.content.args if isinstance(arg, TextNode)]
    return []


def _nested(node: TextNode) -> list[TextNode]:
    return _node_args(node) + list(node.siblings)


def _dump_node(node: TextNode, done: list[Any]) -> dict[str, Any] | str:
    content = node.content
    if isinstance(content, LiteralContent) and node.style.is_empty() and not node.siblings:
        return content.text

    arg_count = len(_node_args(node))
    result: dict[str, Any] = _dump_content(content, done[:arg_count])

    for key, attr in STYLE_FIELDS.items():
        value = getattr(node.style, attr)
        if value is not None:
            result[key] = dict(value) if isinstance(value, Mapping) else value

    if node.siblings:
        result["extra"] = done[arg_count:]

    return result


def _dump_content(content: Content, dumped_args: list[Any]) -> dict[str, Any]:
    if isinstance(content, LiteralContent):
        return {"text": content.text}
    if isinstance(content, KeybindContent):
        return {"keybind": content.key}
    if isinstance(content, TranslatableContent):
        result: dict[str, Any] = {"translate": content.key}
        if content.args:
            components = iter(dumped_args)
            result["with"] = [
                next(components) if isinstance(arg, TextNode) else arg for arg in content.args
            ]
        if content.fallback is not None:
            result["fallback"] = content.fallback
        return result
    return dict(content.data)
