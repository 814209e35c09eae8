"""
Rich text tree model.

A sign line (or any chat component) is a tree of TextNode values. Each node
carries exactly one content variant, an opaque style, and an ordered tuple of
siblings that render after it.

All values are frozen; transforms build new nodes instead of mutating.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any


def _freeze_mapping(value: Mapping[str, Any]) -> Mapping[str, Any]:
    """Read-only copy, so a caller's dict cannot change a frozen value."""
    return MappingProxyType(dict(value))


# --- Content Variants ---


@dataclass(frozen=True)
class LiteralContent:
    """Already-resolved plain text."""

    text: str


@dataclass(frozen=True)
class KeybindContent:
    """Resolves at render time to the name of the key bound to an action."""

    key: str


@dataclass(frozen=True)
class TranslatableContent:
    """Resolves at render time through the local translation registry."""

    key: str
    args: tuple[Any, ...] = ()
    fallback: str | None = None


@dataclass(frozen=True)
class OpaqueContent:
    """Any other content kind (score, selector, nbt). Never rewritten."""

    kind: str
    data: Mapping[str, Any] = field(default_factory=dict, hash=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "data", _freeze_mapping(self.data))


Content = LiteralContent | KeybindContent | TranslatableContent | OpaqueContent


# --- Style ---


@dataclass(frozen=True)
class Style:
    """Formatting attributes. Carried through transforms verbatim."""

    color: str | None = None
    bold: bool | None = None
    italic: bool | None = None
    underlined: bool | None = None
    strikethrough: bool | None = None
    obfuscated: bool | None = None
    font: str | None = None
    insertion: str | None = None
    # Compared but not hashed
    click_event: Mapping[str, Any] | None = field(default=None, hash=False)
    hover_event: Mapping[str, Any] | None = field(default=None, hash=False)

    def __post_init__(self) -> None:
        if self.click_event is not None:
            object.__setattr__(self, "click_event", _freeze_mapping(self.click_event))
        if self.hover_event is not None:
            object.__setattr__(self, "hover_event", _freeze_mapping(self.hover_event))

    def is_empty(self) -> bool:
        """True when no attribute is set."""
        return self == EMPTY_STYLE


EMPTY_STYLE = Style()


# --- Node ---


@dataclass(frozen=True)
class TextNode:
    """
    A node in the rich text tree.

    Trees are assumed acyclic; the producer guarantees it.
    """

    content: Content
    style: Style = EMPTY_STYLE
    siblings: tuple[TextNode, ...] = ()

    def iter_nodes(self) -> list[TextNode]:
        """Return this node and all descendants in pre-order."""
        nodes: list[TextNode] = []
        stack: list[TextNode] = [self]
        while stack:
            node = stack.pop()
            nodes.append(node)
            stack.extend(reversed(node.siblings))
        return nodes


def literal(text: str, style: Style = EMPTY_STYLE, *siblings: TextNode) -> TextNode:
    """Build a literal node."""
    return TextNode(LiteralContent(text), style, tuple(siblings))


def keybind(key: str, style: Style = EMPTY_STYLE, *siblings: TextNode) -> TextNode:
    """Build a keybind reference node."""
    return TextNode(KeybindContent(key), style, tuple(siblings))


def translatable(
    key: str,
    args: tuple[Any, ...] = (),
    style: Style = EMPTY_STYLE,
    *siblings: TextNode,
) -> TextNode:
    """Build a translatable reference node."""
    return TextNode(TranslatableContent(key, tuple(args)), style, tuple(siblings))


# --- Errors ---


class MalformedTreeError(ValueError):
    """Raised when a tree nests deeper than a transform allows."""

    def __init__(self, depth: int, max_depth: int) -> None:
        self.depth = depth
        self.max_depth = max_depth
        super().__init__(
            f"Text tree exceeds maximum depth {max_depth} (reached {depth}); "
            "input may be cyclic"
        )
