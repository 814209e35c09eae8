"""
TextSanitizer - Neutralize untrusted key references in a text tree.

Rewrites every keybind or translatable node whose key the classifier rejects
into a literal holding the raw key, so rendering never consults the local
registries for it. Trusted references and all other content pass through.

Key behaviors:
- Style and sibling order preserved on every node
- Siblings always sanitized, whatever happened to the parent content
- Translation args are not sanitized; a rejected node drops them entirely
- Depth bounded by SanitizerConfig.max_depth (MalformedTreeError past it)
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from signguard.components.keys import DEFAULT_CLASSIFIER, KeyKind
from signguard.domain.text import (
    Content,
    KeybindContent,
    LiteralContent,
    MalformedTreeError,
    TextNode,
    TranslatableContent,
)

from .models import NeutralizedKey
from .ports import ClassifierPort

# --- Configuration ---


@dataclass(frozen=True)
class SanitizerConfig:
    """Sanitizer limits."""

    # Vanilla caps component nesting well below this
    max_depth: int = 512


DEFAULT_CONFIG = SanitizerConfig()


# --- Classification ---


def classify_content(
    content: Content,
    classifier: ClassifierPort = DEFAULT_CLASSIFIER,
) -> NeutralizedKey | None:
    """Return the rejected key for this content, or None if it may stay."""
    if isinstance(content, KeybindContent):
        if not classifier.is_trusted_keybind(content.key):
            return NeutralizedKey(KeyKind.KEYBIND, content.key)
    elif isinstance(content, TranslatableContent):
        if not classifier.is_trusted_translation(content.key):
            return NeutralizedKey(KeyKind.TRANSLATION, content.key)
    return None


# --- Rewriting ---


def sanitize(
    node: TextNode,
    classifier: ClassifierPort | None = None,
    config: SanitizerConfig = DEFAULT_CONFIG,
) -> TextNode:
    """
    Return a copy of the tree with untrusted references made literal.

    Args:
        node: Root of the tree to sanitize. Must be acyclic.
        classifier: Key classifier. Defaults to the vanilla whitelist.
        config: Sanitizer limits.

    Returns:
        New tree with identical shape and styles.

    Raises:
        MalformedTreeError: If the tree nests deeper than config.max_depth.
    """
    classifier = classifier or DEFAULT_CLASSIFIER
    max_depth = config.max_depth

    # Post-order walk on an explicit stack so depth never costs Python frames.
    # Each frame holds a source node, its depth and its rewritten siblings so far.
    stack: list[tuple[TextNode, int, list[TextNode]]] = [(node, 0, [])]
    result = node
    while stack:
        current, depth, done = stack[-1]
        if len(done) < len(current.siblings):
            child_depth = depth + 1
            if child_depth > max_depth:
                raise MalformedTreeError(child_depth, max_depth)
            stack.append((current.siblings[len(done)], child_depth, []))
            continue

        stack.pop()
        result = TextNode(_rewrite_content(current.content, classifier), current.style, tuple(done))
        if stack:
            stack[-1][2].append(result)

    return result


def _rewrite_content(content: Content, classifier: ClassifierPort) -> Content:
    rejected = classify_content(content, classifier)
    if rejected is not None:
        return LiteralContent(rejected.key)
    return content


def sanitize_lines(
    lines: Iterable[TextNode],
    classifier: ClassifierPort | None = None,
    config: SanitizerConfig = DEFAULT_CONFIG,
) -> list[TextNode]:
    """Sanitize each line independently, keeping line order."""
    return [sanitize(line, classifier, config) for line in lines]


def find_untrusted(
    node: TextNode,
    classifier: ClassifierPort | None = None,
) -> list[NeutralizedKey]:
    """List the keys a sanitize pass would neutralize, in pre-order."""
    classifier = classifier or DEFAULT_CLASSIFIER
    found: list[NeutralizedKey] = []
    for item in node.iter_nodes():
        rejected = classify_content(item.content, classifier)
        if rejected is not None:
            found.append(rejected)
    return found
