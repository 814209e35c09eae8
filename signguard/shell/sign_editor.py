"""
Sign editor integration.

The host calls open_sign_editor once, while constructing the sign editing
surface and before its first render, and renders the returned lines in place
of the stored ones. This is the only point where sign text is sanitized.

Key behaviors:
- Picks the filtered or raw messages of the sign face being edited
- Sanitizes every line independently, keeping line order
- Logs neutralized keys at debug level; the sanitizer core itself is silent
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any

from signguard.components.sanitize import (
    DEFAULT_CONFIG,
    ClassifierPort,
    SanitizerConfig,
    find_untrusted,
    sanitize_lines,
)
from signguard.domain.text import LiteralContent, TextNode
from signguard.domain.text_json import parse_text

logger = logging.getLogger(__name__)

SIGN_LINE_COUNT = 4


@dataclass(frozen=True)
class SignText:
    """Stored text of one sign face."""

    messages: tuple[TextNode, ...]
    filtered_messages: tuple[TextNode, ...]

    def get_messages(self, filtered: bool) -> tuple[TextNode, ...]:
        return self.filtered_messages if filtered else self.messages


@dataclass(frozen=True)
class SignEditSurface:
    """Lines handed to the editing surface for rendering."""

    lines: tuple[TextNode, ...]
    front: bool = True
    filtered: bool = False


def sign_text_from_json(
    lines: Sequence[Any],
    filtered_lines: Sequence[Any] | None = None,
) -> SignText:
    """
    Build SignText from stored JSON text components.

    Missing lines are padded with empty literals. Filtered lines default to
    the raw lines.

    Raises:
        ValueError: If more than four lines are given.
        TextParseError: If a line is not a valid text component.
    """
    messages = _parse_lines(lines)
    filtered = _parse_lines(filtered_lines) if filtered_lines is not None else messages
    return SignText(messages=messages, filtered_messages=filtered)


def _parse_lines(lines: Sequence[Any]) -> tuple[TextNode, ...]:
    if len(lines) > SIGN_LINE_COUNT:
        raise ValueError(f"A sign face holds {SIGN_LINE_COUNT} lines, got {len(lines)}")

    parsed = [parse_text(line) for line in lines]
    while len(parsed) < SIGN_LINE_COUNT:
        parsed.append(TextNode(LiteralContent("")))
    return tuple(parsed)


def open_sign_editor(
    text: SignText,
    *,
    front: bool = True,
    filtered: bool = False,
    classifier: ClassifierPort | None = None,
    config: SanitizerConfig = DEFAULT_CONFIG,
) -> SignEditSurface:
    """
    Prepare a sign face for editing.

    Args:
        text: Stored text of the face being edited.
        front: Whether the front face is being edited.
        filtered: Whether to show the filtered messages.
        classifier: Optional classifier port. Defaults to the vanilla whitelist.
        config: Sanitizer limits.

    Returns:
        SignEditSurface whose lines are safe to render.

    Raises:
        MalformedTreeError: If a line nests deeper than config.max_depth.
    """
    original = text.get_messages(filtered)
    lines = sanitize_lines(original, classifier, config)

    if logger.isEnabledFor(logging.DEBUG):
        total = 0
        for index, line in enumerate(original):
            for item in find_untrusted(line, classifier):
                total += 1
                logger.debug(
                    "Neutralized %s key on sign line %d: %r",
                    item.kind.value,
                    index,
                    item.key,
                )
        logger.debug(
            "Prepared %s sign face for editing (%d lines, %d keys neutralized)",
            "front" if front else "back",
            len(lines),
            total,
        )

    return SignEditSurface(lines=tuple(lines), front=front, filtered=filtered)
