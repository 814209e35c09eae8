"""
Sanitize component input/output models.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from signguard.components.keys import KeyKind
from signguard.domain.text import TextNode


@dataclass(frozen=True)
class NeutralizedKey:
    """A reference that was (or would be) rewritten to a literal."""

    kind: KeyKind
    key: str


# --- Input Models ---


@dataclass(frozen=True)
class SanitizeTextInput:
    """Input for sanitizing one text tree."""

    node: TextNode


@dataclass(frozen=True)
class SanitizeLinesInput:
    """Input for sanitizing an ordered group of lines."""

    lines: tuple[TextNode, ...]


# --- Output Models ---


@dataclass(frozen=True)
class SanitizeOutput:
    """Output for a sanitized text tree."""

    node: TextNode | None
    neutralized: list[NeutralizedKey] = field(default_factory=list)
    error: str | None = None
    success: bool = True


@dataclass(frozen=True)
class SanitizeLinesOutput:
    """Output for sanitized lines."""

    lines: tuple[TextNode, ...]
    neutralized: list[NeutralizedKey] = field(default_factory=list)
    error: str | None = None
    success: bool = True
