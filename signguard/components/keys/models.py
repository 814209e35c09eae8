"""
Keys component input/output models.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class KeyKind(str, Enum):
    """Kind of dynamically resolved reference."""

    KEYBIND = "keybind"
    TRANSLATION = "translation"


# --- Input Models ---


@dataclass(frozen=True)
class ClassifyKeyInput:
    """Input for classifying a single key."""

    kind: KeyKind
    key: str


# --- Output Models ---


@dataclass(frozen=True)
class ClassifyOutput:
    """Output for key classification."""

    kind: KeyKind
    key: str
    trusted: bool
    success: bool = True
