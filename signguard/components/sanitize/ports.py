"""
Sanitize component port definitions.
"""

from __future__ import annotations

from typing import Protocol


class ClassifierPort(Protocol):
    """Port deciding which key references may stay dynamic."""

    def is_trusted_keybind(self, key: str) -> bool:
        """Check if a keybind key is trusted."""
        ...

    def is_trusted_translation(self, key: str) -> bool:
        """Check if a translation key is trusted."""
        ...
