"""
Keys component port definitions.
"""

from __future__ import annotations

from typing import Protocol


class WhitelistPort(Protocol):
    """Port for accessing whitelist tables."""

    def get_keybind_prefixes(self) -> tuple[str, ...]:
        """Get trusted keybind prefixes."""
        ...

    def get_keybind_exact(self) -> frozenset[str]:
        """Get trusted exact keybind identifiers."""
        ...

    def get_translation_prefixes(self) -> tuple[str, ...]:
        """Get trusted translation prefixes."""
        ...
