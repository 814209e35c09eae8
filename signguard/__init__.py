"""
signguard - Sign text sanitization against key-resolution fingerprinting.

Servers can send sign text whose translation or keybind keys only resolve
when a particular client add-on is installed. Rewriting every untrusted
reference to a literal of its raw key closes that channel.
"""

from signguard.components.keys import is_trusted_keybind, is_trusted_translation
from signguard.components.sanitize import sanitize
from signguard.shell.sign_editor import open_sign_editor

__all__ = [
    "is_trusted_keybind",
    "is_trusted_translation",
    "open_sign_editor",
    "sanitize",
]
