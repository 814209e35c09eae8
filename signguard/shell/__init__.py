"""Host integration points."""

from signguard.shell.sign_editor import (
    SIGN_LINE_COUNT,
    SignEditSurface,
    SignText,
    open_sign_editor,
    sign_text_from_json,
)

__all__ = [
    "SIGN_LINE_COUNT",
    "SignEditSurface",
    "SignText",
    "open_sign_editor",
    "sign_text_from_json",
]
