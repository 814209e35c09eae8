"""
Keys component - Vanilla keybind and translation key whitelist.
"""

from ._impl import (
    DEFAULT_CLASSIFIER,
    DEFAULT_WHITELIST,
    VANILLA_KEYBIND_ACTIONS,
    VANILLA_KEYBIND_PREFIXES,
    VANILLA_TRANSLATION_PREFIXES,
    KeyClassifier,
    KeyWhitelist,
    is_trusted,
    is_trusted_keybind,
    is_trusted_translation,
)
from .component import run, run_classify
from .models import ClassifyKeyInput, ClassifyOutput, KeyKind
from .ports import WhitelistPort

__all__ = [
    # Entry points
    "run",
    "run_classify",
    # Models
    "ClassifyKeyInput",
    "ClassifyOutput",
    "KeyKind",
    # Ports
    "WhitelistPort",
    # Classification
    "DEFAULT_CLASSIFIER",
    "DEFAULT_WHITELIST",
    "KeyClassifier",
    "KeyWhitelist",
    "VANILLA_KEYBIND_ACTIONS",
    "VANILLA_KEYBIND_PREFIXES",
    "VANILLA_TRANSLATION_PREFIXES",
    "is_trusted",
    "is_trusted_keybind",
    "is_trusted_translation",
]
