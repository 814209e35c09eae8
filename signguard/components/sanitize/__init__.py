"""
Sanitize component - Rewrites untrusted key references in text trees.
"""

from ._impl import (
    DEFAULT_CONFIG,
    SanitizerConfig,
    classify_content,
    find_untrusted,
    sanitize,
    sanitize_lines,
)
from .component import run, run_sanitize, run_sanitize_lines
from .models import (
    NeutralizedKey,
    SanitizeLinesInput,
    SanitizeLinesOutput,
    SanitizeOutput,
    SanitizeTextInput,
)
from .ports import ClassifierPort

__all__ = [
    # Entry points
    "run",
    "run_sanitize",
    "run_sanitize_lines",
    # Input models
    "SanitizeTextInput",
    "SanitizeLinesInput",
    # Output models
    "SanitizeOutput",
    "SanitizeLinesOutput",
    "NeutralizedKey",
    # Ports
    "ClassifierPort",
    # Core
    "DEFAULT_CONFIG",
    "SanitizerConfig",
    "classify_content",
    "find_untrusted",
    "sanitize",
    "sanitize_lines",
]
