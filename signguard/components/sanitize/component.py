"""
Sanitize component - Text tree rewriting against key fingerprinting.

Provides the single rewrite the host applies to sign text before the
editing surface renders it.

Invariants:
- I1: Output tree has the input's shape, styles and sibling order
- I2: Only keybind/translatable content changes, and only into literals
- I3: Trusted references stay dynamic
- I4: A second pass changes nothing
"""

from __future__ import annotations

from signguard.domain.text import MalformedTreeError, TextNode

from ._impl import (
    DEFAULT_CONFIG,
    SanitizerConfig,
    find_untrusted,
    sanitize,
)
from .models import (
    NeutralizedKey,
    SanitizeLinesInput,
    SanitizeLinesOutput,
    SanitizeOutput,
    SanitizeTextInput,
)
from .ports import ClassifierPort

# --- Component Entry Points ---


def run_sanitize(
    inp: SanitizeTextInput,
    *,
    classifier: ClassifierPort | None = None,
    config: SanitizerConfig = DEFAULT_CONFIG,
) -> SanitizeOutput:
    """
    Sanitize a single text tree.

    Args:
        inp: Input containing the tree.
        classifier: Optional classifier port. Defaults to the vanilla whitelist.
        config: Sanitizer limits.

    Returns:
        SanitizeOutput with the rewritten tree and the neutralized keys.
        On a malformed tree, node is None and success is False.
    """
    try:
        node = sanitize(inp.node, classifier, config)
    except MalformedTreeError as e:
        return SanitizeOutput(node=None, error=str(e), success=False)

    return SanitizeOutput(
        node=node,
        neutralized=find_untrusted(inp.node, classifier),
    )


def run_sanitize_lines(
    inp: SanitizeLinesInput,
    *,
    classifier: ClassifierPort | None = None,
    config: SanitizerConfig = DEFAULT_CONFIG,
) -> SanitizeLinesOutput:
    """
    Sanitize an ordered group of lines (e.g. the four lines of a sign face).

    Fails as a whole if any line is malformed; no partial result is returned.
    """
    lines: list[TextNode] = []
    neutralized: list[NeutralizedKey] = []
    for line in inp.lines:
        result = run_sanitize(SanitizeTextInput(line), classifier=classifier, config=config)
        if not result.success or result.node is None:
            return SanitizeLinesOutput(lines=(), error=result.error, success=False)
        lines.append(result.node)
        neutralized.extend(result.neutralized)

    return SanitizeLinesOutput(lines=tuple(lines), neutralized=neutralized)


def run(
    inp: SanitizeTextInput | SanitizeLinesInput,
    *,
    classifier: ClassifierPort | None = None,
    config: SanitizerConfig = DEFAULT_CONFIG,
) -> SanitizeOutput | SanitizeLinesOutput:
    """
    Main entry point for the sanitize component.

    Dispatches to appropriate handler based on input type.
    """
    if isinstance(inp, SanitizeTextInput):
        return run_sanitize(inp, classifier=classifier, config=config)
    elif isinstance(inp, SanitizeLinesInput):
        return run_sanitize_lines(inp, classifier=classifier, config=config)
    else:
        raise ValueError(f"Unknown input type: {type(inp)}")
