"""
Keys component - Vanilla key classification.

Invariants:
- I1: Unknown keys are untrusted
- I2: Translation trust requires a leading prefix match
- I3: Empty keys are untrusted
"""

from __future__ import annotations

from ._impl import DEFAULT_WHITELIST, KeyWhitelist, is_trusted
from .models import ClassifyKeyInput, ClassifyOutput
from .ports import WhitelistPort


def _build_whitelist(rules: WhitelistPort | None) -> KeyWhitelist:
    """Build whitelist from rules port."""
    if rules is None:
        return DEFAULT_WHITELIST

    return KeyWhitelist(
        keybind_prefixes=rules.get_keybind_prefixes(),
        keybind_exact=rules.get_keybind_exact(),
        translation_prefixes=rules.get_translation_prefixes(),
    )


# --- Component Entry Points ---


def run_classify(
    inp: ClassifyKeyInput,
    *,
    rules: WhitelistPort | None = None,
) -> ClassifyOutput:
    """
    Classify a keybind or translation key.

    Args:
        inp: Input containing the key and its kind.
        rules: Optional rules port supplying the whitelist tables.

    Returns:
        ClassifyOutput with the trust decision.
    """
    whitelist = _build_whitelist(rules)
    return ClassifyOutput(
        kind=inp.kind,
        key=inp.key,
        trusted=is_trusted(inp.kind, inp.key, whitelist),
    )


def run(
    inp: ClassifyKeyInput,
    *,
    rules: WhitelistPort | None = None,
) -> ClassifyOutput:
    """Main entry point for the keys component."""
    if isinstance(inp, ClassifyKeyInput):
        return run_classify(inp, rules=rules)
    raise ValueError(f"Unknown input type: {type(inp)}")
