"""
Whitelist loader.

The vanilla tables are compiled in; a deployment may instead ship them as a
versioned YAML file. Loading is fail-fast: a broken whitelist must never
silently fall back to trusting more keys.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path

import yaml
from pydantic import ValidationError

from signguard.components.keys import DEFAULT_WHITELIST, KeyWhitelist
from signguard.rules.models import WhitelistRules

logger = logging.getLogger(__name__)

# Environment variable naming an external whitelist file
WHITELIST_ENV_VAR = "SIGNGUARD_WHITELIST"


def load_whitelist_rules(path: Path) -> WhitelistRules:
    """
    Load and validate a whitelist file.

    Raises FileNotFoundError if file missing.
    Raises ValueError if YAML or schema invalid.
    """
    if not path.exists():
        raise FileNotFoundError(f"Whitelist file not found at: {path}")

    try:
        data = yaml.safe_load(path.read_text())
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid YAML syntax in whitelist file: {e}") from e

    try:
        return WhitelistRules.model_validate(data)
    except ValidationError as e:
        raise ValueError(f"Whitelist validation failed:\n{e}") from e


def load_whitelist(path: Path) -> KeyWhitelist:
    """Load a whitelist file into match tables."""
    rules = load_whitelist_rules(path)
    logger.info(
        "Loaded key whitelist from %s (%d keybind prefixes, %d keybinds, %d translation prefixes)",
        path,
        len(rules.keybind_prefixes),
        len(rules.keybind_exact),
        len(rules.translation_prefixes),
    )
    return rules.to_whitelist()


def resolve_whitelist(path: Path | str | None = None) -> KeyWhitelist:
    """
    Pick the whitelist for this process.

    Order: explicit path, then $SIGNGUARD_WHITELIST, then the compiled-in
    vanilla tables.
    """
    if path is None:
        env_path = os.environ.get(WHITELIST_ENV_VAR)
        if not env_path:
            return DEFAULT_WHITELIST
        path = env_path

    return load_whitelist(Path(path))
