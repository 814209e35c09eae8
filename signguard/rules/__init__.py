"""Externalized whitelist rules."""

from signguard.rules.loader import (
    WHITELIST_ENV_VAR,
    load_whitelist,
    load_whitelist_rules,
    resolve_whitelist,
)
from signguard.rules.models import WhitelistRules

__all__ = [
    "WHITELIST_ENV_VAR",
    "WhitelistRules",
    "load_whitelist",
    "load_whitelist_rules",
    "resolve_whitelist",
]
