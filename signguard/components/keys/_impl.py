"""
KeyClassifier - Vanilla key whitelist.

Decides whether a keybind or translation key belongs to the base game
vocabulary. Anything not provably vanilla is untrusted.

Key behaviors:
- Keybinds: prefix match on key.keyboard./key.mouse. or exact action match
- Translations: case-sensitive leading-prefix match only
- Empty and malformed keys are untrusted
- Pure and total; never raises for any string
"""

from __future__ import annotations

from dataclasses import dataclass, field

from .models import KeyKind

# --- Vanilla Tables ---

VANILLA_KEYBIND_PREFIXES: tuple[str, ...] = (
    "key.keyboard.",
    "key.mouse.",
)

VANILLA_KEYBIND_ACTIONS: frozenset[str] = frozenset(
    [
        "key.attack",
        "key.use",
        "key.forward",
        "key.back",
        "key.left",
        "key.right",
        "key.jump",
        "key.sneak",
        "key.sprint",
        "key.drop",
        "key.inventory",
        "key.swapOffhand",
        "key.chat",
        "key.playerlist",
        "key.command",
        "key.screenshot",
        "key.togglePerspective",
        "key.smoothCamera",
        "key.fullscreen",
        "key.spectatorOutlines",
        "key.advancements",
        "key.hotbar.1",
        "key.hotbar.2",
        "key.hotbar.3",
        "key.hotbar.4",
        "key.hotbar.5",
        "key.hotbar.6",
        "key.hotbar.7",
        "key.hotbar.8",
        "key.hotbar.9",
        "key.saveToolbarActivator",
        "key.loadToolbarActivator",
        "key.pickItem",
        "key.socialInteractions",
    ]
)

# Hand-curated from observed vanilla namespaces. Known to be incomplete;
# missing families render as their raw key, which is safe.
VANILLA_TRANSLATION_PREFIXES: tuple[str, ...] = (
    # Registries
    "block.minecraft.",
    "item.minecraft.",
    "entity.minecraft.",
    "biome.minecraft.",
    "effect.minecraft.",
    "enchantment.minecraft.",
    "potion.minecraft.",
    "advancement.",
    "advancements.",
    "stat.minecraft.",
    # Screens and menus
    "container.",
    "gui.",
    "menu.",
    "chat.",
    "commands.",
    "command.",
    "argument.",
    "selectWorld.",
    "createWorld.",
    "multiplayer.",
    "connect.",
    "disconnect.",
    "options.",
    "controls.",
    "key.",
    "soundCategory.",
    "record.",
    "subtitles.",
    "death.",
    "deathScreen.",
    "gameMode.",
    "selectServer.",
    "addServer.",
    "lanServer.",
    "title.",
    "narrator.",
    "accessibility.",
    "pack.",
    "resourcePack.",
    "dataPack.",
    "optimizeWorld.",
    "debug.",
    "demo.",
    "screenshot.",
    "book.",
    "lectern.",
    "merchant.",
    "filled_map.",
    "attribute.",
    "slot.",
    "color.",
    "painting.",
    "structure_block.",
    "jigsaw_block.",
    "gamerule.",
    "generator.",
    "flat_world_preset.",
    "world_preset.",
    "dimension.",
    # Data-driven variants
    "trim_material.",
    "trim_pattern.",
    "instrument.",
    "banner_pattern.",
    "wolf_variant.",
    "cat_variant.",
    "frog_variant.",
    "goat_horn_sound.",
    "spectatorMenu.",
    "telemetry.",
    "trial_spawner.",
)


# --- Configuration ---


@dataclass(frozen=True)
class KeyWhitelist:
    """Match tables for trusted keys."""

    keybind_prefixes: tuple[str, ...] = VANILLA_KEYBIND_PREFIXES
    keybind_exact: frozenset[str] = field(default_factory=lambda: VANILLA_KEYBIND_ACTIONS)
    translation_prefixes: tuple[str, ...] = VANILLA_TRANSLATION_PREFIXES


# Default whitelist
DEFAULT_WHITELIST = KeyWhitelist()


# --- Classification ---


def is_trusted_keybind(key: str, whitelist: KeyWhitelist = DEFAULT_WHITELIST) -> bool:
    """Check if a keybind key is vanilla."""
    if not key:
        return False
    if key.startswith(whitelist.keybind_prefixes):
        return True
    return key in whitelist.keybind_exact


def is_trusted_translation(key: str, whitelist: KeyWhitelist = DEFAULT_WHITELIST) -> bool:
    """
    Check if a translation key is vanilla.

    Only a true leading prefix counts: "mygui.foo" is not trusted even
    though it contains "gui.".
    """
    if not key:
        return False
    return key.startswith(whitelist.translation_prefixes)


def is_trusted(kind: KeyKind, key: str, whitelist: KeyWhitelist = DEFAULT_WHITELIST) -> bool:
    """Check a key of the given kind against the whitelist."""
    if kind is KeyKind.KEYBIND:
        return is_trusted_keybind(key, whitelist)
    return is_trusted_translation(key, whitelist)


class KeyClassifier:
    """
    Whitelist-backed classifier.

    Satisfies the sanitize component's ClassifierPort.
    """

    def __init__(self, whitelist: KeyWhitelist = DEFAULT_WHITELIST) -> None:
        self.whitelist = whitelist

    def is_trusted_keybind(self, key: str) -> bool:
        return is_trusted_keybind(key, self.whitelist)

    def is_trusted_translation(self, key: str) -> bool:
        return is_trusted_translation(key, self.whitelist)


DEFAULT_CLASSIFIER = KeyClassifier()
