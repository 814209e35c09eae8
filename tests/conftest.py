from pathlib import Path

import pytest

from signguard.components.keys import KeyClassifier
from signguard.domain.text import Style, keybind, literal, translatable

PROJECT_ROOT = Path(__file__).parent.parent


@pytest.fixture
def whitelist_path() -> Path:
    """The whitelist file shipped at the project root."""
    path = PROJECT_ROOT / "whitelist.yaml"
    if not path.exists():
        raise FileNotFoundError(f"Whitelist not found at {path}")
    return path


@pytest.fixture
def classifier() -> KeyClassifier:
    return KeyClassifier()


@pytest.fixture
def mixed_tree():
    """
    Literal parent with a trusted keybind child and an untrusted
    translatable child, each styled differently.
    """
    return literal(
        "hello",
        Style(color="red"),
        keybind("key.jump", Style(bold=True)),
        translatable("examplemod.hud.title", (), Style(italic=True)),
    )
