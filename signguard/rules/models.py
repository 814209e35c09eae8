from pydantic import BaseModel, ConfigDict, Field, field_validator

from signguard.components.keys import KeyWhitelist

SUPPORTED_SCHEMA_VERSION = 1


class WhitelistRules(BaseModel):
    """Whitelist tables as stored in whitelist.yaml."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    schema_version: int
    keybind_prefixes: list[str] = Field(default_factory=list)
    keybind_exact: list[str] = Field(default_factory=list)
    translation_prefixes: list[str] = Field(default_factory=list)

    @field_validator("schema_version")
    @classmethod
    def _check_version(cls, v: int) -> int:
        if v != SUPPORTED_SCHEMA_VERSION:
            raise ValueError(f"unsupported schema_version {v}, expected {SUPPORTED_SCHEMA_VERSION}")
        return v

    @field_validator("keybind_prefixes", "keybind_exact", "translation_prefixes")
    @classmethod
    def _no_empty_entries(cls, v: list[str]) -> list[str]:
        # An empty prefix matches every key
        if any(not entry for entry in v):
            raise ValueError("entries must be non-empty strings")
        return v

    # --- WhitelistPort ---

    def get_keybind_prefixes(self) -> tuple[str, ...]:
        return tuple(self.keybind_prefixes)

    def get_keybind_exact(self) -> frozenset[str]:
        return frozenset(self.keybind_exact)

    def get_translation_prefixes(self) -> tuple[str, ...]:
        return tuple(self.translation_prefixes)

    def to_whitelist(self) -> KeyWhitelist:
        return KeyWhitelist(
            keybind_prefixes=self.get_keybind_prefixes(),
            keybind_exact=self.get_keybind_exact(),
            translation_prefixes=self.get_translation_prefixes(),
        )
