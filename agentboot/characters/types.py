"""Character data model.

A character is validated with pydantic but keeps every key it was given:
unknown keys survive merging and are ignored by the boot pipeline.
"""

from __future__ import annotations

import uuid
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

# Namespace for ids derived from character names
CHARACTER_NAMESPACE = uuid.UUID("6f1c1f43-3a56-4d7e-9b35-62d2f0a0c1e7")


class CharacterSettings(BaseModel):
    """Character-scoped settings; only ``secrets`` is interpreted here."""

    model_config = ConfigDict(extra="allow")

    secrets: dict[str, str] = Field(default_factory=dict)

    @field_validator("secrets", mode="before")
    @classmethod
    def _stringify_secrets(cls, value: Any) -> Any:
        if value is None:
            return {}
        if isinstance(value, dict):
            return {str(k): "" if v is None else str(v) for k, v in value.items()}
        return value


class Character(BaseModel):
    """Declarative configuration for one agent instance.

    Attributes:
        id: Stable identifier, derived from ``name`` by ``ensure_identity`` if absent
        name: Display name
        username: Defaults to ``name``
        model_provider: Model provider key (JSON ``modelProvider``)
        clients: Client-type identifiers the character wants active
        plugins: Plugin identifiers or already-resolved capability objects
        extends: Paths of base characters merged underneath this one
        settings: Character settings, including ``secrets``
    """

    model_config = ConfigDict(extra="allow", populate_by_name=True, arbitrary_types_allowed=True)

    id: str | None = None
    name: str
    username: str | None = None
    model_provider: str | None = Field(default=None, alias="modelProvider")
    clients: list[str] = Field(default_factory=list)
    plugins: list[Any] = Field(default_factory=list)
    extends: list[str] = Field(default_factory=list)
    settings: CharacterSettings = Field(default_factory=CharacterSettings)

    @field_validator("clients", "plugins", "extends", mode="before")
    @classmethod
    def _none_to_list(cls, value: Any) -> Any:
        return [] if value is None else value

    @field_validator("settings", mode="before")
    @classmethod
    def _none_to_settings(cls, value: Any) -> Any:
        return {} if value is None else value

    @property
    def secrets(self) -> dict[str, str]:
        return self.settings.secrets


def character_id_from_name(name: str) -> str:
    """Deterministic id for a character that declares none."""
    return str(uuid.uuid5(CHARACTER_NAMESPACE, name))


def ensure_identity(character: Character) -> Character:
    """Default ``id`` and ``username`` in place; both are set once."""
    if not character.id:
        character.id = character_id_from_name(character.name)
    if not character.username:
        character.username = character.name
    return character
