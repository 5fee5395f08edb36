"""Secret scope resolution.

Two lookups live here:

- ``get_secret`` is the general two-tier resolver used by capability
  activation: the character's own ``settings.secrets`` first, then the
  process environment.
- ``seed_character_secrets`` runs once at load time and copies every
  ``CHARACTER.<NORMALIZED_ID>.<KEY>`` environment variable into
  ``settings.secrets`` without overriding explicit values.
"""

from __future__ import annotations

import os
from collections.abc import Callable, Mapping
from typing import Any

from agentboot.config.logging import get_logger

from .types import Character

logger = get_logger("characters")

SecretLookup = Callable[[str], "str | None"]


def get_secret(
    character: Character | Mapping[str, Any],
    key: str,
    environ: Mapping[str, str] | None = None,
) -> str | None:
    """Resolve ``key`` for ``character``; empty values count as absent."""
    env = os.environ if environ is None else environ
    if isinstance(character, Character):
        secrets = character.settings.secrets
    else:
        secrets = ((character or {}).get("settings") or {}).get("secrets") or {}
    value = secrets.get(key)
    if value:
        return value
    return env.get(key) or None


def secret_lookup(character: Character, environ: Mapping[str, str] | None = None) -> SecretLookup:
    """Bind ``get_secret`` to one character, for factories that take a callback."""

    def lookup(key: str) -> str | None:
        return get_secret(character, key, environ)

    return lookup


def normalize_character_key(identity: str) -> str:
    """Uppercase and replace spaces with underscores."""
    return identity.upper().replace(" ", "_")


def character_env_prefix(data: Mapping[str, Any]) -> str:
    """Environment prefix for a raw character, keyed by ``id`` or ``name``."""
    identity = data.get("id") or data.get("name") or ""
    return f"CHARACTER.{normalize_character_key(str(identity))}."


def env_secrets_for(data: Mapping[str, Any], environ: Mapping[str, str] | None = None) -> dict[str, str]:
    """Collect ``CHARACTER.<ID>.*`` variables with the prefix stripped."""
    env = os.environ if environ is None else environ
    prefix = character_env_prefix(data)
    return {key[len(prefix) :]: value for key, value in env.items() if key.startswith(prefix)}


def seed_character_secrets(data: dict[str, Any], environ: Mapping[str, str] | None = None) -> dict[str, Any]:
    """Merge environment-derived secrets into a raw character in place.

    Existing explicit secrets win: ``{**from_env, **existing}``. Nothing
    changes when no variable matches.
    """
    derived = env_secrets_for(data, environ)
    if not derived:
        return data

    settings = data.get("settings")
    if not isinstance(settings, dict):
        settings = {}
        data["settings"] = settings
    existing = settings.get("secrets")
    if not isinstance(existing, dict):
        existing = {}
    settings["secrets"] = {**derived, **existing}
    logger.debug(f"Seeded {len(derived)} secret(s) for {data.get('name')}: {', '.join(sorted(derived))}")
    return data
