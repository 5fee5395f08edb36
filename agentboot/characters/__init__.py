"""Character resolution: data model, secret scope, merging and loading."""

from .types import Character, CharacterSettings, character_id_from_name, ensure_identity
from .secrets import SecretLookup, get_secret, secret_lookup, seed_character_secrets
from .merge import merge_characters
from .loader import (
    candidate_paths,
    json_to_character,
    load_character,
    load_character_from_onchain,
    load_character_try_path,
    load_characters_from_url,
)
from .defaults import DEFAULT_CHARACTER, default_character
from .assembler import has_valid_remote_urls, load_all_characters, load_characters

__all__ = [
    "DEFAULT_CHARACTER",
    "Character",
    "CharacterSettings",
    "SecretLookup",
    "candidate_paths",
    "character_id_from_name",
    "default_character",
    "ensure_identity",
    "get_secret",
    "has_valid_remote_urls",
    "json_to_character",
    "load_all_characters",
    "load_character",
    "load_character_from_onchain",
    "load_character_try_path",
    "load_characters",
    "load_characters_from_url",
    "merge_characters",
    "secret_lookup",
    "seed_character_secrets",
]
