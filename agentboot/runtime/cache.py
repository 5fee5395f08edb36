"""Cache store selection for one character."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Any

from agentboot.characters.types import Character
from agentboot.config.logging import get_logger
from agentboot.errors import ConfigurationError

logger = get_logger("runtime")


class CacheStore(str, Enum):
    REDIS = "redis"
    DATABASE = "database"
    FILESYSTEM = "filesystem"


@dataclass(frozen=True)
class CacheSelection:
    """Where a character's cache lives; keyed by character id."""

    store: CacheStore
    character_id: str
    redis_url: str | None = None
    directory: Path | None = None
    database: Any = None


def _require_id(character: Character, store: CacheStore) -> str:
    if not character.id:
        raise ConfigurationError(f"CacheStore.{store.name} requires id to be set in character definition")
    return character.id


def select_cache(
    store: str,
    character: Character,
    base_dir: str | Path | None = None,
    db: Any = None,
    redis_url: str | None = None,
) -> CacheSelection:
    """Select the cache store for ``character``.

    Raises:
        ConfigurationError: Unknown store, missing store configuration or
            a character without an id
    """
    try:
        cache_store = CacheStore(store)
    except ValueError:
        raise ConfigurationError(f"Invalid cache store: {store} or required configuration missing.") from None

    if cache_store is CacheStore.REDIS:
        if not redis_url:
            raise ConfigurationError("REDIS_URL environment variable is not set.")
        logger.info("Connecting to Redis...")
        return CacheSelection(cache_store, _require_id(character, cache_store), redis_url=redis_url)

    if cache_store is CacheStore.DATABASE:
        if db is None:
            raise ConfigurationError("Database adapter is not provided for CacheStore.DATABASE.")
        logger.info("Using Database Cache...")
        return CacheSelection(cache_store, _require_id(character, cache_store), database=db)

    logger.info("Using File System Cache...")
    if not base_dir:
        raise ConfigurationError("baseDir must be provided for CacheStore.FILESYSTEM.")
    character_id = _require_id(character, cache_store)
    return CacheSelection(cache_store, character_id, directory=Path(base_dir).resolve() / character_id / "cache")
