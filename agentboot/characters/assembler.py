"""Assemble the set of characters to boot.

Sources are tried in priority order and are not layered:

1. on-chain identity + RPC endpoint configured: the on-chain blob
2. explicit paths or valid remote URLs: those
3. otherwise: the built-in default character

Any load failure aborts the whole set.
"""

from __future__ import annotations

import asyncio
import inspect
from collections.abc import Awaitable, Callable, Mapping
from pathlib import Path
from urllib.parse import urlparse

import httpx

from agentboot.config import get_settings
from agentboot.config._settings import AgentBootSettings
from agentboot.config.logging import get_logger
from agentboot.plugins.registry import CapabilityRegistry

from .defaults import default_character
from .loader import load_character_from_onchain, load_character_try_path, load_characters_from_url
from .types import Character

logger = get_logger("characters")

CharacterNormalizer = Callable[[Character], "Awaitable[Character] | Character"]


def comma_separated(value: str | None) -> list[str]:
    """Split a comma separated list, dropping blank entries."""
    if not value:
        return []
    return [item.strip() for item in value.split(",") if item.strip()]


def is_absolute_http_url(value: str) -> bool:
    parsed = urlparse(value)
    return parsed.scheme in ("http", "https") and bool(parsed.netloc)


def has_valid_remote_urls(settings: AgentBootSettings | None = None) -> bool:
    """True when ``REMOTE_CHARACTER_URLS`` holds only absolute http(s) URLs."""
    settings = settings or get_settings()
    urls = settings.characters.remote_url_list()
    return bool(urls) and all(is_absolute_http_url(url) for url in urls)


async def read_characters_from_storage(character_paths: list[str], storage_dir: Path) -> list[str]:
    """Append every file in the storage directory to ``character_paths``.

    Only file names are read. A missing directory is logged and leaves the
    list unchanged.
    """

    def _scan() -> list[str]:
        return sorted(str(p) for p in storage_dir.iterdir() if p.is_file())

    try:
        found = await asyncio.to_thread(_scan)
    except OSError as e:
        logger.error(f"Error reading directory {storage_dir}: {e}")
        return character_paths

    logger.info(f"Found {len(found)} character file(s) in {storage_dir}")
    return [*character_paths, *found]


async def load_characters(
    characters_arg: str | None,
    *,
    settings: AgentBootSettings | None = None,
    registry: CapabilityRegistry | None = None,
    http_client: httpx.AsyncClient | None = None,
    environ: Mapping[str, str] | None = None,
    cwd: Path | None = None,
) -> list[Character]:
    """Load explicit paths (plus the storage scan) and remote URLs, in that order."""
    settings = settings or get_settings()
    cwd = Path.cwd() if cwd is None else Path(cwd)

    character_paths = comma_separated(characters_arg)
    if settings.characters.use_storage:
        character_paths = await read_characters_from_storage(character_paths, cwd / settings.characters.storage_dir)

    loaded: list[Character] = []
    for character_path in character_paths:
        loaded.append(await load_character_try_path(character_path, cwd=cwd, registry=registry, environ=environ))

    if has_valid_remote_urls(settings):
        logger.info("Loading characters from remote URLs")
        for url in settings.characters.remote_url_list():
            loaded.extend(
                await load_characters_from_url(url, client=http_client, registry=registry, environ=environ)
            )

    return loaded


async def load_all_characters(
    characters_arg: str | None = None,
    *,
    settings: AgentBootSettings | None = None,
    registry: CapabilityRegistry | None = None,
    http_client: httpx.AsyncClient | None = None,
    normalizer: CharacterNormalizer | None = None,
    environ: Mapping[str, str] | None = None,
    cwd: Path | None = None,
) -> list[Character]:
    """Resolve the ordered, non-empty list of characters to boot.

    Args:
        characters_arg: Comma separated character paths from the CLI
        settings: Settings to read sources from (defaults to global settings)
        registry: Capability registry for plugin resolution
        http_client: Client used for remote character URLs
        normalizer: Per-character adaptation step applied after assembly
        environ: Environment for secret seeding (defaults to os.environ)
        cwd: Base directory for relative paths (defaults to the working directory)

    Raises:
        NotFoundError: A character path or URL produced no content
        ParseOrValidationError: A character was malformed
    """
    settings = settings or get_settings()

    if settings.onchain.configured:
        logger.info(f"Loading character from on-chain identity {settings.onchain.wallet_address}")
        characters = await load_character_from_onchain(
            settings.onchain.character_json,
            registry=registry,
            environ=environ,
            wallet_address=settings.onchain.wallet_address,
        )
    elif comma_separated(characters_arg) or has_valid_remote_urls(settings):
        characters = await load_characters(
            characters_arg,
            settings=settings,
            registry=registry,
            http_client=http_client,
            environ=environ,
            cwd=cwd,
        )
    else:
        characters = []

    if not characters:
        logger.info("No characters found, using default character")
        characters = [default_character()]

    if normalizer is not None:
        normalized = []
        for character in characters:
            result = normalizer(character)
            if inspect.isawaitable(result):
                result = await result
            normalized.append(result)
        characters = normalized

    return characters
