"""Character source loading: files, URLs and on-chain blobs.

Every source ends up in ``json_to_character``, which validates the raw
object, seeds character-scoped secrets from the environment, resolves
plugin identifiers and merges any ``extends`` bases underneath it.
"""

from __future__ import annotations

import asyncio
import json
import os
from collections.abc import Mapping
from pathlib import Path
from typing import Any

import httpx
from pydantic import ValidationError

from agentboot.config.logging import get_logger
from agentboot.errors import NotFoundError, ParseOrValidationError
from agentboot.plugins.registry import CapabilityRegistry

from .merge import merge_characters
from .secrets import seed_character_secrets
from .types import Character

logger = get_logger("characters")

# Directory the loader is installed in; candidates 4-7 are relative to it
INSTALL_DIR = Path(__file__).resolve().parent


def candidate_paths(
    hint: str | os.PathLike[str],
    cwd: Path | None = None,
    install_dir: Path | None = None,
) -> list[Path]:
    """Ordered candidate locations for a character path hint."""
    cwd = Path.cwd() if cwd is None else Path(cwd)
    install_dir = INSTALL_DIR if install_dir is None else Path(install_dir)
    hint_path = Path(hint)
    basename = hint_path.name

    return [
        hint_path,
        cwd / hint_path,
        cwd / "agent" / hint_path,
        install_dir / hint_path,
        install_dir / "characters" / basename,
        install_dir.parent / "characters" / basename,
        install_dir.parent.parent / "characters" / basename,
    ]


def try_load_file(path: Path) -> str | None:
    """Read a file as UTF-8, or ``None`` if it cannot be read.

    Raises:
        ParseOrValidationError: The file exists but is not valid UTF-8
    """
    try:
        raw = path.read_bytes()
    except OSError:
        return None
    try:
        return raw.decode("utf-8")
    except UnicodeDecodeError as e:
        raise ParseOrValidationError(f"Character file {path} is not valid UTF-8: {e}", source=str(path)) from e


def parse_character_json(content: str, source: str | None) -> Any:
    try:
        return json.loads(content)
    except json.JSONDecodeError as e:
        raise ParseOrValidationError(f"Invalid JSON in character from {source}: {e}", source=source) from e


def validate_character(data: Any, source: str | None) -> Character:
    """Validate a raw character object without discarding unknown keys."""
    if not isinstance(data, dict):
        raise ParseOrValidationError(
            f"Character from {source} must be a JSON object, got {type(data).__name__}", source=source
        )
    try:
        return Character.model_validate(data)
    except ValidationError as e:
        raise ParseOrValidationError(f"Invalid character from {source}: {e}", source=source) from e


async def resolve_character_data(
    source: str | None,
    data: Any,
    registry: CapabilityRegistry | None = None,
    environ: Mapping[str, str] | None = None,
) -> dict[str, Any]:
    """Validate, seed, resolve plugins and merge bases; returns the raw form.

    ``source`` is the file the data came from; ``extends`` entries are
    resolved against its directory, or the working directory for
    URL and on-chain sources.
    """
    validate_character(data, source)
    registry = registry or CapabilityRegistry.get_instance()

    seed_character_secrets(data, environ)
    data["plugins"] = await registry.resolve_plugins(data.get("plugins") or [])

    extends = list(data.get("extends") or [])
    if extends:
        logger.info(f"Merging {data.get('name')} character with parent characters")
        base_dir = Path(source).parent if source and not _is_url(source) else Path.cwd()
        for extend_path in extends:
            base = await load_character_data(base_dir / extend_path, registry, environ)
            data = merge_characters(base, data)
            logger.info(f"Merged {data.get('name')} with {base.get('name')}")

    return data


async def json_to_character(
    source: str | None,
    data: Any,
    registry: CapabilityRegistry | None = None,
    environ: Mapping[str, str] | None = None,
) -> Character:
    """Turn one raw character object into a resolved ``Character``."""
    resolved = await resolve_character_data(source, data, registry, environ)
    return validate_character(resolved, source)


async def load_character_data(
    path: Path,
    registry: CapabilityRegistry | None = None,
    environ: Mapping[str, str] | None = None,
) -> dict[str, Any]:
    content = await asyncio.to_thread(try_load_file, path)
    if content is None:
        raise NotFoundError(f"Character file not found: {path}", source=str(path), attempted=[str(path)])
    return await resolve_character_data(str(path), parse_character_json(content, str(path)), registry, environ)


async def load_character(
    path: str | os.PathLike[str],
    registry: CapabilityRegistry | None = None,
    environ: Mapping[str, str] | None = None,
) -> Character:
    """Load a character from this exact path (no candidate search)."""
    path = Path(path)
    data = await load_character_data(path, registry, environ)
    return validate_character(data, str(path))


async def load_character_try_path(
    hint: str,
    *,
    cwd: Path | None = None,
    install_dir: Path | None = None,
    registry: CapabilityRegistry | None = None,
    environ: Mapping[str, str] | None = None,
) -> Character:
    """Load a character from the first candidate location that can be read.

    Raises:
        NotFoundError: No candidate could be read; ``attempted`` lists them all
        ParseOrValidationError: The first readable candidate is malformed
    """
    paths = candidate_paths(hint, cwd, install_dir)
    logger.info("Trying paths:")
    for path in paths:
        logger.info(f"  {path} (exists={path.exists()})")

    resolved_path: Path | None = None
    content: str | None = None
    for path in paths:
        content = await asyncio.to_thread(try_load_file, path)
        if content is not None:
            resolved_path = path
            break

    if resolved_path is None or content is None:
        attempted = [str(p) for p in paths]
        logger.error(f"Error loading character from {hint}: File not found in any of the expected locations")
        logger.error("Tried the following paths:")
        for path in attempted:
            logger.error(f" - {path}")
        raise NotFoundError(
            f"Error loading character from {hint}: File not found in any of the expected locations",
            source=hint,
            attempted=attempted,
        )

    source = str(resolved_path)
    try:
        character = await json_to_character(source, parse_character_json(content, source), registry, environ)
    except ParseOrValidationError as e:
        logger.error(f"Error parsing character from {source}: {e}")
        raise
    logger.info(f"Successfully loaded character from: {source}")
    return character


async def load_characters_from_url(
    url: str,
    *,
    client: httpx.AsyncClient | None = None,
    registry: CapabilityRegistry | None = None,
    environ: Mapping[str, str] | None = None,
) -> list[Character]:
    """Fetch a character, or a JSON array of characters, from ``url``.

    Raises:
        NotFoundError: The request failed or returned an error status
        ParseOrValidationError: The body is not valid character JSON
    """
    try:
        if client is None:
            async with httpx.AsyncClient(follow_redirects=True) as owned:
                response = await owned.get(url)
        else:
            response = await client.get(url)
        response.raise_for_status()
    except httpx.HTTPError as e:
        logger.error(f"Error loading character(s) from {url}: {e}")
        raise NotFoundError(f"Error loading character(s) from {url}: {e}", source=url, attempted=[url]) from e

    payload = parse_character_json(response.text, url)
    items = payload if isinstance(payload, list) else [payload]
    return [await json_to_character(url, item, registry, environ) for item in items]


async def load_character_from_onchain(
    blob: str | None,
    *,
    registry: CapabilityRegistry | None = None,
    environ: Mapping[str, str] | None = None,
    wallet_address: str | None = None,
) -> list[Character]:
    """Decode an externally supplied on-chain character blob.

    An empty (or ``"null"``) blob yields no characters. Plugins are
    resolved only when every entry is a string. ``extends`` is not
    followed for on-chain characters.
    """
    if not blob or blob.strip() == "null":
        return []

    source = f"onchain:{wallet_address}" if wallet_address else "onchain"
    data = parse_character_json(blob, source)
    validate_character(data, source)

    seed_character_secrets(data, environ)

    plugins = data.get("plugins") or []
    if plugins and all(isinstance(p, str) for p in plugins):
        registry = registry or CapabilityRegistry.get_instance()
        data["plugins"] = await registry.resolve_plugins(plugins)

    character = validate_character(data, source)
    logger.info(f"Successfully loaded character from: {wallet_address or 'on-chain blob'}")
    return [character]


def _is_url(source: str) -> bool:
    return source.startswith(("http://", "https://"))
