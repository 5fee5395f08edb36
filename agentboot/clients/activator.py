"""Start a character's clients.

Built-in types are started in ``ClientType`` order when the character
declares them. Clients contributed by capability modules are started
afterwards and keyed by ``determine_client_type``.

There is at most one client per type key; a later client with the same
key replaces the earlier one. Two unrelated clients whose class names
reduce to the same key will therefore collide.
"""

from __future__ import annotations

import inspect
import time
from collections.abc import Iterable, Mapping
from typing import Any

from agentboot.characters.types import Character
from agentboot.config.logging import get_logger

from .registry import ClientStarter, ClientType, get_client_starter

logger = get_logger("clients")

# Class names that say nothing about the client's type
GENERIC_CLASS_NAMES = frozenset({"dict", "SimpleNamespace"})


def determine_client_type(client: Any) -> str:
    """Type key for a client contributed by a capability module.

    An explicit ``type`` attribute wins; otherwise the lower-cased class
    name without a trailing ``client``; otherwise ``client_<ms>``.
    """
    explicit = client.get("type") if isinstance(client, Mapping) else getattr(client, "type", None)
    if isinstance(explicit, str) and explicit:
        return explicit

    class_name = type(client).__name__
    if class_name and "Object" not in class_name and class_name not in GENERIC_CLASS_NAMES:
        key = class_name.lower()
        if key.endswith("client") and key != "client":
            key = key[: -len("client")]
        return key

    return f"client_{int(time.time() * 1000)}"


async def _start(starter: ClientStarter, runtime: Any) -> Any:
    result = starter(runtime)
    if inspect.isawaitable(result):
        result = await result
    return result


def _start_method(client: Any) -> ClientStarter:
    if isinstance(client, Mapping):
        return client["start"]
    return client.start


def _capabilities_with_clients(*groups: Iterable[Any]) -> list[Any]:
    seen: set[int] = set()
    found = []
    for group in groups:
        for capability in group or []:
            if id(capability) in seen:
                continue
            seen.add(id(capability))
            if isinstance(capability, Mapping):
                clients = capability.get("clients")
            else:
                clients = getattr(capability, "clients", None)
            if clients:
                found.append(capability)
    return found


async def initialize_clients(
    character: Character,
    runtime: Any,
    plugins: Iterable[Any] | None = None,
) -> dict[str, Any]:
    """Start declared and contributed clients for one character.

    Args:
        character: Resolved character; ``clients`` is matched case-insensitively
        runtime: Runtime passed to every ``start``
        plugins: Activated capabilities, scanned after ``character.plugins``

    Returns:
        Mapping of client type key to started client

    Raises:
        Exception: whatever a client's ``start`` raises
    """
    clients: dict[str, Any] = {}
    client_types = [str(c).lower() for c in character.clients]
    logger.info(f"initializeClients {client_types} for {character.name}")

    for client_type in ClientType:
        if client_type.value not in client_types:
            continue
        starter = get_client_starter(client_type)
        if starter is None:
            logger.warning(f"No client registered for type {client_type.value}")
            continue
        started = await _start(starter, runtime)
        if started is not None:
            clients[client_type.value] = started

    unknown = sorted(set(client_types) - {t.value for t in ClientType})
    if unknown:
        logger.warning(f"Ignoring unknown client types: {', '.join(unknown)}")

    logger.debug(f"client keys {list(clients)}")

    for capability in _capabilities_with_clients(character.plugins, plugins or []):
        contributed = capability.get("clients") if isinstance(capability, Mapping) else capability.clients
        for contributed_client in contributed:
            started = await _start(_start_method(contributed_client), runtime)
            key = determine_client_type(contributed_client)
            if started is None:
                logger.debug(f"Client of type {key} did not start")
                continue
            logger.debug(f"Initializing client of type: {key}")
            if key in clients:
                logger.warning(f"Replacing client {key} with one contributed by a capability")
            clients[key] = started

    return clients
