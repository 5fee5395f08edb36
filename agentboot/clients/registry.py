"""Registry of built-in client starters.

Each known client type maps to a ``start(runtime)`` collaborator. Client
packages register themselves with the ``client`` decorator:

    @client(ClientType.DISCORD)
    class DiscordClientInterface:
        @staticmethod
        async def start(runtime):
            ...

or with ``register_client(ClientType.DISCORD, start)`` for a plain
function.
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from enum import Enum
from typing import Any, TypeVar

from agentboot.config.logging import get_logger

logger = get_logger("clients")

T = TypeVar("T")

ClientStarter = Callable[[Any], "Awaitable[Any] | Any"]


class ClientType(str, Enum):
    """Known client types, in the order they are started."""

    AUTO = "auto"
    XMTP = "xmtp"
    DISCORD = "discord"
    TELEGRAM = "telegram"
    TELEGRAM_ACCOUNT = "telegram_account"
    TWITTER = "twitter"
    ALEXA = "alexa"
    INSTAGRAM = "instagram"
    FARCASTER = "farcaster"
    LENS = "lens"
    SIMSAI = "simsai"
    SLACK = "slack"


# Global starter registry, keyed by ClientType value
_client_registry: dict[str, ClientStarter] = {}


def _key(client_type: ClientType | str) -> str:
    return client_type.value if isinstance(client_type, ClientType) else ClientType(client_type.lower()).value


def register_client(client_type: ClientType | str, starter: ClientStarter) -> None:
    """Register the start collaborator for a known client type.

    Raises:
        ValueError: ``client_type`` is not a known type
    """
    key = _key(client_type)
    _client_registry[key] = starter
    logger.debug(f"Registered client: {key}")


def client(client_type: ClientType | str) -> Callable[[T], T]:
    """Decorator registering a class with a ``start`` method, or a start function."""

    def decorator(obj: T) -> T:
        starter = getattr(obj, "start", obj)
        if not callable(starter):
            raise TypeError(f"{obj!r} has no callable start")
        register_client(client_type, starter)
        return obj

    return decorator


def get_client_starter(client_type: ClientType | str) -> ClientStarter | None:
    return _client_registry.get(_key(client_type))


def list_clients() -> list[str]:
    """List registered client types."""
    return list(_client_registry.keys())


def clear_registry() -> None:
    """Clear the client registry (for testing)."""
    _client_registry.clear()
