"""Client registry and activation."""

from .activator import determine_client_type, initialize_clients
from .registry import (
    ClientStarter,
    ClientType,
    clear_registry,
    client,
    get_client_starter,
    list_clients,
    register_client,
)

__all__ = [
    "ClientStarter",
    "ClientType",
    "clear_registry",
    "client",
    "determine_client_type",
    "get_client_starter",
    "initialize_clients",
    "list_clients",
    "register_client",
]
