"""Agent start orchestration.

``start_agent`` wires one character into a running agent:

1. default ``id`` and ``username``
2. resolve any plugin identifiers still given as strings
3. look up the model provider token
4. connect the database and select the cache
5. activate capabilities and build the runtime
6. initialize the runtime, start its clients, register it

If any step fails the database adapter is closed before the error is
re-raised.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from pathlib import Path

from agentboot.characters.types import Character, ensure_identity
from agentboot.clients.activator import initialize_clients
from agentboot.config import get_settings
from agentboot.config._settings import AgentBootSettings
from agentboot.config.logging import get_logger
from agentboot.plugins.activation import import_plugins
from agentboot.plugins.factories import CapabilityFactories
from agentboot.plugins.registry import CapabilityRegistry

from .cache import select_cache
from .database import DatabaseAdapterFactory, DatabaseBackend, create_database_adapter, select_database_backend
from .protocols import AgentRegistry, AgentRuntime, DatabaseAdapter, RuntimeFactory
from .tokens import get_token_for_provider

logger = get_logger("runtime")


@dataclass
class AgentServices:
    """Collaborators needed to start agents.

    Attributes:
        runtime_factory: Builds the agent runtime
        agent_registry: Container started agents are registered with
        database_factories: Adapter constructor per database backend
        capability_factories: Wallet and adapter capability constructors
        capability_registry: Registry for plugin identifiers (defaults to the singleton)
        settings: Settings (defaults to global settings)
        environ: Environment for the secret scope (defaults to os.environ)
    """

    runtime_factory: RuntimeFactory
    agent_registry: AgentRegistry
    database_factories: Mapping[DatabaseBackend, DatabaseAdapterFactory] = field(default_factory=dict)
    capability_factories: CapabilityFactories | None = None
    capability_registry: CapabilityRegistry | None = None
    settings: AgentBootSettings | None = None
    environ: Mapping[str, str] | None = None


async def start_agent(character: Character, services: AgentServices) -> AgentRuntime:
    """Start one agent for ``character``.

    Raises:
        AgentBootError: configuration, token or storage selection failed
        Exception: anything raised by the runtime, a database adapter or a client
    """
    settings = services.settings or get_settings()
    db: DatabaseAdapter | None = None

    try:
        ensure_identity(character)

        if any(isinstance(p, str) for p in character.plugins):
            registry = services.capability_registry or CapabilityRegistry.get_instance()
            character.plugins = await registry.resolve_plugins(character.plugins)

        token = get_token_for_provider(character.model_provider, character, services.environ)

        data_dir = Path(settings.database.data_dir)
        data_dir.mkdir(parents=True, exist_ok=True)

        selection = select_database_backend(settings.database, data_dir)
        db = create_database_adapter(selection, services.database_factories)
        await db.init()
        logger.info(f"Successfully connected to {selection.backend.value} database")

        cache = select_cache(
            settings.cache.store,
            character,
            base_dir=settings.cache.cache_dir or None,
            db=db,
            redis_url=settings.cache.redis_url or None,
        )

        activation = await import_plugins(
            character,
            token,
            inference=settings.inference,
            factories=services.capability_factories,
            environ=services.environ,
        )
        runtime = services.runtime_factory(
            character=character,
            database=db,
            cache=cache,
            token=token,
            plugins=activation.plugins,
            verifiable_inference_adapter=activation.verifiable_inference_adapter,
        )

        await runtime.initialize()

        runtime.clients = await initialize_clients(character, runtime, activation.plugins)

        services.agent_registry.register_agent(runtime)
        logger.info(f"Started {character.name} as {runtime.agent_id}", extra={"character": character.name})
        return runtime
    except Exception:
        logger.exception(f"Error starting agent for character {character.name}")
        if db is not None:
            try:
                await db.close()
            except Exception as close_error:
                logger.warning(f"Failed to close database for {character.name}: {close_error}")
        raise


async def start_agents(characters: Iterable[Character], services: AgentServices) -> list[AgentRuntime]:
    """Start agents one at a time; a failing character does not stop the rest."""
    runtimes: list[AgentRuntime] = []
    for character in characters:
        try:
            runtimes.append(await start_agent(character, services))
        except Exception as e:
            logger.error(f"Skipping {character.name}: {e}")
    return runtimes
