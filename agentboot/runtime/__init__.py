"""Agent runtime wiring: tokens, storage selection and agent start."""

from .agent import AgentServices, start_agent, start_agents
from .cache import CacheSelection, CacheStore, select_cache
from .database import (
    DatabaseBackend,
    DatabaseSelection,
    create_database_adapter,
    select_database_backend,
)
from .protocols import AgentRegistry, AgentRuntime, DatabaseAdapter, RuntimeFactory
from .tokens import ModelProvider, get_token_for_provider

__all__ = [
    "AgentRegistry",
    "AgentRuntime",
    "AgentServices",
    "CacheSelection",
    "CacheStore",
    "DatabaseAdapter",
    "DatabaseBackend",
    "DatabaseSelection",
    "ModelProvider",
    "RuntimeFactory",
    "create_database_adapter",
    "get_token_for_provider",
    "select_cache",
    "select_database_backend",
    "start_agent",
    "start_agents",
]
