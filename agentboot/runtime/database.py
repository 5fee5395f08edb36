"""Database backend selection.

The first configured backend wins, in this order: MongoDB, Supabase,
Postgres, PGLite, Qdrant (needs all four settings), then SQLite as the
fallback. Adapters themselves are supplied by the caller as factories
keyed by backend.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Any

from agentboot.config._sections import DatabaseSettings
from agentboot.config.logging import get_logger
from agentboot.errors import ConfigurationError

from .protocols import DatabaseAdapter

logger = get_logger("runtime")


class DatabaseBackend(str, Enum):
    MONGODB = "mongodb"
    SUPABASE = "supabase"
    POSTGRES = "postgres"
    PGLITE = "pglite"
    QDRANT = "qdrant"
    SQLITE = "sqlite"


@dataclass(frozen=True)
class DatabaseSelection:
    """Chosen backend and the settings its adapter is built from."""

    backend: DatabaseBackend
    options: dict[str, Any] = field(default_factory=dict)

    def __repr__(self) -> str:
        # options may hold credentials
        return f"DatabaseSelection({self.backend.value}, keys={sorted(self.options)})"


DatabaseAdapterFactory = Callable[[DatabaseSelection], DatabaseAdapter]


def select_database_backend(settings: DatabaseSettings, data_dir: str | Path | None = None) -> DatabaseSelection:
    if settings.mongodb_connection_string:
        return DatabaseSelection(
            DatabaseBackend.MONGODB,
            {
                "connection_string": settings.mongodb_connection_string,
                "database": settings.mongodb_database or "elizaAgent",
            },
        )
    if settings.supabase_url and settings.supabase_anon_key:
        return DatabaseSelection(
            DatabaseBackend.SUPABASE,
            {"url": settings.supabase_url, "anon_key": settings.supabase_anon_key},
        )
    if settings.postgres_url:
        return DatabaseSelection(
            DatabaseBackend.POSTGRES,
            {"connection_string": settings.postgres_url, "parse_inputs": True},
        )
    if settings.pglite_data_dir:
        return DatabaseSelection(DatabaseBackend.PGLITE, {"data_dir": settings.pglite_data_dir})
    if settings.qdrant_url and settings.qdrant_key and settings.qdrant_port and settings.qdrant_vector_size:
        return DatabaseSelection(
            DatabaseBackend.QDRANT,
            {
                "url": settings.qdrant_url,
                "api_key": settings.qdrant_key,
                "port": settings.qdrant_port,
                "vector_size": settings.qdrant_vector_size,
            },
        )

    base = Path(data_dir if data_dir is not None else settings.data_dir)
    file_path = settings.sqlite_file or str(base / "db.sqlite")
    return DatabaseSelection(DatabaseBackend.SQLITE, {"file": file_path})


def create_database_adapter(
    selection: DatabaseSelection,
    factories: Mapping[DatabaseBackend, DatabaseAdapterFactory],
) -> DatabaseAdapter:
    """Build (but do not connect) the adapter for the selected backend.

    Raises:
        ConfigurationError: No factory is available for the selected backend
    """
    factory = factories.get(selection.backend)
    if factory is None:
        raise ConfigurationError(f"No database adapter available for backend {selection.backend.value}")
    logger.info(f"Initializing {selection.backend.value} database...")
    return factory(selection)
