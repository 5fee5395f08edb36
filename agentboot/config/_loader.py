"""Settings sources: YAML config file discovery and flat environment names."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

import yaml
from pydantic.fields import FieldInfo
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource

# Flat environment variable -> (section, field)
ENV_FIELD_MAP: dict[str, tuple[str, str]] = {
    "REMOTE_CHARACTER_URLS": ("characters", "remote_urls"),
    "USE_CHARACTER_STORAGE": ("characters", "use_storage"),
    "CHARACTER_STORAGE_DIR": ("characters", "storage_dir"),
    "PLUGIN_IMPORT_ALLOWLIST": ("characters", "plugin_import_allowlist"),
    "IQ_WALLET_ADDRESS": ("onchain", "wallet_address"),
    "IQSOlRPC": ("onchain", "rpc_url"),
    "ONCHAIN_CHARACTER_JSON": ("onchain", "character_json"),
    "VERIFIABLE_INFERENCE_ENABLED": ("inference", "verifiable_inference_enabled"),
    "OPACITY_TEAM_ID": ("inference", "opacity_team_id"),
    "OPACITY_CLOUDFLARE_NAME": ("inference", "opacity_cloudflare_name"),
    "OPACITY_PROVER_URL": ("inference", "opacity_prover_url"),
    "PRIMUS_APP_ID": ("inference", "primus_app_id"),
    "PRIMUS_APP_SECRET": ("inference", "primus_app_secret"),
    "MONGODB_CONNECTION_STRING": ("database", "mongodb_connection_string"),
    "MONGODB_DATABASE": ("database", "mongodb_database"),
    "SUPABASE_URL": ("database", "supabase_url"),
    "SUPABASE_ANON_KEY": ("database", "supabase_anon_key"),
    "POSTGRES_URL": ("database", "postgres_url"),
    "PGLITE_DATA_DIR": ("database", "pglite_data_dir"),
    "QDRANT_URL": ("database", "qdrant_url"),
    "QDRANT_KEY": ("database", "qdrant_key"),
    "QDRANT_PORT": ("database", "qdrant_port"),
    "QDRANT_VECTOR_SIZE": ("database", "qdrant_vector_size"),
    "SQLITE_FILE": ("database", "sqlite_file"),
    "AGENT_DATA_DIR": ("database", "data_dir"),
    "CACHE_STORE": ("cache", "store"),
    "REDIS_URL": ("cache", "redis_url"),
    "CACHE_DIR": ("cache", "cache_dir"),
    "LOG_LEVEL": ("logging", "level"),
}


def find_config_file() -> Path | None:
    """Find agentboot.yaml using search order:
    1. AGENTBOOT_CONFIG env var (explicit path)
    2. ./agentboot.yaml (CWD)
    3. ./agentboot.yml (CWD alt)
    4. ~/.agentboot/agentboot.yaml (user home)
    """
    explicit = os.environ.get("AGENTBOOT_CONFIG")
    if explicit:
        p = Path(explicit)
        if p.is_file():
            return p
        return None

    candidates = [
        Path.cwd() / "agentboot.yaml",
        Path.cwd() / "agentboot.yml",
        Path.home() / ".agentboot" / "agentboot.yaml",
    ]
    for candidate in candidates:
        if candidate.is_file():
            return candidate
    return None


class YamlSettingsSource(PydanticBaseSettingsSource):
    """Load settings from a YAML file."""

    def __init__(self, settings_cls: type[BaseSettings]) -> None:
        super().__init__(settings_cls)
        self._yaml_data: dict[str, Any] = {}
        config_path = find_config_file()
        if config_path is not None:
            with open(config_path) as f:
                data = yaml.safe_load(f)
                if isinstance(data, dict):
                    self._yaml_data = data

    def get_field_value(self, field: FieldInfo, field_name: str) -> tuple[Any, str, bool]:
        val = self._yaml_data.get(field_name)
        return val, field_name, val is not None

    def __call__(self) -> dict[str, Any]:
        return self._yaml_data


class FlatEnvSettingsSource(PydanticBaseSettingsSource):
    """Map the established flat environment variable names onto sections.

    Names are matched exactly (``IQSOlRPC`` is mixed case). Empty values
    are treated as unset.
    """

    def __init__(self, settings_cls: type[BaseSettings], environ: dict[str, str] | None = None) -> None:
        super().__init__(settings_cls)
        self._environ = os.environ if environ is None else environ

    def get_field_value(self, field: FieldInfo, field_name: str) -> tuple[Any, str, bool]:
        section = self().get(field_name)
        return section, field_name, section is not None

    def __call__(self) -> dict[str, Any]:
        data: dict[str, dict[str, Any]] = {}
        for env_name, (section, field_name) in ENV_FIELD_MAP.items():
            value = self._environ.get(env_name)
            if value is None or value == "":
                continue
            data.setdefault(section, {})[field_name] = value
        return data
