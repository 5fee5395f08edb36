"""Tests for agentboot configuration."""

from __future__ import annotations

import logging
from unittest.mock import patch

import pytest

from agentboot.config import get_settings, reset_settings
from agentboot.config._loader import FlatEnvSettingsSource, find_config_file
from agentboot.config._settings import AgentBootSettings
import agentboot.config.logging as logging_config
from agentboot.config.logging import ColoredConsoleFormatter, init_logging


class TestFlatEnvSettingsSource:
    """Tests for flat environment name mapping."""

    def test_maps_names_onto_sections(self):
        source = FlatEnvSettingsSource(
            AgentBootSettings,
            environ={
                "REMOTE_CHARACTER_URLS": "https://a.io/c.json",
                "IQSOlRPC": "https://rpc.example",
                "CACHE_STORE": "redis",
                "QDRANT_PORT": "6333",
                "UNRELATED": "x",
            },
        )
        assert source() == {
            "characters": {"remote_urls": "https://a.io/c.json"},
            "onchain": {"rpc_url": "https://rpc.example"},
            "cache": {"store": "redis"},
            "database": {"qdrant_port": "6333"},
        }

    def test_empty_values_skipped(self):
        source = FlatEnvSettingsSource(AgentBootSettings, environ={"REDIS_URL": ""})
        assert source() == {}


class TestAgentBootSettings:
    """Tests for the settings singleton."""

    @patch.dict("os.environ", {"AGENTBOOT_CONFIG": "/nonexistent/agentboot.yaml"}, clear=True)
    def test_defaults(self):
        settings = AgentBootSettings()
        assert settings.cache.store == "database"
        assert settings.database.mongodb_database
        assert settings.characters.storage_dir

    @patch.dict(
        "os.environ",
        {
            "AGENTBOOT_CONFIG": "/nonexistent/agentboot.yaml",
            "USE_CHARACTER_STORAGE": "true",
            "IQ_WALLET_ADDRESS": "0xwallet",
            "IQSOlRPC": "https://rpc.example",
            "QDRANT_VECTOR_SIZE": "1536",
            "VERIFIABLE_INFERENCE_ENABLED": "true",
        },
    )
    def test_env_values_typed(self):
        settings = AgentBootSettings()
        assert settings.characters.use_storage is True
        assert settings.onchain.configured is True
        assert settings.database.qdrant_vector_size == 1536
        assert settings.inference.verifiable_inference_enabled is True

    def test_yaml_file(self, tmp_path):
        config = tmp_path / "agentboot.yaml"
        config.write_text("cache:\n  store: filesystem\n  cache_dir: /tmp/cache\ncharacters:\n  storage_dir: chars\n")

        with patch.dict("os.environ", {"AGENTBOOT_CONFIG": str(config)}, clear=True):
            assert find_config_file() == config
            settings = AgentBootSettings()

        assert settings.cache.store == "filesystem"
        assert settings.cache.cache_dir == "/tmp/cache"
        assert settings.characters.storage_dir == "chars"

    def test_env_beats_yaml(self, tmp_path):
        config = tmp_path / "agentboot.yaml"
        config.write_text("cache:\n  store: filesystem\n  cache_dir: /tmp/cache\n")

        with patch.dict("os.environ", {"AGENTBOOT_CONFIG": str(config), "CACHE_STORE": "redis"}, clear=True):
            settings = AgentBootSettings()

        assert settings.cache.store == "redis"
        assert settings.cache.cache_dir == "/tmp/cache"

    @patch.dict("os.environ", {"AGENTBOOT_CONFIG": "/nonexistent/agentboot.yaml"})
    def test_singleton(self):
        first = get_settings()
        assert get_settings() is first
        reset_settings()
        assert get_settings() is not first


class TestColoredConsoleFormatter:
    """Tests for the console formatter."""

    def test_tag_and_extras(self):
        record = logging.LogRecord("characters", logging.INFO, __file__, 1, "Loaded", None, None)
        record.character = "Eliza"
        output = ColoredConsoleFormatter().format(record)
        assert "[characters]" in output
        assert "Loaded" in output
        assert "character=Eliza" in output


class TestCharacterStorageFlag:
    """Tests for USE_CHARACTER_STORAGE parsing."""

    @pytest.mark.parametrize("value", ["1", "yes", "on", "TRUE", "True"])
    def test_only_literal_true_enables(self, value):
        env = {"AGENTBOOT_CONFIG": "/nonexistent/agentboot.yaml", "USE_CHARACTER_STORAGE": value}
        with patch.dict("os.environ", env, clear=True):
            assert AgentBootSettings().characters.use_storage is False

    def test_literal_true(self):
        env = {"AGENTBOOT_CONFIG": "/nonexistent/agentboot.yaml", "USE_CHARACTER_STORAGE": "true"}
        with patch.dict("os.environ", env, clear=True):
            assert AgentBootSettings().characters.use_storage is True

    def test_yaml_boolean(self, tmp_path):
        config = tmp_path / "agentboot.yaml"
        config.write_text("characters:\n  use_storage: true\n")
        with patch.dict("os.environ", {"AGENTBOOT_CONFIG": str(config)}, clear=True):
            assert AgentBootSettings().characters.use_storage is True


@pytest.fixture
def fresh_logging(monkeypatch):
    """Let init_logging run again and restore the root logger afterwards."""
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    monkeypatch.setattr(logging_config, "_initialized", False)
    yield root
    root.handlers[:] = handlers
    root.setLevel(level)


class TestInitLogging:
    """Tests for console level selection."""

    def test_level_from_yaml(self, tmp_path, fresh_logging):
        config = tmp_path / "agentboot.yaml"
        config.write_text("logging:\n  level: DEBUG\n")

        with patch.dict("os.environ", {"AGENTBOOT_CONFIG": str(config)}, clear=True):
            init_logging()

        assert fresh_logging.handlers[-1].level == logging.DEBUG

    def test_env_beats_yaml(self, tmp_path, fresh_logging):
        config = tmp_path / "agentboot.yaml"
        config.write_text("logging:\n  level: DEBUG\n")

        with patch.dict("os.environ", {"AGENTBOOT_CONFIG": str(config), "LOG_LEVEL": "warning"}, clear=True):
            init_logging()

        assert fresh_logging.handlers[-1].level == logging.WARNING
