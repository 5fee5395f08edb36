"""Pytest configuration and fixtures for agentboot tests."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from agentboot.clients.registry import clear_registry
from agentboot.config import reset_settings
from agentboot.config._sections import CharacterSourceSettings, OnchainSettings
from agentboot.config._settings import AgentBootSettings
from agentboot.plugins.catalog import register_builtin_capabilities, reset_catalog
from agentboot.plugins.factories import reset_node_plugin
from agentboot.plugins.registry import CapabilityRegistry


@pytest.fixture(autouse=True)
def reset_global():
    """Reset module-level singletons between tests."""
    yield
    reset_settings()
    CapabilityRegistry.reset()
    reset_catalog()
    reset_node_plugin()
    clear_registry()


@pytest.fixture
def registry():
    """A capability registry with the built-in catalog registered."""
    return register_builtin_capabilities(CapabilityRegistry(allowed_prefixes=("agentboot_plugin_",)))


@pytest.fixture
def make_settings():
    """Build settings without reading the environment or a config file."""

    def _make(**sections) -> AgentBootSettings:
        sections.setdefault("characters", CharacterSourceSettings())
        sections.setdefault("onchain", OnchainSettings())
        return AgentBootSettings.model_construct(**sections)

    return _make


@pytest.fixture
def write_character(tmp_path):
    """Write a character JSON file and return its path."""

    def _write(name: str, data, directory: Path | None = None) -> Path:
        path = (directory or tmp_path) / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(data if isinstance(data, str) else json.dumps(data))
        return path

    return _write
