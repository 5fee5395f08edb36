"""Unified configuration for agentboot.

Usage:
    from agentboot.config import get_settings

    s = get_settings()
    s.characters.remote_urls   # "https://..."
    s.cache.store              # "database"
"""

from __future__ import annotations

import logging

from agentboot.config._settings import AgentBootSettings

logger = logging.getLogger("agentboot.config")

_settings: AgentBootSettings | None = None


def get_settings() -> AgentBootSettings:
    """Return the singleton AgentBootSettings instance (created on first call)."""
    global _settings
    if _settings is None:
        _settings = AgentBootSettings()
        logger.debug("Settings loaded")
    return _settings


def reset_settings() -> None:
    """Force re-creation of the settings singleton (useful for tests)."""
    global _settings
    _settings = None


__all__ = ["AgentBootSettings", "get_settings", "reset_settings"]
