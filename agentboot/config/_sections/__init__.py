"""Config section models."""

from agentboot.config._sections.cache import CacheSettings
from agentboot.config._sections.characters import CharacterSourceSettings
from agentboot.config._sections.database import DatabaseSettings
from agentboot.config._sections.inference import InferenceSettings
from agentboot.config._sections.logging import LoggingSettings
from agentboot.config._sections.onchain import OnchainSettings

__all__ = [
    "CacheSettings",
    "CharacterSourceSettings",
    "DatabaseSettings",
    "InferenceSettings",
    "LoggingSettings",
    "OnchainSettings",
]
