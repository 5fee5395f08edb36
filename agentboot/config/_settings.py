"""Root AgentBootSettings model."""

from __future__ import annotations

from typing import Any

from pydantic import Field
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource

from agentboot.config._loader import FlatEnvSettingsSource, YamlSettingsSource
from agentboot.config._sections import (
    CacheSettings,
    CharacterSourceSettings,
    DatabaseSettings,
    InferenceSettings,
    LoggingSettings,
    OnchainSettings,
)


class AgentBootSettings(BaseSettings):
    model_config = {"env_nested_delimiter": "__", "case_sensitive": False, "extra": "ignore"}

    characters: CharacterSourceSettings = Field(default_factory=CharacterSourceSettings)
    onchain: OnchainSettings = Field(default_factory=OnchainSettings)
    inference: InferenceSettings = Field(default_factory=InferenceSettings)
    database: DatabaseSettings = Field(default_factory=DatabaseSettings)
    cache: CacheSettings = Field(default_factory=CacheSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
        **kwargs: Any,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        return (
            FlatEnvSettingsSource(settings_cls),
            env_settings,
            YamlSettingsSource(settings_cls),
            init_settings,
        )
