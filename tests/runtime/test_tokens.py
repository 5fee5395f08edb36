"""Tests for model provider token lookup."""

from __future__ import annotations

import pytest

from agentboot.characters.types import Character
from agentboot.errors import ConfigurationError
from agentboot.runtime.tokens import ModelProvider, get_token_for_provider


class TestGetTokenForProvider:
    """Tests for get_token_for_provider."""

    @pytest.mark.parametrize("provider", ["llama_local", "ollama", "gaianet", "bedrock"])
    def test_local_providers_need_no_key(self, provider):
        assert get_token_for_provider(provider, Character(name="A"), {}) == ""

    def test_character_secret_before_environment(self):
        character = Character(name="A", settings={"secrets": {"OPENAI_API_KEY": "mine"}})
        assert get_token_for_provider("openai", character, {"OPENAI_API_KEY": "env"}) == "mine"

    def test_environment_fallback(self):
        assert get_token_for_provider(ModelProvider.GROQ, Character(name="A"), {"GROQ_API_KEY": "g"}) == "g"

    def test_chained_keys(self):
        character = Character(name="A")
        assert get_token_for_provider("together", character, {"OPENAI_API_KEY": "o"}) == "o"
        assert get_token_for_provider("together", character, {"TOGETHER_API_KEY": "t", "OPENAI_API_KEY": "o"}) == "t"
        assert get_token_for_provider("anthropic", character, {"CLAUDE_API_KEY": "c"}) == "c"

    def test_missing_key(self):
        assert get_token_for_provider("openai", Character(name="A"), {}) is None

    @pytest.mark.parametrize("provider", ["carrier-pigeon", None])
    def test_unsupported_provider(self, provider):
        with pytest.raises(ConfigurationError, match="unsupported model provider"):
            get_token_for_provider(provider, Character(name="A"), {})
