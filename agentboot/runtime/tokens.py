"""Model provider token lookup."""

from __future__ import annotations

from collections.abc import Mapping
from enum import Enum

from agentboot.characters.secrets import get_secret
from agentboot.characters.types import Character
from agentboot.config.logging import get_logger
from agentboot.errors import ConfigurationError

logger = get_logger("runtime")


class ModelProvider(str, Enum):
    LLAMALOCAL = "llama_local"
    OLLAMA = "ollama"
    GAIANET = "gaianet"
    BEDROCK = "bedrock"
    OPENAI = "openai"
    ETERNALAI = "eternalai"
    NINETEEN_AI = "nineteen_ai"
    LLAMACLOUD = "llama_cloud"
    TOGETHER = "together"
    CLAUDE_VERTEX = "claude_vertex"
    ANTHROPIC = "anthropic"
    REDPILL = "redpill"
    OPENROUTER = "openrouter"
    GROK = "grok"
    HEURIST = "heurist"
    GROQ = "groq"
    GALADRIEL = "galadriel"
    FAL = "falai"
    ALI_BAILIAN = "ali_bailian"
    VOLENGINE = "volengine"
    NANOGPT = "nanogpt"
    HYPERBOLIC = "hyperbolic"
    VENICE = "venice"
    ATOMA = "atoma"
    NVIDIA = "nvidia"
    AKASH_CHAT_API = "akash_chat_api"
    GOOGLE = "google"
    MISTRAL = "mistral"
    LETZAI = "letzai"
    INFERA = "infera"
    DEEPSEEK = "deepseek"
    LIVEPEER = "livepeer"


# Providers that run without a key
LOCAL_PROVIDERS = frozenset(
    {ModelProvider.LLAMALOCAL, ModelProvider.OLLAMA, ModelProvider.GAIANET, ModelProvider.BEDROCK}
)

# Secret keys tried in order; the first one set wins
PROVIDER_TOKEN_KEYS: dict[ModelProvider, tuple[str, ...]] = {
    ModelProvider.OPENAI: ("OPENAI_API_KEY",),
    ModelProvider.ETERNALAI: ("ETERNALAI_API_KEY",),
    ModelProvider.NINETEEN_AI: ("NINETEEN_AI_API_KEY",),
    ModelProvider.LLAMACLOUD: ("LLAMACLOUD_API_KEY", "TOGETHER_API_KEY", "OPENAI_API_KEY"),
    ModelProvider.TOGETHER: ("LLAMACLOUD_API_KEY", "TOGETHER_API_KEY", "OPENAI_API_KEY"),
    ModelProvider.CLAUDE_VERTEX: ("ANTHROPIC_API_KEY", "CLAUDE_API_KEY"),
    ModelProvider.ANTHROPIC: ("ANTHROPIC_API_KEY", "CLAUDE_API_KEY"),
    ModelProvider.REDPILL: ("REDPILL_API_KEY",),
    ModelProvider.OPENROUTER: ("OPENROUTER_API_KEY",),
    ModelProvider.GROK: ("GROK_API_KEY",),
    ModelProvider.HEURIST: ("HEURIST_API_KEY",),
    ModelProvider.GROQ: ("GROQ_API_KEY",),
    ModelProvider.GALADRIEL: ("GALADRIEL_API_KEY",),
    ModelProvider.FAL: ("FAL_API_KEY",),
    ModelProvider.ALI_BAILIAN: ("ALI_BAILIAN_API_KEY",),
    ModelProvider.VOLENGINE: ("VOLENGINE_API_KEY",),
    ModelProvider.NANOGPT: ("NANOGPT_API_KEY",),
    ModelProvider.HYPERBOLIC: ("HYPERBOLIC_API_KEY",),
    ModelProvider.VENICE: ("VENICE_API_KEY",),
    ModelProvider.ATOMA: ("ATOMASDK_BEARER_AUTH",),
    ModelProvider.NVIDIA: ("NVIDIA_API_KEY",),
    ModelProvider.AKASH_CHAT_API: ("AKASH_CHAT_API_KEY",),
    ModelProvider.GOOGLE: ("GOOGLE_GENERATIVE_AI_API_KEY",),
    ModelProvider.MISTRAL: ("MISTRAL_API_KEY",),
    ModelProvider.LETZAI: ("LETZAI_API_KEY",),
    ModelProvider.INFERA: ("INFERA_API_KEY",),
    ModelProvider.DEEPSEEK: ("DEEPSEEK_API_KEY",),
    ModelProvider.LIVEPEER: ("LIVEPEER_GATEWAY_URL",),
}


def get_token_for_provider(
    provider: str | None,
    character: Character,
    environ: Mapping[str, str] | None = None,
) -> str | None:
    """Model token for ``provider`` through the character's secret scope.

    Returns ``""`` for local providers and ``None`` when no key is set.

    Raises:
        ConfigurationError: ``provider`` is not supported
    """
    try:
        model_provider = ModelProvider(provider)
    except ValueError:
        message = f"Failed to get token - unsupported model provider: {provider}"
        logger.error(message)
        raise ConfigurationError(message) from None

    if model_provider in LOCAL_PROVIDERS:
        return ""

    for key in PROVIDER_TOKEN_KEYS[model_provider]:
        token = get_secret(character, key, environ)
        if token:
            return token
    return None
