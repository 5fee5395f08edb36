"""Constructors for capabilities that are built rather than shared.

Wallet-backed plugins take a secret lookup callback and are constructed
before the activation table is evaluated; their result (possibly
``None``) is what goes into the table.
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from agentboot.characters.secrets import SecretLookup
from agentboot.config._sections import InferenceSettings
from agentboot.config.logging import get_logger

from .types import Capability, VerifiableInferenceAdapter

logger = get_logger("plugins")

WalletPluginFactory = Callable[[SecretLookup], Awaitable["Capability | None"]]

_node_plugin: Capability | None = None


def get_node_plugin() -> Capability:
    """Return the process-wide node capability, creating it on first use."""
    global _node_plugin
    if _node_plugin is None:
        _node_plugin = Capability(name="node", description="Browser, PDF, speech and media services")
    return _node_plugin


def reset_node_plugin() -> None:
    """Drop the shared node capability (for testing)."""
    global _node_plugin
    _node_plugin = None


async def create_goat_plugin(get_secret: SecretLookup) -> Capability | None:
    """GOAT on-chain toolkit bound to the character's EVM wallet."""
    if not get_secret("EVM_PRIVATE_KEY"):
        return None
    return Capability(
        name="goat",
        description="GOAT on-chain toolkit",
        options={"chain": "evm", "provider_url": get_secret("EVM_PROVIDER_URL")},
    )


async def create_zilliqa_plugin(get_secret: SecretLookup) -> Capability | None:
    """Zilliqa wallet actions bound to the character's Zilliqa key."""
    if not get_secret("ZILLIQA_PRIVATE_KEY"):
        return None
    return Capability(
        name="zilliqa",
        description="Zilliqa wallet actions",
        options={"provider_url": get_secret("ZILLIQA_PROVIDER_URL")},
    )


def create_cosmos_plugin() -> Capability:
    return Capability(name="cosmos", description="Cosmos SDK chain actions")


def create_nft_collections_plugin() -> Capability:
    return Capability(name="nft-collections", description="Reservoir NFT collection data")


@dataclass
class CapabilityFactories:
    """Factories used by the activation engine; swap these in tests."""

    goat: WalletPluginFactory = create_goat_plugin
    zilliqa: WalletPluginFactory = create_zilliqa_plugin
    cosmos: Callable[[], Capability] = create_cosmos_plugin
    nft_collections: Callable[[], Capability] = create_nft_collections_plugin
    node: Callable[[], Capability] = get_node_plugin


def build_verifiable_inference_adapter(
    settings: InferenceSettings,
    model_provider: str | None,
    token: str | None,
) -> VerifiableInferenceAdapter | None:
    """Build the verifiable-inference adapter descriptor, if configured.

    Opacity needs a team id, cloudflare name and prover URL; Primus needs
    an app id and secret. Both require ``VERIFIABLE_INFERENCE_ENABLED``.
    When both are configured Primus is used.
    """
    if not settings.verifiable_inference_enabled:
        return None

    adapter: VerifiableInferenceAdapter | None = None

    if settings.opacity_team_id and settings.opacity_cloudflare_name and settings.opacity_prover_url:
        adapter = VerifiableInferenceAdapter(
            provider="opacity",
            options={
                "team_id": settings.opacity_team_id,
                "team_name": settings.opacity_cloudflare_name,
                "prover_url": settings.opacity_prover_url,
                "model_provider": model_provider,
                "token": token,
            },
        )
        logger.info(f"Verifiable inference adapter initialized (opacity, team {settings.opacity_team_id})")

    if settings.primus_app_id and settings.primus_app_secret:
        adapter = VerifiableInferenceAdapter(
            provider="primus",
            options={
                "app_id": settings.primus_app_id,
                "app_secret": settings.primus_app_secret,
                "att_mode": "proxytls",
                "model_provider": model_provider,
                "token": token,
            },
        )
        logger.info("Verifiable inference primus adapter initialized")

    return adapter
