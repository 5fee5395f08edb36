"""Built-in capability catalog.

One shared ``Capability`` instance per built-in module, so the activation
table can reference the same object from several rules. The same
instances are registered in the ``CapabilityRegistry`` under their names,
which is how character files refer to them.
"""

from __future__ import annotations

from .registry import CapabilityRegistry
from .types import Capability

BUILTIN_CAPABILITIES: tuple[tuple[str, str], ...] = (
    ("bootstrap", "Core actions, evaluators and providers every agent needs"),
    ("bittensor", "BitMind deepfake detection on the Bittensor network"),
    ("email-automation", "Automated outbound email drafting"),
    ("iq6900", "On-chain character storage on IQ6900"),
    ("agentkit", "Coinbase AgentKit wallet actions"),
    ("dexscreener", "DexScreener token market data"),
    ("football", "Live football scores and standings"),
    ("conflux", "Conflux core space transfers"),
    ("router-nitro", "Router Nitro cross-chain bridging"),
    ("web-search", "Tavily web search"),
    ("solana", "Solana wallet and token actions"),
    ("solana-v2", "Solana actions on the v2 SDK"),
    ("solana-agent-kit", "Solana Agent Kit actions"),
    ("autonome", "Autonome agent launching"),
    ("near", "NEAR wallet actions"),
    ("evm", "EVM wallet actions"),
    ("injective", "Injective chain actions"),
    ("nft-generation", "Solana NFT collection generation"),
    ("0g", "0G decentralized storage"),
    ("coinmarketcap", "CoinMarketCap price data"),
    ("zerion", "Zerion portfolio data"),
    ("coinbase-commerce", "Coinbase Commerce charges"),
    ("image-generation", "Image generation across hosted providers"),
    ("3d-generation", "3D model generation via FAL"),
    ("coinbase-mass-payments", "Coinbase mass payouts"),
    ("coinbase-trade", "Coinbase trading"),
    ("coinbase-token-contract", "Coinbase token contract deployment"),
    ("coinbase-advanced-trade", "Coinbase Advanced Trade"),
    ("tee", "Trusted execution environment key derivation"),
    ("tee-verifiable-log", "Verifiable logging inside a TEE"),
    ("sgx", "Intel SGX attestation"),
    ("tee-log", "TEE-backed action log"),
    ("omniflix", "OmniFlix media network actions"),
    ("coinbase-webhook", "Coinbase webhook notifications"),
    ("coingecko", "CoinGecko price data"),
    ("moralis", "Moralis on-chain data"),
    ("abstract", "Abstract chain actions"),
    ("b2", "B2 network actions"),
    ("binance", "Binance exchange actions"),
    ("flow", "Flow blockchain actions"),
    ("lens-network", "Lens network actions"),
    ("aptos", "Aptos wallet actions"),
    ("mind-network", "Mind Network FHE voting"),
    ("multiversx", "MultiversX wallet actions"),
    ("zksync-era", "zkSync Era transfers"),
    ("cronoszkevm", "Cronos zkEVM transfers"),
    ("tee-marlin", "Marlin Oyster TEE attestation"),
    ("ton", "TON wallet actions"),
    ("thirdweb", "thirdweb Nebula chat"),
    ("sui", "Sui wallet actions"),
    ("story", "Story protocol IP registration"),
    ("squid-router", "Squid cross-chain router"),
    ("fuel", "Fuel network transfers"),
    ("avalanche", "Avalanche wallet actions"),
    ("birdeye", "Birdeye market data"),
    ("echochambers", "Echo Chambers rooms"),
    ("letzai", "LetzAI image generation"),
    ("stargaze", "Stargaze NFT data"),
    ("giphy", "GIPHY search"),
    ("gitcoin-passport", "Gitcoin Passport scoring"),
    ("genlayer", "GenLayer intelligent contracts"),
    ("avail", "Avail data availability"),
    ("open-weather", "OpenWeather forecasts"),
    ("obsidian", "Obsidian vault access"),
    ("arthera", "Arthera chain transfers"),
    ("allora", "Allora network inferences"),
    ("hyperliquid", "Hyperliquid trading"),
    ("akash", "Akash deployments"),
    ("chainbase", "Chainbase on-chain queries"),
    ("quai", "Quai network transfers"),
    ("0x", "0x swap quotes"),
    ("dkg", "OriginTrail decentralized knowledge graph"),
    ("pyth-data", "Pyth price feeds"),
    ("lightning", "Lightning network payments"),
    ("openai", "OpenAI community actions"),
    ("devin", "Devin task delegation"),
    ("initia", "Initia wallet actions"),
    ("holdstation", "Holdstation swaps"),
    ("nvidia-nim", "NVIDIA NIM guardrails"),
    ("bnb", "BNB chain actions"),
    ("email", "Inbound and outbound email"),
    ("sei", "Sei wallet actions"),
    ("hyperbolic", "Hyperbolic GPU marketplace"),
    ("suno", "Suno music generation"),
    ("udio", "Udio music generation"),
    ("imgflip", "Imgflip meme generation"),
    ("lit", "Lit protocol signing"),
    ("ethstorage", "EthStorage blob storage"),
    ("mina", "Mina wallet actions"),
    ("form", "Form chain curves"),
    ("ankr", "Ankr multichain queries"),
    ("dcap", "DCAP attestation verification"),
    ("quick-intel", "Quick Intel token audits"),
    ("gelato", "Gelato relay"),
    ("trikon", "Trikon token transfers"),
)

_catalog: dict[str, Capability] | None = None


def _build_catalog() -> dict[str, Capability]:
    return {name: Capability(name=name, description=description) for name, description in BUILTIN_CAPABILITIES}


def builtin(name: str) -> Capability:
    """Return the shared built-in capability ``name``.

    Raises:
        KeyError: if ``name`` is not a built-in capability
    """
    global _catalog
    if _catalog is None:
        _catalog = _build_catalog()
    return _catalog[name]


def builtin_names() -> list[str]:
    return [name for name, _ in BUILTIN_CAPABILITIES]


def register_builtin_capabilities(registry: CapabilityRegistry) -> CapabilityRegistry:
    """Register every built-in capability instance under its name."""
    for name in builtin_names():
        registry.register(name, builtin(name))
    return registry


def reset_catalog() -> None:
    """Drop the shared instances (for testing)."""
    global _catalog
    _catalog = None
