"""The capability activation table.

Order matters: the activated list follows declaration order here. Some
capabilities are reachable from more than one rule (``evm`` via an
explicit key or a ``0x`` wallet key, ``goat`` when built and again under
``EVM_PROVIDER_URL``, ``hyperliquid`` for mainnet and testnet); each true
rule contributes its own entry.
"""

from __future__ import annotations

from .activation import ActivationRule, PrebuiltCapabilities
from .catalog import builtin as b
from .factories import CapabilityFactories
from .predicates import ALWAYS, any_of, flag, has, starts_with, when
from .toggles import ActivationToggles

# A shared wallet key targets Solana unless it is an 0x (EVM) address
SOLANA_WALLET = has("SOLANA_PUBLIC_KEY") | (has("WALLET_PUBLIC_KEY") & ~starts_with("WALLET_PUBLIC_KEY", "0x"))
EVM_WALLET = has("EVM_PUBLIC_KEY") | starts_with("WALLET_PUBLIC_KEY", "0x")
COINBASE = has("COINBASE_API_KEY") & has("COINBASE_PRIVATE_KEY")


def build_activation_rules(
    toggles: ActivationToggles,
    prebuilt: PrebuiltCapabilities,
    factories: CapabilityFactories,
) -> list[ActivationRule]:
    """Assemble the table for one character's toggles and prebuilt inputs."""
    tee = when(toggles.tee_enabled, "tee_enabled")

    return [
        ActivationRule("bittensor", flag("BITMIND") & has("BITMIND_API_TOKEN"), b("bittensor")),
        ActivationRule("email-automation", flag("EMAIL_AUTOMATION_ENABLED"), b("email-automation")),
        ActivationRule("iq6900", has("IQ_WALLET_ADDRESS") & has("IQSOlRPC"), b("iq6900")),
        ActivationRule("bootstrap", ALWAYS, b("bootstrap")),
        ActivationRule(
            "agentkit",
            has("CDP_API_KEY_NAME") & has("CDP_API_KEY_PRIVATE_KEY") & has("CDP_AGENT_KIT_NETWORK"),
            b("agentkit"),
        ),
        ActivationRule("dexscreener", has("DEXSCREENER_API_KEY"), b("dexscreener")),
        ActivationRule("football", has("FOOTBALL_API_KEY"), b("football")),
        ActivationRule("conflux", has("CONFLUX_CORE_PRIVATE_KEY"), b("conflux")),
        ActivationRule("node", ALWAYS, prebuilt.node),
        ActivationRule(
            "router-nitro",
            has("ROUTER_NITRO_EVM_PRIVATE_KEY") & has("ROUTER_NITRO_EVM_ADDRESS"),
            b("router-nitro"),
        ),
        ActivationRule("web-search", has("TAVILY_API_KEY"), b("web-search")),
        ActivationRule("solana", SOLANA_WALLET, [b("solana"), b("solana-v2")]),
        ActivationRule("solana-agent-kit", has("SOLANA_PRIVATE_KEY"), b("solana-agent-kit")),
        ActivationRule("autonome", has("AUTONOME_JWT_TOKEN"), b("autonome")),
        ActivationRule(
            "near",
            (has("NEAR_ADDRESS") | has("NEAR_WALLET_PUBLIC_KEY")) & has("NEAR_WALLET_SECRET_KEY"),
            b("near"),
        ),
        ActivationRule("evm", EVM_WALLET, b("evm")),
        ActivationRule(
            "injective",
            (has("EVM_PUBLIC_KEY") | has("INJECTIVE_PUBLIC_KEY")) & has("INJECTIVE_PRIVATE_KEY"),
            b("injective"),
        ),
        ActivationRule("cosmos", has("COSMOS_RECOVERY_PHRASE") & has("COSMOS_AVAILABLE_CHAINS"), factories.cosmos),
        ActivationRule(
            "nft-generation",
            SOLANA_WALLET
            & has("SOLANA_ADMIN_PUBLIC_KEY")
            & has("SOLANA_PRIVATE_KEY")
            & has("SOLANA_ADMIN_PRIVATE_KEY"),
            b("nft-generation"),
        ),
        ActivationRule("0g", has("ZEROG_PRIVATE_KEY"), b("0g")),
        ActivationRule("coinmarketcap", has("COINMARKETCAP_API_KEY"), b("coinmarketcap")),
        ActivationRule("zerion", has("ZERION_API_KEY"), b("zerion")),
        ActivationRule("coinbase-commerce", has("COINBASE_COMMERCE_KEY"), b("coinbase-commerce")),
        ActivationRule(
            "image-generation",
            any_of(
                has("FAL_API_KEY"),
                has("OPENAI_API_KEY"),
                has("VENICE_API_KEY"),
                has("NVIDIA_API_KEY"),
                has("NINETEEN_AI_API_KEY"),
                has("HEURIST_API_KEY"),
                has("LIVEPEER_GATEWAY_URL"),
            ),
            b("image-generation"),
        ),
        ActivationRule("3d-generation", has("FAL_API_KEY"), b("3d-generation")),
        ActivationRule(
            "coinbase",
            COINBASE,
            [
                b("coinbase-mass-payments"),
                b("coinbase-trade"),
                b("coinbase-token-contract"),
                b("coinbase-advanced-trade"),
            ],
        ),
        ActivationRule("tee", tee, [b("tee")]),
        ActivationRule("tee-verifiable-log", tee & has("VLOG"), b("tee-verifiable-log")),
        ActivationRule("sgx", has("SGX"), b("sgx")),
        ActivationRule("tee-log", has("ENABLE_TEE_LOG") & (tee | has("SGX")), b("tee-log")),
        ActivationRule("omniflix", has("OMNIFLIX_API_URL") & has("OMNIFLIX_MNEMONIC"), b("omniflix")),
        ActivationRule("coinbase-webhook", COINBASE & has("COINBASE_NOTIFICATION_URI"), b("coinbase-webhook")),
        ActivationRule("goat", ALWAYS, prebuilt.goat),
        ActivationRule("zilliqa", ALWAYS, prebuilt.zilliqa),
        ActivationRule("coingecko", has("COINGECKO_API_KEY") | has("COINGECKO_PRO_API_KEY"), b("coingecko")),
        ActivationRule("moralis", has("MORALIS_API_KEY"), b("moralis")),
        ActivationRule("goat-provider", has("EVM_PROVIDER_URL"), prebuilt.goat),
        ActivationRule("abstract", has("ABSTRACT_PRIVATE_KEY"), b("abstract")),
        ActivationRule("b2", has("B2_PRIVATE_KEY"), b("b2")),
        ActivationRule("binance", has("BINANCE_API_KEY") & has("BINANCE_SECRET_KEY"), b("binance")),
        ActivationRule("flow", has("FLOW_ADDRESS") & has("FLOW_PRIVATE_KEY"), b("flow")),
        ActivationRule("lens-network", has("LENS_ADDRESS") & has("LENS_PRIVATE_KEY"), b("lens-network")),
        ActivationRule("aptos", has("APTOS_PRIVATE_KEY"), b("aptos")),
        ActivationRule("mind-network", has("MIND_COLD_WALLET_ADDRESS"), b("mind-network")),
        ActivationRule("multiversx", has("MVX_PRIVATE_KEY"), b("multiversx")),
        ActivationRule("zksync-era", has("ZKSYNC_PRIVATE_KEY"), b("zksync-era")),
        ActivationRule("cronoszkevm", has("CRONOSZKEVM_PRIVATE_KEY"), b("cronoszkevm")),
        ActivationRule("tee-marlin", has("TEE_MARLIN"), b("tee-marlin")),
        ActivationRule("ton", has("TON_PRIVATE_KEY"), b("ton")),
        ActivationRule("thirdweb", has("THIRDWEB_SECRET_KEY"), b("thirdweb")),
        ActivationRule("sui", has("SUI_PRIVATE_KEY"), b("sui")),
        ActivationRule("story", has("STORY_PRIVATE_KEY"), b("story")),
        ActivationRule(
            "squid-router",
            has("SQUID_SDK_URL")
            & has("SQUID_INTEGRATOR_ID")
            & has("SQUID_EVM_ADDRESS")
            & has("SQUID_EVM_PRIVATE_KEY")
            & has("SQUID_API_THROTTLE_INTERVAL"),
            b("squid-router"),
        ),
        ActivationRule("fuel", has("FUEL_PRIVATE_KEY"), b("fuel")),
        ActivationRule("avalanche", has("AVALANCHE_PRIVATE_KEY"), b("avalanche")),
        ActivationRule("birdeye", has("BIRDEYE_API_KEY"), b("birdeye")),
        ActivationRule(
            "echochambers",
            has("ECHOCHAMBERS_API_URL") & has("ECHOCHAMBERS_API_KEY"),
            b("echochambers"),
        ),
        ActivationRule("letzai", has("LETZAI_API_KEY"), b("letzai")),
        ActivationRule("stargaze", has("STARGAZE_ENDPOINT"), b("stargaze")),
        ActivationRule("giphy", has("GIPHY_API_KEY"), b("giphy")),
        ActivationRule("gitcoin-passport", has("PASSPORT_API_KEY"), b("gitcoin-passport")),
        ActivationRule("genlayer", has("GENLAYER_PRIVATE_KEY"), b("genlayer")),
        ActivationRule("avail", has("AVAIL_SEED") & has("AVAIL_APP_ID"), b("avail")),
        ActivationRule("open-weather", has("OPEN_WEATHER_API_KEY"), b("open-weather")),
        ActivationRule("obsidian", has("OBSIDIAN_API_TOKEN"), b("obsidian")),
        ActivationRule("arthera", starts_with("ARTHERA_PRIVATE_KEY", "0x"), b("arthera")),
        ActivationRule("allora", has("ALLORA_API_KEY"), b("allora")),
        ActivationRule("hyperliquid", has("HYPERLIQUID_PRIVATE_KEY"), b("hyperliquid")),
        ActivationRule("hyperliquid-testnet", has("HYPERLIQUID_TESTNET"), b("hyperliquid")),
        ActivationRule("akash", has("AKASH_MNEMONIC") & has("AKASH_WALLET_ADDRESS"), b("akash")),
        ActivationRule("chainbase", has("CHAINBASE_API_KEY"), b("chainbase")),
        ActivationRule("quai", has("QUAI_PRIVATE_KEY"), b("quai")),
        ActivationRule("nft-collections", has("RESERVOIR_API_KEY"), factories.nft_collections),
        ActivationRule("0x", has("ZERO_EX_API_KEY"), b("0x")),
        ActivationRule("dkg", has("DKG_PRIVATE_KEY"), b("dkg")),
        ActivationRule(
            "pyth-data",
            has("PYTH_TESTNET_PROGRAM_KEY") | has("PYTH_MAINNET_PROGRAM_KEY"),
            b("pyth-data"),
        ),
        ActivationRule(
            "lightning",
            has("LND_TLS_CERT") & has("LND_MACAROON") & has("LND_SOCKET"),
            b("lightning"),
        ),
        ActivationRule("openai", has("OPENAI_API_KEY") & flag("ENABLE_OPEN_AI_COMMUNITY_PLUGIN"), b("openai")),
        ActivationRule("devin", has("DEVIN_API_TOKEN"), b("devin")),
        ActivationRule("initia", has("INITIA_PRIVATE_KEY"), b("initia")),
        ActivationRule("holdstation", has("HOLDSTATION_PRIVATE_KEY"), b("holdstation")),
        ActivationRule("nvidia-nim", has("NVIDIA_NIM_API_KEY") | has("NVIDIA_NGC_API_KEY"), b("nvidia-nim")),
        ActivationRule("bnb", has("BNB_PRIVATE_KEY") | starts_with("BNB_PUBLIC_KEY", "0x"), b("bnb")),
        ActivationRule(
            "email",
            (has("EMAIL_INCOMING_USER") & has("EMAIL_INCOMING_PASS"))
            | (has("EMAIL_OUTGOING_USER") & has("EMAIL_OUTGOING_PASS")),
            b("email"),
        ),
        ActivationRule("sei", has("SEI_PRIVATE_KEY"), b("sei")),
        ActivationRule("hyperbolic", has("HYPERBOLIC_API_KEY"), b("hyperbolic")),
        ActivationRule("suno", has("SUNO_API_KEY"), b("suno")),
        ActivationRule("udio", has("UDIO_AUTH_TOKEN"), b("udio")),
        ActivationRule("imgflip", has("IMGFLIP_USERNAME") & has("IMGFLIP_PASSWORD"), b("imgflip")),
        ActivationRule("lit", has("FUNDING_PRIVATE_KEY") & has("EVM_RPC_URL"), b("lit")),
        ActivationRule("ethstorage", has("ETHSTORAGE_PRIVATE_KEY"), b("ethstorage")),
        ActivationRule("mina", has("MINA_PRIVATE_KEY"), b("mina")),
        ActivationRule("form", has("FORM_PRIVATE_KEY"), b("form")),
        ActivationRule("ankr", has("ANKR_WALLET"), b("ankr")),
        ActivationRule("dcap", has("DCAP_EVM_PRIVATE_KEY") & has("DCAP_MODE"), b("dcap")),
        ActivationRule("quick-intel", has("QUICKINTEL_API_KEY"), b("quick-intel")),
        ActivationRule("gelato", has("GELATO_RELAY_API_KEY"), b("gelato")),
        ActivationRule("trikon", has("TRIKON_WALLET_ADDRESS"), b("trikon")),
    ]
