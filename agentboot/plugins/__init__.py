"""Capability ("plugin") activation for agentboot.

Key concepts:
- Capability: an opaque named module, optionally contributing clients
- Registry: maps capability keys to constructors, with an import allow-list
- Rules: an ordered table of (predicate -> capabilities) records
- Activation: evaluates the table against one character's secret scope
"""

from .activation import (
    ActivationResult,
    ActivationRule,
    PrebuiltCapabilities,
    build_prebuilt,
    evaluate_rules,
    import_plugins,
)
from .catalog import builtin, builtin_names, register_builtin_capabilities
from .factories import (
    CapabilityFactories,
    build_verifiable_inference_adapter,
    create_goat_plugin,
    create_zilliqa_plugin,
    get_node_plugin,
)
from .predicates import ALWAYS, Predicate, all_of, any_of, flag, has, parse_boolean_from_text, starts_with, when
from .registry import CapabilityRegistry, export_name_for
from .rules import build_activation_rules
from .toggles import ActivationToggles, TEEMode
from .types import Capability, ClientInterface, VerifiableInferenceAdapter

__all__ = [
    "ALWAYS",
    "ActivationResult",
    "ActivationRule",
    "ActivationToggles",
    "Capability",
    "CapabilityFactories",
    "CapabilityRegistry",
    "ClientInterface",
    "PrebuiltCapabilities",
    "Predicate",
    "TEEMode",
    "VerifiableInferenceAdapter",
    "all_of",
    "any_of",
    "build_activation_rules",
    "build_prebuilt",
    "build_verifiable_inference_adapter",
    "builtin",
    "builtin_names",
    "create_goat_plugin",
    "create_zilliqa_plugin",
    "evaluate_rules",
    "export_name_for",
    "flag",
    "get_node_plugin",
    "has",
    "import_plugins",
    "parse_boolean_from_text",
    "register_builtin_capabilities",
    "starts_with",
    "when",
]
