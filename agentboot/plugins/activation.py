"""Capability activation engine.

The engine knows nothing about individual capabilities. It evaluates an
ordered list of ``ActivationRule`` records (see ``rules.py``) against one
character's secret scope:

1. resolve and validate global toggles (the only fatal step)
2. construct the capabilities whose result goes into the table
3. evaluate every rule in declaration order
4. flatten one level and drop empty results

Duplicates are kept: a capability reachable through two true rules is
listed twice.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Mapping, Sequence
from dataclasses import dataclass, field
from typing import Any, Union

from agentboot.characters.secrets import SecretLookup, secret_lookup
from agentboot.characters.types import Character
from agentboot.config._sections import InferenceSettings
from agentboot.config.logging import get_logger

from .factories import CapabilityFactories, build_verifiable_inference_adapter
from .predicates import Predicate
from .toggles import ActivationToggles
from .types import Capability, VerifiableInferenceAdapter

logger = get_logger("plugins")

RuleResult = Union[Capability, Sequence["Capability | None"], Callable[[], "Capability | None"], None]


@dataclass(frozen=True)
class ActivationRule:
    """One table entry: when ``predicate`` holds, ``result`` is unlocked.

    ``result`` is a capability, a list of capabilities unlocked together,
    a zero-argument constructor called only when the predicate holds, or
    ``None`` (a prebuilt capability that turned out not to apply).
    """

    name: str
    predicate: Predicate
    result: RuleResult

    def evaluate(self, lookup: SecretLookup) -> list[Any]:
        if not self.predicate(lookup):
            return []
        result = self.result
        if callable(result) and not isinstance(result, Capability):
            result = result()
        if isinstance(result, (list, tuple)):
            return list(result)
        return [result]


@dataclass(frozen=True)
class PrebuiltCapabilities:
    """Capabilities constructed before the table is assembled."""

    node: Capability | None = None
    goat: Capability | None = None
    zilliqa: Capability | None = None


@dataclass
class ActivationResult:
    """Output of ``import_plugins`` for one character."""

    plugins: list[Capability] = field(default_factory=list)
    verifiable_inference_adapter: VerifiableInferenceAdapter | None = None
    toggles: ActivationToggles = field(default_factory=ActivationToggles)

    @property
    def names(self) -> list[str]:
        return [getattr(p, "name", type(p).__name__) for p in self.plugins]


def evaluate_rules(rules: Iterable[ActivationRule], lookup: SecretLookup) -> list[Any]:
    """Evaluate rules in order, flatten one level, drop ``None``/``False``."""
    activated: list[Any] = []
    for rule in rules:
        contributed = [item for item in rule.evaluate(lookup) if item is not None and item is not False]
        if contributed:
            logger.debug(f"Rule {rule.name} matched {rule.predicate.description}")
        activated.extend(contributed)
    return activated


async def build_prebuilt(lookup: SecretLookup, factories: CapabilityFactories) -> PrebuiltCapabilities:
    """Construct table inputs that depend on secrets, before evaluation."""
    goat = await factories.goat(lookup) if lookup("EVM_PRIVATE_KEY") else None
    zilliqa = await factories.zilliqa(lookup) if lookup("ZILLIQA_PRIVATE_KEY") else None
    return PrebuiltCapabilities(node=factories.node(), goat=goat, zilliqa=zilliqa)


async def import_plugins(
    character: Character,
    token: str | None = None,
    *,
    inference: InferenceSettings | None = None,
    factories: CapabilityFactories | None = None,
    environ: Mapping[str, str] | None = None,
    rules_builder: Callable[[ActivationToggles, PrebuiltCapabilities, CapabilityFactories], list[ActivationRule]]
    | None = None,
) -> ActivationResult:
    """Activate capabilities for a resolved character.

    Args:
        character: Resolved character (secrets already seeded)
        token: Model provider token, passed to the inference adapter
        inference: Verifiable inference settings (defaults to global settings)
        factories: Capability constructors (defaults to the built-in ones)
        environ: Environment mapping for the secret scope (defaults to os.environ)
        rules_builder: Table builder (defaults to ``rules.build_activation_rules``)

    Returns:
        ActivationResult with the ordered capability list

    Raises:
        ConfigurationError: TEE mode enabled without its wallet salt
    """
    if inference is None:
        from agentboot.config import get_settings

        inference = get_settings().inference
    if factories is None:
        factories = CapabilityFactories()
    if rules_builder is None:
        from .rules import build_activation_rules

        rules_builder = build_activation_rules

    logger.info(f"Creating runtime for character {character.name}")
    lookup = secret_lookup(character, environ)

    toggles = ActivationToggles.from_lookup(lookup)
    prebuilt = await build_prebuilt(lookup, factories)
    adapter = build_verifiable_inference_adapter(inference, character.model_provider, token)

    rules = rules_builder(toggles, prebuilt, factories)
    plugins = evaluate_rules(rules, lookup)
    logger.info(f"Activated {len(plugins)} capabilities for {character.name}")

    return ActivationResult(plugins=plugins, verifiable_inference_adapter=adapter, toggles=toggles)
