"""Predicate combinators over a secret lookup.

Predicates compose with ``&``, ``|`` and ``~`` and carry a readable
description for debug logging:

    (has("NEAR_ADDRESS") | has("NEAR_WALLET_PUBLIC_KEY")) & has("NEAR_WALLET_SECRET_KEY")
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

from agentboot.characters.secrets import SecretLookup

TRUTHY_TEXT = frozenset({"YES", "Y", "TRUE", "T", "1", "ON", "ENABLE"})
FALSY_TEXT = frozenset({"NO", "N", "FALSE", "F", "0", "OFF", "DISABLE"})


def parse_boolean_from_text(text: str | None) -> bool:
    """Loose boolean parsing used for feature flags; unknown text is False."""
    if not text:
        return False
    return text.strip().upper() in TRUTHY_TEXT


@dataclass(frozen=True)
class Predicate:
    """A named boolean test over a secret lookup."""

    test: Callable[[SecretLookup], bool]
    description: str

    def __call__(self, lookup: SecretLookup) -> bool:
        return bool(self.test(lookup))

    def __and__(self, other: Predicate) -> Predicate:
        return Predicate(lambda lookup: self(lookup) and other(lookup), f"({self.description} & {other.description})")

    def __or__(self, other: Predicate) -> Predicate:
        return Predicate(lambda lookup: self(lookup) or other(lookup), f"({self.description} | {other.description})")

    def __invert__(self) -> Predicate:
        return Predicate(lambda lookup: not self(lookup), f"~{self.description}")

    def __repr__(self) -> str:
        return f"Predicate({self.description})"


ALWAYS = Predicate(lambda lookup: True, "always")


def has(key: str) -> Predicate:
    """Secret ``key`` is present and non-empty."""
    return Predicate(lambda lookup: bool(lookup(key)), key)


def flag(key: str) -> Predicate:
    """Secret ``key`` parses as a true boolean."""
    return Predicate(lambda lookup: parse_boolean_from_text(lookup(key)), f"flag({key})")


def starts_with(key: str, prefix: str) -> Predicate:
    """Secret ``key`` is present and starts with ``prefix``."""
    return Predicate(lambda lookup: (lookup(key) or "").startswith(prefix), f"{key}^={prefix}")


def all_of(*predicates: Predicate) -> Predicate:
    return Predicate(
        lambda lookup: all(p(lookup) for p in predicates),
        "(" + " & ".join(p.description for p in predicates) + ")",
    )


def any_of(*predicates: Predicate) -> Predicate:
    return Predicate(
        lambda lookup: any(p(lookup) for p in predicates),
        "(" + " | ".join(p.description for p in predicates) + ")",
    )


def when(condition: bool, description: str) -> Predicate:
    """Lift an already-evaluated toggle into a predicate."""
    return Predicate(lambda lookup: condition, description)
