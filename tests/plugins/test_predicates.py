"""Tests for predicate combinators and toggles."""

from __future__ import annotations

import pytest

from agentboot.errors import ConfigurationError
from agentboot.plugins.predicates import ALWAYS, all_of, any_of, flag, has, parse_boolean_from_text, starts_with, when
from agentboot.plugins.toggles import ActivationToggles


def lookup_from(values: dict[str, str]):
    return lambda key: values.get(key) or None


class TestParseBoolean:
    """Tests for loose boolean parsing."""

    @pytest.mark.parametrize("text", ["true", "TRUE", " yes ", "1", "on", "enable", "t", "Y"])
    def test_truthy(self, text):
        assert parse_boolean_from_text(text) is True

    @pytest.mark.parametrize("text", [None, "", "false", "0", "off", "maybe"])
    def test_falsy(self, text):
        assert parse_boolean_from_text(text) is False


class TestPredicates:
    """Tests for predicate combinators."""

    def test_has(self):
        assert has("A")(lookup_from({"A": "x"})) is True
        assert has("A")(lookup_from({"A": ""})) is False
        assert has("A")(lookup_from({})) is False

    def test_flag(self):
        assert flag("F")(lookup_from({"F": "true"})) is True
        assert flag("F")(lookup_from({"F": "no"})) is False

    def test_starts_with(self):
        assert starts_with("K", "0x")(lookup_from({"K": "0xabc"})) is True
        assert starts_with("K", "0x")(lookup_from({"K": "abc"})) is False
        assert starts_with("K", "0x")(lookup_from({})) is False

    def test_operators(self):
        lookup = lookup_from({"A": "1"})
        assert (has("A") & has("B"))(lookup) is False
        assert (has("A") | has("B"))(lookup) is True
        assert (~has("B"))(lookup) is True

    def test_has_and_not_prefix(self):
        solana_wallet = has("W") & ~starts_with("W", "0x")
        assert solana_wallet(lookup_from({"W": "So1ana"})) is True
        assert solana_wallet(lookup_from({"W": "0xevm"})) is False
        assert solana_wallet(lookup_from({})) is False

    def test_all_any(self):
        lookup = lookup_from({"A": "1", "B": "2"})
        assert all_of(has("A"), has("B"))(lookup) is True
        assert all_of(has("A"), has("C"))(lookup) is False
        assert any_of(has("C"), has("B"))(lookup) is True

    def test_always_and_when(self):
        assert ALWAYS(lookup_from({})) is True
        assert when(True, "on")(lookup_from({})) is True
        assert when(False, "off")(lookup_from({})) is False

    def test_description(self):
        predicate = (has("A") | has("B")) & has("C")
        assert predicate.description == "((A | B) & C)"


class TestActivationToggles:
    """Tests for TEE toggle validation."""

    def test_default_off(self):
        toggles = ActivationToggles.from_lookup(lookup_from({}))
        assert toggles.tee_mode == "OFF"
        assert toggles.tee_enabled is False

    def test_mode_without_salt_fails(self):
        with pytest.raises(ConfigurationError, match="WALLET_SECRET_SALT"):
            ActivationToggles.from_lookup(lookup_from({"TEE_MODE": "LOCAL"}))

    def test_mode_with_salt(self):
        toggles = ActivationToggles.from_lookup(lookup_from({"TEE_MODE": "DOCKER", "WALLET_SECRET_SALT": "s"}))
        assert toggles.tee_mode == "DOCKER"
        assert toggles.tee_enabled is True

    @pytest.mark.parametrize("mode", ["off", "Off", "docker"])
    def test_mode_is_case_sensitive(self, mode):
        with pytest.raises(ConfigurationError, match="WALLET_SECRET_SALT"):
            ActivationToggles.from_lookup(lookup_from({"TEE_MODE": mode}))

        toggles = ActivationToggles.from_lookup(lookup_from({"TEE_MODE": mode, "WALLET_SECRET_SALT": "s"}))
        assert toggles.tee_mode == mode
        assert toggles.tee_enabled is True

    def test_salt_without_mode(self):
        toggles = ActivationToggles.from_lookup(lookup_from({"WALLET_SECRET_SALT": "s"}))
        assert toggles.tee_enabled is False

    def test_unknown_mode_is_enabled(self):
        toggles = ActivationToggles.from_lookup(lookup_from({"TEE_MODE": "CUSTOM", "WALLET_SECRET_SALT": "s"}))
        assert toggles.tee_enabled is True
