"""Global activation toggles, resolved and validated once per character."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from agentboot.characters.secrets import SecretLookup
from agentboot.config.logging import get_logger
from agentboot.errors import ConfigurationError

logger = get_logger("plugins")


class TEEMode(str, Enum):
    """Trusted execution environment modes."""

    OFF = "OFF"
    LOCAL = "LOCAL"
    DOCKER = "DOCKER"
    PRODUCTION = "PRODUCTION"


@dataclass(frozen=True)
class ActivationToggles:
    """Immutable view of the toggles the rule table depends on.

    Attributes:
        tee_mode: Value of ``TEE_MODE`` as given, ``OFF`` when unset; matched case-sensitively
        has_wallet_secret_salt: Whether ``WALLET_SECRET_SALT`` is set
    """

    tee_mode: str = TEEMode.OFF.value
    has_wallet_secret_salt: bool = False

    @property
    def tee_enabled(self) -> bool:
        """TEE mode is on and its salt is present."""
        return self.tee_mode != TEEMode.OFF.value and self.has_wallet_secret_salt

    @classmethod
    def from_lookup(cls, lookup: SecretLookup) -> ActivationToggles:
        """Resolve toggles through the secret scope and validate them.

        Raises:
            ConfigurationError: TEE mode is enabled without ``WALLET_SECRET_SALT``
        """
        tee_mode = lookup("TEE_MODE") or TEEMode.OFF.value
        has_salt = bool(lookup("WALLET_SECRET_SALT"))

        if tee_mode != TEEMode.OFF.value and not has_salt:
            logger.error("A WALLET_SECRET_SALT required when TEE_MODE is enabled")
            raise ConfigurationError(f"Invalid TEE configuration: TEE_MODE={tee_mode} requires WALLET_SECRET_SALT")

        if tee_mode not in TEEMode.__members__:
            logger.warning(f"Unrecognized TEE_MODE {tee_mode!r}, treating it as enabled")

        return cls(tee_mode=tee_mode, has_wallet_secret_salt=has_salt)
