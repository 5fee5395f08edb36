"""Core types for capability modules ("plugins").

A capability is opaque to the boot pipeline: it has a name, an optional
description and an optional list of client interfaces it contributes.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Awaitable, Protocol, runtime_checkable

if TYPE_CHECKING:
    from agentboot.runtime.protocols import AgentRuntime


@runtime_checkable
class ClientInterface(Protocol):
    """A communication front-end that can be started for a runtime.

    ``start`` may be a coroutine function or a plain function. Returning
    ``None`` means the client did not activate.
    """

    def start(self, runtime: AgentRuntime) -> Awaitable[Any] | Any: ...


@dataclass(eq=False)
class Capability:
    """An activated or resolvable capability module.

    Identity comparison is used on purpose (``eq=False``): the same
    capability object may appear more than once in an activation list.
    """

    name: str
    description: str = ""
    clients: list[ClientInterface] = field(default_factory=list)
    options: dict[str, Any] = field(default_factory=dict)

    def __repr__(self) -> str:
        return f"Capability({self.name!r})"


@dataclass(frozen=True)
class VerifiableInferenceAdapter:
    """Descriptor for the optional verifiable-inference adapter."""

    provider: str
    options: dict[str, Any] = field(default_factory=dict)


