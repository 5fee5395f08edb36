"""Interfaces of the collaborators the boot pipeline drives.

The agent runtime, storage adapters and agent registry live outside this
package; only the calls made on them are described here.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

if TYPE_CHECKING:
    from agentboot.characters.types import Character
    from agentboot.plugins.types import VerifiableInferenceAdapter
    from agentboot.runtime.cache import CacheSelection


@runtime_checkable
class DatabaseAdapter(Protocol):
    """Storage adapter used through ``init``/``close`` only."""

    async def init(self) -> None: ...

    async def close(self) -> None: ...


@runtime_checkable
class AgentRuntime(Protocol):
    """A constructed agent; ``clients`` is assigned after it initializes."""

    agent_id: str
    character: Character
    clients: dict[str, Any]

    async def initialize(self) -> None: ...


class RuntimeFactory(Protocol):
    def __call__(
        self,
        *,
        character: Character,
        database: DatabaseAdapter,
        cache: CacheSelection,
        token: str,
        plugins: list[Any],
        verifiable_inference_adapter: VerifiableInferenceAdapter | None,
    ) -> AgentRuntime: ...


class AgentRegistry(Protocol):
    """Container that started agents are added to."""

    def register_agent(self, runtime: AgentRuntime) -> None: ...
