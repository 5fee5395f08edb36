"""Error taxonomy for the agent boot pipeline."""

from __future__ import annotations


class AgentBootError(Exception):
    """Base class for all boot pipeline errors."""


class NotFoundError(AgentBootError):
    """No candidate path or URL produced character content."""

    def __init__(self, message: str, source: str | None = None, attempted: list[str] | None = None):
        super().__init__(message)
        self.source = source
        self.attempted = list(attempted or [])


class ParseOrValidationError(AgentBootError):
    """Character content was found but is malformed or fails validation."""

    def __init__(self, message: str, source: str | None = None):
        super().__init__(message)
        self.source = source


class ConfigurationError(AgentBootError):
    """A global toggle or storage setting violates its invariant."""


class PluginImportError(AgentBootError, ImportError):
    """A declared plugin identifier could not be resolved."""

    def __init__(self, identifier: str, reason: str):
        super().__init__(f"Failed to import plugin {identifier!r}: {reason}")
        self.identifier = identifier
        self.reason = reason
