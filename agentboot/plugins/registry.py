"""Capability registry.

Maps stable capability keys to constructors so that a character's
``plugins: ["web-search", ...]`` can be resolved without importing by
computed name. Dynamic import is kept only for external plugin packages
whose module path starts with an allowed prefix.

Usage:
    registry = CapabilityRegistry.get_instance()
    registry.register("web-search", lambda: Capability("web-search"))
    plugins = await registry.resolve_plugins(["web-search", "agentboot_plugin_weather"])
"""

from __future__ import annotations

import asyncio
import importlib
import inspect
from collections.abc import Callable, Iterable
from typing import Any, ClassVar

from agentboot.config.logging import get_logger
from agentboot.errors import PluginImportError

from .types import Capability

logger = get_logger("plugins")

CapabilityFactory = Callable[[], Any]

DEFAULT_ALLOWED_PREFIXES: tuple[str, ...] = ("agentboot_plugin_",)


def export_name_for(module_name: str) -> str:
    """Attribute name a plugin module is expected to export.

    ``agentboot_plugin_web_search`` -> ``web_search_plugin``;
    ``vendor.plugins.open-weather`` -> ``open_weather_plugin``.
    """
    leaf = module_name.rsplit(".", 1)[-1]
    for prefix in DEFAULT_ALLOWED_PREFIXES + ("plugin_", "plugin-"):
        if leaf.startswith(prefix):
            leaf = leaf[len(prefix) :]
            break
    return leaf.replace("-", "_") + "_plugin"


class CapabilityRegistry:
    """Registry of capability constructors plus an import allow-list.

    Keys are case-insensitive. Factories are called on every resolve, so
    a factory that should yield a shared instance must cache it itself.
    """

    _instance: ClassVar[CapabilityRegistry | None] = None

    def __init__(self, allowed_prefixes: Iterable[str] | None = None) -> None:
        self._factories: dict[str, CapabilityFactory] = {}
        self.allowed_prefixes: tuple[str, ...] = (
            tuple(allowed_prefixes) if allowed_prefixes is not None else DEFAULT_ALLOWED_PREFIXES
        )

    @classmethod
    def get_instance(cls) -> CapabilityRegistry:
        """Get or create the singleton registry instance."""
        if cls._instance is None:
            from agentboot.config import get_settings

            from .catalog import register_builtin_capabilities

            cls._instance = cls(get_settings().characters.allowed_plugin_prefixes())
            register_builtin_capabilities(cls._instance)
        return cls._instance

    @classmethod
    def reset(cls) -> None:
        """Reset the singleton instance. Useful for testing."""
        cls._instance = None

    def register(self, key: str, factory: CapabilityFactory | Capability) -> None:
        """Register a constructor (or a ready instance) under ``key``."""
        if isinstance(factory, Capability):
            instance = factory
            factory = lambda: instance  # noqa: E731
        self._factories[key.lower()] = factory
        logger.debug(f"Registered capability: {key}")

    def unregister(self, key: str) -> bool:
        return self._factories.pop(key.lower(), None) is not None

    def keys(self) -> list[str]:
        return list(self._factories)

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and key.lower() in self._factories

    def is_import_allowed(self, module_name: str) -> bool:
        return any(module_name.startswith(prefix) for prefix in self.allowed_prefixes)

    async def resolve(self, identifier: str) -> Any:
        """Resolve one identifier to a capability object.

        Raises:
            PluginImportError: unknown key, disallowed module, failed import,
                or a module without the expected export
        """
        factory = self._factories.get(identifier.lower())
        if factory is not None:
            try:
                result = factory()
                if inspect.isawaitable(result):
                    result = await result
            except Exception as e:
                raise PluginImportError(identifier, f"factory failed: {e}") from e
            return result

        if not self.is_import_allowed(identifier):
            raise PluginImportError(identifier, "not registered and not on the import allow-list")

        try:
            module = await asyncio.to_thread(importlib.import_module, identifier)
        except Exception as e:
            raise PluginImportError(identifier, str(e)) from e

        plugin = getattr(module, "plugin", None)
        if plugin is None:
            plugin = getattr(module, export_name_for(identifier), None)
        if plugin is None:
            raise PluginImportError(
                identifier, f"module exports neither 'plugin' nor '{export_name_for(identifier)}'"
            )
        return plugin

    async def resolve_plugins(self, entries: Iterable[Any]) -> list[Any]:
        """Resolve a character's plugin list, preserving declaration order.

        Strings are resolved concurrently; anything else is taken as an
        already-resolved capability. An entry that fails to resolve is
        logged and dropped, the others still load.
        """
        entries = list(entries or [])
        if not entries:
            return []

        names = [e for e in entries if isinstance(e, str)]
        if names:
            logger.info(f"Plugins are: {', '.join(names)}")

        async def _resolve_entry(entry: Any) -> Any:
            if not isinstance(entry, str):
                return entry
            try:
                return await self.resolve(entry)
            except PluginImportError as e:
                logger.error(str(e))
                return None

        resolved = await asyncio.gather(*(_resolve_entry(entry) for entry in entries))
        return [plugin for plugin in resolved if plugin is not None]
