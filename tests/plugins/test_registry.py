"""Tests for the capability registry."""

from __future__ import annotations

import logging
import sys
import types
from unittest.mock import patch

import pytest

from agentboot.errors import PluginImportError
from agentboot.plugins.catalog import builtin
from agentboot.plugins.registry import CapabilityRegistry, export_name_for
from agentboot.plugins.types import Capability


class TestExportNameFor:
    """Tests for the expected export attribute."""

    def test_names(self):
        assert export_name_for("agentboot_plugin_web_search") == "web_search_plugin"
        assert export_name_for("vendor.plugins.open-weather") == "open_weather_plugin"
        assert export_name_for("weather") == "weather_plugin"


class TestCapabilityRegistry:
    """Tests for registration and resolution."""

    def test_register_and_contains(self):
        registry = CapabilityRegistry()
        registry.register("Custom", Capability("custom"))
        assert "custom" in registry
        assert "CUSTOM" in registry
        assert registry.keys() == ["custom"]
        assert registry.unregister("custom") is True
        assert registry.unregister("custom") is False

    @pytest.mark.asyncio
    async def test_resolve_builtin_is_shared_instance(self, registry):
        assert await registry.resolve("web-search") is builtin("web-search")
        assert await registry.resolve("Web-Search") is builtin("web-search")

    @pytest.mark.asyncio
    async def test_async_factory(self):
        registry = CapabilityRegistry()

        async def make():
            return Capability("async-made")

        registry.register("async-made", make)
        assert (await registry.resolve("async-made")).name == "async-made"

    @pytest.mark.asyncio
    async def test_factory_failure_wrapped(self):
        registry = CapabilityRegistry()

        def broken():
            raise RuntimeError("boom")

        registry.register("broken", broken)
        with pytest.raises(PluginImportError, match="boom"):
            await registry.resolve("broken")

    @pytest.mark.asyncio
    async def test_disallowed_module_rejected(self, registry):
        with pytest.raises(PluginImportError, match="allow-list"):
            await registry.resolve("os")

    @pytest.mark.asyncio
    async def test_import_uses_plugin_attribute(self, monkeypatch):
        module = types.ModuleType("agentboot_plugin_weather")
        module.plugin = Capability("weather")
        module.weather_plugin = Capability("ignored")
        monkeypatch.setitem(sys.modules, "agentboot_plugin_weather", module)

        registry = CapabilityRegistry()
        assert await registry.resolve("agentboot_plugin_weather") is module.plugin

    @pytest.mark.asyncio
    async def test_import_uses_derived_export(self, monkeypatch):
        module = types.ModuleType("agentboot_plugin_weather")
        module.weather_plugin = Capability("weather")
        monkeypatch.setitem(sys.modules, "agentboot_plugin_weather", module)

        registry = CapabilityRegistry()
        assert await registry.resolve("agentboot_plugin_weather") is module.weather_plugin

    @pytest.mark.asyncio
    async def test_module_without_export(self, monkeypatch):
        monkeypatch.setitem(sys.modules, "agentboot_plugin_empty", types.ModuleType("agentboot_plugin_empty"))
        with pytest.raises(PluginImportError, match="empty_plugin"):
            await CapabilityRegistry().resolve("agentboot_plugin_empty")

    @pytest.mark.asyncio
    async def test_resolve_plugins_preserves_order_and_drops_failures(self, registry, caplog):
        inline = Capability("inline")
        with caplog.at_level(logging.ERROR):
            resolved = await registry.resolve_plugins(["evm", inline, "agentboot_plugin_missing", "bootstrap", "nope"])

        assert resolved == [builtin("evm"), inline, builtin("bootstrap")]
        assert "agentboot_plugin_missing" in caplog.text
        assert "nope" in caplog.text

    @pytest.mark.asyncio
    async def test_resolve_plugins_empty(self, registry):
        assert await registry.resolve_plugins([]) == []
        assert await registry.resolve_plugins(None) == []

    @patch.dict("os.environ", {"PLUGIN_IMPORT_ALLOWLIST": "myco_plugins., agentboot_plugin_"})
    def test_get_instance_reads_settings(self):
        registry = CapabilityRegistry.get_instance()
        assert registry.allowed_prefixes == ("myco_plugins.", "agentboot_plugin_")
        assert "bootstrap" in registry
        assert CapabilityRegistry.get_instance() is registry
