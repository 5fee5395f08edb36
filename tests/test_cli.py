"""Tests for the agentboot CLI."""

from __future__ import annotations

from unittest.mock import patch

import pytest
from typer.testing import CliRunner

from agentboot.cli import app

runner = CliRunner()


@pytest.fixture(autouse=True)
def quiet_environment(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    with (
        patch("agentboot.cli.init_logging"),
        patch("agentboot.cli.load_dotenv"),
        patch.dict("os.environ", {"AGENTBOOT_CONFIG": str(tmp_path / "missing.yaml")}, clear=True),
    ):
        yield


class TestCapabilitiesCommand:
    def test_lists_builtins(self):
        result = runner.invoke(app, ["capabilities"])
        assert result.exit_code == 0
        assert "bootstrap" in result.output


class TestResolveCommand:
    def test_character_file(self, write_character):
        path = write_character("ada.json", {"name": "Ada", "clients": ["discord"]})

        result = runner.invoke(app, ["resolve", "--character", str(path)])

        assert result.exit_code == 0, result.output
        assert "Ada" in result.output

    def test_default_character(self):
        result = runner.invoke(app, ["resolve"])
        assert result.exit_code == 0, result.output
        assert "Eliza" in result.output

    def test_missing_character(self):
        result = runner.invoke(app, ["resolve", "--character", "missing.json"])
        assert result.exit_code == 1
        assert "Error:" in result.output
        assert "tried" in result.output

    def test_malformed_character(self, write_character):
        path = write_character("broken.json", "{not json")
        result = runner.invoke(app, ["resolve", "--characters", str(path)])
        assert result.exit_code == 1
        assert "Error:" in result.output
