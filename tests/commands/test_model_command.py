# tests/commands/test_model_command.py
"""Tests for the ``ptn model`` subcommands."""

from __future__ import annotations

import json
from unittest.mock import MagicMock, patch

import pytest
from typer.testing import CliRunner

from photon_cli.commands.model import model_app
from photon_cli.config.settings import PhotonConfig, get_config_path


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def mock_output():
    with patch("photon_cli.commands.model.output") as mock:
        yield mock


@pytest.fixture
def mock_console():
    with patch("photon_cli.commands.model.console") as mock:
        yield mock


def _printed(mock_console: MagicMock) -> str:
    return "\n".join(
        call.args[0].plain for call in mock_console.print.call_args_list if call.args
    )


class TestListCommand:
    def test_lists_all_models_marking_current(self, runner, mock_console):
        result = runner.invoke(model_app, ["list"])
        assert result.exit_code == 0
        text = _printed(mock_console)
        for model_id in ("kimi", "deepseek-r1", "deepseek-v3", "llama-4", "mistral"):
            assert model_id in text
        assert "deepseek-v3" in text.split("(current)")[0].splitlines()[-1]


class TestCurrentCommand:
    def test_default_model(self, runner, mock_output, mock_console):
        result = runner.invoke(model_app, ["current"])
        assert result.exit_code == 0
        mock_output.info.assert_called_once_with("🤖 Current Model:")
        assert "📋 Model:" in _printed(mock_console)

    def test_online_model(self, runner, mock_output, monkeypatch):
        monkeypatch.setenv("PHOTON_MODEL", "__online__openai/gpt-4o")
        result = runner.invoke(model_app, ["current"])
        assert result.exit_code == 0
        mock_output.info.assert_called_once_with("🤖 Current Model: openai/gpt-4o (online)")

    def test_unknown_model(self, runner, mock_output, monkeypatch):
        monkeypatch.setenv("PHOTON_MODEL", "gpt-99")
        result = runner.invoke(model_app, ["current"])
        assert result.exit_code == 1
        mock_output.error.assert_called_once_with("Error: model 'gpt-99' not found")


class TestSetCommand:
    def test_set_valid(self, runner, mock_output):
        result = runner.invoke(model_app, ["set", "kimi"])
        assert result.exit_code == 0
        mock_output.success.assert_called_once_with("✅ Model set to: MoonshotAI Kimi K2")
        saved = json.loads(get_config_path().read_text())
        assert saved["current_model"] == "kimi"

    def test_set_invalid(self, runner, mock_output):
        result = runner.invoke(model_app, ["set", "gpt-99"])
        assert result.exit_code == 1
        mock_output.error.assert_called_once_with("Error: model 'gpt-99' not found")
        assert not get_config_path().exists()

    @patch("photon_cli.commands.model.run_model_selector", return_value="mistral")
    def test_interactive(self, mock_selector, runner, mock_output):
        result = runner.invoke(model_app, ["set"])
        assert result.exit_code == 0
        mock_selector.assert_called_once()
        assert mock_selector.call_args.args[1] == "deepseek-v3"
        assert PhotonConfig.load().current_model == "mistral"

    @patch("photon_cli.commands.model.run_model_selector", return_value=None)
    def test_interactive_cancelled(self, mock_selector, runner, mock_output):
        result = runner.invoke(model_app, ["set"])
        assert result.exit_code == 0
        mock_output.warning.assert_called_once_with("No model selected")
        assert not get_config_path().exists()


class TestInfoCommand:
    def test_info(self, runner, mock_console):
        result = runner.invoke(model_app, ["info", "deepseek-r1"])
        assert result.exit_code == 0
        text = _printed(mock_console)
        assert "🧠 Special:" in text
        assert "163840 tokens" in text

    def test_info_unknown(self, runner, mock_output):
        result = runner.invoke(model_app, ["info", "nope"])
        assert result.exit_code == 1
        mock_output.error.assert_called_once()


class TestResetCommand:
    def test_reset(self, runner, mock_output):
        runner.invoke(model_app, ["set", "kimi"])
        result = runner.invoke(model_app, ["reset"])
        assert result.exit_code == 0
        assert PhotonConfig.load().current_model == "deepseek-v3"
        mock_output.success.assert_called_with("✅ Model reset to default: DeepSeek V3 Chat")
