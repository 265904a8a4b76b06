"""Tests for adminbot/cli.py"""

from unittest.mock import MagicMock, patch

import pytest
from typer.testing import CliRunner

from adminbot.cli import app, setup_logging


class TestSetupLogging:
    @patch("adminbot.cli.logging.basicConfig")
    def test_setup_logging_default_level(self, mock_basic_config):
        setup_logging()

        assert mock_basic_config.call_args[1]["level"] == 20  # logging.INFO

    @patch("adminbot.cli.logging.basicConfig")
    def test_setup_logging_custom_level(self, mock_basic_config):
        setup_logging("debug")

        assert mock_basic_config.call_args[1]["level"] == 10  # logging.DEBUG

    @patch("adminbot.cli.logging.basicConfig")
    def test_setup_logging_invalid_level(self, mock_basic_config):
        with pytest.raises(AttributeError):
            setup_logging("INVALID")


class TestCLICommands:
    def setup_method(self):
        self.runner = CliRunner()

    @patch("adminbot.cli.AdminBot")
    @patch("adminbot.cli.setup_logging")
    @patch("adminbot.cli.get_settings")
    def test_run_command(self, mock_get_settings, mock_setup_logging, mock_admin_bot, settings):
        mock_get_settings.return_value = settings
        mock_admin_bot.return_value = MagicMock()

        result = self.runner.invoke(app, ["run"])

        assert result.exit_code == 0
        mock_setup_logging.assert_called_once_with("INFO")
        mock_admin_bot.assert_called_once_with(settings)
        mock_admin_bot.return_value.run.assert_called_once()

    @patch("adminbot.cli.AdminBot")
    @patch("adminbot.cli.setup_logging")
    @patch("adminbot.cli.get_settings")
    def test_run_command_with_log_level(self, mock_get_settings, mock_setup_logging, mock_admin_bot, settings):
        mock_get_settings.return_value = settings

        result = self.runner.invoke(app, ["run", "--log-level", "DEBUG"])

        assert result.exit_code == 0
        mock_setup_logging.assert_called_once_with("DEBUG")

    @patch("adminbot.cli.get_settings")
    def test_commands_lists_registry(self, mock_get_settings, settings):
        mock_get_settings.return_value = settings

        result = self.runner.invoke(app, ["commands"])

        assert result.exit_code == 0
        assert ",lookup <uuid/uid/discord>  Lookup a user." in result.output
        assert ",help [command]" in result.output
