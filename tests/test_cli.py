"""Tests for the click entry point."""

import logging

import pytest
from click.testing import CliRunner

from bloodbank import __version__
from bloodbank.cli import main
from bloodbank.utils.logger import LOGGER_NAME
from tests.conftest import session_input


class TestMainGroup:
    """Tests for the top-level command group."""

    def test_version(self, runner: CliRunner) -> None:
        result = runner.invoke(main, ["--version"])

        assert result.exit_code == 0
        assert __version__ in result.output

    def test_help_lists_commands(self, runner: CliRunner) -> None:
        result = runner.invoke(main, ["--help"])

        assert result.exit_code == 0
        assert "shell" in result.output
        assert "compatibility" in result.output

    def test_shell_subcommand(self, runner: CliRunner) -> None:
        result = runner.invoke(main, ["shell"], input=session_input("7"))

        assert result.exit_code == 0
        assert "Exiting..." in result.output

    def test_log_level_option_configures_logger(self, runner: CliRunner) -> None:
        result = runner.invoke(main, ["--log-level", "debug", "shell"], input=session_input("7"))

        assert result.exit_code == 0
        assert logging.getLogger(LOGGER_NAME).level == logging.DEBUG

    def test_log_level_from_environment(self, runner: CliRunner, monkeypatch) -> None:
        monkeypatch.setenv("BLOODBANK_LOG_LEVEL", "error")

        result = runner.invoke(main, ["shell"], input=session_input("7"))

        assert result.exit_code == 0
        assert logging.getLogger(LOGGER_NAME).level == logging.ERROR

    def test_rejects_unknown_log_level(self, runner: CliRunner) -> None:
        result = runner.invoke(main, ["--log-level", "loud"])

        assert result.exit_code == 2


class TestCompatibilityCommand:
    """Tests for `bloodbank compatibility GROUP`."""

    def test_shows_both_directions(self, runner: CliRunner) -> None:
        result = runner.invoke(main, ["compatibility", "ab-"])

        assert result.exit_code == 0
        assert result.output.splitlines() == [
            "AB- can receive from: A-, B-, AB-, O-",
            "AB- can donate to: AB+, AB-",
        ]

    @pytest.mark.parametrize(
        "group, receive, donate",
        [
            ("O-", "O-", "A+, A-, B+, B-, AB+, AB-, O+, O-"),
            ("AB+", "A+, A-, B+, B-, AB+, AB-, O+, O-", "AB+"),
        ],
    )
    def test_universal_groups(
        self, runner: CliRunner, group: str, receive: str, donate: str
    ) -> None:
        result = runner.invoke(main, ["compatibility", group])

        assert f"{group} can receive from: {receive}" in result.output
        assert f"{group} can donate to: {donate}" in result.output

    def test_invalid_group_is_usage_error(self, runner: CliRunner) -> None:
        result = runner.invoke(main, ["compatibility", "C+"])

        assert result.exit_code == 2
        assert "'C+' is not one of: A+, A-, B+, B-, AB+, AB-, O+, O-" in result.output
