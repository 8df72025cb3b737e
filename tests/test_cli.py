"""Tests for the root onboardctl CLI."""

import pytest
from click.testing import CliRunner

from onboardctl import __version__
from onboardctl.cli import cli

EXPECTED_COMMANDS = ["validate", "verify", "submit"]


def test_cli_help(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["--help"])
    assert result.exit_code == 0
    assert "onboardctl" in result.output


def test_cli_version(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["--version"])
    assert result.exit_code == 0
    assert __version__ in result.output


def test_cli_no_args(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, [])
    assert result.exit_code == 0
    assert "Usage" in result.output


@pytest.mark.parametrize("flag", ["--json", "-q", "-v", "--log-json"])
def test_global_flag_accepted(cli_runner: CliRunner, flag: str) -> None:
    result = cli_runner.invoke(cli, [flag, "--version"])
    assert result.exit_code == 0


@pytest.mark.parametrize("command", EXPECTED_COMMANDS)
def test_command_registered(cli_runner: CliRunner, command: str) -> None:
    result = cli_runner.invoke(cli, [command, "--help"])
    assert result.exit_code == 0, f"{command} --help failed: {result.output}"


@pytest.mark.parametrize("command", EXPECTED_COMMANDS)
def test_command_examples(cli_runner: CliRunner, command: str) -> None:
    result = cli_runner.invoke(cli, [command, "--examples"])
    assert result.exit_code == 0
    assert f"onboardctl {command}" in result.output
