"""Tests for the root vnext-template CLI."""

import pytest
from click.testing import CliRunner

from vnext_template import __version__
from vnext_template.cli import cli


def test_cli_help(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["--help"])
    assert result.exit_code == 0
    assert "vnext-template" in result.output


def test_cli_version(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["--version"])
    assert result.exit_code == 0
    assert __version__ in result.output


def test_cli_no_args(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, [])
    assert result.exit_code == 0
    assert "Usage" in result.output


@pytest.mark.parametrize("flag", ["--json", "-q", "-v", "--log-json"])
def test_global_flags_accepted(cli_runner: CliRunner, flag: str) -> None:
    result = cli_runner.invoke(cli, [flag, "--version"])
    assert result.exit_code == 0


EXPECTED_COMMANDS = ["domain", "types", "config", "list", "show", "validate"]


@pytest.mark.parametrize("name", EXPECTED_COMMANDS)
def test_command_registered(cli_runner: CliRunner, name: str) -> None:
    result = cli_runner.invoke(cli, [name, "--help"])
    assert result.exit_code == 0, result.output


@pytest.mark.parametrize("name", EXPECTED_COMMANDS)
def test_command_examples(cli_runner: CliRunner, name: str) -> None:
    result = cli_runner.invoke(cli, [name, "--examples"])
    assert result.exit_code == 0
    assert f"Examples for 'cli {name}'" in result.output
    assert "vnext-template" in result.output
