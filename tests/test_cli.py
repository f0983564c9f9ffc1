"""Tests for the root papilio CLI."""

import pytest
from click.testing import CliRunner

from papilio import __version__
from papilio.cli import cli


def test_cli_help(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["--help"])
    assert result.exit_code == 0
    assert "papilio" in result.output


def test_cli_version(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["--version"])
    assert result.exit_code == 0
    assert __version__ in result.output


@pytest.mark.usefixtures("_isolated_data_dir")
def test_cli_no_args(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, [])
    assert result.exit_code == 0
    assert "Usage" in result.output


@pytest.mark.parametrize("name", ["task", "wheel", "domains", "panel"])
def test_commands_registered(name: str) -> None:
    assert name in cli.commands


@pytest.mark.parametrize("args", [["task"], ["wheel"], ["domains"], ["panel"]])
def test_examples_flag(cli_runner: CliRunner, args: list[str]) -> None:
    result = cli_runner.invoke(cli, [*args, "--examples"])
    assert result.exit_code == 0
    assert "Examples for" in result.output


@pytest.mark.parametrize("args", [["task"], ["wheel"], ["domains"], ["panel"]])
def test_help_mentions_examples(cli_runner: CliRunner, args: list[str]) -> None:
    result = cli_runner.invoke(cli, [*args, "--help"])
    assert result.exit_code == 0
    assert "--examples' for usage examples" in result.output


def test_examples_are_indented(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["task", "--examples"])
    assert "  papilio task add finances" in result.output
