"""Tests for CLI commands."""

from pathlib import Path

import pytest
from typer.testing import CliRunner

from calcrepr.cli import app


@pytest.fixture
def cli_runner():
    """Return a CLI test runner."""
    return CliRunner()


@pytest.fixture
def wrap_config(tmp_path: Path) -> Path:
    """Create a config file that wraps on overflow."""
    path = tmp_path / "calcrepr.toml"
    path.write_text(
        """
[integers]
bits = 32
overflow = "wrap"
"""
    )
    return path


def test_expression_argument(cli_runner: CliRunner):
    result = cli_runner.invoke(app, ["2 + 3 * 4"])
    assert result.exit_code == 0
    assert "REPR: <2+<3*4>>" in result.stdout
    assert "Result: 14" in result.stdout


def test_output_order(cli_runner: CliRunner):
    result = cli_runner.invoke(app, ["(1)"])
    assert result.exit_code == 0
    assert result.stdout.splitlines() == ["REPR: (1)", "Result: 1"]


def test_leading_minus_expression(cli_runner: CliRunner):
    result = cli_runner.invoke(app, ["-1 * (-2 + 5)"])
    assert result.exit_code == 0
    assert "REPR: <<-1>*(<<-2>+5>)>" in result.stdout
    assert "Result: -3" in result.stdout


def test_expression_from_stdin(cli_runner: CliRunner):
    result = cli_runner.invoke(app, [], input="   (1 + 2) * 3  \n")
    assert result.exit_code == 0
    assert "Input your expr:" in result.stdout
    assert "---" in result.stdout
    assert "REPR: <(<1+2>)*3>" in result.stdout
    assert "Result: 9" in result.stdout


def test_division_by_zero_exits_nonzero(cli_runner: CliRunner):
    result = cli_runner.invoke(app, ["1/0"])
    assert result.exit_code == 1
    assert "Division by zero" in result.output
    assert "Result:" not in result.output


def test_invalid_character_exits_nonzero(cli_runner: CliRunner):
    result = cli_runner.invoke(app, ["1 + x"])
    assert result.exit_code == 1
    assert "Invalid character" in result.output


def test_trailing_input_exits_nonzero(cli_runner: CliRunner):
    result = cli_runner.invoke(app, ["1 2"])
    assert result.exit_code == 1
    assert "Extra token" in result.output


def test_overflow_default_checked(cli_runner: CliRunner):
    result = cli_runner.invoke(app, ["2147483647 + 1"])
    assert result.exit_code == 1
    assert "overflow" in result.output


def test_config_wrap(cli_runner: CliRunner, wrap_config: Path):
    result = cli_runner.invoke(app, ["-c", str(wrap_config), "2147483647 + 1"])
    assert result.exit_code == 0
    assert "Result: -2147483648" in result.stdout


def test_invalid_config_exits_nonzero(cli_runner: CliRunner, tmp_path: Path):
    path = tmp_path / "calcrepr.toml"
    path.write_text('[integers]\noverflow = "saturate"\n')
    result = cli_runner.invoke(app, ["-c", str(path), "1"])
    assert result.exit_code == 1
    assert "overflow" in result.output


def test_show_tokens(cli_runner: CliRunner):
    result = cli_runner.invoke(app, ["--tokens", "12 + 3"])
    assert result.exit_code == 0
    assert "Tokens" in result.stdout
    assert "plus" in result.stdout
    assert "Result: 15" in result.stdout


def test_version(cli_runner: CliRunner):
    result = cli_runner.invoke(app, ["--version"])
    assert result.exit_code == 0
    assert "calcrepr" in result.stdout


def test_leading_minus_with_options(cli_runner: CliRunner, wrap_config: Path):
    result = cli_runner.invoke(app, ["-c", str(wrap_config), "-2147483648"])
    assert result.exit_code == 0
    assert "REPR: <-2147483648>" in result.stdout
    assert "Result: -2147483648" in result.stdout


def test_non_table_integers_exits_nonzero(cli_runner: CliRunner, tmp_path: Path):
    path = tmp_path / "calcrepr.toml"
    path.write_text("integers = 5\n")
    result = cli_runner.invoke(app, ["-c", str(path), "1"])
    assert result.exit_code == 1
    assert "Error: integers must be a table" in result.output


def test_undecodable_config_exits_nonzero(cli_runner: CliRunner, tmp_path: Path):
    path = tmp_path / "calcrepr.toml"
    path.write_bytes(b"\xff\xfe[integers]\n")
    result = cli_runner.invoke(app, ["-c", str(path), "1"])
    assert result.exit_code == 1
    assert "Error: Cannot read" in result.output
