"""Tests for CLI generation."""

import json

import pytest
from click.testing import CliRunner

from simplecalc.adapters.cli import build_cli, generate_cli
from simplecalc.calculator import add, divide, multiply, subtract
from simplecalc.tools import calculator


@pytest.fixture(autouse=True)
def clean_env(monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("SIMPLECALC_OUTPUT_FORMAT", raising=False)


@pytest.fixture
def cli():
    return build_cli([add, subtract, multiply, divide, calculator])


@pytest.fixture
def runner():
    return CliRunner()


class TestCLIGeneration:
    """Test command construction."""

    def test_generate_cli_basic(self):
        command = generate_cli(add)

        assert command.name == "add"
        assert command.help == "Add two numbers."
        option_names = {param.name for param in command.params}
        assert {"a", "b", "json_input", "output_format"} <= option_names

    def test_literal_becomes_choice(self):
        command = generate_cli(calculator)

        operation = next(param for param in command.params if param.name == "operation")
        assert list(operation.type.choices) == ["add", "subtract", "multiply", "divide"]

    def test_group_lists_commands(self, cli, runner):
        result = runner.invoke(cli, ["--help"])

        assert result.exit_code == 0
        for name in ("add", "subtract", "multiply", "divide", "calculator"):
            assert name in result.output


class TestCLIExecution:
    """Test running commands."""

    @pytest.mark.parametrize(
        "args,expected",
        [
            (["add", "--a", "5", "--b", "3"], 8),
            (["subtract", "--a", "10", "--b", "4"], 6),
            (["multiply", "--a", "6", "--b", "7"], 42),
            (["divide", "--a", "20", "--b", "4"], 5.0),
        ],
    )
    def test_operations(self, cli, runner, args, expected):
        result = runner.invoke(cli, args)

        assert result.exit_code == 0
        assert json.loads(result.output) == expected

    def test_divide_output_is_float(self, cli, runner):
        result = runner.invoke(cli, ["divide", "--a", "20", "--b", "4"])

        assert result.output.strip() == "5.0"

    def test_divide_by_zero(self, cli, runner):
        result = runner.invoke(cli, ["divide", "--a", "10", "--b", "0"])

        assert result.exit_code == 1
        assert "by zero" in json.loads(result.output)["error"]

    def test_calculator_result(self, cli, runner):
        result = runner.invoke(
            cli, ["calculator", "--operation", "multiply", "--left", "6", "--right", "7"]
        )

        assert result.exit_code == 0
        assert json.loads(result.output) == {
            "result": 42,
            "operation": "multiply",
            "expression": "6 * 7 = 42",
        }

    def test_invalid_choice(self, cli, runner):
        result = runner.invoke(
            cli, ["calculator", "--operation", "modulo", "--left", "6", "--right", "7"]
        )

        assert result.exit_code == 2

    def test_json_input(self, cli, runner):
        result = runner.invoke(cli, ["add", "--json", '{"a": 2.5, "b": 1}'])

        assert result.exit_code == 0
        assert json.loads(result.output) == 3.5

    def test_invalid_json(self, cli, runner):
        result = runner.invoke(cli, ["add", "--json", "{not json"])

        assert result.exit_code == 1
        assert json.loads(result.output)["error"].startswith("Invalid JSON")

    def test_missing_argument(self, cli, runner):
        result = runner.invoke(cli, ["add", "--a", "5"])

        assert result.exit_code == 1
        assert json.loads(result.output)["error"].startswith("Validation error")

    def test_raw_format(self, cli, runner):
        result = runner.invoke(cli, ["add", "--a", "5", "--b", "3", "--format", "raw"])

        assert result.output == "8\n"

    def test_format_from_environment(self, cli, runner, monkeypatch):
        monkeypatch.setenv("SIMPLECALC_OUTPUT_FORMAT", "raw")

        result = runner.invoke(cli, ["multiply", "--a", "6", "--b", "7"])

        assert result.output == "42\n"


class TestOperandParsing:
    """Operands keep the numeric kind they were written in."""

    def test_float_operand_keeps_float(self, cli, runner):
        result = runner.invoke(cli, ["add", "--a", "1.0", "--b", "2"])

        assert result.exit_code == 0
        assert result.output.strip() == "3.0"

    def test_integer_operands_stay_integers(self, cli, runner):
        result = runner.invoke(cli, ["multiply", "--a", "-6", "--b", "7"])

        assert result.output.strip() == "-42"

    def test_exponent_operand_is_float(self, cli, runner):
        result = runner.invoke(cli, ["add", "--a", "1e2", "--b", "1"])

        assert result.output.strip() == "101.0"

    def test_option_matches_json_input(self, cli, runner):
        from_options = runner.invoke(cli, ["subtract", "--a", "2.5", "--b", "1"])
        from_json = runner.invoke(cli, ["subtract", "--json", '{"a": 2.5, "b": 1}'])

        assert from_options.output == from_json.output

    def test_not_a_number(self, cli, runner):
        result = runner.invoke(cli, ["add", "--a", "five", "--b", "1"])

        assert result.exit_code == 2
        assert "not a number" in result.output


class TestCLIErrors:
    """Failures are reported as JSON errors."""

    def test_invalid_output_format_config(self, cli, runner, monkeypatch):
        monkeypatch.setenv("SIMPLECALC_OUTPUT_FORMAT", "xml")

        result = runner.invoke(cli, ["add", "--a", "1", "--b", "2"])

        assert result.exit_code == 1
        assert json.loads(result.output)["error"].startswith("Invalid configuration")

    def test_overflow_is_reported(self, cli, runner):
        result = runner.invoke(cli, ["divide", "--a", "1" + "0" * 400, "--b", "3"])

        assert result.exit_code == 1
        assert "too large" in json.loads(result.output)["error"]


def test_raw_calculator_prints_expression(cli, runner):
    result = runner.invoke(
        cli, ["calculator", "--operation", "add", "--left", "1", "--right", "2", "--format", "raw"]
    )

    assert result.exit_code == 0
    assert result.output == "1 + 2 = 3\n"
