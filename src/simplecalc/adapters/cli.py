"""CLI generation from function signatures."""

import json
import logging
import sys
from collections.abc import Callable
from typing import Any, Literal, NoReturn, get_args, get_origin

import click
from pydantic import BaseModel, ValidationError

from simplecalc.calculator import Number
from simplecalc.config import Config
from simplecalc.function_schema import FunctionDescription
from simplecalc.serialization import to_json_dict, to_json_str
from simplecalc.tools import CalculationResult

logger = logging.getLogger(__name__)


class NumberParamType(click.ParamType):
    """Parse an operand as an int, or as a float when written like one."""

    name = "number"

    def convert(self, value, param, ctx):
        if isinstance(value, int | float):
            return value
        text = value.strip()
        try:
            if any(marker in text.lower() for marker in (".", "e", "inf", "nan")):
                return float(text)
            return int(text)
        except ValueError:
            self.fail(f"{value!r} is not a number", param, ctx)


NUMBER = NumberParamType()


def get_click_type(annotation: Any) -> Any:
    """Convert a Python type to a Click type."""
    if get_origin(annotation) is Literal:
        return click.Choice([str(choice) for choice in get_args(annotation)])
    if annotation == Number:
        return NUMBER
    if annotation in (str, int, float, bool):
        return annotation
    return str


def parse_cli_kwargs(kwargs: dict[str, Any], func_desc: FunctionDescription) -> dict[str, Any]:
    """Collect the options that were actually given on the command line."""
    return {
        field_name: kwargs[field_name]
        for field_name in func_desc.args_model.model_fields
        if kwargs.get(field_name) is not None
    }


def add_cli_options(cli_func: click.Command, func_desc: FunctionDescription) -> click.Command:
    """Add one named option per function parameter."""
    for field_name, field_info in func_desc.args_model.model_fields.items():
        option_name = f"--{field_name.replace('_', '-')}"
        field_type = field_info.annotation or str
        help_text = field_info.description or f"Value for {field_name}"

        if field_type is bool:
            cli_func = click.option(option_name, field_name, is_flag=True, help=help_text)(cli_func)
        else:
            cli_func = click.option(
                option_name,
                field_name,
                type=get_click_type(field_type),
                help=help_text,
            )(cli_func)

    return cli_func


def output_result(result: Any, format: str) -> None:
    """Output result in the specified format."""
    if result is None:
        return
    if format == "json":
        click.echo(json.dumps(to_json_dict(result), indent=2))
    elif format == "raw":
        if isinstance(result, CalculationResult):
            click.echo(result.expression)
        elif isinstance(result, BaseModel):
            click.echo(to_json_str(result))
        else:
            click.echo(result)


def fail(message: str) -> NoReturn:
    """Report an error as JSON and exit with status 1."""
    click.echo(json.dumps({"error": message}))
    sys.exit(1)


def resolve_output_format(output_format: str | None) -> str:
    """Use the --format option, falling back to the configured default."""
    if output_format:
        return output_format
    try:
        return Config().output_format
    except ValidationError as e:
        fail(f"Invalid configuration: {str(e)}")


def _generate_cli_from_description(func_desc: FunctionDescription) -> click.Command:
    """Generate a CLI command from a FunctionDescription."""
    tool_doc = func_desc.docstring_info.description or func_desc.description or "CLI for tool"
    first_line = tool_doc.split("\n")[0].strip()

    @click.command(name=func_desc.name, help=first_line)
    @click.option("--json", "json_input", help="JSON input for all arguments")
    @click.option(
        "--format",
        "output_format",
        type=click.Choice(["json", "raw"]),
        default=None,
        help="Output format (defaults to SIMPLECALC_OUTPUT_FORMAT or json)",
    )
    def cli(json_input: str | None, output_format: str | None, **kwargs):
        output_format = resolve_output_format(output_format)

        if json_input:
            try:
                args_dict = json.loads(json_input)
            except json.JSONDecodeError as e:
                fail(f"Invalid JSON: {str(e)}")
        else:
            args_dict = parse_cli_kwargs(kwargs, func_desc)

        try:
            parsed_args = func_desc.validate_and_parse_args(args_dict)
            result = func_desc.call(**parsed_args)
        except ValidationError as e:
            fail(f"Validation error: {str(e)}")
        except ArithmeticError as e:
            logger.debug(f"{func_desc.name} failed: {e}")
            fail(str(e))

        output_result(result, output_format)

    return add_cli_options(cli, func_desc)


def generate_cli(func: Callable) -> click.Command:
    """Generate a Click command for a single tool."""
    return _generate_cli_from_description(FunctionDescription(func))


def build_cli(functions: list[Callable] | Callable) -> click.Group:
    """Create a click group that dispatches to one sub-command per function."""
    if not isinstance(functions, list):
        functions = [functions]

    @click.group()
    def cli():
        """Simple arithmetic calculator."""

    for func in functions:
        cli.add_command(generate_cli(func))

    return cli


def cli_main(functions: list[Callable] | Callable):
    """Configure logging and run the CLI."""
    try:
        config = Config()
    except ValidationError as e:
        fail(f"Invalid configuration: {str(e)}")
    logging.basicConfig(
        level=config.log_level.upper(),
        format="%(levelname).1s %(asctime)s %(filename)s:%(lineno)d - %(message)s",
        datefmt="%H:%M:%S",
        handlers=[logging.StreamHandler()],
    )
    build_cli(functions)(standalone_mode=True)
