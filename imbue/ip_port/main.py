import json
import os
from typing import NoReturn

import click
from loguru import logger
from pydantic import ValidationError

from imbue.ip_port.config import load_ip_port_range_from_env
from imbue.ip_port.data_types import IpPortRange
from imbue.ip_port.errors import BaseIpPortError
from imbue.ip_port.errors import IpPortCliError
from imbue.ip_port.errors import IpPortValidationError
from imbue.ip_port.ip_port import make_ip_port
from imbue.ip_port.ip_port import validate_ip_port_data
from imbue.ip_port.logging import setup_logging
from imbue.ip_port.primitives import DataPath
from imbue.ip_port.pure import pure
from imbue.ip_port.resolvers import resolve_ip_port_to_number
from imbue.ip_port.resolvers import resolve_ip_port_to_string

_LOG_LEVELS = ("TRACE", "DEBUG", "INFO", "WARNING", "ERROR")


def _resolve_ip_port_range(min_inc: int | None, max_inc: int | None) -> IpPortRange:
    """Combine the environment configuration with any bounds given on the command line."""
    try:
        env_range = load_ip_port_range_from_env(os.environ)
    except BaseIpPortError as e:
        raise IpPortCliError(str(e)) from e

    try:
        return IpPortRange(
            min_inc=env_range.min_inc if min_inc is None else min_inc,
            max_inc=env_range.max_inc if max_inc is None else max_inc,
        )
    except ValidationError as e:
        raise IpPortCliError(
            f"Invalid port range: {e.errors()[0]['msg']}",
            user_help_text="--min-inc and --max-inc must be between 0 and 65535, with --min-inc <= --max-inc.",
        ) from e


@pure
def _format_check_result(value: str, error: IpPortValidationError | None, output_format: str) -> str:
    if output_format == "json":
        return json.dumps(
            {
                "value": value,
                "is_valid": error is None,
                "reason": None if error is None else str(error.reason),
                "message": None if error is None else str(error),
            }
        )
    if error is None:
        return f"{value}: valid"
    return f"{value}: invalid ({error.reason}) {error}"


def _raise_cli_error(error: IpPortValidationError) -> NoReturn:
    raise IpPortCliError(f"Not a valid IP port ({error.reason}): {error}")


_min_inc_option = click.option(
    "--min-inc",
    type=int,
    default=None,
    help="Lowest acceptable port [default: $IP_PORT_MIN_INC or 0]",
)
_max_inc_option = click.option(
    "--max-inc",
    type=int,
    default=None,
    help="Highest acceptable port [default: $IP_PORT_MAX_INC or 65535]",
)


@click.group()
@click.option(
    "--log-level",
    type=click.Choice(_LOG_LEVELS, case_sensitive=False),
    default="WARNING",
    envvar="IP_PORT_LOG_LEVEL",
    show_default=True,
    help="Log verbosity",
)
def cli(log_level: str) -> None:
    """Validate and normalize IP port numbers."""
    setup_logging(log_level)


@cli.command()
@click.argument("values", nargs=-1, required=True)
@_min_inc_option
@_max_inc_option
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["human", "json"]),
    default="human",
    show_default=True,
    help="Output format",
)
@click.pass_context
def check(
    ctx: click.Context,
    values: tuple[str, ...],
    min_inc: int | None,
    max_inc: int | None,
    output_format: str,
) -> None:
    """Check whether each VALUE is a valid IP port.

    Exits with status 1 if any value is invalid.
    """
    ip_port_range = _resolve_ip_port_range(min_inc, max_inc)
    logger.debug("Checking {} value(s) against ports {}-{}", len(values), ip_port_range.min_inc, ip_port_range.max_inc)

    invalid_count = 0
    for idx, value in enumerate(values):
        result = validate_ip_port_data(DataPath(f"values[{idx}]"), value, ip_port_range)
        if isinstance(result, IpPortValidationError):
            invalid_count += 1
            click.echo(_format_check_result(value, result, output_format))
        else:
            click.echo(_format_check_result(value, None, output_format))

    if invalid_count:
        logger.debug("{} of {} value(s) rejected", invalid_count, len(values))
        ctx.exit(1)


@cli.command()
@click.argument("value")
@click.option(
    "--to",
    "target",
    type=click.Choice(["number", "string"]),
    default="number",
    show_default=True,
    help="Representation to print",
)
@_min_inc_option
@_max_inc_option
def resolve(value: str, target: str, min_inc: int | None, max_inc: int | None) -> None:
    """Validate VALUE and print it in the requested representation."""
    ip_port_range = _resolve_ip_port_range(min_inc, max_inc)
    port = make_ip_port(value, on_error=_raise_cli_error, path=DataPath("value"), ip_port_range=ip_port_range)

    if target == "number":
        click.echo(resolve_ip_port_to_number(port))
    else:
        click.echo(resolve_ip_port_to_string(port))
