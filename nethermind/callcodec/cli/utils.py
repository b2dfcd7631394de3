import json
import logging
import os
from logging import Logger

import click
from rich.console import Console
from rich.logging import RichHandler

root_logger = logging.getLogger("nethermind")
logger = root_logger.getChild("callcodec").getChild("cli")


def cli_logger_config(instrument_logger: Logger, log_level: str = "WARNING") -> Console:
    """Routes library logs through a RichHandler, and returns the console used for command output"""
    rich_console = Console()
    instrument_logger.handlers.clear()

    instrument_logger.addHandler(RichHandler(show_path=False, console=Console(stderr=True)))
    instrument_logger.setLevel(log_level.upper())
    return rich_console


def group_options(*options):
    """Decorator to group multiple click options together"""

    def wrapper(function):
        for option in reversed(options):
            function = option(function)
        return function

    return wrapper


def load_abi_json(abi_json) -> list:
    """Reads a JSON ABI from an open file.  Accepts a bare ABI list, or a compiler artifact with an ``abi`` key"""
    try:
        abi_data = json.load(abi_json)
    except json.JSONDecodeError as e:
        raise click.BadParameter(f"{abi_json.name} is not valid JSON: {e}", param_hint="ABI_JSON") from e

    if isinstance(abi_data, dict) and "abi" in abi_data:
        abi_data = abi_data["abi"]
    if not isinstance(abi_data, list):
        raise click.BadParameter(f"Expected a list of ABI entries in {abi_json.name}", param_hint="ABI_JSON")
    return abi_data


# -------------------------------------------------------
#    CLI Configurations
# -------------------------------------------------------
log_level_option = click.option(
    "--log-level",
    "log_level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    default=os.environ.get("CALLCODEC_LOG_LEVEL", "WARNING"),
    show_default=True,
    help="Log level for library logs.  If not provided, will use the CALLCODEC_LOG_LEVEL environment variable",
)

full_signatures_option = click.option(
    "--full-signatures",
    is_flag=True,
    default=False,
    help="Print function signatures with parameter types instead of function names",
)
