import logging
import sys

import click

from nethermind.callcodec.cli.utils import (
    cli_logger_config,
    full_signatures_option,
    group_options,
    load_abi_json,
    log_level_option,
)

# isort: skip_file
# pylint: disable=import-outside-toplevel

root_logger = logging.getLogger("nethermind")
logger = root_logger.getChild("callcodec").getChild("cli")


@click.group()
def callcodec_cli():
    """Command Line Interface for deriving selectors, and encoding & decoding contract calls"""


@callcodec_cli.command()
@group_options(log_level_option)
@click.argument("signature")
def selector(signature: str, log_level: str):
    """Prints the 4 byte selector for a signature like transfer(address,uint256)"""
    from nethermind.callcodec.abi import derive_selector

    cli_logger_config(root_logger, log_level)
    click.echo(derive_selector(signature))


@callcodec_cli.command()
@group_options(log_level_option)
@click.argument("abi_json", type=click.File("r"))
@click.argument("function")
@click.argument("args", nargs=-1)
def encode(abi_json, function: str, args: tuple[str, ...], log_level: str):
    """
    Encodes a call to FUNCTION with ARGS.  FUNCTION can be a name, signature or selector.  Each argument is
    parsed as JSON, and passed as a string if it is not valid JSON
    """
    from nethermind.callcodec.contract import ContractAbi
    from nethermind.callcodec.exceptions import AbiError
    from nethermind.callcodec.utils import parse_cli_value

    cli_logger_config(root_logger, log_level)
    try:
        contract = ContractAbi(abi_json.name, load_abi_json(abi_json))
        click.echo(contract.encode_call(function, [parse_cli_value(arg) for arg in args]))
    except AbiError as e:
        logger.error(e)
        sys.exit(1)


@callcodec_cli.command()
@group_options(log_level_option)
@click.argument("abi_json", type=click.File("r"))
@click.argument("calldata")
def decode_call(abi_json, calldata: str, log_level: str):
    """Decodes CALLDATA, selecting the function from the ABI by the leading 4 byte selector"""
    from nethermind.callcodec.contract import ContractAbi
    from nethermind.callcodec.exceptions import AbiError
    from nethermind.callcodec.utils import decoded_to_json

    cli_logger_config(root_logger, log_level)
    try:
        contract = ContractAbi(abi_json.name, load_abi_json(abi_json))
        decoded = contract.decode_call(calldata)
    except AbiError as e:
        logger.error(e)
        sys.exit(1)

    click.echo(decoded_to_json({"method": decoded.method, "parameters": decoded}))


@callcodec_cli.command()
@group_options(log_level_option)
@click.argument("abi_json", type=click.File("r"))
@click.argument("function")
@click.argument("data")
def decode_return(abi_json, function: str, data: str, log_level: str):
    """Decodes DATA returned from a call to FUNCTION"""
    from nethermind.callcodec.contract import ContractAbi
    from nethermind.callcodec.exceptions import AbiError
    from nethermind.callcodec.utils import decoded_to_json

    cli_logger_config(root_logger, log_level)
    try:
        contract = ContractAbi(abi_json.name, load_abi_json(abi_json))
        decoded = contract.decode_return(function, data)
    except AbiError as e:
        logger.error(e)
        sys.exit(1)

    click.echo(decoded_to_json(decoded))


@callcodec_cli.command()
@group_options(log_level_option, full_signatures_option)
@click.argument("abi_json", type=click.File("r"))
def list_functions(abi_json, full_signatures: bool, log_level: str):
    """Lists the selector, signature and mutability of every function in ABI_JSON"""
    from nethermind.callcodec.contract import ContractAbi
    from nethermind.callcodec.exceptions import AbiError

    console = cli_logger_config(root_logger, log_level)
    try:
        contract = ContractAbi(abi_json.name, load_abi_json(abi_json))
    except AbiError as e:
        logger.error(e)
        sys.exit(1)

    console.print(contract.function_table(full_signatures=full_signatures))
