import logging
from typing import Any, Mapping, Sequence

from eth_typing import ABIConstructor, ABIFunction
from eth_utils import encode_hex, remove_0x_prefix

from nethermind.callcodec.exceptions import InvalidCallableDescriptor, MissingAbiInputs
from nethermind.callcodec.types.decoding import DecodedCall

from .parameters import decode_parameters, encode_parameters
from .selectors import derive_selector
from .utils import HEX_PREFIX, abi_to_signature, is_function_like

root_logger = logging.getLogger("nethermind")
logger = root_logger.getChild("callcodec").getChild("abi")

SELECTOR_HEX_LENGTH = 10
""" Characters taken by a 0x prefixed selector at the start of call data """


def encode_call(abi_function: ABIFunction, args: Sequence[Any] | None = None) -> str:
    """
    Encodes a function call as the function selector followed by the packed arguments.

    >>> from nethermind.callcodec import encode_call
    >>> encode_call(
    ...     {"type": "function", "name": "balanceOf", "inputs": [{"name": "account", "type": "address"}]},
    ...     ["0x1234567890123456789012345678901234567890"],
    ... )
    '0x70a082310000000000000000000000001234567890123456789012345678901234567890'

    :param abi_function: Function ABI entry
    :param args: Argument values, matched positionally to the function inputs.  Can be omitted for
        functions without inputs
    :return: 0x prefixed hex call data
    """
    if not is_function_like(abi_function):
        raise InvalidCallableDescriptor(f"Cannot encode call for {abi_function!r}, expected a function ABI entry")

    encoded_args = encode_parameters(abi_function["inputs"], args or [])
    return derive_selector(abi_function) + remove_0x_prefix(encoded_args)  # type: ignore[arg-type]


def decode_call(
    abi_function: ABIFunction | ABIConstructor,
    data: str | bytes,
    selector_present: bool = True,
) -> DecodedCall:
    """
    Decodes call data using a function or constructor ABI entry.

    If selector_present is True, the first 4 bytes are treated as the function selector and discarded.
    Data that is shorter than a selector, or does not start with 0x, is decoded without stripping.
    The selector is not checked against the ABI entry.

    :param abi_function: Function or constructor ABI entry.  Must contain an ``inputs`` list
    :param data: Call data as a 0x prefixed hex string, or raw bytes
    :param selector_present: False if data only contains the packed arguments
    :return: DecodedCall with the decoded arguments and the method signature
    """
    if not isinstance(abi_function, Mapping):
        raise InvalidCallableDescriptor(f"Cannot decode call for {abi_function!r}, expected an ABI entry")

    if abi_function.get("inputs") is None:
        raise MissingAbiInputs(f"No inputs found in ABI entry {abi_function.get('name', abi_function.get('type'))}")

    if isinstance(data, (bytes, bytearray)):
        data = encode_hex(data)

    if selector_present and data and len(data) >= SELECTOR_HEX_LENGTH and data.startswith(HEX_PREFIX):
        arg_data = data[SELECTOR_HEX_LENGTH:]
    else:
        logger.debug(f"Decoding call data without stripping selector (selector_present={selector_present})")
        arg_data = data

    decoded = decode_parameters(abi_function["inputs"], arg_data)
    return DecodedCall.from_parameters(decoded, method=abi_to_signature(abi_function))
