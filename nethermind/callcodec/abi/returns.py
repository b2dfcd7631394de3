import logging
from typing import Any, Mapping

from eth_typing import ABIConstructor, ABIFunction
from eth_utils import encode_hex

from nethermind.callcodec.exceptions import InvalidCallableDescriptor
from nethermind.callcodec.types.decoding import Empty, Multiple, Raw, ReturnValue, Scalar, unwrap

from .parameters import decode_parameters

root_logger = logging.getLogger("nethermind")
logger = root_logger.getChild("callcodec").getChild("abi")


def decode_return_value(
    abi_function: ABIFunction | ABIConstructor,
    return_values: str | bytes | None = None,
) -> ReturnValue:
    """
    Decodes the data returned by a function call into a tagged return value.

    * Constructors have no outputs, and their return data is passed through as ``Raw``
    * Missing or empty return data, or an entry without ``outputs``, results in ``Empty``
    * Exactly one decoded value results in ``Scalar``, any other count in ``Multiple``

    The first two characters of the return data are always dropped as the 0x prefix, without checking them.

    :param abi_function: Function or constructor ABI entry
    :param return_values: Returned data as a 0x prefixed hex string, or raw bytes
    """
    if not isinstance(abi_function, Mapping):
        raise InvalidCallableDescriptor(f"Cannot decode return data for {abi_function!r}, expected an ABI entry")

    if abi_function.get("type") == "constructor":
        return Raw(return_values)

    if not return_values:
        return Empty()

    if isinstance(return_values, (bytes, bytearray)):
        return_values = encode_hex(return_values)

    value = return_values[2:] if len(return_values) >= 2 else return_values

    outputs = abi_function.get("outputs")
    if outputs is None:
        logger.debug(f"ABI entry {abi_function.get('name')} has no outputs, skipping return data decoding")
        return Empty()

    result = decode_parameters(outputs, value)
    if result.length == 1:
        return Scalar(result[0])
    return Multiple(result)


def decode_return(
    abi_function: ABIFunction | ABIConstructor,
    return_values: str | bytes | None = None,
) -> Any:
    """
    Decodes the data returned by a function call.  If the function returns a single value, that value is
    returned directly.  Otherwise, the values are returned as ``DecodedParameters``.  Returns None if there
    is nothing to decode, and the raw return data for constructors.

    >>> from nethermind.callcodec import decode_return
    >>> decode_return(
    ...     {"type": "function", "name": "totalSupply", "inputs": [], "outputs": [{"name": "", "type": "uint256"}]},
    ...     "0x000000000000000000000000000000000000000000000000000000000000002a",
    ... )
    42

    """
    return unwrap(decode_return_value(abi_function, return_values))
