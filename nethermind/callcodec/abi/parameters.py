import binascii
import logging
from typing import Any, Callable, Mapping, Sequence

from eth_abi import decode as eth_abi_decode
from eth_abi import encode as eth_abi_encode
from eth_abi.exceptions import (
    ABITypeError,
    DecodingError,
    EncodingError,
    ParseError,
    PredicateMappingError,
)
from eth_typing import ABIComponent
from eth_utils import decode_hex, encode_hex, is_hex, to_checksum_address

from nethermind.callcodec.exceptions import ParameterCodecError
from nethermind.callcodec.types.decoding import DecodedParameters

from .utils import collapse_if_tuple, split_array_type

root_logger = logging.getLogger("nethermind")
logger = root_logger.getChild("callcodec").getChild("abi")

EthAbiErrors = (
    EncodingError,
    DecodingError,
    ParseError,
    ABITypeError,
    PredicateMappingError,
    OverflowError,
    UnicodeDecodeError,
)

formatters: dict[str, Callable[[Any], Any]] = {"address": to_checksum_address}
"""
    Formatters applied to decoded values by type.  By default, converts all addresses
    to checksummed hexstrings
"""


def get_abi_types(params: Sequence[ABIComponent]) -> list[str]:
    """
    Returns the eth-abi type strings for a list of parameter declarations, collapsing tuples into
    parenthesized component lists.

    >>> get_abi_types([{"name": "to", "type": "address"}, {"name": "ids", "type": "uint256[]"}])
    ['address', 'uint256[]']
    """
    return [collapse_if_tuple(param) for param in params]


def encode_parameters(params: Sequence[ABIComponent], values: Sequence[Any]) -> str:
    """
    Packs values according to the declared parameter types.

    :param params: Parameter declarations, ie the ``inputs`` of a function ABI entry
    :param values: Values matched positionally to params
    :return: 0x prefixed hex string of the packed values
    """
    values = list(values)
    if len(params) != len(values):
        raise ParameterCodecError(
            f"Expected {len(params)} values for types {get_abi_types(params)}, but received {len(values)}"
        )

    types = get_abi_types(params)
    try:
        normalized = [_normalize_value(param["type"], param, value) for param, value in zip(params, values)]
        encoded = eth_abi_encode(types, normalized)
    except EthAbiErrors as e:
        raise ParameterCodecError(f"Could not encode {values} as types {types}: {e}") from e

    return encode_hex(encoded)


def decode_parameters(params: Sequence[ABIComponent], data: str | bytes) -> DecodedParameters:
    """
    Unpacks data according to the declared parameter types.  Addresses are returned checksummed, tuples as
    nested ``DecodedParameters``, and arrays as lists.

    :param params: Parameter declarations, ie the ``inputs`` or ``outputs`` of a function ABI entry
    :param data: Packed data, as a hex string with or without a 0x prefix, or as raw bytes
    :return: DecodedParameters keyed by position and by declared name
    """
    types = get_abi_types(params)

    if isinstance(data, str):
        try:
            data = decode_hex(data)
        except (binascii.Error, ValueError) as e:
            raise ParameterCodecError(f"Cannot decode types {types} from non-hex data {data!r}") from e

    try:
        decoded = eth_abi_decode(types, bytes(data))
    except EthAbiErrors as e:
        raise ParameterCodecError(f"Could not decode {encode_hex(data)} as types {types}: {e}") from e

    return _to_decoded_parameters(params, decoded)


def _to_decoded_parameters(params: Sequence[ABIComponent], values: Sequence[Any]) -> DecodedParameters:
    return DecodedParameters(
        [_format_value(param["type"], param, value) for param, value in zip(params, values, strict=True)],
        [param.get("name") for param in params],
    )


def _format_value(typ: str, param: ABIComponent, value: Any) -> Any:
    inner_type, is_array = split_array_type(typ)
    if is_array:
        return [_format_value(inner_type, param, item) for item in value]

    if typ == "tuple":
        return _to_decoded_parameters(param.get("components", []), value)

    formatter = formatters.get(typ)
    if formatter is not None:
        return formatter(value)
    return value


def _normalize_value(typ: str, param: ABIComponent, value: Any) -> Any:
    """
    Converts loosely typed values into the python types eth-abi packs.  Integer types accept decimal or
    0x prefixed strings, byte types accept hex strings, and tuples accept mappings keyed by component name.
    """
    inner_type, is_array = split_array_type(typ)
    if is_array:
        if isinstance(value, (str, bytes)) or not isinstance(value, Sequence):
            raise ParameterCodecError(f"Expected a list for array type {typ}, got {value!r}")
        return [_normalize_value(inner_type, param, item) for item in value]

    if typ == "tuple":
        components = param.get("components", [])
        if isinstance(value, DecodedParameters):
            value = value.as_tuple()
        elif isinstance(value, Mapping):
            try:
                value = [value[component["name"]] for component in components]
            except KeyError as e:
                raise ParameterCodecError(f"Tuple value {value!r} is missing component {e}") from e

        if isinstance(value, (str, bytes)) or not isinstance(value, Sequence) or len(value) != len(components):
            raise ParameterCodecError(f"Expected {len(components)} tuple components, got {value!r}")
        return tuple(_normalize_value(c["type"], c, v) for c, v in zip(components, value))

    if typ.startswith(("uint", "int")) and isinstance(value, str):
        try:
            return int(value, 16) if value.lower().startswith("0x") else int(value)
        except ValueError as e:
            raise ParameterCodecError(f"Cannot convert {value!r} to {typ}") from e

    if typ.startswith("bytes") and isinstance(value, str):
        if not is_hex(value):
            raise ParameterCodecError(f"Expected a hex string for {typ}, got {value!r}")
        return decode_hex(value)

    return value
