from typing import Any, Mapping, Sequence

from eth_typing import ABIComponent, ABIConstructor, ABIElement, ABIFunction
from eth_utils import is_hex

from nethermind.callcodec.exceptions import InvalidCallableDescriptor

HEX_PREFIX = "0x"


def is_function_like(abi: Any) -> bool:
    """
    Returns True if abi can be treated as a function entry.  Entries without a type default to functions,
    as described in the Solidity ABI JSON specification.  A function entry needs a non-empty string name
    and an ``inputs`` list, which can be empty.

    >>> from nethermind.callcodec.abi.utils import is_function_like
    >>> is_function_like({"type": "function", "name": "totalSupply", "inputs": []})
    True
    >>> is_function_like({"type": "function", "name": "totalSupply"})
    False
    >>> is_function_like({"type": "constructor", "inputs": []})
    False
    """
    if not isinstance(abi, Mapping):
        return False

    if abi.get("type", "function") != "function":
        return False

    name = abi.get("name")
    if not isinstance(name, str) or not name:
        return False

    return is_parameter_list(abi.get("inputs"))


def is_parameter_list(params: Any) -> bool:
    """Returns True if params is a list of parameter declarations, each carrying a string type"""
    if isinstance(params, (str, bytes)) or not isinstance(params, Sequence):
        return False
    return all(isinstance(param, Mapping) and isinstance(param.get("type"), str) for param in params)


def abi_to_signature(abi: ABIFunction | ABIConstructor | ABIElement) -> str:
    """
    Converts a function or constructor ABI entry to its canonical signature.  Constructors have no name, and
    produce a signature with an empty name.  If a function name already contains a parameter list, it is
    returned as is.

    >>> from nethermind.callcodec.abi.utils import abi_to_signature
    >>> abi_to_signature({
    ...     "type": "function",
    ...     "name": "transferFrom",
    ...     "inputs": [
    ...         {"name": "sender", "type": "address"},
    ...         {"name": "recipient", "type": "address"},
    ...         {"name": "amount", "type": "uint256"},
    ...     ],
    ... })
    'transferFrom(address,address,uint256)'

    """
    if not isinstance(abi, Mapping):
        raise InvalidCallableDescriptor(f"Cannot compute signature for {abi!r}, expected an ABI entry")

    inputs = abi.get("inputs")
    if not is_parameter_list(inputs):
        raise InvalidCallableDescriptor(f"ABI entry {abi.get('name', '<unnamed>')} does not have an inputs list")

    if abi.get("type") == "constructor":
        name = ""
    else:
        name = abi.get("name")
        if not isinstance(name, str) or not name:
            raise InvalidCallableDescriptor(f"Cannot compute signature for unnamed ABI entry {dict(abi)}")
        if "(" in name:
            return name

    collapsed = [collapse_if_tuple(abi_input) for abi_input in inputs]  # type: ignore[union-attr]
    return f"{name}({','.join(collapsed)})"


def collapse_if_tuple(abi_params: ABIComponent | Mapping[str, Any]) -> str:
    """
    Converts a tuple from a dict to a parenthesized list of its types.

    >>> from nethermind.callcodec.abi.utils import collapse_if_tuple
    >>> collapse_if_tuple(
    ...     {
    ...         'components': [
    ...             {'name': 'anAddress', 'type': 'address'},
    ...             {'name': 'anInt', 'type': 'uint256'},
    ...             {'name': 'someBytes', 'type': 'bytes'},
    ...         ],
    ...         'type': 'tuple[]',
    ...     }
    ... )
    '(address,uint256,bytes)[]'
    """

    typ = abi_params["type"]
    if not isinstance(typ, str):
        raise TypeError(f"The 'type' must be a string, but got {typ} of type {type(typ)}")

    if not typ.startswith("tuple"):
        return typ

    delimited = ",".join(collapse_if_tuple(c) for c in abi_params.get("components", []))
    # Whatever comes after "tuple" is the array dims.  The ABI spec states that
    # this will have the form "", "[]", or "[k]".
    array_dim = typ[5:]
    return f"({delimited}){array_dim}"


def split_array_type(typ: str) -> tuple[str, bool]:
    """
    Removes the outermost array dimension from a type

    >>> split_array_type("uint256[2][]")
    ('uint256[2]', True)
    >>> split_array_type("address")
    ('address', False)
    """
    if typ.endswith("]") and "[" in typ:
        return typ[: typ.rindex("[")], True
    return typ, False


def filter_functions(contract_abi: Sequence[ABIElement]) -> list[ABIFunction]:
    """Filters out all non-function ABIs"""
    return [abi for abi in contract_abi if abi.get("type", "function") == "function"]  # type: ignore[misc]


def filter_constructors(contract_abi: Sequence[ABIElement]) -> list[ABIConstructor]:
    """Filters out all non-constructor ABIs"""
    return [abi for abi in contract_abi if abi.get("type") == "constructor"]  # type: ignore[misc]


def signature_to_name(function_sig: str) -> str:
    """
    Removes types from function signature

    >>> signature_to_name("swap(address,address,uint256,uint256,int128)")
    'swap'
    """
    index = function_sig.find("(")
    if index != -1:
        return function_sig[:index]
    return function_sig


def is_selector(value: str) -> bool:
    """Returns True if value is a 0x prefixed, 4 byte hex selector"""
    return len(value) == 10 and value.startswith(HEX_PREFIX) and is_hex(value)
