import logging
from typing import Any

from eth_typing import ABIFunction
from eth_utils import encode_hex, keccak

from nethermind.callcodec.exceptions import InvalidCallableDescriptor

from .utils import abi_to_signature, is_function_like

root_logger = logging.getLogger("nethermind")
logger = root_logger.getChild("callcodec").getChild("abi")

SELECTOR_LENGTH = 4
""" Number of keccak digest bytes used as a function selector """


def derive_selector(callable_abi: str | ABIFunction | Any) -> str:
    """
    Derives the 4 byte function selector from a signature string, or from a function ABI entry.  The
    selector is the first 4 bytes of the keccak digest of the canonical signature.

    >>> from nethermind.callcodec import derive_selector
    >>> derive_selector("myMethod(uint256,string)")
    '0x24ee0097'
    >>> derive_selector({
    ...     "type": "function",
    ...     "name": "myMethod",
    ...     "inputs": [{"type": "uint256", "name": "myNumber"}, {"type": "string", "name": "myString"}],
    ... })
    '0x24ee0097'

    :param callable_abi: Signature string in the form ``name(type1,type2,...)``, or a function ABI entry
    :return: 0x prefixed, lowercase hex selector
    """
    if isinstance(callable_abi, str) and callable_abi:
        signature = callable_abi
    elif is_function_like(callable_abi):
        signature = abi_to_signature(callable_abi)
    else:
        raise InvalidCallableDescriptor(
            f"Cannot derive selector from {callable_abi!r}.  Expected a signature string or a function ABI entry"
        )

    selector = encode_hex(keccak(text=signature)[:SELECTOR_LENGTH])
    logger.debug(f"Derived selector {selector} for {signature}")
    return selector
