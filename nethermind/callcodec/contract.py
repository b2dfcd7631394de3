import logging
from dataclasses import dataclass
from typing import Any, Sequence

from eth_typing import ABIConstructor, ABIElement, ABIFunction
from eth_utils import encode_hex
from rich.table import Table

from nethermind.callcodec.exceptions import DecodingError
from nethermind.callcodec.types.decoding import DecodedCall, ReturnValue

from .abi.calls import SELECTOR_HEX_LENGTH, decode_call, encode_call
from .abi.returns import decode_return, decode_return_value
from .abi.selectors import derive_selector
from .abi.utils import (
    abi_to_signature,
    filter_constructors,
    filter_functions,
    is_function_like,
    is_selector,
    signature_to_name,
)

root_logger = logging.getLogger("nethermind")
logger = root_logger.getChild("callcodec").getChild("contract")


@dataclass
class FunctionEntry:
    """Stores precomputed data for encoding and decoding calls to a single function"""

    selector: str
    function_signature: str
    abi_function: ABIFunction

    @property
    def name(self) -> str:
        """Function name, without parameter types"""
        return signature_to_name(self.function_signature)

    @property
    def state_mutability(self) -> str:
        """Mutability tag of the function.  Informational only"""
        return str(self.abi_function.get("stateMutability", ""))


class ContractAbi:
    """
    Encodes calls to, and decodes calls and results from, the functions of a single contract ABI.

    >>> from nethermind.callcodec import ContractAbi
    >>> erc20 = ContractAbi("ERC20", [
    ...     {
    ...         "type": "function",
    ...         "name": "balanceOf",
    ...         "inputs": [{"name": "account", "type": "address"}],
    ...         "outputs": [{"name": "", "type": "uint256"}],
    ...         "stateMutability": "view",
    ...     }
    ... ])
    >>> erc20.get_all_functions()
    ['balanceOf(address)']

    """

    abi_name: str
    """ Name of the ABI, used in log and error messages """

    function_entries: dict[str, FunctionEntry]
    """ Mapping from 0x prefixed 4byte selectors to function data """

    constructor: ABIConstructor | None
    """ Constructor entry of the ABI, if it declares one """

    def __init__(self, abi_name: str, abi_data: Sequence[ABIElement]):
        self.abi_name = abi_name
        self.function_entries = {}

        for abi_function in filter_functions(abi_data):
            entry = self._load_function_entry(abi_function)
            existing = self.function_entries.get(entry.selector)
            if existing is not None:
                raise DecodingError(
                    f"Selector {entry.selector} of {entry.function_signature} conflicts with "
                    f"{existing.function_signature} in ABI {abi_name}"
                )
            self.function_entries[entry.selector] = entry

        constructors = filter_constructors(abi_data)
        if len(constructors) > 1:
            raise DecodingError(f"ABI {abi_name} declares {len(constructors)} constructors")
        self.constructor = constructors[0] if constructors else None

        logger.debug(f"Loaded {len(self.function_entries)} functions from ABI {abi_name}")

    def _load_function_entry(self, abi_function: ABIFunction) -> FunctionEntry:
        if not is_function_like(abi_function):
            raise DecodingError(f"Invalid function entry in ABI {self.abi_name}: {abi_function}")

        function_signature = abi_to_signature(abi_function)
        return FunctionEntry(
            selector=derive_selector(function_signature),
            function_signature=function_signature,
            abi_function=abi_function,
        )

    def get_function(self, identifier: str) -> FunctionEntry:
        """
        Returns the function matching a selector, a full signature, or a function name.  Looking up an
        overloaded function by name raises a DecodingError, since the name alone cannot select an overload.

        :param identifier: ``0x`` prefixed selector, signature like ``transfer(address,uint256)``, or name
        """
        if is_selector(identifier):
            entry = self.function_entries.get(identifier.lower())
            if entry is None:
                raise DecodingError(f"Function with selector {identifier} not found in ABI {self.abi_name}")
            return entry

        if "(" in identifier:
            matches = [e for e in self.function_entries.values() if e.function_signature == identifier]
        else:
            matches = [e for e in self.function_entries.values() if e.name == identifier]

        match matches:
            case [entry]:
                return entry
            case []:
                raise DecodingError(f"Function {identifier} not found in ABI {self.abi_name}")
            case _:
                raise DecodingError(
                    f"Function name {identifier} is ambiguous in ABI {self.abi_name}.  Use one of the "
                    f"signatures {[e.function_signature for e in matches]}"
                )

    def get_all_functions(self, full_signature: bool = True) -> list[str]:
        """Returns a list of all function signatures"""
        return [
            entry.function_signature if full_signature else entry.name for entry in self.function_entries.values()
        ]

    def encode_call(self, identifier: str, args: Sequence[Any] | None = None) -> str:
        """Encodes a call to the function matching identifier"""
        return encode_call(self.get_function(identifier).abi_function, args)

    def decode_call(self, calldata: str | bytes) -> DecodedCall:
        """
        Decodes call data, using its leading selector to find the called function

        :param calldata: 0x prefixed hex string or raw bytes, including the 4 byte selector
        """
        if isinstance(calldata, (bytes, bytearray)):
            calldata = encode_hex(calldata)

        selector = calldata[:SELECTOR_HEX_LENGTH].lower()
        entry = self.function_entries.get(selector)
        if entry is None:
            raise DecodingError(f"Function with selector {selector} not found in ABI {self.abi_name}")

        logger.debug(f"Decoding call data for {entry.function_signature}")
        return decode_call(entry.abi_function, calldata, selector_present=True)

    def decode_constructor_args(self, data: str | bytes) -> DecodedCall:
        """Decodes packed constructor arguments, which are not preceded by a selector"""
        if self.constructor is None:
            raise DecodingError(f"ABI {self.abi_name} does not declare a constructor")
        return decode_call(self.constructor, data, selector_present=False)

    def decode_return(self, identifier: str, return_data: str | bytes | None) -> Any:
        """Decodes the return data of the function matching identifier"""
        return decode_return(self.get_function(identifier).abi_function, return_data)

    def decode_return_value(self, identifier: str, return_data: str | bytes | None) -> ReturnValue:
        """Decodes the return data of the function matching identifier into a tagged return value"""
        return decode_return_value(self.get_function(identifier).abi_function, return_data)

    def function_table(self, full_signatures: bool = True) -> Table:
        """Returns a rich Table listing the selector, signature and mutability of every function"""
        table = Table(title=f"{self.abi_name} Functions", box=None)
        table.add_column("Selector", style="bold")
        table.add_column("Function")
        table.add_column("Mutability")

        for entry in sorted(self.function_entries.values(), key=lambda e: e.function_signature):
            table.add_row(
                entry.selector,
                entry.function_signature if full_signatures else entry.name,
                entry.state_mutability,
            )
        return table
