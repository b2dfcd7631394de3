class AbiError(Exception):
    """

    Base class for all errors raised while deriving selectors, encoding calls, or decoding call and return data

    """


class InvalidCallableDescriptor(AbiError):
    """
    Raised when a value passed as a callable is neither a non-empty signature string nor a function ABI entry.
    A function entry must have ``"type": "function"`` (or no type at all), a non-empty name, and an
    ``inputs`` list, even if that list is empty.
    """


class MissingAbiInputs(AbiError):
    """Raised when call data is decoded against an ABI entry that has no ``inputs`` list at all"""


class ParameterCodecError(AbiError):
    """
    Raised when parameter values cannot be packed or unpacked.  The following conditions will result in
    this error being raised:

        * The number of values does not match the number of declared parameters
        * A value is incompatible with its declared type, or overflows it
        * Encoded data is truncated, has non-zero padding, or is not valid hex
        * A declared type is not part of the ABI type grammar

    The underlying eth-abi exception is always chained as ``__cause__``
    """


class DecodingError(AbiError):
    """

    Raised when a contract ABI cannot resolve a function, or when an ABI contains conflicting selectors

    """
