from .abi import (
    abi_to_signature,
    decode_call,
    decode_parameters,
    decode_return,
    decode_return_value,
    derive_selector,
    encode_call,
    encode_parameters,
    is_function_like,
)
from .contract import ContractAbi
from .exceptions import (
    AbiError,
    DecodingError,
    InvalidCallableDescriptor,
    MissingAbiInputs,
    ParameterCodecError,
)
from .types import DecodedCall, DecodedParameters, Empty, Multiple, Raw, Scalar, unwrap
