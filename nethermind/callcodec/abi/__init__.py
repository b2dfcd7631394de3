from .calls import decode_call, encode_call
from .parameters import decode_parameters, encode_parameters, get_abi_types
from .returns import decode_return, decode_return_value
from .selectors import derive_selector
from .utils import abi_to_signature, is_function_like
