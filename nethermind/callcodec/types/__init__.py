from .decoding import (
    DecodedCall,
    DecodedParameters,
    Empty,
    Multiple,
    Raw,
    ReturnValue,
    Scalar,
    unwrap,
)
