import json
from typing import Any

from nethermind.callcodec.types.decoding import DecodedParameters


class HexEnabledJsonEncoder(json.JSONEncoder):
    """JSON Encoder that converts bytes to 0x prefixed hex, and decoded parameters to objects"""

    def default(self, o):
        if isinstance(o, (bytes, bytearray)):
            return "0x" + o.hex()
        if isinstance(o, DecodedParameters):
            return dict(o.items())
        return json.JSONEncoder.default(self, o)


def decoded_to_json(value: Any, indent: int | None = 4) -> str:
    """Converts a decoded value to json"""
    return json.dumps(value, cls=HexEnabledJsonEncoder, indent=indent)


def parse_cli_value(value: str) -> Any:
    """
    Parses a command line argument as JSON, falling back to the raw string.  Numbers, booleans, lists and
    objects can be passed as JSON, while addresses and hex strings are passed as is.

    >>> parse_cli_value("[1, 2]")
    [1, 2]
    >>> parse_cli_value("0x1234")
    '0x1234'
    """
    try:
        return json.loads(value)
    except json.JSONDecodeError:
        return value
