import json

from nethermind.callcodec import DecodedParameters
from nethermind.callcodec.utils import decoded_to_json, parse_cli_value


def test_decoded_to_json():
    nested = DecodedParameters([1, b"\x01\x02"], ["amount", "data"])
    value = DecodedParameters([nested, [b"\xff"], "text"], ["order", "", "note"])

    assert json.loads(decoded_to_json(value)) == {
        "0": {"0": 1, "1": "0x0102", "amount": 1, "data": "0x0102"},
        "1": ["0xff"],
        "2": "text",
        "order": {"0": 1, "1": "0x0102", "amount": 1, "data": "0x0102"},
        "note": "text",
    }
    assert decoded_to_json(42) == "42"


def test_parse_cli_value():
    assert parse_cli_value("1000") == 1000
    assert parse_cli_value("true") is True
    assert parse_cli_value('{"x": 1, "y": [2]}') == {"x": 1, "y": [2]}
    assert parse_cli_value("0x1234567890123456789012345678901234567890") == "0x1234567890123456789012345678901234567890"
    assert parse_cli_value("Hello!%") == "Hello!%"
