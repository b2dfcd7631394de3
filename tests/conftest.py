import json
import random
from pathlib import Path

import pytest
from eth_utils import to_checksum_address

from tests.resources.ABI import ERC20_ABI_JSON, ERC721_ABI_JSON, UNISWAP_V2_PAIR_ABI_JSON


@pytest.fixture(name="random_address")
def fixture_random_address():
    def _generate_random_address():
        return to_checksum_address(random.randbytes(20).hex())

    return _generate_random_address


@pytest.fixture(name="erc20_abi")
def fixture_erc20_abi() -> list[dict]:
    return json.loads(ERC20_ABI_JSON)


@pytest.fixture(name="erc721_abi")
def fixture_erc721_abi() -> list[dict]:
    return json.loads(ERC721_ABI_JSON)


@pytest.fixture(name="pair_abi")
def fixture_pair_abi() -> list[dict]:
    return json.loads(UNISWAP_V2_PAIR_ABI_JSON)


@pytest.fixture(name="get_function")
def fixture_get_function():
    def _get_function(abi: list[dict], name: str, input_count: int | None = None) -> dict:
        return [
            f
            for f in abi
            if f.get("name") == name and (input_count is None or len(f["inputs"]) == input_count)
        ][0]

    return _get_function


@pytest.fixture(name="erc20_abi_file")
def fixture_erc20_abi_file(tmp_path: Path) -> Path:
    abi_file = tmp_path / "ERC20.json"
    abi_file.write_text(ERC20_ABI_JSON)
    return abi_file
