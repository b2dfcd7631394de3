import pytest
from rich.table import Table

from nethermind.callcodec import ContractAbi, DecodingError, Multiple, Scalar, encode_call
from tests.utils import right_padded, word

ADDRESS_1 = "0xf8e81D47203A594245E36C48e151709F0C19fBe8"
ADDRESS_2 = "0xbEbc44782C7dB0a1A60Cb6fe97d0b483032FF1C7"


def test_contract_initialization(erc20_abi, erc721_abi):
    erc20 = ContractAbi("ERC20", erc20_abi)
    erc721 = ContractAbi("ERC721", erc721_abi)

    loaded_functions = erc20.get_all_functions()

    assert "transfer(address,uint256)" in loaded_functions
    assert "transferFrom(address,address,uint256)" in loaded_functions
    assert "balanceOf(address)" in loaded_functions
    assert len(loaded_functions) == 8
    assert erc20.constructor is not None

    assert sorted(erc721.get_all_functions(full_signature=False)) == [
        "ownerOf",
        "safeTransferFrom",
        "safeTransferFrom",
    ]
    assert erc721.constructor is None


def test_function_lookup(erc20_abi, erc721_abi):
    erc20 = ContractAbi("ERC20", erc20_abi)
    erc721 = ContractAbi("ERC721", erc721_abi)

    assert erc20.get_function("transfer").selector == "0xa9059cbb"
    assert erc20.get_function("0xA9059CBB").function_signature == "transfer(address,uint256)"
    assert erc20.get_function("transfer(address,uint256)").name == "transfer"
    assert erc20.get_function("balanceOf").state_mutability == "view"

    assert erc721.get_function("safeTransferFrom(address,address,uint256)").selector == "0x42842e0e"
    assert erc721.get_function("0xb88d4fde").function_signature == "safeTransferFrom(address,address,uint256,bytes)"

    with pytest.raises(DecodingError, match="ambiguous"):
        erc721.get_function("safeTransferFrom")

    with pytest.raises(DecodingError):
        erc20.get_function("mint")

    with pytest.raises(DecodingError):
        erc20.get_function("0x12345678")


def test_encode_and_dispatch_transfers(erc20_abi, get_function):
    erc20 = ContractAbi("ERC20", erc20_abi)

    transfer_calldata = erc20.encode_call("transfer", [ADDRESS_1, 36124523])
    transfer_from_calldata = erc20.encode_call("transferFrom", [ADDRESS_1, ADDRESS_2, 36124523])

    assert transfer_calldata == encode_call(get_function(erc20_abi, "transfer"), [ADDRESS_1, 36124523])
    assert transfer_calldata == "0xa9059cbb" + word(ADDRESS_1.lower()) + word(36124523)

    decoded_transfer = erc20.decode_call(transfer_calldata)
    decoded_transfer_from = erc20.decode_call(bytes.fromhex(transfer_from_calldata[2:]))

    assert decoded_transfer.method == "transfer(address,uint256)"
    assert decoded_transfer["recipient"] == ADDRESS_1
    assert decoded_transfer["amount"] == 36124523

    assert decoded_transfer_from.method == "transferFrom(address,address,uint256)"
    assert decoded_transfer_from["sender"] == ADDRESS_1
    assert decoded_transfer_from["recipient"] == ADDRESS_2
    assert decoded_transfer_from["amount"] == 36124523


def test_dispatch_unknown_selector(erc20_abi):
    erc20 = ContractAbi("ERC20", erc20_abi)

    with pytest.raises(DecodingError, match="0x42842e0e"):
        erc20.decode_call("0x42842e0e" + word(ADDRESS_1) + word(ADDRESS_2) + word(1))


def test_overloaded_encoding(erc721_abi):
    erc721 = ContractAbi("ERC721", erc721_abi)

    calldata = erc721.encode_call(
        "safeTransferFrom(address,address,uint256,bytes)",
        [ADDRESS_1, ADDRESS_2, 3059, "0x"],
    )
    decoded = erc721.decode_call(calldata)

    assert calldata.startswith("0xb88d4fde")
    assert decoded.method == "safeTransferFrom(address,address,uint256,bytes)"
    assert decoded.as_tuple() == (ADDRESS_1, ADDRESS_2, 3059, b"")


def test_decode_returns(erc20_abi, pair_abi):
    erc20 = ContractAbi("ERC20", erc20_abi)
    pair = ContractAbi("UniswapV2Pair", pair_abi)

    assert erc20.decode_return("balanceOf", "0x" + word(10**18)) == 10**18
    assert erc20.decode_return("transfer", "0x" + word(1)) is True
    assert erc20.decode_return("name", "0x" + word(0x20) + word(4) + right_padded("55534443")) == "USDC"
    assert erc20.decode_return("totalSupply", None) is None
    assert erc20.decode_return_value("decimals", "0x" + word(6)) == Scalar(6)

    reserves = pair.decode_return_value("getReserves", "0x" + word(10) + word(20) + word(30))
    assert isinstance(reserves, Multiple)
    assert reserves.values["reserve1"] == 20


def test_decode_constructor_args(erc20_abi, erc721_abi):
    erc20 = ContractAbi("ERC20", erc20_abi)

    args = (
        "0x"
        + word(0x60)
        + word(0xA0)
        + word(10**24)
        + word(8)
        + right_padded("5465737420546f6b")
        + word(3)
        + right_padded("545354")
    )
    decoded = erc20.decode_constructor_args(args)

    assert decoded.method == "(string,string,uint256)"
    assert decoded["name_"] == "Test Tok"
    assert decoded["symbol_"] == "TST"
    assert decoded["initialSupply"] == 10**24

    with pytest.raises(DecodingError):
        ContractAbi("ERC721", erc721_abi).decode_constructor_args(args)


def test_conflicting_selectors(erc20_abi, get_function):
    with pytest.raises(DecodingError, match="conflicts"):
        ContractAbi("Duplicated", erc20_abi + [get_function(erc20_abi, "transfer")])


def test_invalid_function_entry():
    with pytest.raises(DecodingError):
        ContractAbi("Broken", [{"type": "function", "name": "missingInputs"}])


def test_function_table(erc20_abi):
    table = ContractAbi("ERC20", erc20_abi).function_table()

    assert isinstance(table, Table)
    assert table.row_count == 8
    assert len(table.columns) == 3
