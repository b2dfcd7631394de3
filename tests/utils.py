def word(value: int | str) -> str:
    """Left pads an integer or hex string to a 32 byte ABI word, without 0x prefix"""
    if isinstance(value, int):
        return f"{value:064x}"
    return value.removeprefix("0x").rjust(64, "0")


def right_padded(hex_str: str) -> str:
    """Right pads hex data to a multiple of 32 bytes, as used for dynamic bytes & strings"""
    hex_str = hex_str.removeprefix("0x")
    padded_length = -(-len(hex_str) // 64) * 64
    return hex_str.ljust(padded_length, "0")


def uint_max(bits: int) -> int:
    return 2**bits - 1
