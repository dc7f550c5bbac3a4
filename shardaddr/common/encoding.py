"""
Hex, integer and base-36 helpers shared by the address modules.

Hex decoding and integer/byte conversion go through eth-utils; base
conversion relies on Python's arbitrary-precision integers.
"""

from __future__ import annotations

import re

from eth_utils import (
    big_endian_to_int,
    decode_hex,
    int_to_big_endian,
    remove_0x_prefix,
)

BASE36_ALPHABET = "0123456789abcdefghijklmnopqrstuvwxyz"

_HEX_RE = re.compile(r"(0x)?([0-9a-fA-F]{2})*")


# ---------------------------------------------------------------------------
# Bytes
# ---------------------------------------------------------------------------

def is_hex_data(value: object) -> bool:
    """True for an even-length hex string, with or without a 0x prefix."""
    return isinstance(value, str) and _HEX_RE.fullmatch(value) is not None


def to_bytes(value: bytes | bytearray | str) -> bytes:
    """Coerce raw bytes or a hex string to bytes.

    Raises ValueError for anything that is not even-length hex.
    """
    if isinstance(value, (bytes, bytearray, memoryview)):
        return bytes(value)
    if not is_hex_data(value):
        raise ValueError(f"Expected bytes or hex string, got {value!r}")
    return decode_hex(value)


def strip_zeros(data: bytes) -> bytes:
    """Drop leading zero bytes (b'\\x00\\x01' -> b'\\x01', b'\\x00' -> b'')."""
    return data.lstrip(b"\x00")


def int_to_minimal_bytes(value: int) -> bytes:
    """Big-endian encoding of a non-negative int with no leading zeros.

    Zero encodes as the empty byte string.
    """
    if value < 0:
        raise ValueError(f"Cannot encode negative integer {value}")
    return strip_zeros(int_to_big_endian(value))


def bytes_to_int(data: bytes) -> int:
    return big_endian_to_int(data)


def format_bytes32_string(text: str) -> bytes:
    """Encode a short string as a right-zero-padded 32-byte block.

    The UTF-8 encoding must leave room for a terminating zero byte, so at
    most 31 bytes are accepted.
    """
    data = text.encode("utf-8")
    if len(data) > 31:
        raise ValueError(f"bytes32 string must be less than 32 bytes, got {len(data)}")
    return data.ljust(32, b"\x00")


# ---------------------------------------------------------------------------
# Base conversion
# ---------------------------------------------------------------------------

def base16_to_base36(hex_digits: str) -> str:
    """Convert hex digits (optional 0x) to lowercase base-36 digits."""
    value = int(remove_0x_prefix(hex_digits) or "0", 16)
    if value == 0:
        return "0"
    digits = []
    while value:
        value, rem = divmod(value, 36)
        digits.append(BASE36_ALPHABET[rem])
    return "".join(reversed(digits))


def base36_to_base16(chars: str) -> str:
    """Convert base-36 characters (any case) to lowercase hex digits, no prefix."""
    return format(int(chars, 36), "x")
