"""
Address parsing and formatting.

Two textual notations are understood:

- hex: 40 hex digits with optional "0x", validated against the mixed-case
  checksum when the input mixes upper and lower case
- ICAP (direct mode only): "XE" + 2 checksum digits + 30-31 base-36 chars

Every successful parse returns the canonical checksum-cased "0x" string.
"""

from __future__ import annotations

import re
from typing import Any

from shardaddr.address.checksum import icap_checksum, mixed_case_checksum
from shardaddr.address.errors import (
    AddressError,
    BadChecksum,
    BadIcapChecksum,
    InvalidAddress,
)
from shardaddr.common.encoding import base16_to_base36, base36_to_base16

_HEX_RE = re.compile(r"(0x)?[0-9a-fA-F]{40}")
_MIXED_CASE_RE = re.compile(r"([A-F].*[a-f])|([a-f].*[A-F])")
_ICAP_RE = re.compile(r"XE[0-9]{2}[0-9A-Za-z]{30,31}")


def parse_address(address: Any) -> str:
    """Validate an address in hex or ICAP notation and return its checksum form."""
    if not isinstance(address, str):
        raise InvalidAddress("invalid address", "address", address)

    if _HEX_RE.fullmatch(address):
        if not address.startswith("0x"):
            address = "0x" + address

        result = mixed_case_checksum(address)

        # Mixed case means the caller supplied a checksum; it must be right
        if _MIXED_CASE_RE.search(address) and result != address:
            raise BadChecksum("bad address checksum", "address", address)
        return result

    if _ICAP_RE.fullmatch(address):
        if address[2:4] != icap_checksum(address):
            raise BadIcapChecksum("bad icap checksum", "address", address)

        hex_digits = base36_to_base16(address[4:]).zfill(40)
        if len(hex_digits) > 40:
            raise InvalidAddress("icap value exceeds 20 bytes", "address", address)
        return mixed_case_checksum("0x" + hex_digits)

    raise InvalidAddress("invalid address", "address", address)


def is_valid_address(address: Any) -> bool:
    """Non-raising counterpart of parse_address."""
    try:
        parse_address(address)
    except AddressError:
        return False
    return True


def to_icap(address: Any) -> str:
    """Return the ICAP (direct mode) form of an address."""
    base36 = base16_to_base36(parse_address(address)[2:]).upper().zfill(30)
    return "XE" + icap_checksum("XE00" + base36) + base36


def to_canonical_bytes(address: Any) -> bytes:
    """Return the 20 raw bytes of an address in any accepted notation."""
    return bytes.fromhex(parse_address(address)[2:])
