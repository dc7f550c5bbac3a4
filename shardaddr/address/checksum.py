"""
Address checksums.

- mixed-case checksum (EIP-55): letter casing encodes bits of the
  Keccak-256 digest of the lowercase hex address
- ICAP checksum: ISO 7064 MOD-97-10 as used by IBAN

See: https://eips.ethereum.org/EIPS/eip-55
See: https://en.wikipedia.org/wiki/International_Bank_Account_Number
"""

from __future__ import annotations

import re
import string

from shardaddr.address.errors import InvalidAddress
from shardaddr.common.crypto import keccak256

_HEX_ADDRESS_RE = re.compile(r"0x[0-9a-fA-F]{40}")

# IBAN letter expansion: digits map to themselves, A=10 ... Z=35
_IBAN_LOOKUP: dict[str, str] = {c: str(i) for i, c in enumerate(string.digits)}
_IBAN_LOOKUP.update({c: str(10 + i) for i, c in enumerate(string.ascii_uppercase)})


def mixed_case_checksum(address: bytes | str) -> str:
    """Return the checksum-cased "0x" form of a 20-byte address.

    Accepts the raw 20 bytes or a 0x-prefixed 40-digit hex string in any case.
    """
    if isinstance(address, (bytes, bytearray)):
        if len(address) != 20:
            raise InvalidAddress("invalid address", "address", address)
        chars = list(bytes(address).hex())
    elif isinstance(address, str) and _HEX_ADDRESS_RE.fullmatch(address):
        chars = list(address[2:].lower())
    else:
        raise InvalidAddress("invalid address", "address", address)

    hashed = keccak256("".join(chars).encode("ascii"))

    for i in range(0, 40, 2):
        if (hashed[i >> 1] >> 4) >= 8:
            chars[i] = chars[i].upper()
        if (hashed[i >> 1] & 0x0F) >= 8:
            chars[i + 1] = chars[i + 1].upper()

    return "0x" + "".join(chars)


def icap_checksum(icap: str) -> str:
    """Compute the two-digit checksum of an ICAP string.

    The checksum digits already in `icap` (positions 2-3) are ignored, so
    "XE00" + payload and a fully formed ICAP address give the same result.
    """
    icap = icap.upper()
    rearranged = icap[4:] + icap[:2] + "00"
    try:
        expanded = "".join(_IBAN_LOOKUP[c] for c in rearranged)
    except KeyError:
        raise InvalidAddress("invalid icap address", "address", icap) from None
    return str(98 - int(expanded) % 97).zfill(2)
