"""Contract address derivation (CREATE and CREATE2).

CREATE (nonce-based):
    address = keccak256(rlp([sender, nonce]))[12:]

CREATE2 (EIP-1014):
    address = keccak256(0xff ++ sender ++ salt ++ init_code_hash)[12:]

Reference: https://eips.ethereum.org/EIPS/eip-1014
"""

from __future__ import annotations

import re
from collections.abc import Mapping
from typing import Any, Optional, Union

import rlp

from shardaddr.address.checksum import mixed_case_checksum
from shardaddr.address.codec import to_canonical_bytes
from shardaddr.address.errors import (
    AddressError,
    InvalidInitCodeHash,
    InvalidNonce,
    InvalidSalt,
    MissingFromAddress,
)
from shardaddr.common.crypto import keccak256
from shardaddr.common.encoding import int_to_minimal_bytes, to_bytes

Nonce = Union[int, str, bytes]

_NONCE_RE = re.compile(r"0[xX][0-9a-fA-F]+|[0-9]+")


def parse_nonce(nonce: Any) -> int:
    """Accept an int, a decimal or 0x-hex string, or big-endian bytes."""
    if isinstance(nonce, bool):
        raise InvalidNonce("invalid nonce", "nonce", nonce)
    if isinstance(nonce, int):
        value = nonce
    elif isinstance(nonce, (bytes, bytearray)):
        value = int.from_bytes(nonce, "big")
    elif isinstance(nonce, str):
        if not _NONCE_RE.fullmatch(nonce):
            raise InvalidNonce("invalid nonce", "nonce", nonce)
        value = int(nonce, 16) if nonce[:2] in ("0x", "0X") else int(nonce, 10)
    else:
        raise InvalidNonce("invalid nonce", "nonce", nonce)
    if value < 0:
        raise InvalidNonce("nonce must be non-negative", "nonce", nonce)
    return value


def derive_create_address(
    transaction: Optional[Mapping[str, Any]] = None,
    *,
    from_: Optional[str] = None,
    nonce: Optional[Nonce] = None,
) -> str:
    """Compute the address of a contract created by `from` at `nonce`.

    Takes either a transaction-like mapping with "from" and "nonce" keys or
    the same values as keyword arguments.

    Example:
        >>> addr = derive_create_address({"from": "0x6ac7ea33f8831ea9dcc53393aaa88b25a785dbf0", "nonce": 0})
        >>> addr.lower()
        '0xcd234a471b72ba2f1ccf0a70fcaba648a5eecd8d'
    """
    if transaction is None:
        transaction = {"from": from_, "nonce": nonce}
    if not isinstance(transaction, Mapping):
        raise MissingFromAddress("missing from address", "transaction", transaction)

    try:
        sender = to_canonical_bytes(transaction.get("from"))
    except AddressError:
        raise MissingFromAddress("missing from address", "transaction", transaction) from None

    nonce_bytes = int_to_minimal_bytes(parse_nonce(transaction.get("nonce")))

    return mixed_case_checksum(keccak256(rlp.encode([sender, nonce_bytes]))[12:])


def derive_create2_address(
    from_: str,
    salt: Union[bytes, str],
    init_code_hash: Union[bytes, str],
) -> str:
    """Compute a CREATE2 address from a precomputed init code hash.

    `salt` and `init_code_hash` may be raw bytes or 0x-hex strings and must
    both be exactly 32 bytes.
    """
    try:
        salt_bytes = to_bytes(salt)
    except ValueError:
        raise InvalidSalt("salt must be 32 bytes", "salt", salt) from None
    if len(salt_bytes) != 32:
        raise InvalidSalt("salt must be 32 bytes", "salt", salt)

    try:
        code_hash = to_bytes(init_code_hash)
    except ValueError:
        raise InvalidInitCodeHash(
            "initCodeHash must be 32 bytes", "initCodeHash", init_code_hash
        ) from None
    if len(code_hash) != 32:
        raise InvalidInitCodeHash("initCodeHash must be 32 bytes", "initCodeHash", init_code_hash)

    sender = to_canonical_bytes(from_)
    preimage = b"\xff" + sender + salt_bytes + code_hash
    return mixed_case_checksum(keccak256(preimage)[12:])


def derive_create2_address_from_code(
    from_: str,
    salt: Union[bytes, str],
    init_code: Union[bytes, str],
) -> str:
    """CREATE2 address for raw init code (hashes it first)."""
    try:
        code = to_bytes(init_code)
    except ValueError:
        raise InvalidInitCodeHash("invalid init code", "initCode", init_code) from None
    return derive_create2_address(from_, salt, keccak256(code))
