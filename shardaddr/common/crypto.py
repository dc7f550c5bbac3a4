"""
Cryptographic primitives used by address derivation.

- keccak256 hashing
- secure random bytes for salt grinding
"""

from __future__ import annotations

import os

from Crypto.Hash import keccak as _keccak_mod


def keccak256(data: bytes) -> bytes:
    """Compute Keccak-256 hash (NOT SHA3-256)."""
    h = _keccak_mod.new(digest_bits=256)
    h.update(data)
    return h.digest()


def random_bytes(length: int) -> bytes:
    """Return `length` bytes from the operating system CSPRNG."""
    if length < 0:
        raise ValueError(f"Length must be non-negative, got {length}")
    return os.urandom(length)
