"""Test fixtures for address tests."""

from .addresses import (
    CREATE_SENDER,
    CREATE_VECTORS,
    EIP55_ALL_CAPS,
    EIP55_ALL_LOWER,
    EIP55_MIXED,
    EIP55_VECTORS,
    ICAP_ADDRESS,
    ICAP_FORM,
    MAX_ADDRESS,
    ZERO_ADDRESS,
)
from .contracts import EIP1014_VECTORS, GRIND_BYTECODE, SIMPLE_INIT_CODE

__all__ = [
    # Addresses
    "CREATE_SENDER",
    "CREATE_VECTORS",
    "EIP55_ALL_CAPS",
    "EIP55_ALL_LOWER",
    "EIP55_MIXED",
    "EIP55_VECTORS",
    "ICAP_ADDRESS",
    "ICAP_FORM",
    "MAX_ADDRESS",
    "ZERO_ADDRESS",
    # Contracts
    "EIP1014_VECTORS",
    "GRIND_BYTECODE",
    "SIMPLE_INIT_CODE",
]
