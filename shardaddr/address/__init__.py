"""Address checksums, parsing, contract derivation, shards and grinding."""

from .checksum import icap_checksum, mixed_case_checksum
from .codec import is_valid_address, parse_address, to_canonical_bytes, to_icap
from .contract import (
    derive_create2_address,
    derive_create2_address_from_code,
    derive_create_address,
)
from .errors import (
    AddressError,
    BadChecksum,
    BadIcapChecksum,
    GrindCancelled,
    GrindError,
    GrindExhausted,
    InvalidAddress,
    InvalidBytecode,
    InvalidInitCodeHash,
    InvalidNonce,
    InvalidSalt,
    MissingFromAddress,
    MissingNonce,
    MissingOrInvalidShard,
)
from .grinder import AddressGrinder, grind_contract_address, grind_contract_address_sync
from .shard import get_shard_info, is_valid_shard_name, resolve_shard
from .types import Address

__all__ = [
    "Address",
    "AddressGrinder",
    "icap_checksum",
    "mixed_case_checksum",
    "parse_address",
    "is_valid_address",
    "to_icap",
    "to_canonical_bytes",
    "derive_create_address",
    "derive_create2_address",
    "derive_create2_address_from_code",
    "resolve_shard",
    "get_shard_info",
    "is_valid_shard_name",
    "grind_contract_address",
    "grind_contract_address_sync",
    # Errors
    "AddressError",
    "InvalidAddress",
    "BadChecksum",
    "BadIcapChecksum",
    "MissingFromAddress",
    "InvalidSalt",
    "InvalidInitCodeHash",
    "InvalidNonce",
    "InvalidBytecode",
    "MissingNonce",
    "MissingOrInvalidShard",
    "GrindError",
    "GrindCancelled",
    "GrindExhausted",
]
