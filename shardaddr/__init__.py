"""
py-shardaddr: address derivation and shard routing for a sharded ledger.
"""

from shardaddr.address import (
    Address,
    AddressError,
    derive_create2_address,
    derive_create_address,
    grind_contract_address,
    is_valid_address,
    is_valid_shard_name,
    parse_address,
    resolve_shard,
    to_icap,
)
from shardaddr.common.config import DEFAULT_SHARD_TABLE, ShardInfo, ShardTable, load_shard_table

__version__ = "0.1.0"

__all__ = [
    "Address",
    "AddressError",
    "parse_address",
    "is_valid_address",
    "to_icap",
    "derive_create_address",
    "derive_create2_address",
    "resolve_shard",
    "is_valid_shard_name",
    "grind_contract_address",
    "DEFAULT_SHARD_TABLE",
    "ShardInfo",
    "ShardTable",
    "load_shard_table",
]
