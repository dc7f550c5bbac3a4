"""Shard lookup for addresses."""

from __future__ import annotations

from typing import Any, Optional

from shardaddr.address.codec import parse_address
from shardaddr.common.config import DEFAULT_SHARD_TABLE, ShardInfo, ShardTable


def address_prefix_value(address: Any) -> int:
    """Value of the first address byte (0..255), compared against hex bounds."""
    return int(parse_address(address)[2:4], 16)


def get_shard_info(address: Any, table: Optional[ShardTable] = None) -> Optional[ShardInfo]:
    if table is None:
        table = DEFAULT_SHARD_TABLE
    return table.find(address_prefix_value(address))


def resolve_shard(address: Any, table: Optional[ShardTable] = None) -> Optional[str]:
    """Return the shard identifier owning `address`, or None."""
    info = get_shard_info(address, table)
    return info.shard if info is not None else None


def is_valid_shard_name(name: Any, table: Optional[ShardTable] = None) -> bool:
    if table is None:
        table = DEFAULT_SHARD_TABLE
    return isinstance(name, str) and table.get(name) is not None
