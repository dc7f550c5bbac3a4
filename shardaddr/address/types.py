"""
Address value type.

An Address wraps exactly 20 bytes; its hex, checksum and ICAP notations
are computed from those bytes on demand.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional

from shardaddr.address.checksum import mixed_case_checksum
from shardaddr.address.codec import to_canonical_bytes, to_icap
from shardaddr.address.errors import InvalidAddress
from shardaddr.address.shard import resolve_shard
from shardaddr.common.config import ShardTable


@dataclass(frozen=True)
class Address:
    value: bytes

    def __post_init__(self) -> None:
        if not isinstance(self.value, bytes) or len(self.value) != 20:
            raise InvalidAddress("address must be 20 bytes", "value", self.value)

    @classmethod
    def from_str(cls, address: Any) -> Address:
        """Parse hex or ICAP notation."""
        return cls(to_canonical_bytes(address))

    @property
    def checksum(self) -> str:
        return mixed_case_checksum(self.value)

    @property
    def hex(self) -> str:
        """Lowercase "0x" form."""
        return "0x" + self.value.hex()

    @property
    def icap(self) -> str:
        return to_icap(self.checksum)

    def shard(self, table: Optional[ShardTable] = None) -> Optional[str]:
        return resolve_shard(self.checksum, table)

    def __str__(self) -> str:
        return self.checksum

    def __bytes__(self) -> bytes:
        return self.value
