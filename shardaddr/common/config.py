"""
Shard boundary configuration.

The shard table is an ordered list of zone shards, each owning a closed
range of address prefixes. It is built once (the default constant below or
a JSON file handed to the CLI) and treated as read-only afterwards.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Iterator, Optional, Union

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Shard entries
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class ShardInfo:
    name: str
    shard: str
    context: int
    low: str     # hex boundary, inclusive
    high: str    # hex boundary, inclusive

    def __post_init__(self) -> None:
        for label, bound in (("low", self.low), ("high", self.high)):
            try:
                int(bound, 16)
            except (TypeError, ValueError):
                raise ValueError(
                    f"Shard {self.shard!r}: {label} bound must be hex, got {bound!r}"
                ) from None
        if self.lower_bound > self.upper_bound:
            raise ValueError(
                f"Shard {self.shard!r}: low bound {self.low} exceeds high bound {self.high}"
            )

    @property
    def lower_bound(self) -> int:
        return int(self.low, 16)

    @property
    def upper_bound(self) -> int:
        return int(self.high, 16)

    def contains(self, value: int) -> bool:
        return self.lower_bound <= value <= self.upper_bound

    @classmethod
    def from_json(cls, data: dict) -> ShardInfo:
        """Parse one entry of the form {"name", "shard", "context", "byte": [lo, hi]}."""
        if not isinstance(data, dict):
            raise ValueError(f"Shard entry must be an object, got {data!r}")
        try:
            shard = data["shard"]
            low, high = data["byte"]
        except (KeyError, TypeError, ValueError):
            raise ValueError(f"Malformed shard entry: {data!r}") from None
        return cls(
            name=data.get("name", shard),
            shard=shard,
            context=int(data.get("context", 2)),
            low=low,
            high=high,
        )

    def to_json(self) -> dict:
        return {
            "name": self.name,
            "shard": self.shard,
            "context": self.context,
            "byte": [self.low, self.high],
        }


# ---------------------------------------------------------------------------
# Table
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class ShardTable:
    entries: tuple[ShardInfo, ...] = ()

    def __iter__(self) -> Iterator[ShardInfo]:
        return iter(self.entries)

    def __len__(self) -> int:
        return len(self.entries)

    def names(self) -> list[str]:
        return [entry.shard for entry in self.entries]

    def get(self, shard: str) -> Optional[ShardInfo]:
        for entry in self.entries:
            if entry.shard == shard:
                return entry
        return None

    def find(self, value: int) -> Optional[ShardInfo]:
        """First entry whose range contains value (entries are assumed disjoint)."""
        for entry in self.entries:
            if entry.contains(value):
                return entry
        return None

    @classmethod
    def from_json(cls, data: Union[list, dict]) -> ShardTable:
        """Build a table from a list of shard entries or {"shards": [...]}."""
        if isinstance(data, dict):
            data = data.get("shards")
        if not isinstance(data, list):
            raise ValueError("Shard table must be a list of shard entries")
        return cls(entries=tuple(ShardInfo.from_json(item) for item in data))

    def to_json(self) -> list[dict]:
        return [entry.to_json() for entry in self.entries]


def load_shard_table(path: Union[str, Path]) -> ShardTable:
    """Read a shard table from a JSON file."""
    path = Path(path)
    with open(path) as f:
        data = json.load(f)
    table = ShardTable.from_json(data)
    logger.info("Loaded %d shards from %s", len(table), path)
    return table


# ---------------------------------------------------------------------------
# Default zone layout
# ---------------------------------------------------------------------------

# Bounds are hex and compared against the first address byte, so the nine
# zones split 0x00..0xFF.
DEFAULT_SHARD_TABLE = ShardTable(entries=(
    ShardInfo(name="Cyprus One", shard="cyprus1", context=2, low="00", high="1D"),
    ShardInfo(name="Cyprus Two", shard="cyprus2", context=2, low="1E", high="3A"),
    ShardInfo(name="Cyprus Three", shard="cyprus3", context=2, low="3B", high="57"),
    ShardInfo(name="Paxos One", shard="paxos1", context=2, low="58", high="73"),
    ShardInfo(name="Paxos Two", shard="paxos2", context=2, low="74", high="8F"),
    ShardInfo(name="Paxos Three", shard="paxos3", context=2, low="90", high="AB"),
    ShardInfo(name="Hydra One", shard="hydra1", context=2, low="AC", high="C7"),
    ShardInfo(name="Hydra Two", shard="hydra2", context=2, low="C8", high="E3"),
    ShardInfo(name="Hydra Three", shard="hydra3", context=2, low="E4", high="FF"),
))
