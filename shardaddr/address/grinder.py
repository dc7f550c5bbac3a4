"""
Contract address grinding.

Searches for init code whose derived contract address falls into a target
shard. The last byte of the init code is replaced with a random salt and
the candidate address

    keccak256(sender ++ bytes32(str(nonce)) ++ init_code)[12:]

is resolved against the shard table until it lands in the target shard.

The search has no upper bound unless the caller supplies one: a cancel
event, a timeout or an iteration cap.
"""

from __future__ import annotations

import asyncio
import logging
import re
import threading
import time
from dataclasses import dataclass
from typing import Any, Callable, Optional

from shardaddr.address.checksum import mixed_case_checksum
from shardaddr.address.codec import to_canonical_bytes
from shardaddr.address.errors import (
    GrindCancelled,
    GrindExhausted,
    InvalidBytecode,
    InvalidNonce,
    MissingNonce,
    MissingOrInvalidShard,
)
from shardaddr.address.shard import is_valid_shard_name, resolve_shard
from shardaddr.common import crypto
from shardaddr.common.config import DEFAULT_SHARD_TABLE, ShardTable
from shardaddr.common.encoding import format_bytes32_string

logger = logging.getLogger(__name__)

_BYTECODE_RE = re.compile(r"(0x)?([0-9a-fA-F]{2})+")

RandomSource = Callable[[int], bytes]


@dataclass
class GrindState:
    nonce: Any
    target_shard: str
    sender: bytes          # 20 bytes
    bytecode: str          # hex, no prefix, last byte is the salt slot
    salt: Optional[bytes] = None
    iterations: int = 0


class AddressGrinder:
    """Synchronous grinding engine; one instance per search."""

    def __init__(
        self,
        nonce: Any,
        target_shard: Optional[str],
        sender_address: str,
        bytecode_hex: str,
        table: Optional[ShardTable] = None,
        random_bytes: Optional[RandomSource] = None,
    ) -> None:
        if nonce is None:
            raise MissingNonce("missing nonce", "nonce", nonce)
        self.table = table if table is not None else DEFAULT_SHARD_TABLE
        if target_shard is None or not is_valid_shard_name(target_shard, self.table):
            raise MissingOrInvalidShard("missing matchShard", "matchShard", target_shard)
        if not isinstance(bytecode_hex, str) or not _BYTECODE_RE.fullmatch(bytecode_hex):
            raise InvalidBytecode("invalid bytecode", "bytecode", bytecode_hex)
        try:
            self._nonce_bytes = format_bytes32_string(str(nonce))
        except ValueError:
            raise InvalidNonce("nonce does not fit in bytes32", "nonce", nonce) from None

        self.state = GrindState(
            nonce=nonce,
            target_shard=target_shard,
            sender=to_canonical_bytes(sender_address),
            bytecode=bytecode_hex.removeprefix("0x").lower(),
        )
        self._prefix = self.state.sender + self._nonce_bytes
        self._random_bytes = random_bytes or crypto.random_bytes

    def candidate(self, salt: bytes) -> tuple[str, str]:
        """Return (init_code_hex, checksum address) for a one-byte salt."""
        init_code = self.state.bytecode[:-2] + salt.hex()
        digest = crypto.keccak256(self._prefix + bytes.fromhex(init_code))
        return init_code, mixed_case_checksum(digest[12:])

    def step(self) -> Optional[str]:
        """Try one random salt; return the init code hex on a match."""
        state = self.state
        state.salt = self._random_bytes(1)
        state.iterations += 1

        init_code, address = self.candidate(state.salt)
        shard = resolve_shard(address, self.table)
        if shard is None:
            logger.debug("Salt %s -> %s: no shard", state.salt.hex(), address)
            return None
        if shard != state.target_shard:
            logger.debug("Salt %s -> %s: shard %s", state.salt.hex(), address, shard)
            return None

        logger.info(
            "Found %s in shard %s with salt %s after %d iterations",
            address, shard, state.salt.hex(), state.iterations,
        )
        return init_code

    def run(
        self,
        cancel_event: Optional[threading.Event] = None,
        deadline: Optional[float] = None,
        max_iterations: Optional[int] = None,
    ) -> str:
        """Step until a match.

        deadline is a time.monotonic() value. Without any of the three
        limits the loop runs until it finds a match.
        """
        logger.info(
            "Grinding contract address for shard %s (nonce=%s)",
            self.state.target_shard, self.state.nonce,
        )
        while True:
            if cancel_event is not None and cancel_event.is_set():
                raise GrindCancelled(self.state.iterations)
            if deadline is not None and time.monotonic() >= deadline:
                raise GrindCancelled(self.state.iterations)
            if max_iterations is not None and self.state.iterations >= max_iterations:
                raise GrindExhausted(self.state.iterations)

            result = self.step()
            if result is not None:
                return result


def grind_contract_address_sync(
    nonce: Any,
    target_shard: Optional[str],
    sender_address: str,
    bytecode_hex: str,
    *,
    table: Optional[ShardTable] = None,
    random_bytes: Optional[RandomSource] = None,
    cancel_event: Optional[threading.Event] = None,
    timeout: Optional[float] = None,
    max_iterations: Optional[int] = None,
) -> str:
    """Blocking grind on the caller's thread."""
    grinder = AddressGrinder(
        nonce, target_shard, sender_address, bytecode_hex,
        table=table, random_bytes=random_bytes,
    )
    deadline = time.monotonic() + timeout if timeout is not None else None
    return grinder.run(cancel_event, deadline, max_iterations)


async def grind_contract_address(
    nonce: Any,
    target_shard: Optional[str],
    sender_address: str,
    bytecode_hex: str,
    *,
    table: Optional[ShardTable] = None,
    random_bytes: Optional[RandomSource] = None,
    cancel_event: Optional[threading.Event] = None,
    timeout: Optional[float] = None,
    max_iterations: Optional[int] = None,
) -> str:
    """Grind in a worker thread so the event loop stays responsive.

    Validation errors are raised before any work is scheduled. Cancelling
    the awaiting task stops the worker at its next iteration.
    """
    grinder = AddressGrinder(
        nonce, target_shard, sender_address, bytecode_hex,
        table=table, random_bytes=random_bytes,
    )
    cancel_event = cancel_event or threading.Event()
    deadline = time.monotonic() + timeout if timeout is not None else None
    try:
        return await asyncio.to_thread(grinder.run, cancel_event, deadline, max_iterations)
    except asyncio.CancelledError:
        cancel_event.set()
        raise
