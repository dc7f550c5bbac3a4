"""
py-shardaddr command-line interface.

Sub-commands:
  checksum  print the checksum form of an address
  icap      print the ICAP form of an address
  validate  report whether an address parses
  create    derive a CREATE contract address
  create2   derive a CREATE2 contract address
  shard     resolve the shard owning an address
  grind     search init code whose contract address lands in a shard
"""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys
from typing import Optional

from shardaddr import __version__
from shardaddr.address import (
    AddressError,
    GrindError,
    derive_create2_address,
    derive_create2_address_from_code,
    derive_create_address,
    grind_contract_address,
    is_valid_address,
    parse_address,
    resolve_shard,
    to_icap,
)
from shardaddr.common.config import DEFAULT_SHARD_TABLE, load_shard_table


logger = logging.getLogger("shardaddr")


# ---------------------------------------------------------------------------
# Commands
# ---------------------------------------------------------------------------

def _cmd_checksum(args: argparse.Namespace) -> int:
    print(parse_address(args.address))
    return 0


def _cmd_icap(args: argparse.Namespace) -> int:
    print(to_icap(args.address))
    return 0


def _cmd_validate(args: argparse.Namespace) -> int:
    valid = is_valid_address(args.address)
    print("valid" if valid else "invalid")
    return 0 if valid else 1


def _cmd_create(args: argparse.Namespace) -> int:
    print(derive_create_address({"from": args.sender, "nonce": args.nonce}))
    return 0


def _cmd_create2(args: argparse.Namespace) -> int:
    if args.init_code is not None:
        print(derive_create2_address_from_code(args.sender, args.salt, args.init_code))
    else:
        print(derive_create2_address(args.sender, args.salt, args.init_code_hash))
    return 0


def _cmd_shard(args: argparse.Namespace) -> int:
    shard = resolve_shard(args.address, args.table)
    if shard is None:
        print("none")
        return 1
    print(shard)
    return 0


def _cmd_grind(args: argparse.Namespace) -> int:
    init_code = asyncio.run(grind_contract_address(
        args.nonce,
        args.shard,
        args.sender,
        args.bytecode,
        table=args.table,
        timeout=args.timeout,
        max_iterations=args.max_iterations,
    ))
    print(init_code)
    return 0


# ---------------------------------------------------------------------------
# CLI
# ---------------------------------------------------------------------------

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="shardaddr",
        description="Address derivation and shard routing utilities",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument(
        "--shards",
        type=str,
        default=None,
        help="Path to a JSON shard table (default: built-in zone table)",
    )
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default="WARNING",
        help="Logging level (default: WARNING)",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    p = sub.add_parser("checksum", help="Print the checksum form of an address")
    p.add_argument("address")
    p.set_defaults(func=_cmd_checksum)

    p = sub.add_parser("icap", help="Print the ICAP form of an address")
    p.add_argument("address")
    p.set_defaults(func=_cmd_icap)

    p = sub.add_parser("validate", help="Check whether an address is valid")
    p.add_argument("address")
    p.set_defaults(func=_cmd_validate)

    p = sub.add_parser("create", help="Derive a CREATE contract address")
    p.add_argument("--from", dest="sender", required=True, help="Deployer address")
    p.add_argument("--nonce", required=True, help="Deployer nonce (decimal or 0x hex)")
    p.set_defaults(func=_cmd_create)

    p = sub.add_parser("create2", help="Derive a CREATE2 contract address")
    p.add_argument("--from", dest="sender", required=True, help="Deployer address")
    p.add_argument("--salt", required=True, help="32-byte salt (0x hex)")
    code = p.add_mutually_exclusive_group(required=True)
    code.add_argument("--init-code-hash", help="32-byte keccak256 of the init code (0x hex)")
    code.add_argument("--init-code", help="Init code (0x hex)")
    p.set_defaults(func=_cmd_create2)

    p = sub.add_parser("shard", help="Resolve the shard owning an address")
    p.add_argument("address")
    p.set_defaults(func=_cmd_shard)

    p = sub.add_parser("grind", help="Grind init code into a target shard")
    p.add_argument("--nonce", type=int, required=True, help="Deployer nonce")
    p.add_argument("--shard", required=True, help="Target shard, e.g. cyprus1")
    p.add_argument("--sender", required=True, help="Deployer address")
    p.add_argument("--bytecode", required=True, help="Init code hex; last byte is replaced")
    p.add_argument("--timeout", type=float, default=None, help="Give up after this many seconds")
    p.add_argument("--max-iterations", type=int, default=None, help="Give up after this many salts")
    p.set_defaults(func=_cmd_grind)

    return parser


def main(argv: Optional[list[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    # Setup logging
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )

    table = DEFAULT_SHARD_TABLE
    if args.shards:
        try:
            table = load_shard_table(args.shards)
        except (OSError, ValueError) as e:
            logger.error("Cannot load shard table %s: %s", args.shards, e)
            return 1
    args.table = table

    try:
        return args.func(args)
    except (AddressError, GrindError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        return 130


if __name__ == "__main__":
    sys.exit(main())
