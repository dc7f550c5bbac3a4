"""Pytest configuration and shared fixtures for all tests."""

import pytest

from shardaddr.common.config import DEFAULT_SHARD_TABLE, ShardInfo, ShardTable

from tests.fixtures.addresses import ICAP_ADDRESS, ICAP_FORM
from tests.fixtures.contracts import GRIND_BYTECODE


# =============================================================================
# Addresses
# =============================================================================

@pytest.fixture
def checksum_address():
    """A valid checksum-cased address."""
    return ICAP_ADDRESS


@pytest.fixture
def icap_address():
    """ICAP form of checksum_address."""
    return ICAP_FORM


# =============================================================================
# Shard tables
# =============================================================================

@pytest.fixture
def default_table():
    return DEFAULT_SHARD_TABLE


@pytest.fixture
def wide_table():
    """Single shard covering every first byte."""
    return ShardTable(entries=(
        ShardInfo(name="Everything", shard="zone", context=2, low="00", high="FF"),
    ))


@pytest.fixture
def split_table():
    """Two shards with gaps at 0x1A..0x1F and above 0x21."""
    return ShardTable(entries=(
        ShardInfo(name="Cyprus One", shard="cyprus1", context=2, low="00", high="19"),
        ShardInfo(name="Cyprus Two", shard="cyprus2", context=2, low="20", high="21"),
    ))


# =============================================================================
# Grinding
# =============================================================================

@pytest.fixture
def grind_bytecode():
    return GRIND_BYTECODE
