"""Tests for shard table configuration."""

import json
import logging

import pytest

from shardaddr.common.config import (
    DEFAULT_SHARD_TABLE,
    ShardInfo,
    ShardTable,
    load_shard_table,
)


QUAIS_STYLE = [
    {"name": "Cyprus One", "shard": "cyprus1", "context": 2, "byte": ["0000", "1999"]},
    {"name": "Cyprus Two", "shard": "cyprus2", "context": 2, "byte": ["2000", "3999"]},
]


class TestShardInfo:
    def test_bounds(self):
        info = ShardInfo(name="A", shard="a", context=2, low="00FF", high="0100")
        assert info.lower_bound == 255
        assert info.upper_bound == 256
        assert info.contains(255)
        assert info.contains(256)
        assert not info.contains(257)

    def test_non_hex_bound(self):
        with pytest.raises(ValueError, match="must be hex"):
            ShardInfo(name="A", shard="a", context=2, low="zz", high="0100")

    def test_inverted_bounds(self):
        with pytest.raises(ValueError, match="exceeds"):
            ShardInfo(name="A", shard="a", context=2, low="0200", high="0100")

    def test_frozen(self):
        info = DEFAULT_SHARD_TABLE.entries[0]
        with pytest.raises(AttributeError):
            info.shard = "other"

    def test_json_round_trip(self):
        info = ShardInfo.from_json(QUAIS_STYLE[0])
        assert info.to_json() == QUAIS_STYLE[0]

    def test_json_defaults(self):
        info = ShardInfo.from_json({"shard": "x", "byte": ["00", "10"]})
        assert info.name == "x"
        assert info.context == 2

    @pytest.mark.parametrize("entry", [
        {"name": "no shard", "byte": ["00", "10"]},
        {"shard": "x"},
        {"shard": "x", "byte": ["00"]},
        "cyprus1",
    ])
    def test_malformed_json(self, entry):
        with pytest.raises(ValueError):
            ShardInfo.from_json(entry)


class TestShardTable:
    def test_from_list(self):
        table = ShardTable.from_json(QUAIS_STYLE)
        assert table.names() == ["cyprus1", "cyprus2"]
        assert len(table) == 2

    def test_from_wrapped_dict(self):
        table = ShardTable.from_json({"shards": QUAIS_STYLE})
        assert table.names() == ["cyprus1", "cyprus2"]

    def test_not_a_list(self):
        with pytest.raises(ValueError):
            ShardTable.from_json({"zones": QUAIS_STYLE})

    def test_find_and_get(self):
        table = ShardTable.from_json(QUAIS_STYLE)
        assert table.find(0x1000).shard == "cyprus1"
        assert table.find(0x2500).shard == "cyprus2"
        assert table.find(0x5000) is None
        assert table.get("cyprus2").name == "Cyprus Two"
        assert table.get("hydra1") is None

    def test_iteration_keeps_order(self):
        assert [e.shard for e in DEFAULT_SHARD_TABLE] == DEFAULT_SHARD_TABLE.names()

    def test_to_json(self):
        table = ShardTable.from_json(QUAIS_STYLE)
        assert table.to_json() == QUAIS_STYLE


class TestDefaultTable:
    def test_nine_zones(self):
        assert len(DEFAULT_SHARD_TABLE) == 9

    def test_contiguous(self):
        entries = DEFAULT_SHARD_TABLE.entries
        assert entries[0].lower_bound == 0
        assert entries[-1].upper_bound == 0xFF
        for prev, cur in zip(entries, entries[1:]):
            assert cur.lower_bound == prev.upper_bound + 1


class TestLoadShardTable:
    def test_load(self, tmp_path, caplog):
        path = tmp_path / "shards.json"
        path.write_text(json.dumps(QUAIS_STYLE))
        caplog.set_level(logging.INFO, logger="shardaddr.common.config")
        table = load_shard_table(path)
        assert table.names() == ["cyprus1", "cyprus2"]
        assert "Loaded 2 shards" in caplog.text

    def test_missing_file(self, tmp_path):
        with pytest.raises(OSError):
            load_shard_table(tmp_path / "missing.json")

    def test_bad_json(self, tmp_path):
        path = tmp_path / "shards.json"
        path.write_text("{not json")
        with pytest.raises(ValueError):
            load_shard_table(path)
