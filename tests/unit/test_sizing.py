"""Unit tests for size and shape calculation."""

from __future__ import annotations

import pytest

from beencode import (
    ByteString,
    Dictionary,
    Integer,
    List,
    Value,
    encode,
    encoded_size,
    from_native,
    max_depth,
    node_counts,
)

SAMPLES: list[Value] = [
    Integer(0),
    Integer(-1234567),
    ByteString(b""),
    ByteString(b"x" * 100),
    List(),
    Dictionary(),
    List.of(Integer(1), List.of(ByteString(b"ab"))),
    Dictionary({b"key": Dictionary({b"": Integer(10)}), b"a": List()}),
]


class TestEncodedSize:
    """Test encoded_size()."""

    @pytest.mark.parametrize("value", SAMPLES)
    def test_matches_encode(self, value: Value) -> None:
        assert encoded_size(value) == len(encode(value))

    def test_metainfo(self, sample_metainfo: dict, sample_torrent: bytes) -> None:
        assert encoded_size(from_native(sample_metainfo)) == len(sample_torrent)


class TestShape:
    """Test node_counts() and max_depth()."""

    def test_node_counts(self) -> None:
        value = Dictionary({b"a": List.of(Integer(1), ByteString(b"x")), b"b": Integer(2)})
        assert node_counts(value) == {
            "integer": 2,
            "byte_string": 3,
            "list": 1,
            "dictionary": 1,
        }

    def test_node_counts_scalar(self) -> None:
        assert node_counts(Integer(1)) == {
            "integer": 1,
            "byte_string": 0,
            "list": 0,
            "dictionary": 0,
        }

    @pytest.mark.parametrize(
        "value, depth",
        [
            (Integer(1), 0),
            (ByteString(b"x"), 0),
            (List(), 1),
            (Dictionary(), 1),
            (List.of(List.of(List())), 3),
            (Dictionary({b"a": List.of(Integer(1)), b"b": Integer(2)}), 2),
        ],
    )
    def test_max_depth(self, value: Value, depth: int) -> None:
        assert max_depth(value) == depth
