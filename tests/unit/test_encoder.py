"""Unit tests for encoding."""

from __future__ import annotations

import pytest

from beencode import (
    ByteString,
    Dictionary,
    EncodeError,
    Integer,
    List,
    encode,
    encode_native,
)


class TestEncodeScalars:
    """Test integer and byte string encoding."""

    @pytest.mark.parametrize(
        "number, expected",
        [
            (0, b"i0e"),
            (7, b"i7e"),
            (-42, b"i-42e"),
            (2**70, b"i1180591620717411303424e"),
        ],
    )
    def test_integer(self, number: int, expected: bytes) -> None:
        assert encode(Integer(number)) == expected

    def test_empty_byte_string(self) -> None:
        assert encode(ByteString(b"")) == b"0:"

    def test_byte_string(self) -> None:
        assert encode(ByteString(b"spam")) == b"4:spam"

    def test_raw_bytes_verbatim(self) -> None:
        assert encode(ByteString(b"\x00e:\xff")) == b"4:\x00e:\xff"

    def test_long_byte_string(self) -> None:
        data = b"a" * 1234
        assert encode(ByteString(data)) == b"1234:" + data


class TestEncodeContainers:
    """Test list and dictionary encoding."""

    def test_empty_list(self) -> None:
        assert encode(List()) == b"le"

    def test_list_order_preserved(self) -> None:
        value = List.of(Integer(3), ByteString(b"a"), Integer(1))
        assert encode(value) == b"li3e1:ai1ee"

    def test_nested_list(self) -> None:
        assert encode(List.of(List.of(List()))) == b"llleee"

    def test_empty_dictionary(self) -> None:
        assert encode(Dictionary()) == b"de"

    def test_dictionary_keys_sorted(self) -> None:
        value = Dictionary(
            {
                b"spam": List.of(ByteString(b"a"), ByteString(b"b")),
                b"cow": ByteString(b"moo"),
            }
        )
        assert encode(value) == b"d3:cow3:moo4:spaml1:a1:bee"

    def test_prefix_sorts_first(self) -> None:
        value = Dictionary({b"ab": Integer(2), b"a": Integer(1), b"a\x00": Integer(3)})
        assert encode(value) == b"d1:ai1e2:a\x00i3e2:abi2ee"

    def test_unsigned_byte_order(self) -> None:
        """0xff sorts after every ASCII byte."""
        value = Dictionary({b"\xff": Integer(1), b"z": Integer(2), b"\x00": Integer(3)})
        assert encode(value) == b"d1:\x00i3e1:zi2e1:\xffi1ee"

    def test_insertion_order_irrelevant(self) -> None:
        first = Dictionary({b"b": Integer(1), b"a": Integer(2), b"c": Integer(3)})
        second = Dictionary({b"c": Integer(3), b"a": Integer(2), b"b": Integer(1)})
        assert encode(first) == encode(second) == b"d1:ai2e1:bi1e1:ci3ee"

    def test_nested_dictionaries_sorted(self) -> None:
        value = Dictionary({b"z": Dictionary({b"y": Integer(1), b"x": Integer(2)})})
        assert encode(value) == b"d1:zd1:xi2e1:yi1eee"

    def test_not_a_value(self) -> None:
        with pytest.raises(TypeError, match="not a value tree node"):
            encode(42)  # type: ignore[arg-type]


class TestEncodeNative:
    """Test encoding plain Python objects."""

    def test_nested(self) -> None:
        assert encode_native({"spam": [1, "eggs"]}) == b"d4:spamli1e4:eggsee"

    def test_str_keys_and_bytes_keys_mix(self) -> None:
        assert encode_native({"b": 1, b"a": 2}) == b"d1:ai2e1:bi1ee"

    def test_unsupported_type(self) -> None:
        with pytest.raises(EncodeError, match="unsupported type: float"):
            encode_native([1.5])
