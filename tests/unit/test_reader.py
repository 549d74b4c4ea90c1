"""Unit tests for byte reading and writing utilities."""

from __future__ import annotations

import pytest

from beencode.codec.reader import ByteReader, ByteWriter


class TestByteReader:
    """Test ByteReader functionality."""

    def test_peek_does_not_consume(self) -> None:
        reader = ByteReader(b"ab")
        assert reader.peek() == ord("a")
        assert reader.peek(1) == ord("b")
        assert reader.position == 0

    def test_peek_past_end(self) -> None:
        reader = ByteReader(b"a")
        assert reader.peek(1) is None
        assert ByteReader(b"").peek() is None

    def test_advance_and_position(self) -> None:
        reader = ByteReader(b"abc")
        reader.advance()
        reader.advance(2)
        assert reader.position == 3
        assert reader.at_end()
        assert reader.remaining() == 0

    def test_advance_bounds(self) -> None:
        reader = ByteReader(b"ab")
        with pytest.raises(ValueError, match="cannot advance"):
            reader.advance(3)
        with pytest.raises(ValueError, match="cannot advance"):
            reader.advance(-1)

    def test_startswith_is_relative_to_cursor(self) -> None:
        reader = ByteReader(b"xi0e")
        assert not reader.startswith(b"i0e")
        reader.advance()
        assert reader.startswith(b"i0e")

    def test_take(self) -> None:
        reader = ByteReader(b"4:spam")
        reader.advance(2)
        assert reader.take(4) == b"spam"
        assert reader.at_end()

    def test_take_bounds(self) -> None:
        reader = ByteReader(b"abc")
        with pytest.raises(ValueError, match="cannot take"):
            reader.take(4)
        assert reader.position == 0


class TestByteWriter:
    """Test ByteWriter functionality."""

    def test_empty(self) -> None:
        assert ByteWriter().to_bytes() == b""

    def test_write_sequence(self) -> None:
        writer = ByteWriter()
        writer.write(b"i")
        writer.write_decimal(-7)
        writer.write(b"e")
        assert writer.to_bytes() == b"i-7e"

    def test_write_decimal_zero(self) -> None:
        writer = ByteWriter()
        writer.write_decimal(0)
        assert writer.to_bytes() == b"0"
