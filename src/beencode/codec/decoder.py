"""Bencode decoder.

This module provides the decode() function that parses a complete byte buffer
into a value tree. Decoding is strict: every malformed input fails with a
DecodeError naming one of a fixed set of kinds, and offsets in those errors
are absolute positions in the original buffer. Open containers live on an
explicit stack, so nesting depth is limited only by memory.
"""

from __future__ import annotations

from types import MappingProxyType

from ..exceptions import DecodeError, DecodeErrorKind
from ..models.convert import Native, to_native
from ..models.values import ByteString, Dictionary, Integer, List, Value
from .reader import ByteReader

_INTEGER = ord("i")
_LIST = ord("l")
_DICT = ord("d")
_END = ord("e")
_COLON = ord(":")
_MINUS = ord("-")
_ZERO = ord("0")
_DIGITS = frozenset(b"0123456789")


def decode(data: bytes | bytearray | memoryview) -> Value:
    """Decode exactly one bencoded value.

    The whole buffer must be consumed by the single top-level value. Several
    values must be wrapped in a list by whoever produced them.

    Dictionaries are accepted with keys in any order. When a key repeats, the
    last occurrence wins.

    Args:
        data: Complete encoded document

    Returns:
        Decoded value tree

    Raises:
        DecodeError: If data is empty, truncated, malformed, or has trailing bytes
        TypeError: If data is not bytes-like

    Examples:
        ```python
        from beencode import decode

        decode(b"li1e6:wibblee")
        # List(items=(Integer(value=1), ByteString(value=b'wibble')))

        decode(b"i-0e")
        # DecodeError: NegativeZero: integer is negative zero at offset 0
        ```
    """
    if isinstance(data, str):
        raise TypeError("decode() requires bytes, not str")
    if not isinstance(data, bytes):
        data = bytes(data)

    reader = ByteReader(data)
    value = _decode_value(reader)
    if not reader.at_end():
        raise DecodeError(DecodeErrorKind.EXPECTING_EOF)
    return value


def decode_native(data: bytes | bytearray | memoryview) -> Native:
    """Decode to plain Python objects (int, bytes, list, dict)."""
    return to_native(decode(data))


def _decode_value(reader: ByteReader) -> Value:
    """Decode one value, tracking open containers on an explicit stack.

    Nesting depth is bounded only by memory. Each loop iteration either opens
    a container, closes the innermost one, or decodes a scalar; a finished
    value is handed to the innermost open container, or returned when no
    container is open.
    """
    stack: list[_ListFrame | _DictFrame] = []

    while True:
        start = reader.position
        byte = reader.peek()
        if byte is None:
            raise DecodeError(DecodeErrorKind.UNEXPECTED_EOF)

        if stack and byte == _END and stack[-1].can_close():
            reader.advance()
            frame = stack.pop()
            value = frame.close()
            start = frame.start
        elif byte == _LIST:
            reader.advance()
            stack.append(_ListFrame(start))
            continue
        elif byte == _DICT:
            reader.advance()
            stack.append(_DictFrame(start))
            continue
        elif byte == _INTEGER:
            value = _decode_integer(reader)
        elif byte in _DIGITS:
            value = _decode_byte_string(reader)
        else:
            # Also covers "e" where a dictionary value is expected
            raise DecodeError(DecodeErrorKind.UNEXPECTED_CHAR, start)

        if not stack:
            return value
        stack[-1].add(value, start)


class _ListFrame:
    """A list whose closing "e" has not been read yet."""

    __slots__ = ("start", "items")

    def __init__(self, start: int) -> None:
        self.start = start
        self.items: list[Value] = []

    def can_close(self) -> bool:
        return True

    def add(self, value: Value, offset: int) -> None:
        self.items.append(value)

    def close(self) -> List:
        return List.model_construct(items=tuple(self.items))


class _DictFrame:
    """A dictionary whose closing "e" has not been read yet.

    Children alternate between key and value; ``key`` holds the pending key
    while its value is being decoded.
    """

    __slots__ = ("start", "entries", "key")

    def __init__(self, start: int) -> None:
        self.start = start
        self.entries: dict[bytes, Value] = {}
        self.key: bytes | None = None

    def can_close(self) -> bool:
        return self.key is None

    def add(self, value: Value, offset: int) -> None:
        if self.key is None:
            if not isinstance(value, ByteString):
                raise DecodeError(DecodeErrorKind.INVALID_DICT_KEY, offset)
            self.key = value.value
            return

        # Key order is not checked; a repeated key overwrites the earlier one
        self.entries[self.key] = value
        self.key = None

    def close(self) -> Dictionary:
        return Dictionary.model_construct(entries=MappingProxyType(self.entries))


def _read_number(reader: ByteReader, terminator: int) -> int:
    """Read one or more decimal digits followed by terminator.

    The terminator is consumed. Returns the accumulated magnitude.

    Raises:
        DecodeError: UNEXPECTED_EOF if input runs out, UNEXPECTED_CHAR at the
            first byte that is neither a digit nor (after a digit) the terminator
    """
    first = reader.peek()
    if first is None:
        raise DecodeError(DecodeErrorKind.UNEXPECTED_EOF)
    if first not in _DIGITS:
        raise DecodeError(DecodeErrorKind.UNEXPECTED_CHAR, reader.position)

    magnitude = 0
    while True:
        byte = reader.peek()
        if byte is None:
            raise DecodeError(DecodeErrorKind.UNEXPECTED_EOF)
        if byte == terminator:
            reader.advance()
            return magnitude
        if byte not in _DIGITS:
            raise DecodeError(DecodeErrorKind.UNEXPECTED_CHAR, reader.position)
        magnitude = magnitude * 10 + (byte - _ZERO)
        reader.advance()


def _decode_integer(reader: ByteReader) -> Integer:
    start = reader.position

    # Order matters: i0e is the only legal spelling of zero
    if reader.startswith(b"i0e"):
        reader.advance(3)
        return Integer.model_construct(value=0)
    if reader.startswith(b"i-0e"):
        raise DecodeError(DecodeErrorKind.NEGATIVE_ZERO, start)
    if reader.startswith(b"i0") or reader.startswith(b"i-0"):
        raise DecodeError(DecodeErrorKind.LEADING_ZERO, start)
    if reader.startswith(b"ie"):
        raise DecodeError(DecodeErrorKind.EMPTY_NUMBER, start)

    reader.advance()
    negative = reader.peek() == _MINUS
    if negative:
        reader.advance()

    magnitude = _read_number(reader, _END)
    return Integer.model_construct(value=-magnitude if negative else magnitude)


def _decode_byte_string(reader: ByteReader) -> ByteString:
    start = reader.position

    if reader.peek() == _ZERO:
        # 0: is the only legal zero-length declaration
        if reader.peek(1) != _COLON:
            raise DecodeError(DecodeErrorKind.UNEXPECTED_CHAR, start)
        reader.advance(2)
        return ByteString.model_construct(value=b"")

    length = _read_number(reader, _COLON)
    if length > reader.remaining():
        raise DecodeError(DecodeErrorKind.STRING_SHORTER_THAN_EXPECTED, start)

    return ByteString.model_construct(value=reader.take(length))
