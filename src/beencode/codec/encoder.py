"""Bencode encoder.

This module provides the encode() function that serializes a value tree into
canonical bencode: integers without leading zeros, length-prefixed byte
strings, and dictionaries with keys sorted byte-wise.
"""

from __future__ import annotations

from typing import Any

from ..models.convert import from_native
from ..models.values import ByteString, Dictionary, Integer, List, Value
from .compare import sort_keys
from .reader import ByteWriter


def encode(value: Value) -> bytes:
    """Encode a value tree to canonical bencode.

    Dictionary keys are always re-sorted, so two dictionaries holding the
    same entries encode identically whatever order they were built in.

    Args:
        value: Value tree to encode

    Returns:
        Canonical encoded bytes

    Raises:
        TypeError: If value is not a value tree node

    Examples:
        ```python
        from beencode import ByteString, Dictionary, Integer, encode

        encode(Integer(-42))
        # b'i-42e'

        encode(Dictionary({b"zz": Integer(1), b"a": ByteString(b"x")}))
        # b'd1:a1:x2:zzi1ee'
        ```
    """
    writer = ByteWriter()
    _encode_value(writer, value)
    return writer.to_bytes()


def encode_native(obj: Any) -> bytes:
    """Encode plain Python objects (see from_native for the type mapping).

    Raises:
        EncodeError: If obj contains a type with no bencode form
    """
    return encode(from_native(obj))


def _encode_value(writer: ByteWriter, value: Value) -> None:
    if not isinstance(value, (Integer, ByteString, List, Dictionary)):
        raise TypeError(f"not a value tree node: {type(value).__name__}")

    # Pending work, popped from the end: either a node or literal bytes
    pending: list[Value | bytes] = [value]

    while pending:
        item = pending.pop()

        if isinstance(item, bytes):
            writer.write(item)
        elif isinstance(item, Integer):
            writer.write(b"i")
            writer.write_decimal(item.value)
            writer.write(b"e")
        elif isinstance(item, ByteString):
            _encode_byte_string(writer, item.value)
        elif isinstance(item, List):
            writer.write(b"l")
            pending.append(b"e")
            pending.extend(reversed(item.items))
        elif isinstance(item, Dictionary):
            writer.write(b"d")
            pending.append(b"e")
            for key in reversed(sort_keys(item.entries)):
                pending.append(item.entries[key])
                pending.append(_byte_string_chunk(key))
        else:
            raise TypeError(f"not a value tree node: {type(item).__name__}")


def _encode_byte_string(writer: ByteWriter, data: bytes) -> None:
    writer.write_decimal(len(data))
    writer.write(b":")
    writer.write(data)


def _byte_string_chunk(data: bytes) -> bytes:
    return b"%d:%s" % (len(data), data)
