"""Byte-level cursor and output buffer.

This module provides the low-level reading and writing primitives used by the
decoder and encoder. The reader keeps a single absolute offset into the
original input so every decode error can report where it happened.
"""

from __future__ import annotations


class ByteReader:
    """Reads forward through an immutable byte buffer.

    The position only ever increases. All offsets are absolute, zero-based
    indices into the buffer handed to the constructor.

    Example:
        >>> reader = ByteReader(b"i42e")
        >>> reader.peek()
        105
        >>> reader.advance()
        >>> reader.position
        1
    """

    __slots__ = ("_data", "_position")

    def __init__(self, data: bytes) -> None:
        """Initialize a reader at offset 0.

        Args:
            data: Byte buffer to read
        """
        self._data = data
        self._position = 0

    @property
    def position(self) -> int:
        """Current absolute offset."""
        return self._position

    def at_end(self) -> bool:
        """Return True if every byte has been consumed."""
        return self._position >= len(self._data)

    def remaining(self) -> int:
        """Return the number of unread bytes."""
        return len(self._data) - self._position

    def peek(self, ahead: int = 0) -> int | None:
        """Return the byte ``ahead`` positions past the cursor, or None past the end."""
        index = self._position + ahead
        if index >= len(self._data):
            return None
        return self._data[index]

    def startswith(self, prefix: bytes) -> bool:
        """Return True if the unread input begins with prefix."""
        return self._data.startswith(prefix, self._position)

    def advance(self, count: int = 1) -> None:
        """Move the cursor forward.

        Raises:
            ValueError: If count is negative or would move past the end
        """
        if count < 0 or count > self.remaining():
            raise ValueError(f"cannot advance {count} bytes with {self.remaining()} remaining")
        self._position += count

    def take(self, count: int) -> bytes:
        """Consume and return the next ``count`` bytes.

        Raises:
            ValueError: If fewer than count bytes remain
        """
        if count < 0 or count > self.remaining():
            raise ValueError(f"cannot take {count} bytes with {self.remaining()} remaining")
        start = self._position
        self._position += count
        return self._data[start : self._position]


class ByteWriter:
    """Collects output chunks and joins them once at the end.

    Example:
        >>> writer = ByteWriter()
        >>> writer.write(b"i")
        >>> writer.write_decimal(-7)
        >>> writer.write(b"e")
        >>> writer.to_bytes()
        b'i-7e'
    """

    __slots__ = ("_chunks",)

    def __init__(self) -> None:
        self._chunks: list[bytes] = []

    def write(self, data: bytes) -> None:
        self._chunks.append(data)

    def write_decimal(self, number: int) -> None:
        """Write number in base 10 ASCII, with a leading '-' if negative."""
        self._chunks.append(str(number).encode("ascii"))

    def to_bytes(self) -> bytes:
        return b"".join(self._chunks)
