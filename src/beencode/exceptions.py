"""Exception hierarchy for beencode.

This module defines all custom exceptions used throughout the package.
All exceptions inherit from BeencodeError for easy catching of any beencode-specific error.
"""

from __future__ import annotations

import enum
from typing import Any


class BeencodeError(Exception):
    """Base exception for all beencode errors."""

    pass


class DecodeErrorKind(enum.Enum):
    """The closed set of reasons a decode can fail.

    The value of each member is a pair ``(name, carries_offset)``.
    """

    EXPECTING_EOF = ("ExpectingEof", False)
    UNEXPECTED_EOF = ("UnexpectedEof", False)
    UNEXPECTED_CHAR = ("UnexpectedChar", True)
    EMPTY_NUMBER = ("EmptyNumber", True)
    NEGATIVE_ZERO = ("NegativeZero", True)
    LEADING_ZERO = ("LeadingZero", True)
    INVALID_DICT_KEY = ("InvalidDictKey", True)
    STRING_SHORTER_THAN_EXPECTED = ("StringShorterThanExpected", True)

    @property
    def label(self) -> str:
        return self.value[0]

    @property
    def carries_offset(self) -> bool:
        return self.value[1]


_MESSAGES = {
    DecodeErrorKind.EXPECTING_EOF: "trailing data after top-level value",
    DecodeErrorKind.UNEXPECTED_EOF: "input ended while a value was expected",
    DecodeErrorKind.UNEXPECTED_CHAR: "unexpected byte",
    DecodeErrorKind.EMPTY_NUMBER: "integer has no digits",
    DecodeErrorKind.NEGATIVE_ZERO: "integer is negative zero",
    DecodeErrorKind.LEADING_ZERO: "integer has a leading zero",
    DecodeErrorKind.INVALID_DICT_KEY: "dictionary key is not a byte string",
    DecodeErrorKind.STRING_SHORTER_THAN_EXPECTED: "byte string is shorter than its declared length",
}


class DecodeError(BeencodeError):
    """Raised when decoding bencoded data fails.

    Every failure maps to exactly one DecodeErrorKind. Kinds that carry an
    offset point at the first byte of the offending token (the ``i`` of an
    integer, the first digit of a string length, the first byte of a bad
    dictionary key), as a zero-based index into the original input.

    Examples:
        - ``i-0e`` fails with NEGATIVE_ZERO at offset 0
        - ``10:aa`` fails with STRING_SHORTER_THAN_EXPECTED at offset 0
        - ``i1ei2e`` fails with EXPECTING_EOF (no offset)
    """

    def __init__(self, kind: DecodeErrorKind, offset: int | None = None) -> None:
        if kind.carries_offset and offset is None:
            raise ValueError(f"{kind.label} requires an offset")
        if not kind.carries_offset and offset is not None:
            raise ValueError(f"{kind.label} does not carry an offset")

        self.kind = kind
        self.offset = offset

        message = f"{kind.label}: {_MESSAGES[kind]}"
        if offset is not None:
            message += f" at offset {offset}"
        super().__init__(message)

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, DecodeError):
            return NotImplemented
        return (self.kind, self.offset) == (other.kind, other.offset)

    def __hash__(self) -> int:
        return hash((self.kind, self.offset))

    def __repr__(self) -> str:
        return f"DecodeError({self.kind.label}, offset={self.offset})"


class EncodeError(BeencodeError):
    """Raised when a native Python object cannot be converted to a value tree.

    Examples:
        - Unsupported type (float, None, set)
        - bool given where an integer is expected
        - Dictionary key that is neither str nor bytes

    Encoding an already-built value tree never raises.
    """

    pass
