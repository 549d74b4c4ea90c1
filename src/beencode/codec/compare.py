"""Three-way comparison of byte sequences.

Dictionary keys are emitted in unsigned byte-wise lexicographic order: bytes
are compared left to right as values 0-255, and a sequence that is a strict
prefix of another sorts first.
"""

from __future__ import annotations

import enum
import functools
from collections.abc import Iterable


class Order(enum.Enum):
    """Result of a three-way comparison."""

    LT = -1
    EQ = 0
    GT = 1


def compare(a: bytes, b: bytes) -> Order:
    """Compare two byte sequences.

    Python's ``bytes`` ordering is already unsigned and prefix-first, so this
    is a thin three-way wrapper around it.

    Example:
        >>> compare(b"ab", b"abc")
        <Order.LT: -1>
        >>> compare(b"\\xff", b"a")
        <Order.GT: 1>
    """
    if a == b:
        return Order.EQ
    return Order.LT if a < b else Order.GT


def sort_keys(keys: Iterable[bytes]) -> list[bytes]:
    """Return keys sorted in canonical order."""
    return sorted(keys, key=functools.cmp_to_key(lambda a, b: compare(a, b).value))
