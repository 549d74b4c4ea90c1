"""Value tree size calculation utilities.

This module provides functions to calculate the encoded size and shape of a
value tree without actually encoding it. Every walk uses an explicit stack, so
trees of any nesting depth can be measured.
"""

from __future__ import annotations

from collections.abc import Iterator

from ..models.values import ByteString, Dictionary, Integer, List, Value


def _decimal_width(number: int) -> int:
    return len(str(number))


def _byte_string_size(data: bytes) -> int:
    return _decimal_width(len(data)) + 1 + len(data)


def _walk(value: Value) -> Iterator[tuple[Value, int]]:
    """Yield every node with its container nesting level (root is 0)."""
    stack = [(value, 0)]
    while stack:
        node, level = stack.pop()
        yield node, level
        if isinstance(node, List):
            stack.extend((item, level + 1) for item in node.items)
        elif isinstance(node, Dictionary):
            stack.extend((item, level + 1) for item in node.entries.values())


def encoded_size(value: Value) -> int:
    """Calculate the encoded size of a value tree in bytes.

    The result always equals ``len(encode(value))``.

    Args:
        value: Value tree to measure

    Returns:
        Size in bytes

    Example:
        >>> encoded_size(Integer(-42))
        5  # i-42e
        >>> encoded_size(ByteString(b"spam"))
        6  # 4:spam
    """
    total = 0
    for node, _ in _walk(value):
        if isinstance(node, Integer):
            total += 2 + _decimal_width(node.value)
        elif isinstance(node, ByteString):
            total += _byte_string_size(node.value)
        elif isinstance(node, List):
            total += 2
        else:
            total += 2 + sum(_byte_string_size(key) for key in node.entries)
    return total


def node_counts(value: Value) -> dict[str, int]:
    """Count the nodes of each kind in a value tree.

    Dictionary keys count as byte strings.

    Example:
        >>> node_counts(List.of(Integer(1), ByteString(b"x")))
        {'integer': 1, 'byte_string': 1, 'list': 1, 'dictionary': 0}
    """
    counts = {"integer": 0, "byte_string": 0, "list": 0, "dictionary": 0}
    for node, _ in _walk(value):
        if isinstance(node, Integer):
            counts["integer"] += 1
        elif isinstance(node, ByteString):
            counts["byte_string"] += 1
        elif isinstance(node, List):
            counts["list"] += 1
        else:
            counts["dictionary"] += 1
            counts["byte_string"] += len(node.entries)
    return counts


def max_depth(value: Value) -> int:
    """Return the container nesting depth (0 for a scalar, 1 for ``le``)."""
    return max(
        (level + 1 for node, level in _walk(value) if isinstance(node, (List, Dictionary))),
        default=0,
    )
