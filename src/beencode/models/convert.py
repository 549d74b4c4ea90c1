"""Conversion between value trees and plain Python objects.

Value trees are the exact, typed form of a document. Application code often
wants plain ``int`` / ``bytes`` / ``list`` / ``dict`` objects instead; this
module maps between the two. Both directions walk with an explicit stack, so
nesting depth is limited only by memory.
"""

from __future__ import annotations

import functools
from collections.abc import Callable, Mapping
from typing import Any, Union

from ..exceptions import EncodeError
from .values import ByteString, Dictionary, Integer, List, Value

Native = Union[int, bytes, list, dict]

# Work items for from_native
_CONVERT = "convert"
_BUILD_LIST = "build-list"
_BUILD_DICT = "build-dict"


def from_native(obj: Any) -> Value:
    """Build a value tree from plain Python objects.

    Mapping:
        - int -> Integer (bool is rejected)
        - bytes, bytearray, memoryview -> ByteString
        - str -> ByteString of its UTF-8 encoding
        - list, tuple -> List
        - dict or any Mapping with str/bytes keys -> Dictionary
        - existing value tree nodes pass through unchanged

    Args:
        obj: Object to convert

    Returns:
        Equivalent value tree

    Raises:
        EncodeError: If obj (or anything nested in it) has no bencode form,
            or if a container contains itself

    Example:
        >>> from_native({"spam": [1, b"eggs"]})
        Dictionary(entries={b'spam': List(items=(Integer(value=1), ByteString(value=b'eggs')))})
    """
    # Converted children accumulate here until their container is built
    done: list[Value] = []
    pending: list[tuple[str, Any]] = [(_CONVERT, obj)]
    open_containers: set[int] = set()

    while pending:
        action, item = pending.pop()

        if action == _BUILD_LIST:
            container, count = item
            open_containers.discard(id(container))
            items = done[len(done) - count :]
            del done[len(done) - count :]
            done.append(List(items))
            continue

        if action == _BUILD_DICT:
            container, keys = item
            open_containers.discard(id(container))
            values = done[len(done) - len(keys) :]
            del done[len(done) - len(keys) :]
            done.append(Dictionary(dict(zip(keys, values))))
            continue

        if isinstance(item, (Integer, ByteString, List, Dictionary)):
            done.append(item)
        elif isinstance(item, (list, tuple)):
            _enter(item, open_containers)
            pending.append((_BUILD_LIST, (item, len(item))))
            pending.extend((_CONVERT, child) for child in reversed(item))
        elif isinstance(item, Mapping):
            _enter(item, open_containers)
            pairs = list(item.items())
            keys = [_native_key(key) for key, _ in pairs]
            pending.append((_BUILD_DICT, (item, keys)))
            pending.extend((_CONVERT, child) for _, child in reversed(pairs))
        else:
            done.append(_native_scalar(item))

    return done[0]


def _enter(container: Any, open_containers: set[int]) -> None:
    if id(container) in open_containers:
        raise EncodeError(f"circular reference to {type(container).__name__}")
    open_containers.add(id(container))


def _native_scalar(obj: Any) -> Value:
    # bool before int
    if isinstance(obj, bool):
        raise EncodeError("bool has no bencode form; use int explicitly")

    if isinstance(obj, int):
        return Integer(obj)

    if isinstance(obj, bytes):
        return ByteString(obj)

    if isinstance(obj, (bytearray, memoryview)):
        return ByteString(bytes(obj))

    if isinstance(obj, str):
        return ByteString(obj.encode("utf-8"))

    raise EncodeError(f"unsupported type: {type(obj).__name__}")


def _native_key(key: Any) -> bytes:
    if isinstance(key, str):
        return key.encode("utf-8")
    if isinstance(key, (bytes, bytearray, memoryview)):
        return bytes(key)
    raise EncodeError(f"dictionary key must be str or bytes, got {type(key).__name__}")


def to_native(value: Value) -> Native:
    """Flatten a value tree into plain Python objects.

    Byte strings stay ``bytes``; no text decoding is attempted.

    Example:
        >>> to_native(List.of(Integer(1), ByteString(b"x")))
        [1, b'x']
    """
    root: list[Native] = []
    # Each node is paired with the callable that stores its converted form
    pending: list[tuple[Value, Callable[[Native], Any]]] = [(value, root.append)]

    while pending:
        node, store = pending.pop()

        if isinstance(node, (Integer, ByteString)):
            store(node.value)
        elif isinstance(node, List):
            items: list[Native] = []
            store(items)
            pending.extend((item, items.append) for item in reversed(node.items))
        else:
            entries: dict[bytes, Native] = {}
            store(entries)
            pending.extend(
                (item, functools.partial(entries.__setitem__, key))
                for key, item in reversed(list(node.entries.items()))
            )

    return root[0]
