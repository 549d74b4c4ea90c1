"""Value tree variants.

A decoded document is a tree built from exactly four node types. All of them
are frozen, strictly validated Pydantic models, so a tree that exists is
well-formed: integers are real ints, byte strings are raw bytes, and every
dictionary key is a byte string.

Trees are deeply immutable. List items are tuples and dictionary entries are
read-only mappings. Equality and hashing work on trees of any depth.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping
from types import MappingProxyType
from typing import Any, Union

from pydantic import BaseModel, ConfigDict, model_validator


class _Node(BaseModel):
    """Shared configuration for all value tree nodes."""

    model_config = ConfigDict(
        # No coercion: True is not an int, "a" is not bytes
        strict=True,
        # Trees are immutable once built
        frozen=True,
        extra="forbid",
    )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, _Node):
            return NotImplemented
        return _trees_equal(self, other)

    def __hash__(self) -> int:
        # Equal trees have the same canonical encoding
        from ..codec.encoder import encode  # Import here to avoid circular dependency

        return hash(encode(self))  # type: ignore[arg-type]


class Integer(_Node):
    """Signed integer of arbitrary magnitude."""

    value: int

    def __init__(self, value: int, **kwargs: Any) -> None:
        super().__init__(value=value, **kwargs)

    def __int__(self) -> int:
        return self.value


class ByteString(_Node):
    """Raw byte sequence. No text encoding is assumed."""

    value: bytes

    def __init__(self, value: bytes, **kwargs: Any) -> None:
        super().__init__(value=value, **kwargs)

    def __bytes__(self) -> bytes:
        return self.value


class List(_Node):
    """Ordered sequence of values."""

    items: tuple[Value, ...]

    def __init__(self, items: Iterable[Value] = (), **kwargs: Any) -> None:
        super().__init__(items=tuple(items), **kwargs)

    @classmethod
    def of(cls, *items: Value) -> List:
        """Build a list from positional items."""
        return cls(items)

    def __len__(self) -> int:
        return len(self.items)

    def __getitem__(self, index: int) -> Value:
        return self.items[index]


class Dictionary(_Node):
    """Mapping from raw byte-string keys to values.

    ``entries`` is a read-only view (``types.MappingProxyType``); assigning to
    it raises ``TypeError``. Its iteration order is insertion order. The
    encoder always re-sorts keys, so insertion order never reaches the
    canonical form.
    """

    entries: dict[bytes, Value]

    def __init__(self, entries: Mapping[bytes, Value] | None = None, **kwargs: Any) -> None:
        super().__init__(entries=dict(entries or {}), **kwargs)

    @model_validator(mode="after")
    def freeze_entries(self) -> Dictionary:
        self.__dict__["entries"] = MappingProxyType(self.entries)
        return self

    @classmethod
    def of(cls, mapping: Mapping[str | bytes, Value]) -> Dictionary:
        """Build a dictionary, encoding any str keys as UTF-8."""
        return cls(
            {
                (key.encode("utf-8") if isinstance(key, str) else key): value
                for key, value in mapping.items()
            }
        )

    def __repr_args__(self) -> Iterator[tuple[str, Any]]:
        yield "entries", dict(self.entries)

    def __len__(self) -> int:
        return len(self.entries)

    def __getitem__(self, key: bytes) -> Value:
        return self.entries[key]

    def __contains__(self, key: object) -> bool:
        return key in self.entries

    def keys(self) -> Iterator[bytes]:
        return iter(self.entries)

    def get(self, key: bytes, default: Value | None = None) -> Value | None:
        return self.entries.get(key, default)


Value = Union[Integer, ByteString, List, Dictionary]

List.model_rebuild()
Dictionary.model_rebuild()


def _trees_equal(left: _Node, right: _Node) -> bool:
    """Structural equality, walking both trees side by side."""
    pending = [(left, right)]
    while pending:
        a, b = pending.pop()
        if type(a) is not type(b):
            return False

        if isinstance(a, (Integer, ByteString)):
            if a.value != b.value:
                return False
        elif isinstance(a, List):
            if len(a.items) != len(b.items):
                return False
            pending.extend(zip(a.items, b.items))
        elif isinstance(a, Dictionary):
            if a.entries.keys() != b.entries.keys():
                return False
            pending.extend((item, b.entries[key]) for key, item in a.entries.items())
    return True
