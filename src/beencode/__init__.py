"""beencode: Bencode Codec

A Python library for the bencode serialization format used by BitTorrent
metainfo files and the DHT protocol. Documents are made of four value kinds
(integers, raw byte strings, lists and dictionaries) written as nested
ASCII-delimited tokens.

Key Features:
- Strict decoding with typed, offset-carrying errors
- Canonical encoding (dictionary keys always sorted byte-wise)
- Immutable, Pydantic-validated value trees
- Arbitrary-precision integers

Quick Start:
    >>> from beencode import ByteString, Dictionary, Integer, List, decode, encode
    >>>
    >>> value = Dictionary({b"spam": List.of(Integer(1), ByteString(b"eggs"))})
    >>> data = encode(value)
    >>> data
    b'd4:spamli1e4:eggsee'
    >>> decode(data) == value
    True
"""

from __future__ import annotations

from .codec import Order, compare, decode, decode_native, encode, encode_native, sort_keys
from .exceptions import BeencodeError, DecodeError, DecodeErrorKind, EncodeError
from .models import ByteString, Dictionary, Integer, List, Value, from_native, to_native
from .render import RenderConfig, render
from .utils import encoded_size, max_depth, node_counts

__version__ = "0.1.0"

__all__ = [
    # Core API
    "encode",
    "decode",
    "encode_native",
    "decode_native",
    # Value tree
    "Value",
    "Integer",
    "ByteString",
    "List",
    "Dictionary",
    "from_native",
    "to_native",
    # Exceptions
    "BeencodeError",
    "DecodeError",
    "DecodeErrorKind",
    "EncodeError",
    # Key ordering
    "Order",
    "compare",
    "sort_keys",
    # Rendering
    "RenderConfig",
    "render",
    # Sizing
    "encoded_size",
    "node_counts",
    "max_depth",
    # Version
    "__version__",
]
