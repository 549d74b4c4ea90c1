"""Bencode codec.

This module provides decoding of byte buffers into value trees and canonical
encoding of value trees back into bytes.
"""

from __future__ import annotations

from .compare import Order, compare, sort_keys
from .decoder import decode, decode_native
from .encoder import encode, encode_native

__all__ = [
    "encode",
    "decode",
    "encode_native",
    "decode_native",
    "Order",
    "compare",
    "sort_keys",
]
