"""Value tree model for beencode.

This module provides the four value variants (Integer, ByteString, List,
Dictionary) and conversion to and from plain Python objects.
"""

from __future__ import annotations

from .convert import from_native, to_native
from .values import ByteString, Dictionary, Integer, List, Value

__all__ = [
    "Value",
    "Integer",
    "ByteString",
    "List",
    "Dictionary",
    "from_native",
    "to_native",
]
