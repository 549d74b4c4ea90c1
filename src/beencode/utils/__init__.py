"""Utility functions for beencode.

This module provides size and shape calculations for value trees.
"""

from __future__ import annotations

from .sizing import encoded_size, max_depth, node_counts

__all__ = [
    "encoded_size",
    "node_counts",
    "max_depth",
]
