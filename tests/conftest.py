"""Pytest configuration and shared fixtures."""

from __future__ import annotations

import pytest

from beencode import encode_native


@pytest.fixture
def sample_metainfo() -> dict:
    """Single-file torrent metainfo as plain Python objects."""
    return {
        "announce": "http://tracker.example.com:6969/announce",
        "created by": "beencode tests",
        "creation date": 1700000000,
        "info": {
            "length": 1048576,
            "name": "ubuntu.iso",
            "piece length": 262144,
            "pieces": bytes(range(80)),
        },
    }


@pytest.fixture
def sample_torrent(sample_metainfo: dict) -> bytes:
    """Canonical encoding of sample_metainfo."""
    return encode_native(sample_metainfo)


@pytest.fixture
def krpc_ping() -> bytes:
    """DHT ping query from BEP 5."""
    return b"d1:ad2:id20:abcdefghij0123456789e1:q4:ping1:t2:aa1:y1:qe"
