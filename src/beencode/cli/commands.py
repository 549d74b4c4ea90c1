"""File inspection CLI commands."""

from __future__ import annotations

import sys
from pathlib import Path

import structlog

from ..codec.decoder import decode
from ..codec.encoder import encode
from ..exceptions import DecodeError
from ..models.values import Value
from ..render import RenderConfig, render
from ..utils.sizing import encoded_size, max_depth, node_counts

logger = structlog.get_logger()


def _decode_file(file_path: Path) -> tuple[bytes, Value]:
    data = file_path.read_bytes()
    logger.debug("read file", path=str(file_path), size=len(data))

    try:
        value = decode(data)
    except DecodeError as e:
        logger.debug("decode failed", path=str(file_path), kind=e.kind.label, offset=e.offset)
        raise

    return data, value


def show_file(file_path: Path, config: RenderConfig) -> None:
    """Decode a file and print its value tree followed by a summary.

    Args:
        file_path: Path to a bencoded file
        config: Rendering options

    Raises:
        DecodeError: If the file is not valid bencode
        OSError: If the file cannot be read
    """
    data, value = _decode_file(file_path)

    print(render(value, config))
    print()
    print(f"{'=' * 24} Summary {'=' * 24}")

    counts = node_counts(value)
    print(f"Input size: {len(data)} bytes")
    print(f"Canonical size: {encoded_size(value)} bytes")
    print(f"Nesting depth: {max_depth(value)}")
    print(
        f"Nodes: {counts['integer']} integers, {counts['byte_string']} byte strings, "
        f"{counts['list']} lists, {counts['dictionary']} dictionaries"
    )


def check_file(file_path: Path) -> None:
    """Validate a file and report whether it is already canonical.

    Canonical form is informational only: a file that decodes is valid
    whether or not its dictionary keys are sorted.

    Raises:
        DecodeError: If the file is not valid bencode
        OSError: If the file cannot be read
    """
    data, value = _decode_file(file_path)

    canonical = encode(value) == data
    print(f"OK: {file_path} ({len(data)} bytes)")
    print(f"Canonical: {'yes' if canonical else 'no'}")


def canonicalize_file(file_path: Path, output: str) -> None:
    """Decode a file and write its canonical encoding.

    Args:
        file_path: Path to a bencoded file
        output: Destination path, or "-" for stdout

    Raises:
        DecodeError: If the file is not valid bencode
        OSError: If a file cannot be read or written
    """
    _, value = _decode_file(file_path)
    canonical = encode(value)

    if output == "-":
        sys.stdout.buffer.write(canonical)
        sys.stdout.buffer.flush()
    else:
        Path(output).write_bytes(canonical)
        logger.debug("wrote canonical form", path=output, size=len(canonical))
