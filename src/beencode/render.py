"""Human-readable rendering of value trees.

Byte strings are raw bytes; showing them as text is purely a presentation
choice made here, never by the codec.
"""

from __future__ import annotations

from dataclasses import dataclass

from .codec.compare import sort_keys
from .models.values import ByteString, Dictionary, Integer, List, Value


@dataclass
class RenderConfig:
    """Configuration for rendering a value tree.

    Attributes:
        indent: Spaces per nesting level (default 2).

        max_bytes: Longest byte-string prefix shown before truncating
            (default 64). Truncated strings are followed by their full length.
            Torrent ``pieces`` fields are typically thousands of bytes of
            SHA-1 digests, so a small value keeps output readable.

        text: Show byte strings made only of printable ASCII as quoted text
            (default True). Anything else is always shown as hex.

    Examples:
        ```python
        from beencode.render import RenderConfig, render

        print(render(value, RenderConfig(indent=4, max_bytes=16)))
        ```
    """

    indent: int = 2
    max_bytes: int = 64
    text: bool = True

    def __post_init__(self) -> None:
        """Validate configuration parameters."""
        if self.indent < 0:
            raise ValueError(f"indent must be >= 0, got {self.indent}")

        if self.max_bytes <= 0:
            raise ValueError(f"max_bytes must be > 0, got {self.max_bytes}")


def render(value: Value, config: RenderConfig | None = None) -> str:
    """Render a value tree as indented text, one node per line.

    Dictionary entries appear in canonical key order.

    Example:
        >>> print(render(decode(b"d3:cow3:moo4:spaml1:ai7eee")))
        dict (2 entries)
          "cow": "moo"
          "spam": list (2 items)
            "a"
            7
    """
    config = config or RenderConfig()
    return "\n".join(_render(value, config))


def format_bytes(data: bytes, config: RenderConfig | None = None) -> str:
    """Format a byte string as quoted text or hex, truncated per config."""
    config = config or RenderConfig()
    shown = data[: config.max_bytes]

    if config.text and all(0x20 <= byte < 0x7F for byte in shown):
        escaped = shown.decode("ascii").replace("\\", "\\\\").replace('"', '\\"')
        text = f'"{escaped}"'
    else:
        text = "0x" + shown.hex()

    if len(data) > config.max_bytes:
        text += f"... ({len(data)} bytes)"
    return text


def _render(value: Value, config: RenderConfig) -> list[str]:
    lines: list[str] = []
    # (node, nesting level, "key: " prefix)
    pending: list[tuple[Value, int, str]] = [(value, 0, "")]

    while pending:
        node, depth, label = pending.pop()
        pad = " " * (config.indent * depth)

        if isinstance(node, Integer):
            lines.append(f"{pad}{label}{node.value}")
        elif isinstance(node, ByteString):
            lines.append(f"{pad}{label}{format_bytes(node.value, config)}")
        elif isinstance(node, List):
            count = len(node.items)
            lines.append(f"{pad}{label}list ({count} item{'s' if count != 1 else ''})")
            pending.extend((item, depth + 1, "") for item in reversed(node.items))
        elif isinstance(node, Dictionary):
            count = len(node.entries)
            lines.append(f"{pad}{label}dict ({count} entr{'ies' if count != 1 else 'y'})")
            pending.extend(
                (node.entries[key], depth + 1, f"{format_bytes(key, config)}: ")
                for key in reversed(sort_keys(node.entries))
            )
        else:
            raise TypeError(f"not a value tree node: {type(node).__name__}")

    return lines
