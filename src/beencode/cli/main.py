"""Main CLI entry point for beencode."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from .. import __version__
from ..exceptions import DecodeError
from ..render import RenderConfig
from .commands import canonicalize_file, check_file, show_file
from .log import configure_logging


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the beencode CLI.

    Returns:
        Exit code (0 for success, non-zero for error)
    """
    parser = argparse.ArgumentParser(
        description="beencode: Bencode Codec",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  beencode --show file.torrent                      Print the decoded value tree
  beencode --check file.torrent                     Validate and test for canonical form
  beencode --canonicalize in.torrent --output out   Rewrite in canonical form
  beencode --version                                Show version
        """,
    )

    group = parser.add_mutually_exclusive_group()
    group.add_argument(
        "--show",
        metavar="FILE",
        type=str,
        help="Decode FILE and print its value tree",
    )
    group.add_argument(
        "--check",
        metavar="FILE",
        type=str,
        help="Validate FILE and report whether it is canonical",
    )
    group.add_argument(
        "--canonicalize",
        metavar="FILE",
        type=str,
        help="Re-encode FILE in canonical form (see --output)",
    )

    parser.add_argument(
        "--output",
        metavar="OUT",
        type=str,
        default="-",
        help="Destination for --canonicalize ('-' for stdout, the default)",
    )
    parser.add_argument(
        "--indent",
        type=int,
        default=2,
        help="Spaces per nesting level for --show (default: 2)",
    )
    parser.add_argument(
        "--hex-limit",
        type=int,
        default=64,
        help="Bytes of each string shown before truncating (default: 64)",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable debug logging on stderr",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"beencode {__version__}",
    )

    args = parser.parse_args(argv)
    configure_logging(args.verbose)

    file_arg = args.show or args.check or args.canonicalize
    if not file_arg:
        # If no command specified, show help
        parser.print_help()
        return 0

    file_path = Path(file_arg)
    if not file_path.exists():
        print(f"Error: File not found: {file_path}", file=sys.stderr)
        return 1

    try:
        if args.show:
            config = RenderConfig(indent=args.indent, max_bytes=args.hex_limit)
            show_file(file_path, config)
        elif args.check:
            check_file(file_path)
        else:
            canonicalize_file(file_path, args.output)
        return 0
    except DecodeError as e:
        if e.offset is not None:
            print(f"Error: {e.kind.label} at offset {e.offset}", file=sys.stderr)
        else:
            print(f"Error: {e.kind.label}", file=sys.stderr)
        return 1
    except (OSError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
