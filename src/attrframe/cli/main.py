"""Main CLI entry point for attrframe."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional, Sequence

from .. import __version__
from ..cli.analyze import analyze_file, dump_frame
from ..config import CodecConfig
from ..exceptions import AttrFrameError
from ..logger import configure_logging


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Main entry point for the attrframe CLI.

    Returns:
        Exit code (0 for success, non-zero for error)
    """
    parser = argparse.ArgumentParser(
        description="attrframe: Extensible Attribute Frames",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  attrframe --analyze schemas.py                    Show attribute keys of each schema
  attrframe --dump 050102030405                     Dump a varint-prefixed frame
  attrframe --dump 00000002aabb --length-prefix u32 Dump a 4-byte-prefixed frame
  attrframe --version                               Show version
        """,
    )

    parser.add_argument(
        "--analyze",
        metavar="FILE",
        type=str,
        help="Analyze attribute schemas and show their keys",
    )

    parser.add_argument(
        "--dump",
        metavar="HEX",
        type=str,
        help="Decode a hex-encoded frame and show its layout",
    )

    parser.add_argument(
        "--length-prefix",
        choices=["varint", "u8", "u16", "u32", "u64"],
        default="varint",
        help="Length prefix format for --dump (default: varint)",
    )

    parser.add_argument(
        "--byte-order",
        choices=["big", "little"],
        default="big",
        help="Byte order of fixed-width length prefixes (default: big)",
    )

    parser.add_argument(
        "--max-length",
        metavar="N",
        type=int,
        help="Reject frames declaring more than N payload bytes",
    )

    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"attrframe {__version__}",
    )

    args = parser.parse_args(argv)

    if args.verbose:
        configure_logging(logging.DEBUG)

    # Handle --analyze
    if args.analyze:
        file_path = Path(args.analyze)
        if not file_path.exists():
            print(f"Error: File not found: {file_path}", file=sys.stderr)
            return 1

        try:
            analyze_file(file_path)
            return 0
        except Exception as e:
            print(f"Error analyzing file: {e}", file=sys.stderr)
            return 1

    # Handle --dump
    if args.dump is not None:
        try:
            data = bytes.fromhex(args.dump)
        except ValueError as e:
            print(f"Error: invalid hex input: {e}", file=sys.stderr)
            return 1

        config = CodecConfig(length_prefix=args.length_prefix, byte_order=args.byte_order)
        try:
            dump_frame(data, config, args.max_length)
            return 0
        except AttrFrameError as e:
            print(f"Error decoding frame: {e}", file=sys.stderr)
            return 1

    # If no command specified, show help
    parser.print_help()
    return 0


if __name__ == "__main__":
    sys.exit(main())
