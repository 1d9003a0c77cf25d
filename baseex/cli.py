"""Command line interface.

Usage:
    baseex CONVERTER [FILE]          encode FILE (or stdin) to stdout
    baseex CONVERTER [FILE] -d       decode FILE (or stdin) to stdout
    baseex --list                    show converter names

Example:
    $ echo -n Hello | baseex base64
    SGVsbG8=
    $ echo SGVsbG8= | baseex base64 -d
    Hello
"""

from __future__ import annotations

import argparse
import logging
import os
import sys
from typing import Any

from baseex import __version__
from baseex.api import available_converters, get_converter
from baseex.core.errors import BaseExError

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="baseex",
        description="Encode or decode FILE, or standard input, to standard output.",
        epilog="With no FILE, or when FILE is -, read standard input.",
    )
    parser.add_argument("converter", nargs="?", metavar="CONVERTER", help="Converter name, e.g. base64")
    parser.add_argument("file", nargs="?", metavar="FILE", help="Input file")
    parser.add_argument("-d", "--decode", action="store_true", help="Decode data")
    parser.add_argument(
        "-i",
        "--ignore-garbage",
        action="store_true",
        help="When decoding, ignore non-alphabet characters",
    )
    case = parser.add_mutually_exclusive_group()
    case.add_argument(
        "-u", "--upper", action="store_true", help="Upper case output (case insensitive converters)"
    )
    case.add_argument(
        "-l", "--lower", action="store_true", help="Lower case output (case insensitive converters)"
    )
    parser.add_argument(
        "-w",
        "--wrap",
        type=int,
        default=76,
        metavar="COLS",
        help="Wrap encoded lines after COLS characters (default 76, 0 disables wrapping)",
    )
    parser.add_argument("--config", default=None, help="Path to baseex.toml")
    parser.add_argument("--list", action="store_true", help="List available converters")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def _read_input(path: str | None) -> bytes:
    if not path or path == "-":
        return sys.stdin.buffer.read()
    with open(path, "rb") as f:
        return f.read()


def main(argv: list[str] | None = None) -> int:
    """Run the command line interface.

    Args:
        argv: Arguments without the program name (default: sys.argv[1:])

    Returns:
        Exit code: 0 on success, 1 if the input file is missing,
        2 if encoding or decoding failed
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(name)s: %(levelname)s: %(message)s",
    )

    if args.list:
        print("\n".join(available_converters()))
        return 0
    if not args.converter:
        parser.error("the following arguments are required: CONVERTER")
    if args.wrap < 0:
        parser.error("--wrap must not be negative")

    if args.file and args.file != "-" and not os.path.exists(args.file):
        sys.stderr.write(f"baseex: {args.file}: No such file or directory.\n")
        return 1

    options: dict[str, Any] = {}
    if args.upper:
        options["upper"] = True
    elif args.lower:
        options["upper"] = False

    try:
        converter = get_converter(args.converter, config_path=args.config)
        data = _read_input(args.file)

        if args.decode:
            if args.ignore_garbage:
                options["integrity"] = False
            options.pop("upper", None)
            payload = data if converter.accepts_bytes else data.decode("utf-8").strip()
            decoded = converter.decode(payload, output_type="bytes", **options)
            sys.stdout.buffer.write(decoded)
            sys.stdout.buffer.flush()
        else:
            if not converter.accepts_bytes:
                options["line_wrap"] = args.wrap
            encoded = converter.encode(data, **options)
            if isinstance(encoded, bytes):
                sys.stdout.buffer.write(encoded)
                sys.stdout.buffer.flush()
            else:
                sys.stdout.write(f"{encoded}\n")
    except (BaseExError, TypeError, ValueError, OSError) as e:
        logger.debug("Conversion failed", exc_info=True)
        sys.stderr.write(f"baseex: {e}\n")
        return 2

    return 0


if __name__ == "__main__":
    sys.exit(main())
