#!/usr/bin/env python3
"""
Command-line interface: decompress a zlib file and hexdump the result.
"""

import argparse
import logging
import os
import sys
from pathlib import Path

from .errors import HexdumpError
from .hexdump import run
from .zlib_reader import ZlibReader

_log = logging.getLogger(__name__)


def setup_logging():
    """Log to stderr; level comes from the LOGLEVEL environment variable."""
    level = os.environ.get('LOGLEVEL', 'WARNING').upper()
    if not isinstance(logging.getLevelName(level), int):
        raise ValueError(f"Unknown LOGLEVEL: {level}")
    logging.basicConfig(format="{levelname: <6} {name: <16} {message}",
                        level=level, style="{")


def unzlib(input_path: Path, output_path: Path = None) -> int:
    """
    Hexdump the decompressed contents of input_path.

    Args:
        input_path: zlib-compressed file
        output_path: File to create or truncate (None = stdout)

    Returns:
        Number of lines written
    """
    with ZlibReader.open(input_path) as reader:
        if output_path is None:
            lines = run(reader, sys.stdout.buffer)
            sys.stdout.buffer.flush()
        else:
            with open(output_path, 'wb') as f:
                lines = run(reader, f)
    _log.info('Dumped %s: %i lines', input_path, lines)
    return lines


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(
        prog='unzlib',
        description='Decompress a zlib file and print a hexdump of its contents')
    parser.add_argument('file', type=Path, help='zlib-compressed file to read')
    parser.add_argument('output', type=Path, nargs='?', default=None,
                        help='Write the hexdump here instead of stdout')

    args = parser.parse_args(argv)
    try:
        setup_logging()
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if not args.file.exists():
        print(f"Error: File not found: {args.file}", file=sys.stderr)
        return 1

    try:
        unzlib(args.file, args.output)
    except HexdumpError as e:
        _log.debug('Hexdump failed', exc_info=e.cause)
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except OSError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    return 0


if __name__ == '__main__':
    sys.exit(main())
