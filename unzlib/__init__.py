"""
Decompress zlib data and print it as a canonical hexdump.
"""

from .errors import HexdumpError, SinkWriteError, SourceReadError
from .hexdump import BYTES_PER_LINE, format_line, is_printable, run
from .zlib_reader import ZlibReader

__all__ = (
    'BYTES_PER_LINE',
    'HexdumpError',
    'SinkWriteError',
    'SourceReadError',
    'ZlibReader',
    'format_line',
    'is_printable',
    'run',
)
