"""
Streaming hexdump formatter.

Pulls 16-byte chunks from a byte source and writes one line per chunk:

    00000000 61 62 63                                         |abc|
"""

import logging
from typing import BinaryIO, Protocol

from .errors import HexdumpError, SinkWriteError, SourceReadError

_log = logging.getLogger(__name__)

BYTES_PER_LINE = 16


class ByteSource(Protocol):
    def read(self, count: int) -> bytes: ...


def is_printable(byte: int) -> bool:
    """True for printable ASCII (0x20..0x7e)."""
    return 0x20 <= byte <= 0x7e


def format_line(chunk: bytes, offset: int) -> str:
    """
    Format one hexdump line.

    Args:
        chunk: 1 to 16 bytes
        offset: Label printed at the start of the line

    Returns:
        The line, including its trailing newline. The ASCII column starts at
        the same position whatever the chunk length.
    """
    if len(chunk) > BYTES_PER_LINE:
        raise ValueError(f"Expected at most {BYTES_PER_LINE} bytes, got {len(chunk)}")

    hex_str = ' '.join(f'{b:02x}' for b in chunk)
    padding = ' ' * ((BYTES_PER_LINE - len(chunk)) * 3)
    ascii_str = ''.join(chr(b) if is_printable(b) else '.' for b in chunk)

    return f"{offset & 0xffffffff:08x} {hex_str}{padding}  |{ascii_str}|\n"


def run(source: ByteSource, sink: BinaryIO) -> int:
    """
    Dump everything readable from source into sink.

    Args:
        source: Object with read(count) returning bytes, b'' at end of stream
        sink: Binary writable object

    Returns:
        Number of lines written

    Raises:
        SourceReadError: source.read failed
        SinkWriteError: sink.write failed
    """
    offset = 0
    lines = 0

    while True:
        try:
            chunk = source.read(BYTES_PER_LINE)
        except HexdumpError:
            raise
        except Exception as e:
            raise SourceReadError(f"Failed to read input at offset {offset:#x}: {e}", e) from e

        if not chunk:
            break

        line = format_line(chunk, offset)
        try:
            sink.write(line.encode('ascii'))
        except HexdumpError:
            raise
        except Exception as e:
            raise SinkWriteError(f"Failed to write output at offset {offset:#x}: {e}", e) from e

        # Fixed stride, even for a short final chunk
        offset += BYTES_PER_LINE
        lines += 1

    _log.debug('Wrote %i lines', lines)
    return lines
