"""
Pull-based reader over a zlib-compressed stream.
"""

import logging
import zlib
from pathlib import Path
from typing import BinaryIO, Optional

from .errors import SourceReadError

_log = logging.getLogger(__name__)


class ZlibReader:
    """Reads decompressed bytes from a zlib stream without inflating it all at once."""

    def __init__(self, stream: BinaryIO, block_size: int = 8192):
        """
        Initialize zlib reader.

        Args:
            stream: Readable binary stream of compressed data
            block_size: Compressed bytes pulled from stream per refill
        """
        self.stream = stream
        self.block_size = block_size
        self._decompressor = zlib.decompressobj()
        self._owns_stream = False
        self._eof = False

    @classmethod
    def open(cls, file_path: Path, block_size: int = 8192) -> 'ZlibReader':
        """Open a compressed file; the reader closes it on exit."""
        reader = cls(open(Path(file_path), 'rb'), block_size)
        reader._owns_stream = True
        return reader

    def __enter__(self):
        """Context manager entry."""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Context manager exit."""
        self.close()

    def close(self) -> None:
        if self._owns_stream and self.stream:
            self.stream.close()
            self.stream = None

    def read(self, count: int) -> bytes:
        """
        Read up to count decompressed bytes.

        Returns fewer than count bytes only when the stream has ended, and
        b'' on every call after that.
        """
        data = bytearray()
        while len(data) < count and not self._eof:
            data += self._inflate(count - len(data))
        return bytes(data)

    def _inflate(self, wanted: int) -> bytes:
        d = self._decompressor
        # Pending input is drained before more is pulled from the stream
        compressed = d.unconsumed_tail
        if not compressed:
            compressed = self.stream.read(self.block_size)

        try:
            out = d.decompress(compressed, wanted)
        except zlib.error as e:
            self._eof = True
            raise SourceReadError(f"Invalid zlib data: {e}", e) from e

        if not compressed and not out and not d.eof:
            self._eof = True
            raise SourceReadError("Truncated zlib stream: input ended before end of data")

        if d.eof:
            self._eof = True
            if d.unused_data:
                _log.debug('Ignoring %i bytes after end of zlib stream', len(d.unused_data))
        return out
