"""
Error types raised while producing a hexdump.
"""

from typing import Optional


class HexdumpError(Exception):
    """Base error for a failed hexdump run."""

    def __init__(self, message: str, cause: Optional[BaseException] = None):
        super().__init__(message)
        self.message = message
        self.cause = cause

    def __str__(self) -> str:
        return self.message


class SourceReadError(HexdumpError):
    """The byte source failed (bad compressed data, truncation, I/O)."""


class SinkWriteError(HexdumpError):
    """The output sink could not accept bytes (disk full, broken pipe)."""
