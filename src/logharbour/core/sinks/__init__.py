"""Byte sinks that log entries are written to."""

from __future__ import annotations

from .base import ByteSink, ShortWriteError, write_all
from .fallback import FallbackWriter
from .file import FileSink

__all__ = [
    "ByteSink",
    "FallbackWriter",
    "FileSink",
    "ShortWriteError",
    "write_all",
]
