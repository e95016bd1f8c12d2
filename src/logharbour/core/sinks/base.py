"""Byte sink interface."""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class ByteSink(Protocol):
    """Append-capable destination: console stream, file, socket wrapper, ...

    ``write`` returns the number of bytes written and raises on failure.
    Binary file objects (``sys.stdout.buffer``, ``open(path, "ab")``,
    ``io.BytesIO``) satisfy this protocol as-is.
    """

    def write(self, data: bytes) -> int:
        """Write ``data`` and return the number of bytes written."""
        ...


class ShortWriteError(OSError):
    """A sink accepted fewer bytes than it was given."""


def write_all(sink: ByteSink, data: bytes) -> int:
    """Write ``data`` to ``sink``, raising ShortWriteError on a partial write."""
    n = sink.write(data)
    if n is not None and n < len(data):
        raise ShortWriteError(f"short write: {n} of {len(data)} bytes")
    return n
