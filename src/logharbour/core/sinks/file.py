"""Append-only file sink."""

from __future__ import annotations

import threading
from pathlib import Path
from types import TracebackType


class FileSink:
    """Byte sink that appends to a file, flushing after every write.

    Each JSON line written by the logger arrives in a single ``write`` call,
    so a flushed file is always a sequence of complete records.
    """

    def __init__(self, path: str | Path):
        self._path = Path(path)
        self._lock = threading.Lock()

        self._path.parent.mkdir(parents=True, exist_ok=True)
        self._file = open(self._path, "ab")

    @property
    def path(self) -> Path:
        return self._path

    @property
    def closed(self) -> bool:
        return self._file.closed

    def write(self, data: bytes) -> int:
        with self._lock:
            n = self._file.write(data)
            self._file.flush()
            return n

    def close(self) -> None:
        with self._lock:
            self._file.close()

    def __enter__(self) -> FileSink:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()
