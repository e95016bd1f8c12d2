"""Primary/fallback byte sink."""

from __future__ import annotations

import logging
import threading

from .base import ByteSink, write_all

logger = logging.getLogger(__name__)


class FallbackWriter:
    """Write to ``primary``; when that raises, write to ``fallback`` instead.

    The fallback's result replaces the primary's: its byte count is returned
    and its exception, if any, propagates. There is no third level. A short
    write counts as a failure on either branch.
    Concurrent writers are serialized so records never interleave.
    """

    def __init__(self, primary: ByteSink, fallback: ByteSink):
        self._primary = primary
        self._fallback = fallback
        self._lock = threading.Lock()

    @property
    def primary(self) -> ByteSink:
        return self._primary

    @property
    def fallback(self) -> ByteSink:
        return self._fallback

    def write(self, data: bytes) -> int:
        with self._lock:
            try:
                return write_all(self._primary, data)
            except Exception as e:
                logger.debug("Primary sink write failed, using fallback: %s", e)
                return write_all(self._fallback, data)

    def write_fallback(self, data: bytes) -> int:
        """Write directly to the fallback branch, bypassing the primary."""
        with self._lock:
            return write_all(self._fallback, data)
