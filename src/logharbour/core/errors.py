"""Exception types raised by the emission pipeline."""

from __future__ import annotations


class LogharbourError(Exception):
    """Base class for errors raised by logharbour itself."""


class EntryValidationError(LogharbourError, ValueError):
    """A validator rejected a log entry."""


class EntrySerializationError(LogharbourError, ValueError):
    """A log entry could not be encoded as a JSON line."""
