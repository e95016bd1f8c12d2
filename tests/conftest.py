from __future__ import annotations

import io
import json
from collections.abc import Callable
from typing import Any

import pytest

from logharbour.core.models import Entry


class FailingSink:
    """Byte sink whose writes always raise."""

    def __init__(self, message: str = "primary writer failed") -> None:
        self.message = message
        self.calls = 0

    def write(self, data: bytes) -> int:
        self.calls += 1
        raise OSError(self.message)


class RecordingValidator:
    """Validator that records every entry it sees and optionally rejects."""

    def __init__(self, reject: bool = False) -> None:
        self.reject = reject
        self.seen: list[Entry] = []

    def validate(self, entry: Entry) -> None:
        self.seen.append(entry)
        if self.reject:
            raise ValueError("entry rejected")


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("LOGHARBOUR_PRIORITY", raising=False)


@pytest.fixture
def hostname() -> Callable[[], str]:
    return lambda: "test-host"


@pytest.fixture
def buffer() -> io.BytesIO:
    return io.BytesIO()


@pytest.fixture
def make_failing_sink() -> type[FailingSink]:
    return FailingSink


@pytest.fixture
def failing_sink() -> FailingSink:
    return FailingSink()


@pytest.fixture
def make_validator() -> type[RecordingValidator]:
    return RecordingValidator


@pytest.fixture
def read_records() -> Callable[[io.BytesIO], list[dict[str, Any]]]:
    def _read(buf: io.BytesIO) -> list[dict[str, Any]]:
        text = buf.getvalue().decode("utf-8")
        return [json.loads(line) for line in text.splitlines() if line]

    return _read
