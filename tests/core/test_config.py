from __future__ import annotations

import pytest

from logharbour.core.config import LoggerConfig, resolve_logger_config
from logharbour.core.models import Priority


def test_default_config() -> None:
    assert resolve_logger_config(None).priority is Priority.INFO


def test_env_overrides_priority(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("LOGHARBOUR_PRIORITY", "debug1")

    cfg = resolve_logger_config(LoggerConfig(priority=Priority.WARN))

    assert cfg.priority is Priority.DEBUG1


def test_invalid_env_raises(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("LOGHARBOUR_PRIORITY", "loud")

    with pytest.raises(ValueError, match="LOGHARBOUR_PRIORITY"):
        resolve_logger_config(None)
