"""Logger configuration with environment overrides."""

from __future__ import annotations

import os
from dataclasses import dataclass, replace

from .models import DEFAULT_PRIORITY, Priority

PRIORITY_ENV = "LOGHARBOUR_PRIORITY"


@dataclass(frozen=True, slots=True)
class LoggerConfig:
    # Initial threshold; also the default priority of emitted entries.
    priority: Priority = DEFAULT_PRIORITY


def resolve_logger_config(cfg: LoggerConfig | None) -> LoggerConfig:
    """Return config with optional env overrides applied."""
    if cfg is None:
        cfg = LoggerConfig()

    env = os.getenv(PRIORITY_ENV)
    if env is None or env.strip() == "":
        return cfg

    try:
        value = Priority.parse(env)
    except ValueError as exc:
        raise ValueError(f"{PRIORITY_ENV} is invalid: {exc}") from exc

    if value == cfg.priority:
        return cfg
    return replace(cfg, priority=value)
