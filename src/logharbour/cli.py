"""Demonstration program.

Emits a short sequence of activity, data-change and debug entries so the
wire format and the priority controls can be inspected:

    python -m logharbour --app MyApp
    python -m logharbour --primary logs/app.jsonl --priority Debug0
"""

from __future__ import annotations

import argparse
import logging
import os
import sys
from collections.abc import Sequence

from logharbour.core.logger import Logger, new_logger_with_fallback
from logharbour.core.models import ChangeInfo, DebugInfo, Priority
from logharbour.core.sinks import ByteSink, FallbackWriter, FileSink

LOGGER = logging.getLogger(__name__)


def _configure_logging() -> None:
    """Route library diagnostics to stderr at LOGHARBOUR_LOG_LEVEL."""
    level_name = os.getenv("LOGHARBOUR_LOG_LEVEL", "WARNING").upper()
    level = getattr(logging, level_name, logging.WARNING)
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def _parse_priority(s: str) -> Priority:
    try:
        return Priority.parse(s)
    except ValueError as e:
        raise argparse.ArgumentTypeError(str(e)) from e


def _inner(log: Logger) -> None:
    log.log_debug("Debugging inner function", DebugInfo(variables={"innerVar": "innerValue"}))


def _outer(log: Logger) -> None:
    _inner(log)


def run_demo(log: Logger) -> None:
    """Emit the demo sequence through ``log``."""
    log.log_activity("User logged in", {"username": "john"})

    log.with_who("john").with_op("Update").log_data_change(
        "User updated profile",
        ChangeInfo(entity="User", operation="Update", changes={"email": "john@example.com"}),
    )

    log.log_debug("Debugging user session", DebugInfo(variables={"sessionID": "12345"}))

    # Raise verbosity at runtime on the same instance.
    log.change_priority(Priority.DEBUG2)

    log.log_debug(
        "Detailed debugging info",
        DebugInfo(variables={"sessionID": "12345", "userID": "john"}),
    )
    _outer(log)


def main(argv: Sequence[str] | None = None) -> int:
    p = argparse.ArgumentParser(description="Emit sample structured log entries.")
    p.add_argument("--app", default="MyApp", help="Application name stamped on entries")
    p.add_argument(
        "--priority",
        type=_parse_priority,
        default=None,
        help="Initial threshold (Debug2..Sec). Default: LOGHARBOUR_PRIORITY or Info",
    )
    p.add_argument(
        "--primary",
        default=None,
        help="Append entries to this file (default: stdout). Stdout is always the fallback.",
    )
    args = p.parse_args(argv)

    _configure_logging()

    stdout: ByteSink = sys.stdout.buffer
    file_sink = FileSink(args.primary) if args.primary else None
    writer = FallbackWriter(file_sink or stdout, stdout)

    try:
        log = new_logger_with_fallback(args.app, writer)
        if args.priority is not None:
            log.change_priority(args.priority)
        LOGGER.debug("Demo logger ready (app=%s, priority=%s)", args.app, log.priority)
        run_demo(log)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2
    finally:
        if file_sink is not None:
            file_sink.close()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
