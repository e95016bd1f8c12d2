"""Host and call-site introspection used to enrich entries."""

from __future__ import annotations

import platform
import socket
import sys
import traceback
from collections.abc import Callable

UNKNOWN_SYSTEM = "unknown"


def system_name(supplier: Callable[[], str] | None = None) -> str:
    """Return the host name, or ``"unknown"`` if it cannot be determined."""
    if supplier is None:
        supplier = socket.gethostname
    try:
        host = supplier()
    except Exception:
        return UNKNOWN_SYSTEM
    return host or UNKNOWN_SYSTEM


def runtime_version() -> str:
    """Interpreter name and version, e.g. ``CPython 3.12.4``."""
    return f"{platform.python_implementation()} {platform.python_version()}"


def caller_location(skip: int) -> tuple[str, int, str, str]:
    """Describe the frame ``skip`` levels above this function.

    Returns ``(file_name, line_number, function_name, stack_trace)``. When the
    stack is shallower than ``skip`` every field is left empty.
    """
    try:
        frame = sys._getframe(skip + 1)
    except ValueError:
        return "", 0, "", ""

    stack = "".join(traceback.format_stack(frame))
    code = frame.f_code
    return code.co_filename, frame.f_lineno, code.co_name, stack
