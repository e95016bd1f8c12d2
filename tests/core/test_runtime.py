from __future__ import annotations

import platform
from pathlib import Path

from logharbour.core.runtime import caller_location, runtime_version, system_name


def test_system_name_uses_supplier() -> None:
    assert system_name(lambda: "web-01") == "web-01"


def test_system_name_unknown_on_failure() -> None:
    def broken() -> str:
        raise OSError("no hostname")

    assert system_name(broken) == "unknown"
    assert system_name(lambda: "") == "unknown"


def test_caller_location_reports_calling_frame() -> None:
    def helper():
        return caller_location(1)

    file_name, line_number, function_name, stack = helper()

    assert Path(file_name).name == Path(__file__).name
    assert function_name == "test_caller_location_reports_calling_frame"
    assert line_number > 0
    assert "test_caller_location_reports_calling_frame" in stack


def test_caller_location_too_deep_is_empty() -> None:
    assert caller_location(10_000) == ("", 0, "", "")


def test_runtime_version_names_interpreter() -> None:
    assert runtime_version() == f"{platform.python_implementation()} {platform.python_version()}"


def test_system_name_unknown_on_any_supplier_error() -> None:
    def broken() -> str:
        raise RuntimeError("no host")

    assert system_name(broken) == "unknown"
