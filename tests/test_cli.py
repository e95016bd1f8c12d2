from __future__ import annotations

import json
from pathlib import Path

import pytest

from logharbour.cli import main


def _records(path: Path) -> list[dict]:
    return [json.loads(line) for line in path.read_text(encoding="utf-8").splitlines()]


def test_demo_writes_to_primary_file(tmp_path: Path) -> None:
    out = tmp_path / "logs" / "demo.jsonl"

    assert main(["--app", "DemoApp", "--primary", str(out)]) == 0

    records = _records(out)
    assert [r["Type"] for r in records] == ["Activity", "Change", "Debug", "Debug", "Debug"]
    assert {r["AppName"] for r in records} == {"DemoApp"}
    assert records[1]["Who"] == "john"
    assert records[-1]["Data"]["functionName"] == "_inner"
    assert records[-1]["Data"]["variables"] == {"innerVar": "innerValue"}


def test_demo_respects_priority_flag(tmp_path: Path) -> None:
    out = tmp_path / "demo.jsonl"

    assert main(["--primary", str(out), "--priority", "Sec"]) == 0

    assert {r["Priority"] for r in _records(out)} == {"Sec", "Debug2"}


def test_invalid_priority_flag_exits(capsys: pytest.CaptureFixture[str]) -> None:
    with pytest.raises(SystemExit) as excinfo:
        main(["--priority", "loud"])

    assert excinfo.value.code == 2
    assert "Unknown priority" in capsys.readouterr().err


def test_invalid_env_priority_reports_error(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    monkeypatch.setenv("LOGHARBOUR_PRIORITY", "loud")

    assert main(["--primary", str(tmp_path / "demo.jsonl")]) == 2
    assert "LOGHARBOUR_PRIORITY" in capsys.readouterr().err
