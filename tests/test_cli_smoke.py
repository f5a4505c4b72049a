from __future__ import annotations

import uuid
from datetime import datetime
from pathlib import Path

from typer.testing import CliRunner

from determination.cli import app

runner = CliRunner()


def test_help_shows_commands():
    result = runner.invoke(app, ["--help"])
    assert result.exit_code == 0
    assert "now" in result.stdout
    assert "guid" in result.stdout
    assert "progression" in result.stdout


def test_now_prints_formatted_time(tmp_path: Path):
    result = runner.invoke(app, ["--log-dir", str(tmp_path), "--datetime-format", "%Y-%m-%d", "now"])

    assert result.exit_code == 0
    lines = result.stdout.strip().splitlines()
    datetime.strptime(lines[-1], "%Y-%m-%d")


def test_guid_prints_requested_count_and_writes_log(tmp_path: Path):
    result = runner.invoke(app, ["--log-dir", str(tmp_path), "--run-id", "r1", "guid", "--count", "3"])

    assert result.exit_code == 0
    lines = result.stdout.strip().splitlines()
    assert lines[0].startswith("run_id=r1 command=guid")
    guids = [uuid.UUID(line) for line in lines[1:]]
    assert len(set(guids)) == 3
    log_text = (tmp_path / "guid_r1.log").read_text(encoding="utf-8")
    assert "runId=r1 comp=guid msg=Generated 3 UUIDs" in log_text


def test_progression_prints_values(tmp_path: Path):
    result = runner.invoke(
        app,
        [
            "--log-dir", str(tmp_path),
            "--datetime-format", "%H:%M",
            "progression", "--seed", "2020-10-01T12:00:00", "--step-minutes", "10", "--count", "7",
        ],
    )

    assert result.exit_code == 0
    lines = result.stdout.strip().splitlines()[1:]
    assert lines == ["12:00", "12:10", "12:20", "12:30", "12:40", "12:50", "13:00"]


def test_progression_negative_step_fails_validation(tmp_path: Path):
    result = runner.invoke(
        app,
        [
            "--log-dir", str(tmp_path),
            "--run-id", "r2",
            "progression", "--seed", "2020-10-01T12:00:00", "--step-minutes", "-10", "--count", "2",
        ],
    )

    assert result.exit_code == 1
    assert "VALIDATION_FAILED: A new datetime value must be greater than the previous one." in result.output
    log_text = (tmp_path / "progression_r2.log").read_text(encoding="utf-8")
    assert "comp=source" in log_text


def test_progression_negative_step_without_strict(tmp_path: Path):
    result = runner.invoke(
        app,
        [
            "--log-dir", str(tmp_path),
            "--datetime-format", "%H:%M",
            "progression", "--seed", "2020-10-01T12:00:00", "--step-minutes", "-10", "--count", "2", "--no-strict",
        ],
    )

    assert result.exit_code == 0
    assert result.stdout.strip().splitlines()[1:] == ["12:00", "11:50"]


def test_progression_rejects_invalid_seed(tmp_path: Path):
    result = runner.invoke(app, ["--log-dir", str(tmp_path), "progression", "--seed", "yesterday"])

    assert result.exit_code == 2
    assert "invalid --seed" in result.output
