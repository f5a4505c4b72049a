from __future__ import annotations

from typer.testing import CliRunner

from determination.cli import app
from determination.config import Settings, load_settings

runner = CliRunner()


def test_defaults_without_sources(monkeypatch):
    for name in ("DETERMINATION_LOG_DIR", "DETERMINATION_LOG_LEVEL", "DETERMINATION_DATETIME_FORMAT"):
        monkeypatch.delenv(name, raising=False)

    loaded = load_settings(None, {})

    assert loaded.settings == Settings()
    assert loaded.sources_used == []


def test_priority_cli_over_env_over_config(tmp_path, monkeypatch):
    cfg = tmp_path / "config.yml"
    cfg.write_text(
        "\n".join([
            f'log_dir: "{tmp_path / "cfg_logs"}"',
            'log_level: "ERROR"',
            'datetime_format: "%Y"',
        ]),
        encoding="utf-8",
    )

    # ENV overrides config
    monkeypatch.setenv("DETERMINATION_LOG_LEVEL", "DEBUG")
    monkeypatch.setenv("DETERMINATION_DATETIME_FORMAT", "%Y/%m")

    # CLI overrides env
    loaded = load_settings(str(cfg), {"datetime_format": "%Y/%m/%d", "log_dir": None})

    assert loaded.settings.log_dir == str(tmp_path / "cfg_logs")
    assert loaded.settings.log_level == "DEBUG"
    assert loaded.settings.datetime_format == "%Y/%m/%d"
    assert loaded.sources_used == ["config", "env", "cli"]


def test_missing_config_file_is_ignored(tmp_path, monkeypatch):
    monkeypatch.delenv("DETERMINATION_LOG_LEVEL", raising=False)

    loaded = load_settings(str(tmp_path / "absent.yml"), {})

    assert "config" not in loaded.sources_used


def test_cli_reports_config_sources(tmp_path, monkeypatch):
    monkeypatch.setenv("DETERMINATION_LOG_LEVEL", "WARN")

    result = runner.invoke(app, ["--log-dir", str(tmp_path), "guid"])

    assert result.exit_code == 0
    assert "log_level=WARN" in result.stdout
    assert "sources=['env', 'cli']" in result.stdout


def test_cli_rejects_unknown_log_level(tmp_path):
    result = runner.invoke(app, ["--log-dir", str(tmp_path), "--log-level", "LOUD", "guid"])

    assert result.exit_code == 2
    assert "invalid settings" in result.output
