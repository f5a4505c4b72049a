from __future__ import annotations

import logging
import uuid
from datetime import datetime, timedelta

import typer

from .config import Settings, load_settings
from .domain.exceptions import ValueSourceError
from .domain.sequencing.sequences import ProgressionSequence
from .domain.sequencing.validators import DATETIME_FAILURE_MESSAGE, always_valid, strictly_increasing
from .infra.providers.clock_provider import SystemClockProvider
from .infra.providers.guid_provider import Uuid4Provider
from .infra.stubs.clock_stub import CurrentDateTimeProviderStub, add_step
from .loggingSetup import closeCommandLogger, createCommandLogger, logEvent, mapLogLevel

app = typer.Typer(no_args_is_help=True, add_completion=False)


def printRunHeader(runId: str, command: str, settings: Settings, sources: list[str]) -> None:
    """
    Назначение:
        Печатает сводку параметров запуска.
    """
    typer.echo(
        f"run_id={runId} command={command} "
        f"log_level={settings.log_level} log_dir={settings.log_dir} sources={sources}"
    )


def runWithLogger(ctx: typer.Context, commandName: str, runner) -> None:
    """
    Назначение:
        Унифицированная обвязка выполнения команд:
        - создаёт логгер + файл лога
        - печатает заголовок запуска
        - переводит ValueSourceError в exit code 1
        - гарантирует закрытие лога в finally

    Входные данные:
        ctx: typer.Context
        commandName: str
        runner: Callable[[logging.Logger], int]
    """
    runId = ctx.obj["runId"]
    settings: Settings = ctx.obj["settings"]
    sources = ctx.obj["sources"]

    logger, _logFilePath = createCommandLogger(
        commandName=commandName,
        logDir=settings.log_dir,
        runId=runId,
        logLevel=settings.log_level,
    )

    exitCode = 0
    try:
        logEvent(logger, logging.INFO, runId, "core", "Command started")
        printRunHeader(runId, commandName, settings, sources)
        try:
            exitCode = runner(logger)
        except ValueSourceError as exc:
            logEvent(logger, logging.ERROR, runId, "core", f"{exc.code.value}: {exc.message}")
            typer.echo(f"ERROR: {exc.code.value}: {exc.message}", err=True)
            exitCode = 1
        logEvent(logger, logging.INFO, runId, "core", f"Command finished exit_code={exitCode}")
    finally:
        closeCommandLogger(logger)

    if exitCode:
        raise typer.Exit(code=exitCode)


@app.callback()
def main(
    ctx: typer.Context,
    config: str | None = typer.Option(None, "--config", help="Path to config.yml"),
    runId: str | None = typer.Option(None, "--run-id", help="Run identifier (UUID). If omitted, generated."),
    logLevel: str | None = typer.Option(None, "--log-level", help="Log level: ERROR|WARN|INFO|DEBUG"),
    logDir: str | None = typer.Option(None, "--log-dir", help="Directory for logs."),
    datetimeFormat: str | None = typer.Option(None, "--datetime-format", help="strftime format for printed times"),
):
    """
    Назначение:
        Глобальная инициализация CLI:
        - генерирует/принимает run_id
        - загружает настройки (CLI > ENV > config > defaults)
        - сохраняет всё в ctx.obj для подкоманд
    """
    if not runId:
        runId = str(uuid.uuid4())

    cliOverrides = {
        "log_level": logLevel,
        "log_dir": logDir,
        "datetime_format": datetimeFormat,
    }

    try:
        loaded = load_settings(config, cliOverrides)
        mapLogLevel(loaded.settings.log_level)
    except ValueError as exc:
        typer.echo(f"ERROR: invalid settings: {exc}", err=True)
        raise typer.Exit(code=2)

    ctx.obj = {
        "runId": runId,
        "settings": loaded.settings,
        "sources": loaded.sources_used,
    }


@app.command("now")
def now(ctx: typer.Context):
    """Печатает текущее время системных часов."""
    settings: Settings = ctx.obj["settings"]

    def execute(logger: logging.Logger) -> int:
        value = SystemClockProvider().value
        typer.echo(value.strftime(settings.datetime_format))
        return 0

    runWithLogger(ctx, "now", execute)


@app.command("guid")
def guid(
    ctx: typer.Context,
    count: int = typer.Option(1, "--count", min=1, help="How many UUIDs to print"),
):
    """Печатает новые UUID4."""

    def execute(logger: logging.Logger) -> int:
        provider = Uuid4Provider()
        for _ in range(count):
            typer.echo(str(provider.value))
        logEvent(logger, logging.INFO, ctx.obj["runId"], "guid", f"Generated {count} UUIDs")
        return 0

    runWithLogger(ctx, "guid", execute)


@app.command("progression")
def progression(
    ctx: typer.Context,
    seed: str = typer.Option(..., "--seed", help="First value, ISO 8601 (e.g. 2020-10-01T12:00:00)"),
    stepMinutes: float = typer.Option(10.0, "--step-minutes", help="Step between values in minutes"),
    count: int = typer.Option(5, "--count", min=1, help="How many values to print"),
    strict: bool = typer.Option(True, "--strict/--no-strict", help="Require strictly increasing values"),
):
    """Печатает значения прогрессии времени, как их выдал бы CurrentDateTimeProviderStub."""
    settings: Settings = ctx.obj["settings"]
    runId = ctx.obj["runId"]

    try:
        seedValue = datetime.fromisoformat(seed)
    except ValueError:
        typer.echo(f"ERROR: invalid --seed: {seed}", err=True)
        raise typer.Exit(code=2)

    def execute(logger: logging.Logger) -> int:
        source = CurrentDateTimeProviderStub(
            ProgressionSequence(seedValue, timedelta(minutes=stepMinutes), add_step),
            strictly_increasing if strict else always_valid,
            DATETIME_FAILURE_MESSAGE,
            logger=logger,
            run_id=runId,
        )
        for _ in range(count):
            typer.echo(source.value.strftime(settings.datetime_format))
        logEvent(logger, logging.INFO, runId, "progression", f"Served {source.served_count} values")
        return 0

    runWithLogger(ctx, "progression", execute)
