"""
CLI for the to-do list.

Launches the terminal UI. Tasks live only for the lifetime of the process;
--summary prints what was left on the list when the app closes.
"""

from __future__ import annotations

from pathlib import Path

import typer
from rich.console import Console
from rich.markup import escape

from todolist import __version__
from todolist.config import VALID_LOG_LEVELS, Settings, get_settings
from todolist.display import format_stats, format_tasks_table
from todolist.exceptions import ConfigurationError
from todolist.store import TaskStore
from todolist.ui import TodoApp
from todolist.utils.logging import get_logger, setup_logging

app = typer.Typer(
    name="todolist",
    help="Single-screen to-do list: add, complete and delete tasks.",
    add_completion=False,
)

console = Console()
logger = get_logger("cli")


def _version_callback(value: bool) -> None:
    if value:
        console.print(f"todolist {__version__}")
        raise typer.Exit()


def _load_settings(config: Path | None, log_level: str | None, summary: bool | None) -> Settings:
    """Settings from file/environment with command line overrides applied."""
    settings = Settings.from_yaml(config) if config else get_settings()

    if log_level is not None:
        if log_level.upper() not in VALID_LOG_LEVELS:
            raise ConfigurationError(f"Invalid log level: {log_level}", config_key="log_level")
        settings = settings.model_copy(update={"log_level": log_level.upper()})

    if summary is not None:
        app_config = settings.app.model_copy(update={"show_summary": summary})
        settings = settings.model_copy(update={"app": app_config})

    return settings


@app.command()
def run(
    config: Path | None = typer.Option(
        None,
        "--config",
        "-c",
        help="Path to a YAML config file",
        exists=True,
        dir_okay=False,
    ),
    log_level: str | None = typer.Option(
        None,
        "--log-level",
        "-l",
        help="DEBUG, INFO, WARNING, ERROR or CRITICAL",
    ),
    summary: bool | None = typer.Option(
        None,
        "--summary/--no-summary",
        help="Print the remaining tasks on exit",
    ),
    version: bool = typer.Option(
        False,
        "--version",
        help="Show the version and exit",
        callback=_version_callback,
        is_eager=True,
    ),
) -> None:
    """
    Open the to-do list.

    Examples:
        todolist                         # Start with an empty list
        todolist --summary               # Print the list on exit
        todolist -c configs/todolist.yaml -l DEBUG
    """
    try:
        settings = _load_settings(config, log_level, summary)
    except ConfigurationError as e:
        console.print(f"[red]Configuration error: {escape(str(e))}[/red]")
        raise typer.Exit(1) from None

    setup_logging(
        level=settings.effective_log_level,
        log_format=settings.logging.format,
        log_file=settings.logging.file_path or None,
        max_size_mb=settings.logging.max_size_mb,
        backup_count=settings.logging.backup_count,
    )

    store = TaskStore()
    logger.info("Starting to-do list")
    TodoApp(store=store, settings=settings).run()
    logger.info(f"Exited with {len(store)} task(s)")

    if settings.app.show_summary:
        console.print(f"[bold]{escape(settings.app.title)}[/bold]: {format_stats(store.stats)}")
        console.print(format_tasks_table(store.list()), markup=False, highlight=False)
