"""
Logging utilities for the to-do list.

The terminal belongs to the UI while the app runs, so console logging is
routed through an AppConsoleHandler:

- while an app is bound, records go to the Textual devtools console
  (`textual console`), never to the screen;
- with no app bound (startup, shutdown, tests), only WARNING and above are
  written to stderr.

A log file, when configured, receives every record at the configured level.
"""

from __future__ import annotations

import json
import logging
import logging.handlers
import sys
from datetime import datetime, timezone
from pathlib import Path
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from textual.app import App

ROOT_LOGGER_NAME = "todolist"

TEXT_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Attributes every LogRecord carries; anything else came in through `extra`
_STANDARD_ATTRS = frozenset(
    logging.LogRecord("", 0, "", 0, "", (), None).__dict__
) | {"message", "asctime", "taskName"}


class StructuredFormatter(logging.Formatter):
    """One JSON object per record, context fields included."""

    def format(self, record: logging.LogRecord) -> str:
        payload: dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created, timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        payload.update(
            (key, value)
            for key, value in record.__dict__.items()
            if key not in _STANDARD_ATTRS
        )
        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)
        return json.dumps(payload, default=str)


class AppConsoleHandler(logging.Handler):
    """Console handler that stays off the screen of a running app.

    Args:
        idle_level: Minimum level written to stderr while no app is bound.
    """

    def __init__(self, idle_level: int = logging.WARNING) -> None:
        super().__init__()
        self.idle_level = idle_level
        self._app: App[Any] | None = None

    @property
    def app(self) -> App[Any] | None:
        return self._app

    def bind(self, app: App[Any]) -> None:
        self._app = app

    def unbind(self, app: App[Any]) -> None:
        if self._app is app:
            self._app = None

    def emit(self, record: logging.LogRecord) -> None:
        try:
            message = self.format(record)
            if self._app is not None:
                self._app.log.logging(message)
            elif record.levelno >= self.idle_level:
                stream = sys.stderr
                stream.write(message + "\n")
                stream.flush()
        except Exception:
            self.handleError(record)


class ContextLogger(logging.LoggerAdapter):
    """
    Logger adapter that adds fixed context to every record.

    Usage:
        logger = get_logger("ui", screen="main")
        logger.info("Mounted")  # `screen` shows up in structured output
    """

    def process(self, msg: str, kwargs: Any) -> tuple[str, Any]:
        kwargs["extra"] = {**(self.extra or {}), **kwargs.get("extra", {})}
        return msg, kwargs


def _console_handler() -> AppConsoleHandler | None:
    for handler in logging.getLogger(ROOT_LOGGER_NAME).handlers:
        if isinstance(handler, AppConsoleHandler):
            return handler
    return None


def bind_app(app: App[Any]) -> None:
    """Send console logging to `app` until unbind_app is called."""
    handler = _console_handler()
    if handler is not None:
        handler.bind(app)


def unbind_app(app: App[Any]) -> None:
    """Return console logging to stderr (WARNING and above)."""
    handler = _console_handler()
    if handler is not None:
        handler.unbind(app)


def setup_logging(
    level: str = "INFO",
    log_format: str = "simple",
    log_file: str | Path | None = None,
    max_size_mb: int = 10,
    backup_count: int = 5,
) -> None:
    """
    Configure the `todolist` logger.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_format: "structured" for JSON lines, "simple" for text
        log_file: Optional file path; rotated after max_size_mb
        max_size_mb: Rotation size of the log file
        backup_count: Number of rotated files to keep
    """
    root_logger = logging.getLogger(ROOT_LOGGER_NAME)
    root_logger.setLevel(getattr(logging, level.upper()))
    for handler in list(root_logger.handlers):
        root_logger.removeHandler(handler)
        handler.close()

    formatter: logging.Formatter = (
        StructuredFormatter()
        if log_format == "structured"
        else logging.Formatter(TEXT_FORMAT, datefmt=DATE_FORMAT)
    )

    console_handler = AppConsoleHandler()
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.handlers.RotatingFileHandler(
            log_path,
            maxBytes=max_size_mb * 1024 * 1024,
            backupCount=backup_count,
            encoding="utf-8",
        )
        file_handler.setFormatter(formatter)
        root_logger.addHandler(file_handler)

    # asyncio chatter from the Textual event loop
    logging.getLogger("asyncio").setLevel(logging.WARNING)


def get_logger(name: str, **context: Any) -> ContextLogger:
    """Logger under `todolist.`, carrying `context` on every record."""
    full_name = name if name.startswith(ROOT_LOGGER_NAME) else f"{ROOT_LOGGER_NAME}.{name}"
    return ContextLogger(logging.getLogger(full_name), context)
