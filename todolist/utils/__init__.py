"""Shared utilities."""

from todolist.utils.logging import bind_app, get_logger, setup_logging, unbind_app

__all__ = ["bind_app", "get_logger", "setup_logging", "unbind_app"]
