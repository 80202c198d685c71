"""
Custom exceptions for the to-do list.

Exception hierarchy:
- TodoListError (base)
  - TaskNotFoundError
  - InvalidTitleError
  - DuplicateTaskIdError
  - ConfigurationError
"""

from __future__ import annotations

from typing import Any


class TodoListError(Exception):
    """
    Base exception for all to-do list errors.

    Attributes:
        message: Human-readable error description
        details: Additional context for debugging
    """

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to dictionary for logging."""
        return {
            "error_type": self.__class__.__name__,
            "message": self.message,
            "details": self.details,
        }


class TaskNotFoundError(TodoListError):
    """Raised when a task id is not in the store."""

    def __init__(self, task_id: Any) -> None:
        super().__init__(f"Task {task_id} not found", {"task_id": str(task_id)})
        self.task_id = task_id


class InvalidTitleError(TodoListError, ValueError):
    """Task title is empty or whitespace-only."""

    def __init__(self, title: str) -> None:
        super().__init__("Title cannot be empty", {"title": title})
        self.title = title


class DuplicateTaskIdError(TodoListError):
    """An id was issued twice."""

    def __init__(self, task_id: Any) -> None:
        super().__init__(f"Task id {task_id} was already issued", {"task_id": str(task_id)})
        self.task_id = task_id


class ConfigurationError(TodoListError):
    """Invalid or missing configuration."""

    def __init__(
        self,
        message: str,
        config_key: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        details = details or {}
        if config_key:
            details["config_key"] = config_key
        super().__init__(message, details)
        self.config_key = config_key
