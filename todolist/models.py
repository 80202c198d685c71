"""Task model and related types."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from datetime import datetime
from uuid import UUID, uuid4

from todolist.exceptions import InvalidTitleError

TaskId = UUID


@dataclass(frozen=True)
class Task:
    """Immutable task representation.

    Attributes:
        title: Display text (required, non-blank).
        completed: Completion status.
        id: Unique task identifier, never reused.
        created_at: Creation timestamp.
    """

    title: str
    completed: bool = False
    id: TaskId = field(default_factory=uuid4)
    created_at: datetime = field(default_factory=datetime.now, compare=False)

    def __post_init__(self) -> None:
        """Validate task data."""
        if not self.title or not self.title.strip():
            raise InvalidTitleError(self.title)

    def toggle_completed(self) -> Task:
        """Return a copy with the completion status flipped."""
        return replace(self, completed=not self.completed)


@dataclass(frozen=True)
class TaskStats:
    """Counts over a store snapshot."""

    total: int = 0
    completed: int = 0

    @property
    def remaining(self) -> int:
        return self.total - self.completed
