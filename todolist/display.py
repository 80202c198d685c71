"""Plain-text formatting for task output."""

from collections.abc import Sequence
from datetime import datetime

from tabulate import tabulate

from todolist.models import Task, TaskStats

CHECKED_ICON = "✓"
UNCHECKED_ICON = "○"


def status_icon(task: Task) -> str:
    """Icon for the task's completion state."""
    return CHECKED_ICON if task.completed else UNCHECKED_ICON


def format_tasks_table(tasks: Sequence[Task]) -> str:
    """Format tasks as a table string."""
    if not tasks:
        return "No tasks."

    headers = ["#", "Done", "Title", "Created"]
    rows = [
        [
            position,
            CHECKED_ICON if task.completed else "",
            _truncate(task.title, 50),
            _format_date(task.created_at),
        ]
        for position, task in enumerate(tasks, start=1)
    ]
    return tabulate(rows, headers=headers, tablefmt="simple")


def format_stats(stats: TaskStats) -> str:
    """One-line summary, e.g. '3 tasks, 1 done, 2 remaining'."""
    noun = "task" if stats.total == 1 else "tasks"
    return f"{stats.total} {noun}, {stats.completed} done, {stats.remaining} remaining"


def _truncate(text: str, max_len: int) -> str:
    """Truncate text with ellipsis if too long."""
    if len(text) <= max_len:
        return text
    return text[: max_len - 1] + "…"


def _format_date(dt: datetime | None) -> str:
    if dt is None:
        return ""
    return dt.strftime("%Y-%m-%d %H:%M")
