"""Widgets for the task screen.

Rows get a read-only Task and post messages upward. They never touch the
store; the app turns their messages into store mutations.
"""

from __future__ import annotations

from rich.text import Text
from textual.app import ComposeResult
from textual.containers import Horizontal, VerticalScroll
from textual.message import Message
from textual.reactive import reactive
from textual.widgets import Button, Label, Static

from todolist.display import status_icon
from todolist.models import Task, TaskId

DELETE_ICON = "🗑"


def row_id(task_id: TaskId) -> str:
    """DOM id of the row showing a task."""
    return f"task-{task_id.hex}"


def title_text(task: Task) -> Text:
    """Task title, struck through once completed."""
    return Text(task.title, style="strike dim" if task.completed else "")


class TaskRow(Horizontal):
    """One task: completion button, title, delete button."""

    DEFAULT_CSS = """
    TaskRow {
        height: auto;
        padding: 0 1;
    }
    TaskRow .title {
        width: 1fr;
        padding: 1 1 0 1;
    }
    TaskRow Button {
        min-width: 5;
    }
    """

    class Toggled(Message):
        """Completion button was pressed."""

        def __init__(self, task_id: TaskId) -> None:
            self.task_id = task_id
            super().__init__()

    class Deleted(Message):
        """Delete button was pressed."""

        def __init__(self, task_id: TaskId) -> None:
            self.task_id = task_id
            super().__init__()

    def __init__(self, record: Task) -> None:
        super().__init__(
            id=row_id(record.id),
            classes="completed" if record.completed else None,
        )
        self.record = record

    def compose(self) -> ComposeResult:
        yield Button(status_icon(self.record), classes="toggle")
        yield Label(title_text(self.record), classes="title")
        yield Button(DELETE_ICON, classes="delete", variant="error")

    def on_button_pressed(self, event: Button.Pressed) -> None:
        event.stop()
        if event.button.has_class("toggle"):
            self.post_message(self.Toggled(self.record.id))
        elif event.button.has_class("delete"):
            self.post_message(self.Deleted(self.record.id))


class TaskList(VerticalScroll):
    """Renders a store snapshot; assigning a new snapshot rebuilds the rows."""

    snapshot: reactive[tuple[Task, ...]] = reactive((), recompose=True)

    def compose(self) -> ComposeResult:
        if not self.snapshot:
            yield Static("No tasks yet. Add one above.", id="empty")
            return
        for task in self.snapshot:
            yield TaskRow(task)
