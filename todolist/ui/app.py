"""Single-screen to-do application."""

from __future__ import annotations

from collections.abc import Callable, Sequence

from textual import on
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal
from textual.widgets import Button, Footer, Header, Input

from todolist.config import Settings
from todolist.display import format_stats
from todolist.models import Task
from todolist.store import TaskStore
from todolist.ui.widgets import TaskList, TaskRow
from todolist.utils.logging import bind_app, get_logger, unbind_app

logger = get_logger("ui")


class TodoApp(App[None]):
    """Input bar on top, task rows below.

    The store is the single source of truth. Gestures become store calls;
    the store's listener pushes each new snapshot into the TaskList.
    """

    CSS = """
    #new-task-bar {
        height: auto;
        padding: 1 1 0 1;
    }
    #new-task {
        width: 1fr;
    }
    #empty {
        padding: 1 2;
        text-style: italic;
    }
    """

    BINDINGS = [
        Binding("ctrl+l", "clear_completed", "Clear completed", priority=True),
        Binding("ctrl+q", "quit", "Quit"),
    ]

    def __init__(
        self,
        store: TaskStore | None = None,
        settings: Settings | None = None,
    ) -> None:
        super().__init__()
        self.settings = settings or Settings()
        self.store = store if store is not None else TaskStore()
        self.title = self.settings.app.title
        self._unsubscribe: Callable[[], None] | None = None

    def compose(self) -> ComposeResult:
        yield Header()
        with Horizontal(id="new-task-bar"):
            yield Input(placeholder=self.settings.app.placeholder, id="new-task")
            yield Button("+", id="add-task", variant="primary")
        yield TaskList(id="tasks")
        yield Footer()

    def on_mount(self) -> None:
        bind_app(self)
        self._unsubscribe = self.store.subscribe(self._render_tasks)
        self._render_tasks(self.store.list())
        self.query_one("#new-task", Input).focus()

    def on_unmount(self) -> None:
        if self._unsubscribe is not None:
            self._unsubscribe()
            self._unsubscribe = None
        unbind_app(self)

    def _render_tasks(self, snapshot: Sequence[Task]) -> None:
        self.query_one(TaskList).snapshot = tuple(snapshot)
        self.sub_title = format_stats(self.store.stats)

    # -------------------- gestures --------------------
    @on(Input.Submitted, "#new-task")
    @on(Button.Pressed, "#add-task")
    def submit_new_task(self) -> None:
        """Add the typed title; the field keeps its text if nothing was added."""
        field = self.query_one("#new-task", Input)
        if self.store.add(field.value) is None:
            logger.debug("Submission ignored, title is blank")
            return
        field.value = ""

    def on_task_row_toggled(self, message: TaskRow.Toggled) -> None:
        self.store.toggle(message.task_id)

    def on_task_row_deleted(self, message: TaskRow.Deleted) -> None:
        self.store.remove(message.task_id)

    def action_clear_completed(self) -> None:
        self.store.clear_completed()
