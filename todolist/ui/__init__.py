"""Terminal user interface built on Textual."""

from todolist.ui.app import TodoApp
from todolist.ui.widgets import TaskList, TaskRow

__all__ = ["TaskList", "TaskRow", "TodoApp"]
