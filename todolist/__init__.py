"""To-do list - add, complete and delete tasks in a terminal UI."""

__version__ = "0.1.0"

from todolist.models import Task, TaskId, TaskStats  # noqa: E402
from todolist.store import TaskStore  # noqa: E402

__all__ = ["Task", "TaskId", "TaskStats", "TaskStore", "__version__"]
