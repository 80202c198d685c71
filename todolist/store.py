"""In-memory task store with change listeners."""

from __future__ import annotations

from collections.abc import Callable, Iterator, Sequence
from uuid import uuid4

from todolist.exceptions import DuplicateTaskIdError, TaskNotFoundError
from todolist.models import Task, TaskId, TaskStats
from todolist.utils.logging import get_logger

logger = get_logger("store")

Listener = Callable[[Sequence[Task]], None]


class TaskStore:
    """Ordered collection of tasks for the running process.

    All mutations are synchronous. After every mutation that changes the
    store, subscribed listeners receive the new snapshot in subscription
    order. Unknown ids are ignored rather than treated as errors; toggle and
    remove report whether a task matched.
    """

    def __init__(self, id_factory: Callable[[], TaskId] = uuid4) -> None:
        """Initialize an empty store.

        Args:
            id_factory: Produces a fresh id for each added task.
        """
        self._tasks: list[Task] = []
        self._issued: set[TaskId] = set()
        self._id_factory = id_factory
        self._listeners: list[Listener] = []

    # -------------------- listeners --------------------
    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register a change listener. Returns a callable that unsubscribes it."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _notify(self) -> None:
        snapshot = self.list()
        for listener in list(self._listeners):
            listener(snapshot)

    # -------------------- queries --------------------
    def list(self) -> tuple[Task, ...]:
        """Return a read-only snapshot in insertion order."""
        return tuple(self._tasks)

    def get(self, task_id: TaskId) -> Task:
        """Get a task by id."""
        index = self._index_of(task_id)
        if index is None:
            raise TaskNotFoundError(task_id)
        return self._tasks[index]

    @property
    def stats(self) -> TaskStats:
        return TaskStats(
            total=len(self._tasks),
            completed=sum(1 for task in self._tasks if task.completed),
        )

    def __len__(self) -> int:
        return len(self._tasks)

    def __iter__(self) -> Iterator[Task]:
        return iter(self.list())

    def __contains__(self, task_id: object) -> bool:
        return any(task.id == task_id for task in self._tasks)

    def _index_of(self, task_id: TaskId) -> int | None:
        for index, task in enumerate(self._tasks):
            if task.id == task_id:
                return index
        return None

    # -------------------- mutations --------------------
    def add(self, title: str) -> TaskId | None:
        """Append a new task. Blank titles are ignored and return None."""
        if not title or not title.strip():
            logger.debug("Ignoring blank title")
            return None

        task_id = self._id_factory()
        if task_id in self._issued:
            raise DuplicateTaskIdError(task_id)
        self._issued.add(task_id)

        task = Task(title=title, id=task_id)
        self._tasks.append(task)
        logger.info(f"Added task {task_id}: {task.title!r}")
        self._notify()
        return task_id

    def toggle(self, task_id: TaskId) -> bool:
        """Flip completion on the matching task. Returns False if absent."""
        index = self._index_of(task_id)
        if index is None:
            logger.debug(f"Toggle ignored, no task {task_id}")
            return False

        toggled = self._tasks[index].toggle_completed()
        self._tasks[index] = toggled
        logger.info(f"Toggled task {task_id} (completed={toggled.completed})")
        self._notify()
        return True

    def remove(self, task_id: TaskId) -> bool:
        """Remove the matching task. Returns False if absent."""
        index = self._index_of(task_id)
        if index is None:
            logger.debug(f"Remove ignored, no task {task_id}")
            return False

        del self._tasks[index]
        logger.info(f"Removed task {task_id}")
        self._notify()
        return True

    def clear_completed(self) -> int:
        """Remove every completed task. Returns how many were removed."""
        kept = [task for task in self._tasks if not task.completed]
        removed = len(self._tasks) - len(kept)
        if not removed:
            return 0

        self._tasks = kept
        logger.info(f"Cleared {removed} completed task(s)")
        self._notify()
        return removed
