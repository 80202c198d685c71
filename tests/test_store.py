"""Tests for TaskStore."""

from uuid import UUID, uuid4

import pytest

from todolist.exceptions import DuplicateTaskIdError, TaskNotFoundError
from todolist.models import TaskStats
from todolist.store import TaskStore


class TestAdd:
    """Tests for adding tasks."""

    @pytest.mark.parametrize("title", ["Buy milk", "x", "Call mum at 5pm", "日本語"])
    def test_add_grows_by_one(self, store, title):
        before = len(store)
        task_id = store.add(title)

        assert len(store) == before + 1
        task = store.get(task_id)
        assert task.title == title
        assert task.completed is False

    @pytest.mark.parametrize("title", ["", " ", "\t\n", "    "])
    def test_blank_title_ignored(self, store, title):
        assert store.add(title) is None
        assert len(store) == 0

    def test_title_kept_as_typed(self, store):
        task_id = store.add("  indented ")
        assert store.get(task_id).title == "  indented "

    def test_insertion_order(self, store):
        store.add("First")
        store.add("Second")
        store.add("Third")

        assert [task.title for task in store.list()] == ["First", "Second", "Third"]

    def test_ids_unique(self):
        store = TaskStore()
        ids = {store.add(f"Task {n}") for n in range(50)}
        assert len(ids) == 50

    def test_ids_never_reused_after_remove(self, store):
        first = store.add("First")
        store.remove(first)
        second = store.add("Second")

        assert second != first

    def test_duplicate_id_from_factory_raises(self):
        fixed = uuid4()
        store = TaskStore(id_factory=lambda: fixed)
        store.add("First")

        with pytest.raises(DuplicateTaskIdError):
            store.add("Second")
        assert len(store) == 1


class TestToggle:
    """Tests for toggling completion."""

    def test_toggle_flips(self, store):
        task_id = store.add("Toggle me")

        assert store.toggle(task_id) is True
        assert store.get(task_id).completed is True

    def test_toggle_twice_restores(self, store):
        task_id = store.add("Toggle me")
        store.toggle(task_id)
        store.toggle(task_id)

        assert store.get(task_id).completed is False

    def test_toggle_keeps_position(self, populated_store):
        first = populated_store.list()[0]
        populated_store.toggle(first.id)

        assert populated_store.list()[0].id == first.id

    def test_toggle_missing_is_noop(self, populated_store):
        before = populated_store.list()

        assert populated_store.toggle(UUID(int=999)) is False
        assert populated_store.list() == before


class TestRemove:
    """Tests for removing tasks."""

    def test_remove_present(self, populated_store):
        target = populated_store.list()[1]

        assert populated_store.remove(target.id) is True
        assert len(populated_store) == 2
        assert target.id not in populated_store

    def test_remove_missing_is_noop(self, populated_store):
        before = populated_store.list()

        assert populated_store.remove(UUID(int=999)) is False
        assert populated_store.list() == before

    def test_remove_twice(self, store):
        task_id = store.add("Once")

        assert store.remove(task_id) is True
        assert store.remove(task_id) is False
        assert len(store) == 0


class TestQueries:
    """Tests for read access."""

    def test_list_empty(self, store):
        assert store.list() == ()

    def test_list_is_snapshot(self, store):
        store.add("Buy milk")
        snapshot = store.list()
        store.add("Walk dog")

        assert len(snapshot) == 1
        assert isinstance(snapshot, tuple)

    def test_get_not_found(self, store):
        with pytest.raises(TaskNotFoundError):
            store.get(UUID(int=42))

    def test_stats(self, populated_store):
        assert populated_store.stats == TaskStats(total=3, completed=1)
        assert populated_store.stats.remaining == 2

    def test_iteration(self, populated_store):
        titles = [task.title for task in populated_store]
        assert titles == ["Buy milk", "Walk dog", "Water plants"]


class TestClearCompleted:
    """Tests for clear_completed."""

    def test_clears_only_completed(self, populated_store):
        assert populated_store.clear_completed() == 1
        assert [task.title for task in populated_store] == ["Buy milk", "Water plants"]

    def test_nothing_to_clear(self, store):
        store.add("Open")
        assert store.clear_completed() == 0
        assert len(store) == 1


class TestListeners:
    """Tests for change notification."""

    def test_listener_receives_snapshot(self, store):
        received = []
        store.subscribe(received.append)

        task_id = store.add("Buy milk")
        store.toggle(task_id)
        store.remove(task_id)

        assert len(received) == 3
        assert received[0][0].title == "Buy milk"
        assert received[1][0].completed is True
        assert received[2] == ()

    def test_noop_does_not_notify(self, store):
        received = []
        store.subscribe(received.append)

        store.add("   ")
        store.toggle(UUID(int=7))
        store.remove(UUID(int=7))
        store.clear_completed()

        assert received == []

    def test_unsubscribe(self, store):
        received = []
        unsubscribe = store.subscribe(received.append)
        store.add("One")
        unsubscribe()
        store.add("Two")

        assert len(received) == 1

    def test_listeners_called_in_order(self, store):
        calls = []
        store.subscribe(lambda _: calls.append("first"))
        store.subscribe(lambda _: calls.append("second"))
        store.add("Task")

        assert calls == ["first", "second"]

    def test_listener_error_propagates(self, store):
        def broken(_):
            raise RuntimeError("listener failed")

        store.subscribe(broken)
        with pytest.raises(RuntimeError, match="listener failed"):
            store.add("Task")


class TestEndToEnd:
    """The full add/toggle/add/remove walk-through."""

    def test_walkthrough(self, store):
        milk = store.add("Buy milk")
        assert [(t.title, t.completed) for t in store.list()] == [("Buy milk", False)]

        store.toggle(milk)
        assert store.get(milk).completed is True

        store.add("Walk dog")
        assert [t.title for t in store.list()] == ["Buy milk", "Walk dog"]

        store.remove(milk)
        assert [(t.title, t.completed) for t in store.list()] == [("Walk dog", False)]
