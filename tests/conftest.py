"""Test fixtures and configuration."""

from collections.abc import Iterator
from itertools import count
from uuid import UUID

import pytest

from todolist.config import Settings, get_settings
from todolist.store import TaskStore


@pytest.fixture
def sequential_ids():
    """Id factory yielding UUIDs 1, 2, 3, ... so tests can predict ids."""
    counter = count(1)
    return lambda: UUID(int=next(counter))


@pytest.fixture
def store(sequential_ids) -> TaskStore:
    """Fresh empty store with predictable ids."""
    return TaskStore(id_factory=sequential_ids)


@pytest.fixture
def populated_store(store: TaskStore) -> TaskStore:
    """Store holding three tasks, the second one completed."""
    store.add("Buy milk")
    second = store.add("Walk dog")
    store.add("Water plants")
    store.toggle(second)
    return store


@pytest.fixture
def settings() -> Settings:
    """Settings that ignore the repository config file."""
    return Settings(log_level="DEBUG", app={"title": "Test List"})


@pytest.fixture(autouse=True)
def clear_settings_cache() -> Iterator[None]:
    """get_settings is cached; keep tests independent."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
