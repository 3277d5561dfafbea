"""
Pytest fixtures and test configuration for certiweb tests.
"""

import pytest

from certiweb import Certiweb
from certiweb.clock import FixedClock
from certiweb.config import Settings, get_settings
from certiweb.storage import InMemoryStore, SQLiteStore

BASE_TIME = 1640995200


@pytest.fixture(autouse=True)
def isolated_data_dir(tmp_path, monkeypatch):
    """Keep databases and event logs of every test inside its tmp_path."""
    data_dir = tmp_path / "certiweb-home"
    monkeypatch.setenv("CERTIWEB_DATA_DIR", str(data_dir))
    get_settings.cache_clear()
    yield data_dir
    get_settings.cache_clear()


@pytest.fixture
def settings(isolated_data_dir):
    return Settings(data_dir=isolated_data_dir, registry_id="test-registry")


@pytest.fixture
def store():
    """Fresh in-memory host store."""
    return InMemoryStore()


@pytest.fixture
def clock():
    return FixedClock(BASE_TIME)


@pytest.fixture
def registry(store, clock, settings):
    """Certiweb over an in-memory store and a fixed clock."""
    return Certiweb(store=store, clock=clock, settings=settings)


@pytest.fixture
def sqlite_store(tmp_path):
    return SQLiteStore(tmp_path / "registry.db")


@pytest.fixture
def sqlite_registry(sqlite_store, clock, settings):
    """Certiweb over a SQLite file and a fixed clock."""
    return Certiweb(store=sqlite_store, clock=clock, settings=settings)


class FailingSetStore(InMemoryStore):
    """Store whose writes land and then fail, like a host that dies mid-invocation."""

    fail_writes = False

    def set(self, name, blob):
        super().set(name, blob)
        if self.fail_writes:
            raise OSError("host write failed")


class FailingSetSQLiteStore(SQLiteStore):
    fail_writes = False

    def set(self, name, blob):
        super().set(name, blob)
        if self.fail_writes:
            raise OSError("host write failed")


@pytest.fixture
def failing_store():
    return FailingSetStore()


@pytest.fixture
def failing_sqlite_store(tmp_path):
    return FailingSetSQLiteStore(tmp_path / "failing.db")
