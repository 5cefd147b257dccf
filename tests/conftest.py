import sys
from pathlib import Path

import pytest

# Ensure project root is importable when running tests from within the tests/ package.
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))


class FakeCursor:
    """Stands in for a mysql-connector cursor; answers from a canned table."""

    def __init__(self, results=None):
        # sql text -> (column names, rows); anything else behaves like DML
        self.results = results or {}
        self.executed = []
        self.description = None
        self.rowcount = -1
        self._rows = []

    def execute(self, sql, params=None):
        self.executed.append((sql, params))
        if sql in self.results:
            cols, rows = self.results[sql]
            self.description = [(c, None, None, None, None, None, True) for c in cols]
            self._rows = list(rows)
            self.rowcount = len(rows)
        else:
            self.description = None
            self._rows = []
            self.rowcount = 1

    def fetchall(self):
        rows, self._rows = self._rows, []
        return rows

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        return False


class FakeConnection:
    def __init__(self, cursor):
        self._cursor = cursor
        self.committed = False
        self.closed = False

    def cursor(self, **_kw):
        return self._cursor

    def commit(self):
        self.committed = True

    def close(self):
        self.closed = True


@pytest.fixture
def fake_cursor():
    return FakeCursor()


@pytest.fixture
def fake_db(monkeypatch, fake_cursor):
    """Patch mysql.connector.connect so the driver hands out a FakeConnection."""
    import mysql.connector

    conn = FakeConnection(fake_cursor)
    calls = []

    def _connect(**kwargs):
        calls.append(kwargs)
        return conn

    monkeypatch.setattr(mysql.connector, "connect", _connect)
    conn.connect_calls = calls
    return conn


@pytest.fixture
def make_cursor():
    return FakeCursor
