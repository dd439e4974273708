"""Shared fixtures: an in-process stand-in for a psycopg2 connection."""

import pytest


class FakeCursor:
    def __init__(self, conn):
        self._conn = conn

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        return False

    def execute(self, sql, params=None):
        self._conn.executed.append((sql, params))
        if self._conn.error is not None:
            raise self._conn.error

    def fetchall(self):
        return list(self._conn.rows)


class FakeConnection:
    """Records every statement and answers with canned rows."""

    def __init__(self, rows=None, error=None):
        self.rows = rows or []
        self.error = error
        self.executed = []
        self.cursor_factories = []
        self.autocommit = False

    def cursor(self, cursor_factory=None):
        self.cursor_factories.append(cursor_factory)
        return FakeCursor(self)


def make_row(keyword="lion", name="Lion", kingdom="Animalia", **overrides):
    row = {
        "keyword": keyword,
        "name": name,
        "kingdom": kingdom,
        "description": None,
        "price": None,
        "size": None,
        "blood_temp": None,
        "venomous": 0,
        "image1": None,
        "image2": None,
        "image3": None,
        "image4": None,
        "image5": None,
    }
    row.update(overrides)
    return row


@pytest.fixture
def fake_connection():
    return FakeConnection()


@pytest.fixture
def row_factory():
    return make_row
