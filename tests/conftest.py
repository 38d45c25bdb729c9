"""Shared test fixtures: an in-memory stand-in for the psycopg2 pool."""

from datetime import date
from decimal import Decimal

import pytest
from psycopg2 import pool

from db import connection


class FakeCursor:
    def __init__(self, conn):
        self.conn = conn
        self.description = None
        self._rows = []

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        return False

    def execute(self, sql, params):
        self.conn.executed.append((sql, list(params)))
        if self.conn.error is not None:
            raise self.conn.error
        if self.conn.rows is not None:
            self.description = [("column",)]
            self._rows = list(self.conn.rows)

    def fetchall(self):
        return self._rows


class FakeConnection:
    """Records every statement; returns `rows` or raises `error`.

    `closed` mirrors psycopg2 (non-zero once the server drops the link) and
    `rollback_error`, when set, is raised by rollback().
    """

    def __init__(self):
        self.rows = []
        self.error = None
        self.executed = []
        self.cursor_factories = []
        self.commits = 0
        self.rollbacks = 0
        self.rollback_error = None
        self.closed = 0

    def cursor(self, cursor_factory=None):
        self.cursor_factories.append(cursor_factory)
        return FakeCursor(self)

    def commit(self):
        self.commits += 1

    def rollback(self):
        self.rollbacks += 1
        if self.rollback_error is not None:
            raise self.rollback_error

    @property
    def last_sql(self) -> str:
        return self.executed[-1][0]

    @property
    def last_params(self) -> list:
        return self.executed[-1][1]


class FakePool:
    def __init__(self, conn):
        self.conn = conn
        self.checked_out = 0
        self.released = 0
        self.discarded = 0
        self.exhausted = False

    def getconn(self):
        if self.exhausted:
            raise pool.PoolError("connection pool exhausted")
        self.checked_out += 1
        return self.conn

    def putconn(self, conn, key=None, close=False):
        assert conn is self.conn
        self.released += 1
        if close:
            self.discarded += 1

    def closeall(self):
        pass


@pytest.fixture
def fake_pool(monkeypatch) -> FakePool:
    """Install a FakePool as the module-level pool in db.connection."""
    pool = FakePool(FakeConnection())
    monkeypatch.setattr(connection, "_pool", pool)
    return pool


@pytest.fixture
def fake_db(fake_pool) -> FakeConnection:
    """The single FakeConnection handed out by the fake pool."""
    return fake_pool.conn


@pytest.fixture
def property_row() -> dict:
    """A properties row as returned by RealDictCursor, with its rating."""
    return {
        "id": 7,
        "owner_id": 3,
        "title": "Speed lamp",
        "description": "description",
        "thumbnail_photo_url": "https://images.example.com/thumb.jpg",
        "cover_photo_url": "https://images.example.com/cover.jpg",
        "cost_per_night": 93061,
        "parking_spaces": 6,
        "number_of_bathrooms": 4,
        "number_of_bedrooms": 8,
        "country": "Canada",
        "street": "536 Namsub Highway",
        "city": "Sotboske",
        "province": "Quebec",
        "post_code": "28142",
        "active": True,
        "average_rating": Decimal("4.2500000000000000"),
    }


@pytest.fixture
def new_property() -> dict:
    """A property as submitted by the listing form (all strings)."""
    return {
        "owner_id": "3",
        "title": "Lakeside cabin",
        "description": "Quiet spot by the water",
        "thumbnail_photo_url": "https://images.example.com/cabin-thumb.jpg",
        "cover_photo_url": "https://images.example.com/cabin.jpg",
        "cost_per_night": "12500",
        "street": "1 Shore Rd",
        "city": "Vancouver",
        "province": "BC",
        "post_code": "V5K 0A1",
        "country": "Canada",
        "parking_spaces": "1",
        "number_of_bathrooms": "1",
        "number_of_bedrooms": "2",
    }


@pytest.fixture
def reservation_row(property_row) -> dict:
    return {
        "reservation_id": 101,
        "guest_id": 12,
        "start_date": date(2026, 7, 1),
        "end_date": date(2026, 7, 5),
        **property_row,
    }
