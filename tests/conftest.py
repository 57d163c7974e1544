"""
Shared fixtures: an in-memory stand-in for the async SQLAlchemy engine.

The fake records every connection handed out, every statement executed with
its bound parameters, and every close, so tests can check both the HTTP
contract and the per-request connection lifecycle.
"""

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.exc import OperationalError

from flightquery.api.deps import get_database
from flightquery.core.config import Settings
from flightquery.db.session import Database
from flightquery.main import create_app


def _db_error(message="ORA-03113: end-of-file on communication channel"):
    return OperationalError("SELECT 1 FROM dual", {}, Exception(message))


class FakeResult:
    def __init__(self, rows):
        self._rows = list(rows)

    def mappings(self):
        return self

    def all(self):
        return list(self._rows)

    def first(self):
        return self._rows[0] if self._rows else None


class FakeConnection:
    def __init__(self, engine):
        self.engine = engine
        self.executed = []
        self.close_calls = 0

    async def execute(self, statement, params=None):
        self.executed.append((str(statement), params))
        if self.engine.query_error is not None:
            raise self.engine.query_error
        return FakeResult(self.engine.rows)

    async def close(self):
        self.close_calls += 1
        if self.engine.close_error is not None:
            raise self.engine.close_error


class FakeEngine:
    def __init__(self, rows=(), query_error=None, connect_error=None, close_error=None):
        self.rows = list(rows)
        self.query_error = query_error
        self.connect_error = connect_error
        self.close_error = close_error
        self.connections = []
        self.disposed = False

    async def connect(self):
        if self.connect_error is not None:
            raise self.connect_error
        conn = FakeConnection(self)
        self.connections.append(conn)
        return conn

    async def dispose(self):
        self.disposed = True

    @property
    def executed(self):
        return [entry for conn in self.connections for entry in conn.executed]


@pytest.fixture
def engine():
    return FakeEngine()


@pytest.fixture
def client(engine):
    app = create_app(Settings(LOG_LEVEL="DEBUG"))
    database = Database(engine)
    app.dependency_overrides[get_database] = lambda: database
    return TestClient(app)


@pytest.fixture
def db_error():
    """Factory for driver errors as SQLAlchemy surfaces them."""
    return _db_error
