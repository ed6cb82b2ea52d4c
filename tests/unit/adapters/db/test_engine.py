"""Unit tests for the database engine helpers.

These tests cover:
- Detection of SQLite vs. non-SQLite URLs.
- Application of SQLite PRAGMAs on connect, including read-only mode.
"""

from typing import TYPE_CHECKING

import pytest
from sqlalchemy import text
from sqlalchemy.engine import make_url
from sqlalchemy.exc import OperationalError

from palisade.adapters.db.engine import is_sqlite, make_engine

if TYPE_CHECKING:
    from sqlalchemy.engine import Engine


def test_is_sqlite_true_for_sqlite_url():
    """is_sqlite() should return True for SQLite URLs."""
    assert is_sqlite("sqlite:///:memory:")
    assert is_sqlite(make_url("sqlite+pysqlite:///file.db"))


def test_is_sqlite_false_for_postgres_url():
    """is_sqlite() should return False for non-SQLite URLs (e.g., Postgres)."""
    assert not is_sqlite("postgresql://u:p@localhost/db")
    assert not is_sqlite(make_url("postgresql+psycopg://u:p@localhost/db"))


def test_sqlite_pragmas_applied(sqlite_engine_memory: "Engine"):
    """SQLite engines created by make_engine() enable foreign keys and stay writable."""
    with sqlite_engine_memory.connect() as cxn:
        fk = cxn.exec_driver_sql("PRAGMA foreign_keys;").scalar()
        query_only = cxn.exec_driver_sql("PRAGMA query_only;").scalar()
    assert fk == 1
    assert query_only == 0


def test_read_only_engine_refuses_writes():
    """read_only=True turns on PRAGMA query_only for every connection."""
    engine = make_engine("sqlite+pysqlite:///:memory:", read_only=True)
    try:
        with engine.connect() as cxn:
            assert cxn.exec_driver_sql("PRAGMA query_only;").scalar() == 1
            with pytest.raises(OperationalError):
                cxn.execute(text("CREATE TABLE t (id INTEGER)"))
    finally:
        engine.dispose()
