"""Fixtures for DatabaseAdapter contract tests."""

from __future__ import annotations

from collections.abc import Iterable
from typing import TYPE_CHECKING

import pytest

from palisade.adapters.db import SqlAlchemyDatabaseAdapter

if TYPE_CHECKING:
    from sqlalchemy.engine import Engine

    from palisade.interfaces.db_adapter import DatabaseAdapter


@pytest.fixture(params=["engine", "connection"])
def db_adapter(
    request: pytest.FixtureRequest, sqlite_engine_memory: Engine
) -> Iterable[DatabaseAdapter]:
    """Return an adapter over the seeded in-memory database.

    Supported params:
      - `"engine"` → SqlAlchemyDatabaseAdapter checking out a connection per query
      - `"connection"` → SqlAlchemyDatabaseAdapter bound to one open connection
    """

    match request.param:
        case "engine":
            yield SqlAlchemyDatabaseAdapter(sqlite_engine_memory)
        case "connection":
            with sqlite_engine_memory.connect() as conn:
                yield SqlAlchemyDatabaseAdapter(conn)
        case _:
            raise ValueError(f"unknown db adapter type: {request.param}")
