"""SQLAlchemy-backed DatabaseAdapter.

Wraps either an `Engine` (a pooled connection is checked out per query and
returned afterwards) or an open `Connection` (used as-is, e.g. inside a
caller's transaction). The adapter never disposes the engine or closes a
connection it was given.

Exceptions:
    Maps `sqlalchemy.exc.DBAPIError` to `QueryExecutionError`.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from sqlalchemy.engine import Connection, Engine, Row
from sqlalchemy.exc import DBAPIError

from palisade.interfaces.db_adapter import DatabaseAdapter
from palisade.interfaces.errors import QueryExecutionError

if TYPE_CHECKING:
    from sqlalchemy.sql import Executable

logger = logging.getLogger(__name__)


class SqlAlchemyDatabaseAdapter(DatabaseAdapter):
    """DatabaseAdapter running statements through SQLAlchemy Core."""

    def __init__(self, bind: Engine | Connection):
        self.bind = bind

    def first_row(self, statement: Executable) -> Row | None:
        try:
            if isinstance(self.bind, Connection):
                return self._first(self.bind, statement)
            with self.bind.connect() as connection:
                return self._first(connection, statement)
        except DBAPIError as e:  # OperationalError, ProgrammingError, etc.
            raise QueryExecutionError(str(e)) from e

    @staticmethod
    def _first(connection: Connection, statement: Executable) -> Row | None:
        # Result.first() fetches one row and closes the cursor
        row = connection.execute(statement).first()
        logger.debug("Lookup returned %s", "a row" if row is not None else "no row")
        return row
