"""Database engine factory.

Record validators only ever read, so engines built for them can be opened
read-only. On SQLite this is enforced with ``PRAGMA query_only``; other
backends rely on the permissions of the configured database user.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from sqlalchemy import create_engine, event
from sqlalchemy.engine import URL, make_url

if TYPE_CHECKING:
    from sqlite3 import Connection as SQLiteConnection

    from sqlalchemy.engine import Engine

SQLITE_NAMES = {"sqlite", "sqlite+pysqlite"}


def is_sqlite(url: str | URL) -> bool:
    """Return True if the given SQLAlchemy URL or string corresponds to SQLite."""
    u = make_url(str(url))
    return u.get_backend_name() in SQLITE_NAMES


def make_engine(url: str | URL, *, echo: bool = False, read_only: bool = False) -> Engine:
    """Create a SQLAlchemy Engine for the given URL.

    SQLite connections get ``foreign_keys=ON``, plus ``query_only=ON`` when
    `read_only` is set.

    Args:
        url: Database connection URL (str or :class:`URL`).
        echo: If True, log SQL statements.
        read_only: Refuse writes on SQLite connections.

    Returns:
        Engine: Configured SQLAlchemy Engine.
    """

    engine = create_engine(url, echo=echo)

    if is_sqlite(url):

        @event.listens_for(engine, "connect")
        def _sqlite_pragmas(dbapi_conn: SQLiteConnection, conn_record):  # type: ignore #pylint: disable=W0613
            cur = dbapi_conn.cursor()
            cur.execute("PRAGMA foreign_keys=ON;")
            if read_only:
                cur.execute("PRAGMA query_only=ON;")
            cur.close()

    return engine
