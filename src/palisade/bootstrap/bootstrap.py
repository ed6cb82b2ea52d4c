"""Build database adapters and install the default adapter."""

from __future__ import annotations

import logging

from palisade import config
from palisade.adapters.db import SqlAlchemyDatabaseAdapter, make_engine
from palisade.validators.db import AbstractRecordValidator

logger = logging.getLogger(__name__)


def build_database_adapter(url: str) -> SqlAlchemyDatabaseAdapter:
    """Build a read-only SQLAlchemy adapter for `url`."""
    return SqlAlchemyDatabaseAdapter(make_engine(url, read_only=True))


def configure_default_adapter(url: str | None = None) -> SqlAlchemyDatabaseAdapter:
    """Build an adapter and install it as the record validators' default.

    Args:
        url: Database URL; read from `PALISADE_DB_URL` when None.

    Raises:
        DatabaseUrlNotSetError: If `url` is None and `PALISADE_DB_URL` is unset.
    """
    adapter = build_database_adapter(url if url is not None else config.get_db_url())
    AbstractRecordValidator.set_default_adapter(adapter)
    logger.debug("Default database adapter configured")
    return adapter
