"""Configuration utilities for PALISADE.

This module centralizes small helpers and constants related to application configuration.
"""

import os

DB_URL_ENV_VAR = "PALISADE_DB_URL"  # pragma: no mutate


class DatabaseUrlNotSetError(Exception):
    """Raised when the PALISADE_DB_URL environment variable is not set."""


def get_db_url() -> str:
    """Get the database URL from the environment.

    Returns:
        The value of the `PALISADE_DB_URL` environment variable.

    Raises:
        DatabaseUrlNotSetError: If `PALISADE_DB_URL` is not set.
    """
    if not (url := os.environ.get(DB_URL_ENV_VAR)):
        raise DatabaseUrlNotSetError
    return url
