"""Fixtures for end-to-end tests of the ``palisade`` command.

Every invocation runs inside an isolated working directory with the flight
recorder pointed at `LOG_FILE` there, and a wide, colorless terminal so
Rich neither wraps nor highlights log lines.
"""

import logging
from collections.abc import Iterator
from pathlib import Path

import pytest
from click.testing import CliRunner

# pylint: disable=redefined-outer-name

LOG_FILE = "palisade.log"


@pytest.fixture(autouse=True)
def _restore_logger_levels() -> Iterator[None]:
    """Undo the per-logger levels an invocation sets on the shared logging tree."""
    manager = logging.root.manager
    saved = {
        name: logger.level
        for name, logger in manager.loggerDict.items()
        if isinstance(logger, logging.Logger)
    }
    yield
    for name, logger in list(manager.loggerDict.items()):
        if isinstance(logger, logging.Logger):
            logger.setLevel(saved.get(name, logging.NOTSET))


@pytest.fixture
def runner() -> CliRunner:
    """CliRunner whose environment keeps logs out of the user log directory."""
    return CliRunner(env={"COLUMNS": "200", "NO_COLOR": "1", "PALISADE_LOG_PATH": LOG_FILE})


@pytest.fixture
def fs(runner):
    """Run the test inside the runner's temporary working directory."""
    with runner.isolated_filesystem():
        yield


@pytest.fixture
def log_file(fs) -> Path:
    """Path the flight recorder writes to during the test."""
    return Path(LOG_FILE)


@pytest.fixture
def db_env(sqlite_db_url):
    """Environment pointing PALISADE_DB_URL at the seeded SQLite database."""
    return {"PALISADE_DB_URL": sqlite_db_url}


@pytest.fixture
def unreachable_db_env(tmp_path):
    """Environment pointing PALISADE_DB_URL at a database that cannot be opened."""
    return {"PALISADE_DB_URL": f"sqlite+pysqlite:///{tmp_path / 'missing' / 'app.db'}"}
