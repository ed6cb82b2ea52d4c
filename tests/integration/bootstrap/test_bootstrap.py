"""Integration tests for wiring the default database adapter."""

from __future__ import annotations

import pytest
from sqlalchemy import insert

from palisade import config
from palisade.adapters.db import SqlAlchemyDatabaseAdapter
from palisade.bootstrap import build_database_adapter, configure_default_adapter
from palisade.interfaces.errors import QueryExecutionError
from palisade.validators import NoRecordExists, RecordExists
from palisade.validators.db import AbstractRecordValidator
from tests.fixtures.sqlite import users


def test_configure_from_environment(monkeypatch, sqlite_db_url: str) -> None:
    """With no URL argument the adapter is built from PALISADE_DB_URL."""
    monkeypatch.setenv(config.DB_URL_ENV_VAR, sqlite_db_url)
    adapter = configure_default_adapter()
    try:
        assert AbstractRecordValidator.get_default_adapter() is adapter
        assert RecordExists("users", "email").is_valid("ada@example.com") is True
        assert NoRecordExists("users", "email").is_valid("ada@example.com") is False
    finally:
        adapter.bind.dispose()


def test_configure_with_explicit_url(monkeypatch, sqlite_db_url: str) -> None:
    """An explicit URL wins and the environment is not consulted."""
    monkeypatch.delenv(config.DB_URL_ENV_VAR, raising=False)
    adapter = configure_default_adapter(sqlite_db_url)
    try:
        assert isinstance(adapter, SqlAlchemyDatabaseAdapter)
        assert RecordExists("users", "email").is_valid("grace@example.com") is True
    finally:
        adapter.bind.dispose()


def test_configure_without_url_raises(monkeypatch) -> None:
    """Missing configuration is reported before anything is installed."""
    monkeypatch.delenv(config.DB_URL_ENV_VAR, raising=False)
    with pytest.raises(config.DatabaseUrlNotSetError):
        configure_default_adapter()
    assert AbstractRecordValidator.get_default_adapter() is None


def test_built_adapter_is_read_only(sqlite_db_url: str) -> None:
    """Adapters built for validation cannot write."""
    adapter = build_database_adapter(sqlite_db_url)
    try:
        with pytest.raises(QueryExecutionError):
            adapter.first_row(insert(users).values(id=99, email="x@example.com"))
    finally:
        adapter.bind.dispose()
