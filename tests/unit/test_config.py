"""Unit tests for `palisade.config`."""

import pytest

from palisade import config


def test_get_db_url_reads_environment(monkeypatch):
    """The URL comes straight from PALISADE_DB_URL."""
    monkeypatch.setenv(config.DB_URL_ENV_VAR, "sqlite+pysqlite:///app.db")
    assert config.get_db_url() == "sqlite+pysqlite:///app.db"


@pytest.mark.parametrize("value", [None, ""])
def test_get_db_url_missing_raises(monkeypatch, value):
    """An unset or empty variable is reported as not set."""
    if value is None:
        monkeypatch.delenv(config.DB_URL_ENV_VAR, raising=False)
    else:
        monkeypatch.setenv(config.DB_URL_ENV_VAR, value)
    with pytest.raises(config.DatabaseUrlNotSetError):
        config.get_db_url()
