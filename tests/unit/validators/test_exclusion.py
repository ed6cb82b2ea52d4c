"""Unit tests for record-validator exclusion clauses."""

from __future__ import annotations

from typing import Any

import pytest
from sqlalchemy import column, table
from sqlalchemy.dialects import sqlite

from palisade.interfaces.errors import ConfigurationError, InvalidExclusionError
from palisade.validators.db.exclusion import (
    NO_EXCLUSION,
    FieldExclusion,
    NoExclusion,
    RawExclusion,
    coerce_exclusion,
    exclusion_condition,
)


@pytest.mark.parametrize(
    ("spec", "expected"),
    [
        (None, NO_EXCLUSION),
        ({"field": "id", "value": 1}, FieldExclusion("id", 1)),
        ({"field": "id", "value": None}, FieldExclusion("id", None)),
        ("id != 1", RawExclusion("id != 1")),
        (FieldExclusion("id", 2), FieldExclusion("id", 2)),
        (RawExclusion("x = 1"), RawExclusion("x = 1")),
        (NoExclusion(), NO_EXCLUSION),
    ],
)
def test_coerce_accepted_forms(spec: Any, expected: Any) -> None:
    """Every accepted form becomes exactly one variant."""
    assert coerce_exclusion(spec) == expected


@pytest.mark.parametrize(
    "spec",
    [
        {"field": "id"},
        {"value": 1},
        {},
        "",
        "   ",
        42,
        ["id", 1],
    ],
)
def test_coerce_rejects_malformed(spec: Any) -> None:
    """Incomplete mappings, blank strings and other types are configuration errors."""
    with pytest.raises(InvalidExclusionError):
        coerce_exclusion(spec)


def test_invalid_exclusion_is_a_configuration_error() -> None:
    """Callers can catch every misconfiguration with one except clause."""
    assert issubclass(InvalidExclusionError, ConfigurationError)


def test_columns() -> None:
    """Only field exclusions name a column the query must expose."""
    assert NO_EXCLUSION.columns == ()
    assert FieldExclusion("id", 1).columns == ("id",)
    assert RawExclusion("id != 1").columns == ()


def test_condition_none_for_no_exclusion() -> None:
    """No exclusion adds no condition."""
    assert exclusion_condition(NO_EXCLUSION, table("users", column("id"))) is None


def test_field_condition_binds_value() -> None:
    """Field exclusions compare with a bound parameter, never inline SQL."""
    target = table("users", column("id"))
    compiled = exclusion_condition(FieldExclusion("id", "1; DROP TABLE users"), target).compile(
        dialect=sqlite.dialect()
    )
    assert str(compiled) == "users.id != ?"
    assert list(compiled.params.values()) == ["1; DROP TABLE users"]


def test_raw_condition_is_verbatim() -> None:
    """Raw exclusions are appended as written."""
    condition = exclusion_condition(RawExclusion("id != 1"), table("users"))
    assert str(condition) == "id != 1"


@pytest.mark.parametrize(
    "condition",
    ["name != 'Ada :x'", "created_at::date != '2024-01-01'", "note != 'a:b'"],
)
def test_raw_condition_colons_are_not_bind_parameters(condition: str) -> None:
    """Colons in a raw exclusion render as written and declare no parameters."""
    clause = exclusion_condition(RawExclusion(condition), table("users"))
    compiled = clause.compile(dialect=sqlite.dialect())
    assert str(compiled) == condition
    assert compiled.params == {}
