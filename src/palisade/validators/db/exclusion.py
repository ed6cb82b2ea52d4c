"""Exclusion clauses for record validators.

An exclusion narrows the lookup so that one record is ignored, typically the
record being edited. Three forms are accepted:

* ``None``: no exclusion.
* ``{"field": "id", "value": 1}``: adds ``id != :value`` with a bound parameter.
* ``"id != 1"``: appended verbatim as SQL text.

Callers may pass any of these; `coerce_exclusion` turns them into one of the
three variants once, and `exclusion_condition` renders a variant into a
SQLAlchemy condition.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from sqlalchemy import ColumnElement, TableClause, TextClause, text

from palisade.interfaces.errors import InvalidExclusionError


@dataclass(frozen=True, slots=True)
class NoExclusion:
    """No record is excluded."""

    @property
    def columns(self) -> tuple[str, ...]:
        """Columns referenced by the exclusion."""
        return ()


@dataclass(frozen=True, slots=True)
class FieldExclusion:
    """Exclude records where `field` equals `value`."""

    field: str
    value: Any

    @property
    def columns(self) -> tuple[str, ...]:
        """Columns referenced by the exclusion."""
        return (self.field,)


@dataclass(frozen=True, slots=True)
class RawExclusion:
    """Exclude records with a literal SQL condition."""

    condition: str

    @property
    def columns(self) -> tuple[str, ...]:
        """Columns referenced by the exclusion (unknown for raw SQL)."""
        return ()


Exclusion = NoExclusion | FieldExclusion | RawExclusion

NO_EXCLUSION = NoExclusion()

ExclusionSpec = Exclusion | Mapping[str, Any] | str | None


def coerce_exclusion(spec: ExclusionSpec) -> Exclusion:
    """Convert any accepted exclusion form into an `Exclusion` variant.

    Raises:
        InvalidExclusionError: For mappings without ``field``/``value``, blank
            strings, or unsupported types.
    """
    match spec:
        case None:
            return NO_EXCLUSION
        case NoExclusion() | FieldExclusion() | RawExclusion():
            return spec
        case str():
            if not spec.strip():
                raise InvalidExclusionError("Exclusion condition must not be blank")
            return RawExclusion(spec)
        case Mapping():
            if "field" not in spec or "value" not in spec:
                raise InvalidExclusionError(
                    f"Exclusion mapping requires 'field' and 'value' keys, got {sorted(spec)!r}"
                )
            return FieldExclusion(spec["field"], spec["value"])
        case _:
            raise InvalidExclusionError(
                f"Exclusion must be None, a mapping or a string, got {type(spec).__name__}"
            )


def exclusion_condition(
    exclusion: Exclusion, target: TableClause
) -> ColumnElement[bool] | TextClause | None:
    """Return the extra WHERE condition for `exclusion`, or None if there is none.

    `target` must expose every column listed in ``exclusion.columns``.
    """
    match exclusion:
        case NoExclusion():
            return None
        case FieldExclusion(field=field, value=value):
            return target.c[field] != value
        case RawExclusion(condition=condition):
            # escaped so ":name" inside the condition is never read as a bind parameter
            return text(condition.replace(":", "\\:"))
