"""Database-backed record validators."""

from .exclusion import (
    NO_EXCLUSION,
    Exclusion,
    FieldExclusion,
    NoExclusion,
    RawExclusion,
    coerce_exclusion,
)
from .record import AbstractRecordValidator, NoRecordExists, RecordExists
from .table import TableReference

__all__ = [
    "AbstractRecordValidator",
    "Exclusion",
    "FieldExclusion",
    "NO_EXCLUSION",
    "NoExclusion",
    "NoRecordExists",
    "RawExclusion",
    "RecordExists",
    "TableReference",
    "coerce_exclusion",
]
