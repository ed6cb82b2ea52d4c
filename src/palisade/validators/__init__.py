"""PALISADE validators.

Each validator implements `palisade.interfaces.validator.Validator`:
``is_valid(value) -> bool`` plus ``get_messages()`` for the last failure.
"""

from .base import AbstractValidator
from .db import NoRecordExists, RecordExists, TableReference
from .uri import UriValidator

__all__ = [
    "AbstractValidator",
    "NoRecordExists",
    "RecordExists",
    "TableReference",
    "UriValidator",
]
