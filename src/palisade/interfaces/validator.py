"""Validator interface and result DTO.

Contract overview
-----------------
- `validate(value)` returns a `ValidationResult` and has no side effects beyond
  what the concrete validator documents (e.g. one lookup query).
- `is_valid(value)` runs `validate`, keeps the result as `last_result`, and
  returns its truth value.
- `get_messages()` returns the rendered messages of the last result; it is
  empty before the first call and after a successful call.

Validators are not thread-safe: `last_result` is overwritten on every call.
Callers that validate concurrently should use one instance per thread.
"""

from __future__ import annotations

import abc
from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any


@dataclass(frozen=True, slots=True)
class ValidationResult:
    """Outcome of a single validation.

    Attributes:
        value: The input that was validated.
        failures: Failure-kind keys, in the order they were recorded.
        messages: Rendered message per failure kind.
    """

    value: Any
    failures: tuple[str, ...] = ()
    messages: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "messages", MappingProxyType(dict(self.messages)))

    @property
    def is_valid(self) -> bool:
        """True when no failure was recorded."""
        return not self.failures

    def __bool__(self) -> bool:
        return self.is_valid


class Validator(abc.ABC):
    """Contract for a single-value validator."""

    _last_result: ValidationResult | None = None

    @abc.abstractmethod
    def validate(self, value: Any) -> ValidationResult:
        """Validate `value` and return the outcome."""

    def is_valid(self, value: Any) -> bool:
        """Validate `value`, remember the result, and return True if it passed.

        If validation raises, `last_result` is left as None.
        """
        self._last_result = None
        self._last_result = self.validate(value)
        return self._last_result.is_valid

    @property
    def last_result(self) -> ValidationResult | None:
        """Result of the most recent `is_valid` call, or None if never called."""
        return self._last_result

    def get_messages(self) -> dict[str, str]:
        """Return the failure messages from the most recent `is_valid` call."""
        if self._last_result is None:
            return {}
        return dict(self._last_result.messages)
