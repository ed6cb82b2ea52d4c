"""URI handler port.

A URI handler is a stateful parser: `parse()` loads a string, and the
predicates report on the most recently parsed value. The URI validator only
relies on this capability set, so handlers are interchangeable.
"""

from __future__ import annotations

import abc
from typing import Self

REQUIRED_CAPABILITIES = ("parse", "is_valid", "is_absolute", "is_valid_relative")


class UriFormatError(ValueError):
    """Raised by `UriHandler.parse` when the input cannot be parsed at all."""


class UriHandler(abc.ABC):
    """Contract for URI handlers used by `UriValidator`."""

    @abc.abstractmethod
    def parse(self, uri: str) -> Self:
        """Parse `uri` into this handler, replacing any previous state.

        Returns:
            The handler itself, so calls can be chained.

        Raises:
            UriFormatError: If `uri` cannot be split into URI components.
        """

    @abc.abstractmethod
    def is_valid(self) -> bool:
        """Return True if the parsed URI is a valid URI reference."""

    @abc.abstractmethod
    def is_absolute(self) -> bool:
        """Return True if the parsed URI has a scheme."""

    @abc.abstractmethod
    def is_valid_relative(self) -> bool:
        """Return True if the parsed URI is a valid relative reference."""


def has_capabilities(obj: object) -> bool:
    """Return True if `obj` (an instance or a class) exposes every required method."""
    return all(callable(getattr(obj, name, None)) for name in REQUIRED_CAPABILITIES)
