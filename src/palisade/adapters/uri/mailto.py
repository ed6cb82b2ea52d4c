"""mailto URI handler (RFC 6068, addresses only)."""

from __future__ import annotations

import re
from urllib.parse import unquote

from .generic import GenericUri

ADDRESS_PATTERN = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")


class MailtoUri(GenericUri):
    """Handler for ``mailto:`` URIs.

    A mailto URI is valid when it has no authority and its path is a
    comma-separated list of addresses. There is no relative form.
    """

    VALID_SCHEMES = frozenset({"mailto"})

    @property
    def addresses(self) -> list[str]:
        """Decoded addresses listed in the path."""
        return [unquote(part) for part in self.path.split(",") if part]

    def is_valid(self) -> bool:
        if not self.is_absolute() or self.host is not None:
            return False
        addresses = self.addresses
        return (
            bool(addresses)
            and all(ADDRESS_PATTERN.match(a) for a in addresses)
            and super().is_valid()
        )

    def is_valid_relative(self) -> bool:
        return False
