"""HTTP(S) URI handler."""

from __future__ import annotations

from .generic import GenericUri

DEFAULT_PORTS = {"http": 80, "https": 443}


class HttpUri(GenericUri):
    """Handler for ``http`` and ``https`` URIs.

    Any other scheme is rejected at parse time. An absolute HTTP URI must name
    a host; relative references follow the generic rules.
    """

    VALID_SCHEMES = frozenset(DEFAULT_PORTS)

    def is_valid(self) -> bool:
        if self.is_absolute() and not self.host:
            return False
        return super().is_valid()

    @property
    def effective_port(self) -> int | None:
        """The explicit port, or the scheme's default port."""
        if self.port:
            return int(self.port)
        return DEFAULT_PORTS.get(self.scheme or "")
