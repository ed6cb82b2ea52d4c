"""file URI handler (RFC 8089)."""

from __future__ import annotations

from .generic import GenericUri


class FileUri(GenericUri):
    """Handler for ``file:`` URIs.

    Absolute file URIs need an absolute path (``file:///etc/hosts``,
    ``file://server/share/x``); relative references are plain paths.
    """

    VALID_SCHEMES = frozenset({"file"})

    def is_valid(self) -> bool:
        if self.is_absolute() and not self.path.startswith("/"):
            return False
        if self.userinfo is not None or self.port is not None:
            return False
        return super().is_valid()
