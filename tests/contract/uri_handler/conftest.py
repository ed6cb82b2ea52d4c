"""Fixtures for URI handler contract tests."""

from collections.abc import Iterable

import pytest

from palisade.adapters.uri import FileUri, GenericUri, HttpUri, MailtoUri
from palisade.interfaces.uri_handler import UriHandler


@pytest.fixture(params=["generic", "http", "mailto", "file"])
def uri_handler(request: pytest.FixtureRequest) -> Iterable[UriHandler]:
    """Return a fresh, unparsed UriHandler for the requested implementation.

    Supported params:
      - `"generic"` → GenericUri
      - `"http"` → HttpUri
      - `"mailto"` → MailtoUri
      - `"file"` → FileUri

    Extend by adding new identifiers to `params` and branching below.
    """

    match request.param:
        case "generic":
            yield GenericUri()
        case "http":
            yield HttpUri()
        case "mailto":
            yield MailtoUri()
        case "file":
            yield FileUri()
        case _:
            raise ValueError(f"unknown uri handler type: {request.param}")


@pytest.fixture
def valid_absolute(uri_handler: UriHandler) -> str:
    """A URI each handler accepts as valid and absolute."""
    match uri_handler:
        case HttpUri():
            return "https://example.com/a?b#c"
        case MailtoUri():
            return "mailto:ada@example.com"
        case FileUri():
            return "file:///etc/hosts"
        case _:
            return "urn:isbn:0451450523"
