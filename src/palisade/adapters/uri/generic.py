"""Generic RFC 3986 URI handler.

Splitting is delegated to `urllib.parse.urlsplit`; each component is then
checked against the RFC 3986 character classes. Structural rules:

- With a host, the path must be empty or start with ``/``.
- Without a host there can be no user info or port, and the path must not
  start with ``//``.
- Something must be present: a host, a path, a query or a fragment.
- A relative reference has no scheme and no authority, and its first path
  segment must not contain ``:`` (it would read as a scheme).

Whitespace, control characters and non-ASCII characters make a URI invalid
rather than being silently stripped the way `urlsplit` does.
"""

from __future__ import annotations

import ipaddress
import re
from typing import Self
from urllib.parse import urlsplit, urlunsplit

from palisade.interfaces.uri_handler import UriFormatError, UriHandler

# RFC 3986 character classes
UNRESERVED = r"A-Za-z0-9\-._~"
SUB_DELIMS = r"!$&'()*+,;="
PCT_ENCODED = r"%[0-9A-Fa-f]{2}"

SCHEME_PATTERN = re.compile(r"^[A-Za-z][A-Za-z0-9+\-.]*$")
USERINFO_PATTERN = re.compile(rf"^(?:[{UNRESERVED}{SUB_DELIMS}:]|{PCT_ENCODED})*$")
REG_NAME_PATTERN = re.compile(rf"^(?:[{UNRESERVED}{SUB_DELIMS}]|{PCT_ENCODED})*$")
IP_FUTURE_PATTERN = re.compile(rf"^v[0-9A-Fa-f]+\.[{UNRESERVED}{SUB_DELIMS}:]+$")
PORT_PATTERN = re.compile(r"^[0-9]*$")
SEGMENT_PATTERN = re.compile(rf"^(?:[{UNRESERVED}{SUB_DELIMS}:@]|{PCT_ENCODED})*$")
QUERY_PATTERN = re.compile(rf"^(?:[{UNRESERVED}{SUB_DELIMS}:@/?]|{PCT_ENCODED})*$")
FORBIDDEN_CHARS = re.compile(r"[\x00-\x20\x7f-\U0010ffff]")


class GenericUri(UriHandler):
    """Handler accepting any syntactically valid URI reference.

    Subclasses narrow the accepted schemes with `VALID_SCHEMES`; a URI with any
    other scheme fails to parse.
    """

    # pylint: disable=too-many-instance-attributes

    VALID_SCHEMES: frozenset[str] | None = None

    def __init__(self, uri: str | None = None) -> None:
        self._reset()
        if uri is not None:
            self.parse(uri)

    def _reset(self) -> None:
        self._parsed = False
        self._clean = True
        self.scheme: str | None = None
        self.userinfo: str | None = None
        self.host: str | None = None
        self.port: str | None = None
        self.path = ""
        self.query: str | None = None
        self.fragment: str | None = None

    # --------------------------------------------------------------------- #
    # Interface implementation
    # --------------------------------------------------------------------- #

    def parse(self, uri: str) -> Self:
        if not isinstance(uri, str):
            raise UriFormatError(f"Expected a string, got {type(uri).__name__}")

        self._reset()
        try:
            parts = urlsplit(uri)
        except ValueError as e:  # e.g. unbalanced IPv6 brackets
            raise UriFormatError(str(e)) from e

        self._clean = not FORBIDDEN_CHARS.search(uri)
        self.scheme = parts.scheme or None
        if self.VALID_SCHEMES is not None and self.scheme not in (None, *self.VALID_SCHEMES):
            raise UriFormatError(
                f"Scheme '{self.scheme}' is not accepted by {type(self).__name__}"
            )

        rest = uri[len(self.scheme) + 1 :] if self.scheme else uri
        if rest.startswith("//"):
            self._split_authority(parts.netloc)

        self.path = parts.path
        self.query = parts.query if "?" in uri.partition("#")[0] else None
        self.fragment = parts.fragment if "#" in uri else None
        self._parsed = True
        return self

    def is_valid(self) -> bool:
        if not self._parsed or not self._clean or not self._valid_components():
            return False

        if self.host:
            return not self.path or self.path.startswith("/")

        if self.userinfo or self.port:
            return False

        if self.path:
            return not self.path.startswith("//")

        return bool(self.query or self.fragment)

    def is_absolute(self) -> bool:
        return self._parsed and self.scheme is not None

    def is_valid_relative(self) -> bool:
        if not self._parsed or not self._clean or not self._valid_components():
            return False

        if self.scheme or self.host or self.userinfo or self.port:
            return False

        if self.path:
            if self.path.startswith("//"):
                return False
            first_segment = self.path.split("/", 1)[0]
            return ":" not in first_segment

        return bool(self.query or self.fragment)

    # --------------------------------------------------------------------- #
    # Helpers
    # --------------------------------------------------------------------- #

    def __str__(self) -> str:
        netloc = ""
        if self.host is not None:
            netloc = self.host
            if self.userinfo is not None:
                netloc = f"{self.userinfo}@{netloc}"
            if self.port:
                netloc = f"{netloc}:{self.port}"
        return urlunsplit(
            (self.scheme or "", netloc, self.path, self.query or "", self.fragment or "")
        )

    def _split_authority(self, netloc: str) -> None:
        userinfo, at, hostport = netloc.rpartition("@")
        self.userinfo = userinfo if at else None

        if hostport.startswith("["):
            literal, _, after = hostport.partition("]")
            self.host = literal + "]"
            self.port = after[1:] if after.startswith(":") else (after or None)
        else:
            host, colon, port = hostport.partition(":")
            self.host = host
            self.port = port if colon else None

    def _valid_components(self) -> bool:
        return (
            self._valid_scheme()
            and self._valid_userinfo()
            and self._valid_host()
            and self._valid_port()
            and all(SEGMENT_PATTERN.match(s) for s in self.path.split("/"))
            and (self.query is None or QUERY_PATTERN.match(self.query) is not None)
            and (self.fragment is None or QUERY_PATTERN.match(self.fragment) is not None)
        )

    def _valid_scheme(self) -> bool:
        return self.scheme is None or SCHEME_PATTERN.match(self.scheme) is not None

    def _valid_userinfo(self) -> bool:
        return self.userinfo is None or USERINFO_PATTERN.match(self.userinfo) is not None

    def _valid_host(self) -> bool:
        if self.host is None:
            return True
        if self.host.startswith("["):
            literal = self.host[1:-1]
            if IP_FUTURE_PATTERN.match(literal):
                return True
            try:
                ipaddress.IPv6Address(literal)
            except ValueError:
                return False
            return True
        return REG_NAME_PATTERN.match(self.host) is not None

    def _valid_port(self) -> bool:
        return self.port is None or PORT_PATTERN.match(self.port) is not None
