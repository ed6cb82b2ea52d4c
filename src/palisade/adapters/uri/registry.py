"""Registry resolving URI handler specs to handler instances.

A handler may be given to `UriValidator` as an instance, as a class, or as a
registered identifier string (``"http"``, or a built-in's dotted class path).
Classes are checked against the `UriHandler` capability set when they are
registered, and specs are resolved when they are set, so a bad spec fails at
configuration time rather than on the first validation.
"""

from __future__ import annotations

import inspect
import logging
from collections.abc import Iterator

from palisade.interfaces.errors import InvalidUriHandlerError
from palisade.interfaces.uri_handler import UriHandler, has_capabilities

logger = logging.getLogger(__name__)

HandlerSpec = UriHandler | type[UriHandler] | str


def _check_handler_class(spec: object, cls: object) -> type[UriHandler]:
    if not isinstance(cls, type):
        raise InvalidUriHandlerError(spec, "expected a class")
    if not (issubclass(cls, UriHandler) or has_capabilities(cls)):
        raise InvalidUriHandlerError(
            spec, f"{cls.__name__} does not implement the UriHandler capabilities"
        )
    if inspect.isabstract(cls):
        raise InvalidUriHandlerError(spec, f"{cls.__name__} is abstract")
    return cls


class UriHandlerRegistry:
    """Identifier -> handler class mapping with capability checks.

    Identifiers are case-insensitive.
    """

    def __init__(self) -> None:
        self._classes: dict[str, type[UriHandler]] = {}

    def register(self, identifier: str, cls: type[UriHandler]) -> None:
        """Register `cls` under `identifier`, replacing any previous entry.

        Raises:
            InvalidUriHandlerError: If `cls` is not a concrete handler class.
        """
        self._classes[identifier.lower()] = _check_handler_class(identifier, cls)

    def register_builtin(self, cls: type[UriHandler], *aliases: str) -> None:
        """Register `cls` under its dotted class path and every alias."""
        for identifier in (f"{cls.__module__}.{cls.__qualname__}", *aliases):
            self.register(identifier, cls)

    def __contains__(self, identifier: object) -> bool:
        return isinstance(identifier, str) and identifier.lower() in self._classes

    def __iter__(self) -> Iterator[str]:
        return iter(self._classes)

    def get(self, identifier: str) -> type[UriHandler]:
        """Return the class registered under `identifier`.

        Raises:
            InvalidUriHandlerError: If nothing is registered under `identifier`.
        """
        try:
            return self._classes[identifier.lower()]
        except KeyError as e:
            raise InvalidUriHandlerError(identifier, "unknown handler identifier") from e

    def resolve(self, spec: HandlerSpec) -> UriHandler:
        """Return a handler instance for `spec`.

        Instances are returned as-is, classes and identifiers are instantiated
        without arguments.

        Raises:
            InvalidUriHandlerError: If `spec` cannot be turned into a handler.
        """
        match spec:
            case str():
                handler = self.get(spec)()
            case type():
                handler = _check_handler_class(spec, spec)()
            case _ if isinstance(spec, UriHandler) or has_capabilities(spec):
                handler = spec
            case _:
                raise InvalidUriHandlerError(
                    spec, f"{type(spec).__name__} does not implement the UriHandler capabilities"
                )
        logger.debug("Resolved URI handler %r to %s", spec, type(handler).__name__)
        return handler
