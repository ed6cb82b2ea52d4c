"""Built-in URI handlers and the default handler registry."""

from .file import FileUri
from .generic import GenericUri
from .http import HttpUri
from .mailto import MailtoUri
from .registry import HandlerSpec, UriHandlerRegistry

DEFAULT_HANDLER = "uri"


def build_default_registry() -> UriHandlerRegistry:
    """Return a registry pre-loaded with every built-in handler."""
    registry = UriHandlerRegistry()
    registry.register_builtin(GenericUri, "uri", "generic")
    registry.register_builtin(HttpUri, "http", "https")
    registry.register_builtin(MailtoUri, "mailto")
    registry.register_builtin(FileUri, "file")
    return registry


default_registry = build_default_registry()

__all__ = [
    "DEFAULT_HANDLER",
    "FileUri",
    "GenericUri",
    "HandlerSpec",
    "HttpUri",
    "MailtoUri",
    "UriHandlerRegistry",
    "build_default_registry",
    "default_registry",
]
