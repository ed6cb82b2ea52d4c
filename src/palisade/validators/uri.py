"""URI format validator.

`UriValidator` asks a `UriHandler` to parse the input and then applies an
absolute/relative policy:

    valid = handler.is_valid() and (
        (allow_absolute and handler.is_absolute())
        or (allow_relative and handler.is_valid_relative())
    )

Non-string input fails without consulting the handler, and `UriFormatError`
raised while parsing is folded into a failed result. Handler specs are
resolved through a `UriHandlerRegistry` as soon as they are set.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any, Self

from palisade.adapters.uri import DEFAULT_HANDLER, HandlerSpec, default_registry
from palisade.interfaces.uri_handler import UriFormatError
from palisade.validators.base import AbstractValidator, normalize_option_keys

if TYPE_CHECKING:
    from palisade.adapters.uri import UriHandlerRegistry
    from palisade.interfaces.uri_handler import UriHandler
    from palisade.interfaces.validator import ValidationResult

logger = logging.getLogger(__name__)


class UriValidator(AbstractValidator):
    """Validate that a string is a URI allowed by the absolute/relative policy.

    Args:
        uri_handler: Handler instance, class, or registered identifier. When
            omitted, a `GenericUri` is created on first use. May also be an
            options mapping (the only positional argument) holding any of the
            keyword names below; camelCase keys are accepted.
        allow_relative: Accept relative references.
        allow_absolute: Accept URIs with a scheme.
        registry: Registry used to resolve handler specs.
        **options: Message options accepted by `AbstractValidator`.

    Raises:
        InvalidUriHandlerError: If `uri_handler` cannot be resolved.
    """

    INVALID = "invalid"
    NOT_URI = "notUri"

    MESSAGE_TEMPLATES = {
        INVALID: "Invalid type given. String expected",
        NOT_URI: "The input does not appear to be a valid Uri",
    }

    def __init__(
        self,
        uri_handler: HandlerSpec | Mapping[str, Any] | None = None,
        allow_relative: bool = True,
        allow_absolute: bool = True,
        *,
        registry: UriHandlerRegistry | None = None,
        **options: Any,
    ) -> None:
        if isinstance(uri_handler, Mapping):
            options = {**normalize_option_keys(uri_handler), **options}
            uri_handler = options.pop("uri_handler", None)
            allow_relative = options.pop("allow_relative", allow_relative)
            allow_absolute = options.pop("allow_absolute", allow_absolute)
        super().__init__(**options)

        self._registry = registry or default_registry
        self._uri_handler: UriHandler | None = None
        self.allow_relative = allow_relative
        self.allow_absolute = allow_absolute
        if uri_handler is not None:
            self.set_uri_handler(uri_handler)

    # --------------------------------------------------------------------- #
    # Configuration
    # --------------------------------------------------------------------- #

    @property
    def uri_handler(self) -> UriHandler:
        """The handler in use, created from the default identifier on first access."""
        if self._uri_handler is None:
            self._uri_handler = self._registry.resolve(DEFAULT_HANDLER)
        return self._uri_handler

    @uri_handler.setter
    def uri_handler(self, spec: HandlerSpec) -> None:
        self._uri_handler = self._registry.resolve(spec)

    def set_uri_handler(self, spec: HandlerSpec) -> Self:
        """Set the handler from an instance, class or identifier."""
        self.uri_handler = spec
        return self

    def set_allow_absolute(self, allow: bool) -> Self:
        """Set whether URIs with a scheme are accepted."""
        self.allow_absolute = allow
        return self

    def set_allow_relative(self, allow: bool) -> Self:
        """Set whether relative references are accepted."""
        self.allow_relative = allow
        return self

    def _options(self) -> dict[str, Any]:
        return {
            **super()._options(),
            "uri_handler": self._uri_handler,
            "allow_relative": self.allow_relative,
            "allow_absolute": self.allow_absolute,
        }

    # --------------------------------------------------------------------- #
    # Validation
    # --------------------------------------------------------------------- #

    def validate(self, value: Any) -> ValidationResult:
        if not isinstance(value, str):
            return self._result(value, self.INVALID)

        handler = self.uri_handler
        try:
            handler.parse(value)
        except UriFormatError as e:
            logger.debug("Handler %s rejected %r: %s", type(handler).__name__, value, e)
            return self._result(value, self.NOT_URI)

        if not handler.is_valid():
            return self._result(value, self.NOT_URI)

        absolute = handler.is_absolute()
        relative = handler.is_valid_relative()
        if (self.allow_absolute and absolute) or (self.allow_relative and relative):
            return self._result(value)
        return self._result(value, self.NOT_URI)
