"""Shared behaviour for PALISADE validators.

`AbstractValidator` owns the message machinery: per-class default templates,
per-instance overrides, placeholder substitution, value obscuring and length
limits. Concrete validators only decide *which* failure kinds apply and call
`self._result(value, *failures)`.

Templates use ``%name%`` placeholders. ``%value%`` is always available; other
placeholders map to instance attributes through `MESSAGE_VARIABLES`.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Mapping
from typing import Any, ClassVar, Self

from palisade.interfaces.errors import ConfigurationError, UnknownMessageKeyError
from palisade.interfaces.validator import ValidationResult, Validator

logger = logging.getLogger(__name__)

UNLIMITED = -1
ELLIPSIS = "..."
OBSCURE_CHAR = "*"

_CAMEL_BOUNDARY = re.compile(r"(?<!^)(?=[A-Z])")


def normalize_option_keys(options: Mapping[str, Any]) -> dict[str, Any]:
    """Return `options` with camelCase keys converted to snake_case.

    ``{"allowRelative": False}`` becomes ``{"allow_relative": False}``; keys that
    are already snake_case pass through unchanged.
    """
    return {_CAMEL_BOUNDARY.sub("_", key).lower(): value for key, value in options.items()}


def format_value(value: Any) -> str:
    """Render an input value for use in a message."""
    if value is None:
        return ""
    if isinstance(value, (str, int, float)):
        return str(value)
    if isinstance(value, (list, tuple, dict, set)):
        return repr(value)
    return f"{type(value).__name__} object"


class AbstractValidator(Validator):
    """Base class wiring message templates into `ValidationResult`s.

    Subclasses declare:
        MESSAGE_TEMPLATES: failure-kind key -> default template.
        MESSAGE_VARIABLES: placeholder name -> attribute holding its value.
    """

    MESSAGE_TEMPLATES: ClassVar[Mapping[str, str]] = {}
    MESSAGE_VARIABLES: ClassVar[Mapping[str, str]] = {}

    def __init__(
        self,
        *,
        messages: Mapping[str, str] | None = None,
        value_obscured: bool = False,
        message_length: int = UNLIMITED,
    ) -> None:
        self._message_templates = dict(self.MESSAGE_TEMPLATES)
        self.value_obscured = value_obscured
        self.message_length = message_length
        if messages:
            self.set_messages(messages)

    # --------------------------------------------------------------------- #
    # Options
    # --------------------------------------------------------------------- #

    @property
    def message_templates(self) -> dict[str, str]:
        """The templates currently in effect, keyed by failure kind."""
        return dict(self._message_templates)

    @property
    def message_variables(self) -> dict[str, str]:
        """Placeholder names available to templates besides ``%value%``."""
        return dict(self.MESSAGE_VARIABLES)

    def _options(self) -> dict[str, Any]:
        return {
            "message_templates": self.message_templates,
            "message_variables": self.message_variables,
            "value_obscured": self.value_obscured,
            "message_length": self.message_length,
        }

    def get_option(self, name: str) -> Any:
        """Return the configured value of option `name`.

        Raises:
            ConfigurationError: If the validator has no such option.
        """
        options = self._options()
        key = normalize_option_keys({name: None}).popitem()[0]
        if key not in options:
            raise ConfigurationError(
                f"Invalid option '{name}' for {type(self).__name__}"
            )
        return options[key]

    def set_message(self, template: str, key: str | None = None) -> Self:
        """Override the template for `key`, or for every key when `key` is None.

        Raises:
            UnknownMessageKeyError: If `key` is not a failure kind of this validator.
        """
        if key is None:
            for existing in self._message_templates:
                self._message_templates[existing] = template
            return self
        if key not in self._message_templates:
            raise UnknownMessageKeyError(key, type(self).__name__)
        self._message_templates[key] = template
        return self

    def set_messages(self, templates: Mapping[str, str]) -> Self:
        """Override several templates at once."""
        for key, template in templates.items():
            self.set_message(template, key)
        return self

    # --------------------------------------------------------------------- #
    # Result construction
    # --------------------------------------------------------------------- #

    def _render(self, key: str, value: Any) -> str:
        message = self._message_templates[key]

        rendered_value = format_value(value)
        if self.value_obscured:
            rendered_value = OBSCURE_CHAR * len(rendered_value)
        message = message.replace("%value%", rendered_value)

        for placeholder, attribute in self.MESSAGE_VARIABLES.items():
            message = message.replace(
                f"%{placeholder}%", format_value(getattr(self, attribute, None))
            )

        if self.message_length > UNLIMITED and len(message) > self.message_length:
            message = message[: max(self.message_length - len(ELLIPSIS), 0)] + ELLIPSIS
        return message

    def _result(self, value: Any, *failures: str) -> ValidationResult:
        """Build the result for `value` with the given failure kinds (none = valid)."""
        if failures:
            logger.debug("%s failed for %r: %s", type(self).__name__, value, failures)
        return ValidationResult(
            value=value,
            failures=failures,
            messages={key: self._render(key, value) for key in failures},
        )
