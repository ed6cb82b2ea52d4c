"""Exception hierarchy for PALISADE validators.

Two families:

- `ConfigurationError` and its subclasses signal misuse (no adapter, an
  unknown URI handler, a malformed exclusion). They are raised at construction,
  in setters, or at the start of `is_valid`, and are never turned into a
  `False` validation result.
- `QueryExecutionError` wraps driver failures raised while running the
  lookup query.

Validation failures themselves are not exceptions.
"""


class ValidatorError(Exception):
    """Base class for PALISADE validator errors."""


class ConfigurationError(ValidatorError):
    """A validator was configured or wired incorrectly."""


class MissingAdapterError(ConfigurationError):
    """No database adapter was supplied and no default adapter is set."""

    def __init__(self, message: str = "No database adapter present") -> None:
        super().__init__(message)


class InvalidUriHandlerError(ConfigurationError):
    """A URI handler spec could not be resolved to a usable handler.

    Attributes:
        spec: The identifier, class or object that failed to resolve.
    """

    def __init__(self, spec: object, reason: str) -> None:
        super().__init__(f"Invalid URI handler {spec!r}: {reason}")
        self.spec = spec


class InvalidExclusionError(ConfigurationError):
    """An exclusion clause is neither None, a field/value mapping, nor a string."""


class UnknownMessageKeyError(ConfigurationError):
    """A message template was set for a key the validator does not define.

    Attributes:
        key: The unknown message key.
        validator: Name of the validator class.
    """

    def __init__(self, key: str, validator: str) -> None:
        super().__init__(f"No message template exists for key '{key}' on {validator}")
        self.key = key
        self.validator = validator


class QueryExecutionError(ValidatorError):
    """The database adapter failed to execute the lookup query."""
