"""Record existence validators.

`RecordExists` passes when a row with ``field = value`` exists in the
configured table; `NoRecordExists` passes when none does. Both share one
query builder and one lookup; they differ only in which outcome counts as a
pass.

Behaviour
- Exactly one query per call, through a `DatabaseAdapter`. Nothing is written.
- The adapter comes from the instance or, failing that, from the process-wide
  default set with `AbstractRecordValidator.set_default_adapter`. With neither,
  `is_valid` raises `MissingAdapterError`.
- Driver errors are not swallowed; `QueryExecutionError` propagates.

Example:
    ```py
    validator = NoRecordExists("users", "email", {"field": "id", "value": 7}, adapter)
    validator.is_valid("ada@example.com")
    ```
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any, ClassVar

from sqlalchemy import Select, select

from palisade.interfaces.errors import ConfigurationError, MissingAdapterError
from palisade.validators.base import AbstractValidator, normalize_option_keys

from .exclusion import Exclusion, ExclusionSpec, coerce_exclusion, exclusion_condition
from .table import TableReference

if TYPE_CHECKING:
    from palisade.interfaces.db_adapter import DatabaseAdapter
    from palisade.interfaces.validator import ValidationResult

logger = logging.getLogger(__name__)

# Bind parameter name that a custom select may use for the input value
VALUE_PARAM = "value"  # pragma: no mutate


class AbstractRecordValidator(AbstractValidator):
    """Common configuration and lookup for record validators.

    Subclasses set `EXPECT_RECORD` (the lookup outcome that counts as valid)
    and `FAILURE_KEY` (the message key recorded otherwise).

    Args:
        table: Table name, ``{"table": ..., "schema": ...}`` mapping, a
            `TableReference`, or (as the only argument) an options mapping with
            any of the keyword names below.
        field: Column compared against the input value.
        exclude: None, ``{"field": ..., "value": ...}``, or a raw SQL condition.
        adapter: Database adapter; falls back to the default adapter.
        schema: Schema qualifier; overrides one given in `table`.
        select: Prebuilt statement used instead of the generated one.
        **options: Message options accepted by `AbstractValidator`.
    """

    EXPECT_RECORD: ClassVar[bool]
    FAILURE_KEY: ClassVar[str]
    MESSAGE_VARIABLES = {"table": "table", "schema": "schema", "field": "field"}

    _default_adapter: ClassVar[DatabaseAdapter | None] = None

    def __init__(  # pylint: disable=too-many-arguments, too-many-positional-arguments
        self,
        table: str | Mapping[str, Any] | TableReference | None = None,
        field: str | None = None,
        exclude: ExclusionSpec = None,
        adapter: DatabaseAdapter | None = None,
        **options: Any,
    ) -> None:
        if isinstance(table, Mapping) and field is None and exclude is None and adapter is None:
            options = {**normalize_option_keys(table), **options}
            table = options.pop("table", None)
            field = options.pop("field", None)
            exclude = options.pop("exclude", None)
            adapter = options.pop("adapter", None)
        schema = options.pop("schema", None)
        custom_select = options.pop("select", None)
        super().__init__(**options)

        if table is None:
            raise ConfigurationError("Table or schema option missing")
        self._table_ref = TableReference.from_spec(table, schema)
        self.field = field
        self._exclude: Exclusion = coerce_exclusion(exclude)
        self._adapter = adapter
        self._select: Select | None = custom_select

    # --------------------------------------------------------------------- #
    # Default adapter (process-wide)
    # --------------------------------------------------------------------- #

    @staticmethod
    def set_default_adapter(adapter: DatabaseAdapter) -> None:
        """Install `adapter` as the fallback for every record validator."""
        AbstractRecordValidator._default_adapter = adapter

    @staticmethod
    def get_default_adapter() -> DatabaseAdapter | None:
        """Return the process-wide default adapter, if any."""
        return AbstractRecordValidator._default_adapter

    @staticmethod
    def clear_default_adapter() -> None:
        """Remove the process-wide default adapter."""
        AbstractRecordValidator._default_adapter = None

    # --------------------------------------------------------------------- #
    # Configuration
    # --------------------------------------------------------------------- #

    @property
    def adapter(self) -> DatabaseAdapter | None:
        """The adapter set on this instance (the default adapter is not reported)."""
        return self._adapter

    @adapter.setter
    def adapter(self, adapter: DatabaseAdapter | None) -> None:
        self._adapter = adapter

    @property
    def table_reference(self) -> TableReference:
        """The configured table and schema."""
        return self._table_ref

    @property
    def table(self) -> str:
        """The configured table name."""
        return self._table_ref.table

    @table.setter
    def table(self, name: str) -> None:
        self._table_ref = TableReference(name, self._table_ref.schema)

    @property
    def schema(self) -> str | None:
        """The configured schema, if any."""
        return self._table_ref.schema

    @schema.setter
    def schema(self, schema: str | None) -> None:
        self._table_ref = TableReference(self._table_ref.table, schema)

    @property
    def exclude(self) -> Exclusion:
        """The configured exclusion, already coerced to a variant."""
        return self._exclude

    @exclude.setter
    def exclude(self, exclude: ExclusionSpec) -> None:
        self._exclude = coerce_exclusion(exclude)

    @property
    def select(self) -> Select | None:
        """A custom statement replacing the generated one, if set."""
        return self._select

    @select.setter
    def select(self, statement: Select | None) -> None:
        self._select = statement

    def _options(self) -> dict[str, Any]:
        return {
            **super()._options(),
            "table": self.table,
            "schema": self.schema,
            "field": self.field,
            "exclude": self._exclude,
            "adapter": self._adapter,
            "select": self._select,
        }

    # --------------------------------------------------------------------- #
    # Lookup
    # --------------------------------------------------------------------- #

    def build_select(self, value: Any) -> Select:
        """Return the statement that looks `value` up.

        A custom `select` gets `value` bound to its ``:value`` parameter, if it
        declares one. Otherwise the statement is
        ``SELECT field FROM [schema.]table WHERE field = :value [AND exclusion]``.

        Raises:
            ConfigurationError: If no field is configured and no custom select is set.
        """
        if self._select is not None:
            return self._select.params({VALUE_PARAM: value})

        if not self.field:
            raise ConfigurationError(f"No field configured for {type(self).__name__}")

        columns = dict.fromkeys((self.field, *self._exclude.columns))
        target = self._table_ref.to_clause(*columns)
        statement = select(target.c[self.field]).where(target.c[self.field] == value)

        condition = exclusion_condition(self._exclude, target)
        if condition is not None:
            statement = statement.where(condition)
        return statement

    def _resolve_adapter(self) -> DatabaseAdapter:
        adapter = self._adapter or AbstractRecordValidator._default_adapter
        if adapter is None:
            raise MissingAdapterError()
        return adapter

    def _record_found(self, value: Any) -> bool:
        adapter = self._resolve_adapter()
        statement = self.build_select(value)
        logger.debug(
            "Looking up %s=%r in %s", self.field, value, self._table_ref.qualified_name
        )
        return adapter.first_row(statement) is not None

    def validate(self, value: Any) -> ValidationResult:
        if self._record_found(value) is self.EXPECT_RECORD:
            return self._result(value)
        return self._result(value, self.FAILURE_KEY)


class RecordExists(AbstractRecordValidator):
    """Valid when a record matching the input exists."""

    NO_RECORD_FOUND = "noRecordFound"

    EXPECT_RECORD = True
    FAILURE_KEY = NO_RECORD_FOUND
    MESSAGE_TEMPLATES = {
        NO_RECORD_FOUND: "No record matching '%value%' was found in '%table%'",
    }


class NoRecordExists(AbstractRecordValidator):
    """Valid when no record matching the input exists."""

    RECORD_FOUND = "recordFound"

    EXPECT_RECORD = False
    FAILURE_KEY = RECORD_FOUND
    MESSAGE_TEMPLATES = {
        RECORD_FOUND: "A record matching '%value%' was found in '%table%'",
    }
