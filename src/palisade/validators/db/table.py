"""Table references for record validators."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass

from sqlalchemy import TableClause, column, table

from palisade.interfaces.errors import ConfigurationError

TABLE_KEYS = frozenset({"table", "schema"})


@dataclass(frozen=True, slots=True)
class TableReference:
    """A table name with an optional schema qualifier."""

    table: str
    schema: str | None = None

    def __post_init__(self) -> None:
        if not isinstance(self.table, str) or not self.table.strip():
            raise ConfigurationError("Table name must be a non-empty string")
        if self.schema is not None and not self.schema.strip():
            raise ConfigurationError("Schema, when given, must be a non-empty string")

    @classmethod
    def from_spec(
        cls, spec: str | Mapping[str, str] | TableReference, schema: str | None = None
    ) -> TableReference:
        """Build a reference from a name, a ``{"table", "schema"}`` mapping, or a reference.

        An explicit `schema` argument wins over one found in `spec`.

        Raises:
            ConfigurationError: If no table name can be found in `spec`, or a
                mapping holds keys other than ``table`` and ``schema``.
        """
        match spec:
            case TableReference():
                return cls(spec.table, schema or spec.schema)
            case str():
                return cls(spec, schema)
            case Mapping():
                if "table" not in spec:
                    raise ConfigurationError(
                        f"Table mapping must contain a 'table' key, got {dict(spec)!r}"
                    )
                if unknown := sorted(set(spec) - TABLE_KEYS):
                    raise ConfigurationError(
                        f"Unknown table mapping key(s) {unknown!r}; expected 'table' and 'schema'"
                    )
                return cls(spec["table"], schema or spec.get("schema"))
            case _:
                raise ConfigurationError(
                    f"Expected a table name, mapping or TableReference, got {type(spec).__name__}"
                )

    @property
    def qualified_name(self) -> str:
        """``schema.table`` when a schema is set, otherwise ``table``."""
        return f"{self.schema}.{self.table}" if self.schema else self.table

    def to_clause(self, *column_names: str) -> TableClause:
        """Return a lightweight SQLAlchemy table clause exposing `column_names`."""
        return table(self.table, *(column(name) for name in column_names), schema=self.schema)
