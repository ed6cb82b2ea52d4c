"""Database adapter port.

Record validators build a SQLAlchemy `Select` and hand it to an adapter; the
adapter owns connections, parameter binding and execution. Only the first row
is ever requested, so implementations must not materialize the full result.
"""

import abc
from typing import Any

# pylint: disable=too-few-public-methods


class DatabaseAdapter(abc.ABC):
    """Contract for executing a lookup statement."""

    @abc.abstractmethod
    def first_row(self, statement: Any) -> Any | None:
        """Execute `statement` and return its first row, or None if there is none.

        Raises:
            QueryExecutionError: If the underlying driver fails.
        """
