"""Database adapters for record validators."""

from .engine import make_engine
from .sqlalchemy_adapter import SqlAlchemyDatabaseAdapter

__all__ = ["SqlAlchemyDatabaseAdapter", "make_engine"]
