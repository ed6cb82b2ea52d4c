"""Adapters for PALISADE.

Concrete implementations of the ports in `palisade.interfaces`: the
SQLAlchemy database adapter and the built-in URI handlers.
"""
