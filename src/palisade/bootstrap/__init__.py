"""Bootstrap (composition root) for PALISADE.

Wires concrete adapters into validators: builds the SQLAlchemy database
adapter from configuration and installs it as the default adapter for record
validators.

Import rules:
- Entry points import *this* package for wiring.
- This package may import `palisade.adapters`, `palisade.validators`,
  `palisade.interfaces` and `palisade.config`.
- Inner layers must not import `palisade.bootstrap`.
"""

from palisade.adapters.uri import default_registry as uri_handler_registry

from .bootstrap import build_database_adapter, configure_default_adapter

__all__ = [
    "build_database_adapter",
    "configure_default_adapter",
    "uri_handler_registry",
]
