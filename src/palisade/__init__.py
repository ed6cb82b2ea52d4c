"""PALISADE

Input validators for web applications: database-backed record existence checks
and URI format checks with a configurable absolute/relative policy.
"""

__all__ = ["__version__"]
__version__ = "0.1.0"
