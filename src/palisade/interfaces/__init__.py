"""Interfaces (application boundary) for PALISADE.

Framework-free contracts shared by validators and adapters: the validator
ABC and its result DTO, the database adapter port, the URI handler port, and
the exception hierarchy.

Dependency rule: this package is independent; do not import from any other
`palisade.*` module. It may be imported by `palisade.validators`,
`palisade.adapters`, and `palisade.bootstrap`.
"""
