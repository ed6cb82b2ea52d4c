"""Entrypoints (inbound adapters) for PALISADE.

Expose validators to the outside world through the command line. Parse
inputs, wire dependencies through `palisade.bootstrap`, run validators and
present results.

Dependency rule: may import `palisade.validators` and `palisade.bootstrap`;
avoid importing `palisade.adapters` directly.
"""
