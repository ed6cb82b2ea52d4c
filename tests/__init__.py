"""PALISADE test suite.

Folder taxonomy
- unit/         : Isolated, fast checks of a single module/class/function.
- contract/     : Shared behavior/invariants enforced across multiple implementations.
- integration/  : Real interactions with a database (SQLite) and the environment.
- e2e/          : The ``palisade`` CLI driven through Click's test runner.
- helpers/      : Test doubles for ports and shared assertions (no tests here).
- fixtures/     : Shared pytest fixtures loaded as plugins (no tests here).

General guidance
- Keep unit fast and deterministic (no real I/O); prefer fakes over mocks at boundaries.
- Integration hits real dependencies with realistic setup/teardown.
- Contract parametrizes implementations to ensure consistent behavior.
- Property-based tests live with the layer they exercise and use @pytest.mark.property.
- Markers: unit, contract, integration, e2e, property
"""
