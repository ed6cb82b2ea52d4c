"""Contract tests.

Purpose
- State the behavior every URI handler and database adapter must offer once,
  then run it against each implementation.

Guidelines
- Parametrize implementations via fixtures.
- Assert only the public contract (inputs/outputs/errors), not internals.
"""
