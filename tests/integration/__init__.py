"""Integration tests.

Purpose
- Run validators and adapters against real SQLite engines, in memory and on disk.

Guidelines
- Seed data through the fixtures in `tests.fixtures.sqlite`.
- Minimize mocking; a failing query should fail the way it would in production.
"""
