"""Unit tests.

Purpose
- Verify a single module/class/function in isolation.

Guidelines
- Prefer the fakes in `tests.helpers.fakes` over real databases at the adapter boundary.
- Prefer behavior-centric assertions over implementation details.
- Keep tests small, fast, and deterministic.
"""
