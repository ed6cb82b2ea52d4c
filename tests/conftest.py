"""Global pytest fixtures for PALISADE."""

from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path
from typing import TYPE_CHECKING

import pytest

from palisade.validators.db import AbstractRecordValidator

if TYPE_CHECKING:
    from sqlalchemy.engine import Engine

# pylint: disable=unused-argument

pytest_plugins = [
    "tests.fixtures.sqlite",
]

TESTS_ROOT = Path(__file__).parent.resolve()
# top-level folder -> marker applied to everything collected beneath it
FOLDER_MARKERS = ("unit", "contract", "integration", "e2e")


@pytest.hookimpl(tryfirst=True)
def pytest_collection_modifyitems(
    config: pytest.Config, items: list[pytest.Item]
) -> None:
    """Add the folder's default mark to items that do not carry it already."""
    for item in items:
        try:
            folder = item.path.resolve().relative_to(TESTS_ROOT).parts[0]
        except (ValueError, IndexError):
            continue
        if folder not in FOLDER_MARKERS:
            continue
        if not any(marker.name == folder for marker in item.iter_markers()):
            item.add_marker(getattr(pytest.mark, folder))


@pytest.fixture(autouse=True)
def _no_default_adapter() -> Iterator[None]:
    """Make sure no test leaks a process-wide default adapter into another."""
    AbstractRecordValidator.clear_default_adapter()
    yield
    AbstractRecordValidator.clear_default_adapter()


# Helper to route to an existing engine fixture by name
@pytest.fixture
def engine(request: pytest.FixtureRequest) -> Engine:
    """Indirection fixture to parametrize over engine-providing fixtures.

    Example:
        ```py
        @pytest.mark.parametrize("engine", ["sqlite_engine_memory", "sqlite_engine_file"], indirect=True)
        def test_something(engine): ...
        ```
    """
    return request.getfixturevalue(request.param)
