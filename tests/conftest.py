"""Global pytest fixtures and default marks for MAILINGLIST."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import pytest

if TYPE_CHECKING:
    from sqlalchemy.engine import Engine

# pylint: disable=unused-argument

pytest_plugins = [
    "tests.fixtures.sqlite",
    "tests.fixtures.postgres",
    "tests.fixtures.datagen",
]

TESTS_ROOT = Path(__file__).parent.resolve()

# top-level test directory -> default marker
SUITE_MARKERS = {
    "unit": pytest.mark.unit,
    "contract": pytest.mark.contract,
    "integration": pytest.mark.integration,
    "e2e": pytest.mark.e2e,
}


@pytest.hookimpl(tryfirst=True)
def pytest_collection_modifyitems(
    config: pytest.Config, items: list[pytest.Item]
) -> None:
    """Mark every item with the suite named by its top-level test directory.

    Items that already carry one of the suite marks keep it.
    """
    for item in items:
        try:
            suite = item.path.resolve().relative_to(TESTS_ROOT).parts[0]
        except ValueError:
            continue
        if (mark := SUITE_MARKERS.get(suite)) is None:
            continue
        if not any(m.name in SUITE_MARKERS for m in item.iter_markers()):
            item.add_marker(mark)


# Helper to route to an existing engine fixture by name
@pytest.fixture
def engine(request: pytest.FixtureRequest) -> Engine:
    """Indirection fixture to parametrize over engine-providing fixtures.

    Example:
        ```py
        @pytest.mark.parametrize("engine", ["postgres_engine", "sqlite_engine_file"], indirect=True)
        def test_something(engine): ...
        ```
    """
    return request.getfixturevalue(request.param)
