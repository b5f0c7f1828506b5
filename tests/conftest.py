from __future__ import annotations

import pytest

from difflife.grid import BoolGrid


def grid_from_rows(rows: list[str]) -> BoolGrid:
    """Build a grid from strings where '#' is alive and anything else dead."""
    return BoolGrid.from_array([[ch == "#" for ch in row] for row in rows])


@pytest.fixture
def make_grid():
    return grid_from_rows


@pytest.fixture(autouse=True)
def reset_logging():
    """The CLI reconfigures loguru sinks; drop them so they don't outlive a test's captured streams."""
    yield
    from loguru import logger

    logger.remove()
