from __future__ import annotations

import pytest

from difflife.grid import BoolGrid
from difflife.patterns import PATTERNS, from_pattern, pattern_names, pattern_size, stamp


def test_pattern_names_sorted() -> None:
    assert pattern_names() == sorted(PATTERNS)
    assert {"block", "blinker", "glider"} <= set(pattern_names())


@pytest.mark.parametrize("name", sorted(PATTERNS))
def test_from_pattern_places_every_cell(name: str) -> None:
    grid = from_pattern(20, 20, name)
    assert grid.population() == len(PATTERNS[name])


def test_from_pattern_centres_by_default() -> None:
    grid = from_pattern(6, 6, "block")
    assert [(x, y) for y in range(6) for x in range(6) if grid.get(x, y)] == [(2, 2), (3, 2), (2, 3), (3, 3)]


def test_stamp_wraps_past_the_edge() -> None:
    grid = BoolGrid(4, 4)
    stamp(grid, "block", 3, 3)
    assert grid.get(3, 3) and grid.get(0, 3) and grid.get(3, 0) and grid.get(0, 0)


def test_pattern_size() -> None:
    assert pattern_size("blinker") == (3, 1)
    assert pattern_size("glider") == (3, 3)


def test_unknown_pattern_lists_known_names() -> None:
    with pytest.raises(KeyError, match="glider"):
        from_pattern(10, 10, "spaceship-9000")
