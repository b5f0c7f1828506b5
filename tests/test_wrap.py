from __future__ import annotations

import pytest

from difflife.wrap import NEIGHBOUR_OFFSETS, neighbour_indices, wrap_index


@pytest.mark.parametrize("dimension", [1, 2, 5, 64])
def test_wrap_below_zero(dimension: int) -> None:
    assert wrap_index(-1, dimension) == dimension - 1


@pytest.mark.parametrize("dimension", [1, 2, 5, 64])
def test_wrap_past_end(dimension: int) -> None:
    assert wrap_index(dimension, dimension) == 0


@pytest.mark.parametrize("dimension", [1, 3, 10])
def test_wrap_in_range_is_identity(dimension: int) -> None:
    for k in range(dimension):
        assert wrap_index(k, dimension) == k


def test_offsets_are_the_moore_neighbourhood() -> None:
    assert len(NEIGHBOUR_OFFSETS) == 8
    assert len(set(NEIGHBOUR_OFFSETS)) == 8
    assert (0, 0) not in NEIGHBOUR_OFFSETS
    assert all(abs(dx) <= 1 and abs(dy) <= 1 for dx, dy in NEIGHBOUR_OFFSETS)


def test_neighbour_indices_corner_wraps() -> None:
    # top-left corner of a 4×3 grid
    assert sorted(neighbour_indices(0, 0, 4, 3)) == sorted([
        2 * 4 + 3, 2 * 4 + 0, 2 * 4 + 1,
        0 * 4 + 3,            0 * 4 + 1,
        1 * 4 + 3, 1 * 4 + 0, 1 * 4 + 1,
    ])


def test_single_cell_is_its_own_neighbour() -> None:
    assert neighbour_indices(0, 0, 1, 1) == [0] * 8
