"""Brute-force neighbour counting, recomputed from scratch every generation."""

import numpy as np

from difflife.grid import BoolGrid


def count_neighbours(grid: BoolGrid) -> np.ndarray:
    """Live-neighbour count of every cell as a (height, width) array."""
    cells = grid.to_array().astype(np.uint8)
    # Correct wrap-around using np.roll
    return sum(
        np.roll(np.roll(cells, dy, 0), dx, 1)
        for dy in (-1, 0, 1)
        for dx in (-1, 0, 1)
        if not (dy == 0 and dx == 0)
    )


def evolve(grid: BoolGrid) -> BoolGrid:
    neighbours = count_neighbours(grid)
    alive = grid.to_array()
    new_state = (alive & (neighbours == 2)) | (neighbours == 3)
    return BoolGrid.from_array(new_state)
