"""One generation of B3/S23 driven by the committed neighbour counts."""

from difflife.diffgrid import DiffGrid
from difflife.grid import BoolGrid
from difflife.wrap import neighbour_indices


def next_state(alive: bool, live_neighbours: int) -> bool:
    """Birth on 3, survival on 2 or 3."""
    return live_neighbours == 3 or (alive and live_neighbours == 2)


def step(old: BoolGrid, new: BoolGrid, counts: DiffGrid) -> int:
    """Write the generation after ``old`` into ``new`` and merge the count deltas.

    Every rule evaluation reads the counts committed for ``old``; flips only
    touch the pending deltas until the final merge. Returns the number of
    cells that changed state.
    """
    width, height = old.width, old.height
    if (new.width, new.height) != (width, height) or (counts.width, counts.height) != (width, height):
        raise ValueError(
            f"Mismatched dimensions: old {width}×{height}, new {new.width}×{new.height}, "
            f"counts {counts.width}×{counts.height}"
        )

    old_cells = old.data
    new_cells = new.data
    flips = 0
    for y in range(height):
        for x in range(width):
            index = y * width + x
            old_value = bool(old_cells[index])
            new_value = next_state(old_value, counts.read_committed(index))
            new_cells[index] = new_value

            if new_value != old_value:
                flips += 1
                for n in neighbour_indices(x, y, width, height):
                    counts.accumulate(n, new_value)

    counts.merge()
    return flips
