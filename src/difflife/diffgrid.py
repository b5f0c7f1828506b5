"""Live-neighbour counts maintained by per-generation deltas.

``committed`` holds the count of live neighbours for every cell as of the
last merged generation. While a generation is being computed, flips are
recorded in ``pending`` and only folded into ``committed`` by ``merge()``,
so every rule evaluation in the pass sees the previous generation's counts.
"""

from typing import Self

import numpy as np
from loguru import logger

from difflife.errors import DiffLifeError
from difflife.grid import BoolGrid
from difflife.wrap import neighbour_indices

MAX_NEIGHBOURS = 8


class CountOverflowError(DiffLifeError, ArithmeticError):
    """A merged neighbour count fell outside [0, 8]."""


class DiffGrid:
    def __init__(self, width: int, height: int):
        if width < 1 or height < 1:
            raise ValueError(f"Grid dimensions must be positive, got {width}×{height}")
        self.width = width
        self.height = height
        self._committed = np.zeros(width * height, dtype=np.uint8)
        self._pending = np.zeros(width * height, dtype=np.int8)

    @classmethod
    def seed(cls, grid: BoolGrid) -> Self:
        """Count every cell's live neighbours from scratch. Done once per run."""
        counts = cls(grid.width, grid.height)
        cells = grid.data
        for y in range(grid.height):
            for x in range(grid.width):
                live = 0
                for n in neighbour_indices(x, y, grid.width, grid.height):
                    if cells[n]:
                        live += 1
                counts._committed[y * grid.width + x] = live
        logger.debug(f"Seeded neighbour counts for {grid.width}×{grid.height} grid")
        return counts

    def __len__(self) -> int:
        return self._committed.size

    def _check(self, index: int) -> None:
        if not 0 <= index < self._committed.size:
            raise IndexError(f"Cell index {index} outside grid of {self._committed.size} cells")

    def read_committed(self, index: int) -> int:
        self._check(index)
        return int(self._committed[index])

    def read_live(self, index: int) -> int:
        """Committed count plus pending delta. Only meaningful between steps."""
        self._check(index)
        return int(self._committed[index]) + int(self._pending[index])

    def accumulate(self, index: int, increase: bool) -> None:
        """Record a +1 (increase) or -1 delta for the cell at index."""
        self._check(index)
        if increase:
            self._pending[index] += 1
        else:
            self._pending[index] -= 1

    def merge(self) -> None:
        """Fold pending deltas into the committed counts and clear them."""
        merged = self._committed.astype(np.int16) + self._pending
        if merged.min() < 0 or merged.max() > MAX_NEIGHBOURS:
            bad = int(np.flatnonzero((merged < 0) | (merged > MAX_NEIGHBOURS))[0])
            raise CountOverflowError(
                f"Cell {bad} would hold {int(merged[bad])} live neighbours after merge"
            )
        self._committed[:] = merged
        self._pending.fill(0)

    # Diagnostics

    def committed_counts(self) -> np.ndarray:
        return self._committed.reshape(self.height, self.width).copy()

    def live_counts(self) -> np.ndarray:
        live = self._committed.astype(np.int16) + self._pending
        return live.reshape(self.height, self.width)

    def pending_is_clear(self) -> bool:
        return not self._pending.any()

    def max_pending_magnitude(self) -> int:
        return int(np.abs(self._pending.astype(np.int16)).max(initial=0))

    def __repr__(self) -> str:
        return f"DiffGrid({self.width}×{self.height}, pending={'clear' if self.pending_is_clear() else 'dirty'})"
