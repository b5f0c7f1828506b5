import sys
import time
from typing import Callable, TextIO

from loguru import logger

from difflife.diffgrid import DiffGrid
from difflife.grid import BoolGrid
from difflife.render import rewind
from difflife.stepper import step

Renderer = Callable[[BoolGrid, DiffGrid], str]


class Simulation:
    """Owns the two generation buffers and the neighbour counts for one run.

    The buffers trade roles every generation by flipping a selector bit;
    cell data is never copied between them.
    """

    def __init__(self, grid: BoolGrid, counts: DiffGrid | None = None):
        if counts is None:
            counts = DiffGrid.seed(grid)
        elif (counts.width, counts.height) != (grid.width, grid.height):
            raise ValueError(
                f"Counts are {counts.width}×{counts.height} but grid is {grid.width}×{grid.height}"
            )
        self._buffers = (grid, BoolGrid(grid.width, grid.height))
        self._current = 0
        self.counts = counts
        self.generation = 0

    @property
    def width(self) -> int:
        return self.current.width

    @property
    def height(self) -> int:
        return self.current.height

    @property
    def current(self) -> BoolGrid:
        """The latest generation. Overwritten two steps later; copy() it to keep it."""
        return self._buffers[self._current]

    def advance(self) -> BoolGrid:
        old = self._buffers[self._current]
        new = self._buffers[1 - self._current]
        flips = step(old, new, self.counts)
        self._current ^= 1
        self.generation += 1
        logger.debug(f"Generation {self.generation}: {flips} flips, {new.population()} alive")
        return new

    def run(
        self,
        generations: int,
        render: Renderer | None = None,
        pause: float = 0.0,
        sink: TextIO | None = None,
    ) -> BoolGrid:
        """Render then step, ``generations`` times. Returns the final grid."""
        if sink is None:
            sink = sys.stdout
        logger.info(
            f"Running {generations} generations on {self.width}×{self.height} grid "
            f"from generation {self.generation}"
        )
        previous_lines = 0
        start = time.perf_counter()
        for _ in range(generations):
            if render is not None:
                frame = render(self.current, self.counts)
                if previous_lines:
                    sink.write(rewind(previous_lines))
                sink.write(frame + "\n")
                sink.flush()
                previous_lines = frame.count("\n") + 1

            self.advance()

            if pause > 0:
                time.sleep(pause)

        duration = time.perf_counter() - start
        logger.info(
            f"Finished at generation {self.generation} in {duration:.3f}s, "
            f"{self.current.population()} alive"
        )
        return self.current
