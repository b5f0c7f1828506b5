"""Conway's Game of Life on a torus, stepped by incremental neighbour counts."""

from difflife.diffgrid import CountOverflowError, DiffGrid
from difflife.errors import DiffLifeError
from difflife.grid import BoolGrid
from difflife.simulation import Simulation
from difflife.stepper import step
from difflife.wrap import NEIGHBOUR_OFFSETS, wrap_index

__all__ = [
    "BoolGrid",
    "CountOverflowError",
    "DiffGrid",
    "DiffLifeError",
    "NEIGHBOUR_OFFSETS",
    "Simulation",
    "step",
    "wrap_index",
]

__version__ = "0.1.0"
