"""ANSI truecolour rendering of grids and neighbour counts."""

from typing import Callable, Dict

from difflife.diffgrid import DiffGrid
from difflife.grid import BoolGrid

RESET = "\033[0m"
BORDER = "\033[48;2;127;0;255m"
ALIVE = "\033[48;2;255;255;255m"
DEAD = "\033[48;2;0;0;0m"
DYING = "\033[38;2;255;0;0m"
BORN = "\033[38;2;0;255;0m"
STEADY = "\033[38;2;127;127;127m"


def _border(width: int) -> str:
    return BORDER + " " * (width * 2 + 4) + RESET


def render_grid(grid: BoolGrid) -> str:
    lines = [_border(grid.width)]
    for row in grid.to_array():
        cells = "".join(ALIVE + "  " if cell else DEAD + "  " for cell in row)
        lines.append(BORDER + "  " + cells + BORDER + "  " + RESET)
    lines.append(_border(grid.width))
    return "\n".join(lines)


def render_counts(grid: BoolGrid, counts: DiffGrid) -> str:
    """Plain digit dump of the live counts, one row per line."""
    return "\n".join("".join(str(int(n)) for n in row) for row in counts.live_counts())


def count_character(live: int) -> str:
    if live == 0:
        return " "
    if 0 < live <= 8:
        return str(live)
    return "E"


def render_debug(grid: BoolGrid, counts: DiffGrid) -> str:
    """Grid with each cell's count, red where a live cell dies, green where one is born."""
    lines = [_border(grid.width)]
    live_counts = counts.live_counts()
    for y, row in enumerate(grid.to_array()):
        parts = [BORDER + "  "]
        for x, alive in enumerate(row):
            live = int(live_counts[y, x])
            if alive and live not in (2, 3):
                colour = DYING
            elif not alive and live == 3:
                colour = BORN
            else:
                colour = STEADY
            parts.append((ALIVE if alive else DEAD) + colour + " " + count_character(live))
        parts.append(BORDER + "  " + RESET)
        lines.append("".join(parts))
    lines.append(_border(grid.width))
    return "\n".join(lines)


def rewind(lines: int) -> str:
    """Move the cursor up over the previous frame and clear to the end of the screen."""
    return f"\033[{lines}A\033[0J"


RENDERERS: Dict[str, Callable[[BoolGrid, DiffGrid], str]] = {
    "grid": lambda grid, counts: render_grid(grid),
    "counts": render_counts,
    "debug": render_debug,
}

DISPLAY_MODES = (*RENDERERS, "none")
