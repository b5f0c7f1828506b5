"""A handful of well-known patterns, as (dx, dy) offsets of live cells."""

from typing import Dict, List, Tuple

from difflife.grid import BoolGrid

PATTERNS: Dict[str, List[Tuple[int, int]]] = {
    "block": [(0, 0), (1, 0), (0, 1), (1, 1)],
    "blinker": [(0, 0), (1, 0), (2, 0)],
    "toad": [(1, 0), (2, 0), (3, 0), (0, 1), (1, 1), (2, 1)],
    "beacon": [(0, 0), (1, 0), (0, 1), (3, 2), (2, 3), (3, 3)],
    "glider": [(1, 0), (2, 1), (0, 2), (1, 2), (2, 2)],
    "lwss": [(1, 0), (4, 0), (0, 1), (0, 2), (4, 2), (0, 3), (1, 3), (2, 3), (3, 3)],
}


def pattern_names() -> List[str]:
    return sorted(PATTERNS)


def get_pattern(name: str) -> List[Tuple[int, int]]:
    try:
        return PATTERNS[name]
    except KeyError:
        raise KeyError(f"Unknown pattern {name!r}; known patterns: {', '.join(pattern_names())}") from None


def pattern_size(name: str) -> Tuple[int, int]:
    cells = get_pattern(name)
    return max(dx for dx, _ in cells) + 1, max(dy for _, dy in cells) + 1


def stamp(grid: BoolGrid, name: str, x: int, y: int) -> None:
    """Set the pattern's cells alive with its top-left corner at (x, y)."""
    for dx, dy in get_pattern(name):
        # offsets may run several cells past the edge
        grid.set((x + dx) % grid.width, (y + dy) % grid.height, True)


def from_pattern(
    width: int, height: int, name: str, x: int | None = None, y: int | None = None
) -> BoolGrid:
    """Empty grid with a single pattern, centred unless a corner is given."""
    pattern_width, pattern_height = pattern_size(name)
    if x is None:
        x = (width - pattern_width) // 2
    if y is None:
        y = (height - pattern_height) // 2
    grid = BoolGrid(width, height)
    stamp(grid, name, x, y)
    return grid
