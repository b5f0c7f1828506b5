"""Toroidal index wrapping for unit neighbour offsets."""

from typing import List, Tuple

# Moore neighbourhood, row-major from the top-left
NEIGHBOUR_OFFSETS: Tuple[Tuple[int, int], ...] = (
    (-1, -1), (0, -1), (1, -1),
    (-1, 0),           (1, 0),
    (-1, 1),  (0, 1),  (1, 1),
)


def wrap_index(n: int, dimension: int) -> int:
    """Wrap n into [0, dimension).

    Only one step past either edge is handled: -1 maps to the last index
    and anything past the end maps to 0. Neighbour offsets are always +/-1.
    """
    if n < 0:
        return dimension - 1
    if n > dimension - 1:
        return 0
    return n


def neighbour_indices(x: int, y: int, width: int, height: int) -> List[int]:
    """Linear indices of the 8 toroidal neighbours of (x, y)."""
    return [
        wrap_index(y + dy, height) * width + wrap_index(x + dx, width)
        for dx, dy in NEIGHBOUR_OFFSETS
    ]
