import hashlib
from typing import Self

import numpy as np


class BoolGrid:
    """Dense row-major alive/dead state for one generation."""

    def __init__(self, width: int, height: int, data: np.ndarray | None = None):
        if width < 1 or height < 1:
            raise ValueError(f"Grid dimensions must be positive, got {width}×{height}")
        self.width = width
        self.height = height
        if data is None:
            self.data = np.zeros(width * height, dtype=np.bool_)
        else:
            data = np.asarray(data, dtype=np.bool_).reshape(-1)
            if data.size != width * height:
                raise ValueError(
                    f"Expected {width * height} cells for a {width}×{height} grid, got {data.size}"
                )
            self.data = data.copy()

    @classmethod
    def random(
        cls,
        width: int,
        height: int,
        rng: np.random.Generator | None = None,
        seed: int | None = None,
    ) -> Self:
        """Each cell alive with probability 0.5, drawn from rng (or a generator seeded with seed)."""
        if rng is None:
            rng = np.random.default_rng(seed)
        bits = rng.integers(0, 2, size=width * height, dtype=np.uint8)
        return cls(width, height, bits.astype(np.bool_))

    @classmethod
    def from_array(cls, array) -> Self:
        """Build from a 2D array-like indexed [y][x]."""
        array = np.asarray(array, dtype=np.bool_)
        if array.ndim != 2:
            raise ValueError(f"Expected a 2D array, got {array.ndim} dimensions")
        height, width = array.shape
        return cls(width, height, array)

    def _index(self, x: int, y: int) -> int:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"({x}, {y}) outside {self.width}×{self.height} grid")
        return y * self.width + x

    def get(self, x: int, y: int) -> bool:
        return bool(self.data[self._index(x, y)])

    def set(self, x: int, y: int, value: bool) -> None:
        self.data[self._index(x, y)] = value

    def swap(self, other: "BoolGrid") -> None:
        """Exchange cell buffers with another grid of the same shape."""
        if (other.width, other.height) != (self.width, self.height):
            raise ValueError(
                f"Cannot swap {self.width}×{self.height} with {other.width}×{other.height}"
            )
        self.data, other.data = other.data, self.data

    def copy(self) -> Self:
        return type(self)(self.width, self.height, self.data)

    def to_array(self) -> np.ndarray:
        return self.data.reshape(self.height, self.width).copy()

    def population(self) -> int:
        return int(np.count_nonzero(self.data))

    def fingerprint(self) -> str:
        """Return SHA-256 hex digest of the grid as a flat string of 0s and 1s"""
        flat_str = "".join("1" if cell else "0" for cell in self.data)
        return hashlib.sha256(flat_str.encode("utf-8")).hexdigest()

    def __eq__(self, other) -> bool:
        if not isinstance(other, BoolGrid):
            return NotImplemented
        return (
            self.width == other.width
            and self.height == other.height
            and bool(np.array_equal(self.data, other.data))
        )

    __hash__ = None

    def __str__(self) -> str:
        """Pretty-print the grid using █ and ░"""
        lines = []
        for row in self.to_array():
            lines.append("".join("█" if cell else "░" for cell in row))
        return "\n".join(lines)

    def __repr__(self) -> str:
        return f"BoolGrid({self.width}×{self.height}, alive={self.population()})"
