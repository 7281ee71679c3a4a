"""Cell states and grid geometry shared by the generator and the solver."""

from __future__ import annotations

from enum import IntEnum
from typing import Iterator, Optional, Tuple

import numpy as np

Coordinate = Tuple[int, int]

# Scan order: up, down, left, right.
DIRECTIONS: Tuple[Coordinate, ...] = ((-1, 0), (1, 0), (0, -1), (0, 1))


class Cell(IntEnum):
    WALL = 0
    OPEN = 1
    START = 2
    END = 3
    PATH = 4


def new_grid(rows: int, cols: int) -> np.ndarray:
    """Allocate a ``rows`` x ``cols`` grid filled with walls."""

    if rows < 1 or cols < 1:
        raise ValueError("rows and cols must be at least 1")
    return np.full((rows, cols), Cell.WALL, dtype=np.int8)


def in_bounds(grid: np.ndarray, row: int, col: int) -> bool:
    rows, cols = grid.shape
    return 0 <= row < rows and 0 <= col < cols


def neighbors(grid: np.ndarray, cell: Coordinate) -> Iterator[Coordinate]:
    """Yield the in-bounds axis-aligned neighbors of ``cell`` in scan order."""

    r, c = cell
    for dr, dc in DIRECTIONS:
        nr, nc = r + dr, c + dc
        if in_bounds(grid, nr, nc):
            yield nr, nc


def find_cell(grid: np.ndarray, state: Cell) -> Optional[Coordinate]:
    """Return the first row-major coordinate holding ``state``."""

    rows, cols = grid.shape
    for r in range(rows):
        for c in range(cols):
            if grid[r, c] == state:
                return r, c
    return None


def ensure_grid(grid: np.ndarray) -> np.ndarray:
    if not isinstance(grid, np.ndarray):
        raise ValueError("grid must be a numpy array")
    if grid.ndim != 2 or 0 in grid.shape:
        raise ValueError(f"grid must be a non-empty 2D array, got shape {grid.shape}")
    return grid


__all__ = [
    "Cell",
    "Coordinate",
    "DIRECTIONS",
    "ensure_grid",
    "find_cell",
    "in_bounds",
    "neighbors",
    "new_grid",
]
