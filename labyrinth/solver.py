"""Breadth-first shortest path solver for generated mazes."""

from __future__ import annotations

import logging
from collections import deque
from typing import Deque, List, Optional, Tuple

import numpy as np

from .cells import Cell, Coordinate, ensure_grid, find_cell, neighbors
from .discovery import DiscoveryArena

logger = logging.getLogger(__name__)

UNREACHED = np.iinfo(np.int64).max


def _locate_start(grid: np.ndarray) -> Coordinate:
    start = find_cell(grid, Cell.START)
    if start is None:
        logger.debug("Grid has no start cell; searching from the origin")
        return 0, 0
    return start


def _search(grid: np.ndarray) -> Tuple[DiscoveryArena, Optional[int], np.ndarray]:
    """Run the traversal; return the arena, the End record (if reached) and distances."""

    start = _locate_start(grid)
    distances = np.full(grid.shape, UNREACHED, dtype=np.int64)
    distances[start] = 0

    arena = DiscoveryArena()
    queue: Deque[int] = deque([arena.add(start)])
    while queue:
        index = queue.popleft()
        current = arena.coord(index)
        if grid[current] == Cell.END:
            return arena, index, distances

        candidate = distances[current] + 1
        for cell in neighbors(grid, current):
            if grid[cell] == Cell.WALL:
                continue
            if candidate < distances[cell]:
                distances[cell] = candidate
                queue.append(arena.add(cell, index))

    return arena, None, distances


def shortest_path(grid: np.ndarray) -> List[Coordinate]:
    """Return the cells from Start to End inclusive, or ``[]`` when End is unreachable."""

    arena, end, _ = _search(ensure_grid(grid))
    if end is None:
        return []
    path = list(arena.chain(end))
    path.reverse()
    return path


def solve_maze(grid: np.ndarray) -> np.ndarray:
    """Mark the shortest Start-to-End route with ``Cell.PATH`` in place.

    Start and End keep their markers. A grid whose End cannot be reached is
    returned untouched.
    """

    ensure_grid(grid)
    arena, end, distances = _search(grid)
    if end is None:
        logger.debug("No route from start to end in %dx%d grid", *grid.shape)
        return grid

    marked = 0
    parent = arena.parent(end)
    while parent is not None and arena.parent(parent) is not None:
        cell = arena.coord(parent)
        if grid[cell] in (Cell.OPEN, Cell.PATH):
            grid[cell] = Cell.PATH
            marked += 1
        parent = arena.parent(parent)

    logger.debug("Marked %d path cells (distance %d)", marked, distances[arena.coord(end)])
    return grid


__all__ = ["UNREACHED", "shortest_path", "solve_maze"]
