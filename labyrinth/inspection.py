"""Structural checks for generated and solved mazes."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from typing import Optional, Set

import numpy as np

from .cells import Cell, Coordinate, ensure_grid, find_cell, neighbors
from .solver import shortest_path


@dataclass
class MazeReport:
    start_count: int
    end_count: int
    open_cells: int
    edges: int
    connected: bool
    is_perfect: bool
    path_cells: int
    distance: Optional[int]

    def to_dict(self) -> dict:
        return {
            "start_count": self.start_count,
            "end_count": self.end_count,
            "open_cells": self.open_cells,
            "edges": self.edges,
            "connected": self.connected,
            "is_perfect": self.is_perfect,
            "path_cells": self.path_cells,
            "distance": self.distance,
        }


def count_edges(grid: np.ndarray) -> int:
    """Count 4-adjacent pairs of passable cells."""

    passable = grid != Cell.WALL
    horizontal = np.count_nonzero(passable[:, :-1] & passable[:, 1:])
    vertical = np.count_nonzero(passable[:-1, :] & passable[1:, :])
    return int(horizontal + vertical)


def reachable_cells(grid: np.ndarray, origin: Coordinate) -> Set[Coordinate]:
    if grid[origin] == Cell.WALL:
        return set()
    queue = deque([origin])
    visited = {origin}
    while queue:
        current = queue.popleft()
        for cell in neighbors(grid, current):
            if cell not in visited and grid[cell] != Cell.WALL:
                visited.add(cell)
                queue.append(cell)
    return visited


def inspect_maze(grid: np.ndarray) -> MazeReport:
    ensure_grid(grid)
    open_cells = int(np.count_nonzero(grid != Cell.WALL))
    edges = count_edges(grid)

    origin = find_cell(grid, Cell.START) or (0, 0)
    connected = len(reachable_cells(grid, origin)) == open_cells
    path = shortest_path(grid)

    return MazeReport(
        start_count=int(np.count_nonzero(grid == Cell.START)),
        end_count=int(np.count_nonzero(grid == Cell.END)),
        open_cells=open_cells,
        edges=edges,
        connected=connected,
        is_perfect=connected and edges == open_cells - 1,
        path_cells=int(np.count_nonzero(grid == Cell.PATH)),
        distance=len(path) - 1 if path else None,
    )


__all__ = ["MazeReport", "count_edges", "inspect_maze", "reachable_cells"]
