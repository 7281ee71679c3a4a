"""Randomized frontier-growth maze generator."""

from __future__ import annotations

import argparse
import json
import logging
import random
import uuid
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional, Tuple

import numpy as np

from .cells import Cell, Coordinate, find_cell, in_bounds, neighbors, new_grid
from .discovery import DiscoveryArena, Frontier
from .inspection import inspect_maze
from .render import render_image, to_text
from .solver import solve_maze

logger = logging.getLogger(__name__)


@dataclass
class MazeRecord:
    id: str
    grid_size: Tuple[int, int]
    seed: Optional[int]
    start: Tuple[int, int]
    end: Tuple[int, int]
    maze_rows: List[str]
    solution_rows: List[str]
    path_length: int

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "grid_size": list(self.grid_size),
            "seed": self.seed,
            "start": list(self.start),
            "end": list(self.end),
            "maze_rows": list(self.maze_rows),
            "solution_rows": list(self.solution_rows),
            "path_length": self.path_length,
        }


def _opposite(current: Coordinate, parent: Optional[Coordinate]) -> Optional[Coordinate]:
    """Reflect ``parent`` through ``current``; ``None`` unless they are one axis step apart."""

    if parent is None:
        return None
    dr = current[0] - parent[0]
    dc = current[1] - parent[1]
    if abs(dr) + abs(dc) != 1:
        return None
    return current[0] + dr, current[1] + dc


def generate_maze(
    rows: int,
    cols: int,
    *,
    rng: Optional[random.Random] = None,
    seed: Optional[int] = None,
) -> np.ndarray:
    """Grow a perfect maze over a ``rows`` x ``cols`` grid.

    Passages are carved two cells at a time from a randomly chosen start: a
    frontier cell next to an opened cell is resolved together with the cell
    beyond it, and only when both are still walls. Pass either ``rng`` or
    ``seed`` for reproducible output.
    """

    grid = new_grid(rows, cols)
    if rng is None:
        rng = random.Random(seed)

    start = (rng.randrange(rows), rng.randrange(cols))
    grid[start] = Cell.START

    arena = DiscoveryArena()
    frontier = Frontier(rng)
    root = arena.add(start)
    for cell in neighbors(grid, start):
        frontier.push(arena.add(cell, root))

    last: Optional[Coordinate] = None
    while frontier:
        index = frontier.pop_random()
        current = arena.coord(index)
        opposite = _opposite(current, arena.parent_coord(index))
        if opposite is None or not in_bounds(grid, *opposite):
            continue
        if grid[current] != Cell.WALL or grid[opposite] != Cell.WALL:
            continue

        grid[current] = Cell.OPEN
        grid[opposite] = Cell.OPEN
        last = opposite
        anchor = arena.add(opposite, index)
        for cell in neighbors(grid, opposite):
            if grid[cell] == Cell.WALL:
                frontier.push(arena.add(cell, anchor))

    if last is not None:
        grid[last] = Cell.END
    else:
        # Nothing could be carved: the grid is too small for a two-cell step.
        fallback = next(neighbors(grid, start), start)
        logger.debug("No passage carved in %dx%d grid; end placed at %s", rows, cols, fallback)
        grid[fallback] = Cell.END

    logger.debug("Generated %dx%d maze from start %s (%d records)", rows, cols, start, len(arena))
    return grid


class MazeGenerator:
    """Generate mazes of a fixed size from a seeded random source."""

    def __init__(self, *, rows: int = 15, cols: int = 15, seed: Optional[int] = None) -> None:
        if rows < 1 or cols < 1:
            raise ValueError("rows and cols must be at least 1")
        self.rows = rows
        self.cols = cols
        self.seed = seed
        self._rng = random.Random(seed)

    def generate(self) -> np.ndarray:
        return generate_maze(self.rows, self.cols, rng=self._rng)

    def create_puzzle(self, *, puzzle_id: Optional[str] = None) -> MazeRecord:
        puzzle_uuid = puzzle_id or str(uuid.uuid4())
        maze_grid = self.generate()
        solution = solve_maze(maze_grid.copy())

        start = find_cell(maze_grid, Cell.START) or (0, 0)
        end = find_cell(maze_grid, Cell.END) or start
        return MazeRecord(
            id=puzzle_uuid,
            grid_size=(self.rows, self.cols),
            seed=self.seed,
            start=start,
            end=end,
            maze_rows=to_text(maze_grid).splitlines(),
            solution_rows=to_text(solution).splitlines(),
            path_length=int(np.count_nonzero(solution == Cell.PATH)),
        )


__all__ = ["MazeGenerator", "MazeRecord", "generate_maze"]


def _positive_int(value: str) -> int:
    number = int(value)
    if number < 1:
        raise argparse.ArgumentTypeError(f"expected a positive integer, got {value}")
    return number


def _parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Generate a random maze and mark its shortest path")
    parser.add_argument("rows", type=_positive_int, help="Number of grid rows")
    parser.add_argument("cols", type=_positive_int, help="Number of grid columns")
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument("--no-solve", action="store_true", help="Print the maze without the solution path")
    parser.add_argument("--image", type=Path, default=None, help="Optional PNG file to render the maze into")
    parser.add_argument("--cell-size", type=_positive_int, default=32)
    parser.add_argument("--report", action="store_true", help="Print the maze inspection report as JSON")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> None:
    args = _parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s: %(message)s",
    )

    generator = MazeGenerator(rows=args.rows, cols=args.cols, seed=args.seed)
    grid = generator.generate()
    if not args.no_solve:
        solve_maze(grid)

    print(to_text(grid))
    if args.image is not None:
        args.image.parent.mkdir(parents=True, exist_ok=True)
        render_image(grid, cell_size=args.cell_size).save(args.image)
        logger.info("Wrote maze image to %s", args.image)
    if args.report:
        print(json.dumps(inspect_maze(grid).to_dict(), indent=2))


if __name__ == "__main__":
    main()
