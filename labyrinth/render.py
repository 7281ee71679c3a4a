"""Text and image renderings of maze grids."""

from __future__ import annotations

from typing import Dict, List, Tuple

import numpy as np
from PIL import Image, ImageDraw

from .cells import Cell, Coordinate, DIRECTIONS, ensure_grid, find_cell, in_bounds

SYMBOLS: Dict[Cell, str] = {
    Cell.WALL: "0",
    Cell.OPEN: "1",
    Cell.START: "S",
    Cell.END: "E",
    Cell.PATH: ".",
}
_CELLS_BY_SYMBOL = {symbol: cell for cell, symbol in SYMBOLS.items()}

WALL_COLOR = (0, 0, 0)
OPEN_COLOR = (255, 255, 255)
START_COLOR = (220, 30, 30)
END_COLOR = (40, 180, 80)
LINE_COLOR = (220, 0, 0)

_FILLS = {
    Cell.WALL: WALL_COLOR,
    Cell.OPEN: OPEN_COLOR,
    Cell.PATH: OPEN_COLOR,
    Cell.START: START_COLOR,
    Cell.END: END_COLOR,
}


def to_text(grid: np.ndarray) -> str:
    ensure_grid(grid)
    return "\n".join("".join(SYMBOLS[Cell(int(value))] for value in row) for row in grid)


def from_text(text: str) -> np.ndarray:
    """Parse the ``0 1 S E .`` encoding back into a grid. Blank lines are ignored."""

    lines = [line.strip() for line in text.splitlines() if line.strip()]
    if not lines:
        raise ValueError("Maze text is empty")
    width = len(lines[0])
    rows: List[List[int]] = []
    for r, line in enumerate(lines):
        if len(line) != width:
            raise ValueError(f"Row {r} has {len(line)} cells, expected {width}")
        try:
            rows.append([_CELLS_BY_SYMBOL[symbol] for symbol in line])
        except KeyError as exc:
            raise ValueError(f"Unknown maze symbol {exc.args[0]!r} in row {r}") from exc
    return np.array(rows, dtype=np.int8)


def _route(grid: np.ndarray) -> List[Coordinate]:
    """Order the Start, Path and End cells into a walk starting at Start."""

    start = find_cell(grid, Cell.START)
    if start is None:
        return []
    marked = {Cell.PATH, Cell.END}
    route = [start]
    seen = {start}
    current = start
    while grid[current] != Cell.END:
        step = None
        for dr, dc in DIRECTIONS:
            nr, nc = current[0] + dr, current[1] + dc
            if in_bounds(grid, nr, nc) and (nr, nc) not in seen and int(grid[nr, nc]) in marked:
                step = (nr, nc)
                break
        if step is None:
            break
        route.append(step)
        seen.add(step)
        current = step
    return route


def render_image(grid: np.ndarray, *, cell_size: int = 32) -> Image.Image:
    """Draw the grid with one square per cell and a line along any marked path."""

    ensure_grid(grid)
    if cell_size < 1:
        raise ValueError("cell_size must be positive")
    rows, cols = grid.shape
    canvas = Image.new("RGB", (cols * cell_size, rows * cell_size), WALL_COLOR)
    draw = ImageDraw.Draw(canvas)

    for r in range(rows):
        for c in range(cols):
            left = c * cell_size
            top = r * cell_size
            fill = _FILLS[Cell(int(grid[r, c]))]
            draw.rectangle((left, top, left + cell_size - 1, top + cell_size - 1), fill=fill)

    route = _route(grid)
    if len(route) >= 2 and np.any(grid == Cell.PATH):
        thickness = max(2, cell_size // 3)
        points: List[Tuple[float, float]] = [
            (c * cell_size + cell_size / 2, r * cell_size + cell_size / 2) for r, c in route
        ]
        draw.line(points, fill=LINE_COLOR, width=thickness, joint="curve")
    return canvas


__all__ = ["SYMBOLS", "from_text", "render_image", "to_text"]
