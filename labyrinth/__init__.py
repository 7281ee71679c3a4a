"""Random perfect maze generation and shortest-path solving."""

__all__ = [
    "Cell",
    "Coordinate",
    "MazeGenerator",
    "MazeRecord",
    "MazeReport",
    "from_text",
    "generate_maze",
    "inspect_maze",
    "render_image",
    "shortest_path",
    "solve_maze",
    "to_text",
]

from .cells import Cell, Coordinate
from .generator import MazeGenerator, MazeRecord, generate_maze
from .inspection import MazeReport, inspect_maze
from .render import from_text, render_image, to_text
from .solver import shortest_path, solve_maze
