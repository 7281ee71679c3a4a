import random
import unittest

import numpy as np

from labyrinth import Cell, from_text, render_image, solve_maze, to_text
from labyrinth.discovery import Frontier
from labyrinth.render import END_COLOR, LINE_COLOR, OPEN_COLOR, START_COLOR, WALL_COLOR


class TextEncodingTests(unittest.TestCase):
    def test_symbols_map_to_cells(self) -> None:
        grid = from_text("S0\n1.\nE1")
        expected = np.array(
            [
                [Cell.START, Cell.WALL],
                [Cell.OPEN, Cell.PATH],
                [Cell.END, Cell.OPEN],
            ],
            dtype=np.int8,
        )
        np.testing.assert_array_equal(grid, expected)
        self.assertEqual(to_text(grid), "S0\n1.\nE1")

    def test_rejects_unknown_symbols(self) -> None:
        with self.assertRaises(ValueError):
            from_text("S1\n1X")

    def test_rejects_ragged_rows(self) -> None:
        with self.assertRaises(ValueError):
            from_text("S11\n1E")

    def test_rejects_empty_text(self) -> None:
        with self.assertRaises(ValueError):
            from_text("\n  \n")


class RenderImageTests(unittest.TestCase):
    def test_canvas_matches_grid(self) -> None:
        grid = from_text("S1E\n101\n111")
        image = render_image(grid, cell_size=30)

        self.assertEqual(image.size, (90, 90))
        self.assertEqual(image.getpixel((15, 15)), START_COLOR)
        self.assertEqual(image.getpixel((75, 15)), END_COLOR)
        self.assertEqual(image.getpixel((45, 45)), WALL_COLOR)
        self.assertEqual(image.getpixel((45, 75)), OPEN_COLOR)

    def test_solution_path_is_drawn(self) -> None:
        grid = solve_maze(from_text("S1E\n101\n111"))
        image = render_image(grid, cell_size=30)

        self.assertEqual(image.getpixel((45, 15)), LINE_COLOR)
        self.assertEqual(image.getpixel((1, 1)), START_COLOR)
        self.assertEqual(image.getpixel((45, 75)), OPEN_COLOR)

    def test_rejects_bad_cell_size(self) -> None:
        with self.assertRaises(ValueError):
            render_image(from_text("SE"), cell_size=0)


class FrontierTests(unittest.TestCase):
    def test_pops_every_item_once(self) -> None:
        frontier = Frontier(random.Random(4))
        for index in range(20):
            frontier.push(index)
        self.assertEqual(len(frontier), 20)

        popped = [frontier.pop_random() for _ in range(20)]
        self.assertEqual(sorted(popped), list(range(20)))
        self.assertFalse(frontier)

    def test_empty_pop_raises(self) -> None:
        with self.assertRaises(IndexError):
            Frontier(random.Random(0)).pop_random()


if __name__ == "__main__":
    unittest.main()
