import unittest

import numpy as np

from labyrinth import Cell, from_text, shortest_path, solve_maze, to_text
from labyrinth.discovery import DiscoveryArena


class SolveMazeTests(unittest.TestCase):
    def test_marks_winding_corridor(self) -> None:
        grid = from_text(
            """
            S1110
            00010
            E1110
            """
        )
        result = solve_maze(grid)

        self.assertIs(result, grid)
        self.assertEqual(to_text(grid), "S...0\n000.0\nE...0")
        path = shortest_path(grid)
        self.assertEqual(path[0], (0, 0))
        self.assertEqual(path[-1], (2, 0))
        self.assertEqual(int(np.count_nonzero(grid == Cell.PATH)) + 2, len(path))

    def test_prefers_shorter_of_two_routes(self) -> None:
        grid = from_text("S1E\n101\n111")
        solve_maze(grid)
        self.assertEqual(to_text(grid), "S.E\n101\n111")

    def test_unreachable_end_leaves_grid_untouched(self) -> None:
        text = "S10\n000\n01E"
        grid = from_text(text)
        solve_maze(grid)
        self.assertEqual(to_text(grid), text)
        self.assertEqual(shortest_path(grid), [])

    def test_missing_start_searches_from_origin(self) -> None:
        grid = from_text("111\n10E")
        solve_maze(grid)
        self.assertEqual(to_text(grid), "1..\n10E")

    def test_missing_end_marks_nothing(self) -> None:
        text = "S11\n101"
        grid = from_text(text)
        solve_maze(grid)
        self.assertEqual(to_text(grid), text)

    def test_adjacent_start_and_end_have_empty_path(self) -> None:
        grid = from_text("SE")
        solve_maze(grid)
        self.assertEqual(to_text(grid), "SE")
        self.assertEqual(shortest_path(grid), [(0, 0), (0, 1)])

    def test_solving_twice_is_stable(self) -> None:
        grid = from_text(
            """
            S1111
            00001
            11111
            10000
            1111E
            """
        )
        solve_maze(grid)
        first = grid.copy()
        solve_maze(grid)
        np.testing.assert_array_equal(first, grid)

    def test_shortest_path_does_not_mutate(self) -> None:
        grid = from_text("S1E")
        before = grid.copy()
        self.assertEqual(shortest_path(grid), [(0, 0), (0, 1), (0, 2)])
        np.testing.assert_array_equal(before, grid)

    def test_rejects_non_grid_input(self) -> None:
        with self.assertRaises(ValueError):
            solve_maze(np.zeros(4, dtype=np.int8))
        with self.assertRaises(ValueError):
            solve_maze([[Cell.START, Cell.END]])


class DiscoveryArenaTests(unittest.TestCase):
    def test_chain_walks_back_to_root(self) -> None:
        arena = DiscoveryArena()
        root = arena.add((0, 0))
        middle = arena.add((0, 1), root)
        leaf = arena.add((1, 1), middle)

        self.assertEqual(list(arena.chain(leaf)), [(1, 1), (0, 1), (0, 0)])
        self.assertEqual(arena.parent_coord(leaf), (0, 1))
        self.assertIsNone(arena.parent_coord(root))

    def test_parent_must_already_exist(self) -> None:
        arena = DiscoveryArena()
        with self.assertRaises(IndexError):
            arena.add((0, 0), 0)


if __name__ == "__main__":
    unittest.main()
