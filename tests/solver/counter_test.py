import unittest

from sudoku_engine.common.grid import copy_grid, empty_grid
from sudoku_engine.solver import SolutionCounter, count_solutions
from tests.tools import (
    PUZZLE,
    SOLUTION,
    get_conflicting_grid,
    get_dead_end_grid,
    get_two_solution_grid,
    get_unsolvable_puzzle,
)


class TestSolutionCounter(unittest.TestCase):
    def test_counts(self):
        self.assertEqual(count_solutions(PUZZLE), 1)
        self.assertEqual(count_solutions(SOLUTION), 1)
        self.assertEqual(count_solutions(get_two_solution_grid()), 2)
        self.assertEqual(count_solutions(get_dead_end_grid()), 0)
        self.assertEqual(count_solutions(get_unsolvable_puzzle()), 0)

    def test_cap(self):
        self.assertEqual(count_solutions(empty_grid(), 2), 2)
        self.assertEqual(count_solutions(empty_grid(), 5), 5)
        self.assertEqual(count_solutions(get_two_solution_grid(), 1), 1)
        # the cap is an upper bound, not a target
        self.assertEqual(count_solutions(get_two_solution_grid(), 10), 2)

    def test_invalid_cap(self):
        with self.assertRaises(ValueError):
            SolutionCounter(0)
        with self.assertRaises(ValueError):
            count_solutions(PUZZLE, -1)

    def test_grid_is_not_modified(self):
        grid = get_two_solution_grid()
        before = copy_grid(grid)
        count_solutions(grid)
        self.assertEqual(grid, before)

    def test_iterations(self):
        counter = SolutionCounter(max_solutions=2)
        self.assertEqual(counter.count(SOLUTION), 1)
        self.assertEqual(counter.iterations, 0)

        self.assertEqual(counter.count(get_two_solution_grid()), 2)
        self.assertGreater(counter.iterations, 0)
        first = counter.iterations

        # a lower cap stops earlier
        counter = SolutionCounter(max_solutions=1)
        counter.count(get_two_solution_grid())
        self.assertLess(counter.iterations, first)

    def test_conflicting_givens_have_no_solution(self):
        self.assertEqual(count_solutions(get_conflicting_grid()), 0)

        # a swapped pair in row 1 with a single hole elsewhere
        grid = copy_grid(SOLUTION)
        grid[0][0], grid[0][1] = grid[0][1], grid[0][0]
        grid[8][8] = 0
        self.assertEqual(count_solutions(grid), 0)

        # a full grid that breaks the rules
        grid[8][8] = SOLUTION[8][8]
        counter = SolutionCounter()
        self.assertEqual(counter.count(grid), 0)
        self.assertEqual(counter.iterations, 0)
