# -*- coding: utf-8 -*-
"""Test for the grid primitives"""
import unittest

from sudoku_engine.common.grid import (
    box_id,
    copy_grid,
    count_clues,
    count_empty,
    empty_grid,
    find_empty_cell,
    grid_key,
    is_valid_move,
)
from tests.tools import PUZZLE, SOLUTION


class TestValidityOracle(unittest.TestCase):
    def test_every_digit_is_valid_on_an_empty_grid(self):
        grid = empty_grid()
        for row in range(9):
            for col in range(9):
                for digit in range(1, 10):
                    self.assertTrue(is_valid_move(grid, row, col, digit))

    def test_repeated_digit_is_rejected(self):
        grid = empty_grid()
        grid[2][4] = 7
        # same row
        self.assertFalse(is_valid_move(grid, 2, 8, 7))
        # same column
        self.assertFalse(is_valid_move(grid, 7, 4, 7))
        # same box, different row and column
        self.assertFalse(is_valid_move(grid, 0, 3, 7))
        # unrelated cell
        self.assertTrue(is_valid_move(grid, 5, 0, 7))
        # other digits are untouched
        self.assertTrue(is_valid_move(grid, 2, 8, 6))

    def test_target_cell_is_not_skipped(self):
        grid = copy_grid(SOLUTION)
        digit = grid[4][4]
        self.assertFalse(is_valid_move(grid, 4, 4, digit))
        grid[4][4] = 0
        self.assertTrue(is_valid_move(grid, 4, 4, digit))

    def test_does_not_mutate(self):
        grid = copy_grid(PUZZLE)
        is_valid_move(grid, 0, 2, 4)
        self.assertEqual(grid, PUZZLE)


class TestGridHelpers(unittest.TestCase):
    def test_find_empty_cell_is_row_major(self):
        self.assertEqual(find_empty_cell(PUZZLE), (0, 2))
        self.assertEqual(find_empty_cell(empty_grid()), (0, 0))
        self.assertIsNone(find_empty_cell(SOLUTION))

        grid = copy_grid(SOLUTION)
        grid[8][8] = 0
        grid[5][1] = 0
        self.assertEqual(find_empty_cell(grid), (5, 1))

    def test_counts(self):
        self.assertEqual(count_empty(empty_grid()), 81)
        self.assertEqual(count_empty(SOLUTION), 0)
        self.assertEqual(count_clues(PUZZLE), 30)
        self.assertEqual(count_empty(PUZZLE), 51)

    def test_box_id(self):
        self.assertEqual(box_id(0, 0), 0)
        self.assertEqual(box_id(1, 5), 1)
        self.assertEqual(box_id(4, 4), 4)
        self.assertEqual(box_id(8, 0), 6)
        self.assertEqual(box_id(8, 8), 8)

    def test_grid_key(self):
        key = grid_key(PUZZLE)
        self.assertEqual(len(key), 81)
        self.assertTrue(key.startswith("530070000"))
        other = copy_grid(PUZZLE)
        self.assertEqual(grid_key(other), key)
        other[8][8] = 0
        self.assertNotEqual(grid_key(other), key)

    def test_copy_grid_is_deep(self):
        grid = copy_grid(PUZZLE)
        grid[0][0] = 9
        self.assertEqual(PUZZLE[0][0], 5)
