# -*- coding: utf-8 -*-
"""Bounded solution counting, used to certify that a puzzle is unique."""
from sudoku_engine.common.constants import DIGITS, EMPTY
from sudoku_engine.common.grid import Grid, copy_grid, find_empty_cell, is_valid_move
from sudoku_engine.common.judge import has_conflicts


class SolutionCounter:
    """
    Counts completions of a grid, stopping the whole search at `max_solutions`.

    The search has the shape of the depth-first solver (row-major cell order,
    ascending digits) but keeps going after each completion until the cap is hit.

    Attributes:
        max_solutions (int): The cap; `count` never returns more than this.
        iterations (int): Digits tried during the last `count` call.
    """

    def __init__(self, max_solutions: int = 2):
        if max_solutions < 1:
            raise ValueError(f"max_solutions must be at least 1, got {max_solutions}")
        self.max_solutions = max_solutions
        self.iterations = 0
        self._solutions = 0

    def count(self, grid: Grid) -> int:
        """Return min(number of completions of `grid`, max_solutions). `grid` is not modified.

        Givens that already break the rules have no completion, so they count as 0.
        """
        self.iterations = 0
        self._solutions = 0
        board = copy_grid(grid)
        if has_conflicts(board):
            return 0
        self._search(board)
        return self._solutions

    def _search(self, grid: Grid) -> bool:
        """Return True once the cap is reached, which stops every enclosing frame."""
        cell = find_empty_cell(grid)
        if cell is None:
            self._solutions += 1
            return self._solutions >= self.max_solutions

        row, col = cell
        for digit in DIGITS:
            self.iterations += 1
            if is_valid_move(grid, row, col, digit):
                grid[row][col] = digit
                if self._search(grid):
                    return True
                grid[row][col] = EMPTY

        return False


def count_solutions(grid: Grid, max_solutions: int = 2) -> int:
    """Number of completions of `grid`, capped at `max_solutions`."""
    return SolutionCounter(max_solutions).count(grid)
