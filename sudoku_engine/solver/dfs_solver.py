# -*- coding: utf-8 -*-
"""Depth-first backtracking solver."""
from typing import Optional, Sequence

import numpy as np

from sudoku_engine.common.config import SolverConfig
from sudoku_engine.common.constants import DIGITS, EMPTY, StepKind
from sudoku_engine.common.grid import Grid, find_empty_cell, is_valid_move
from sudoku_engine.solver.solver import SOLVERS, SearchGenerator, Solver


@SOLVERS.register_module("dfs")
class DfsSolver(Solver):
    """
    Classic recursive backtracking.

    - Fills the first empty cell in row-major order
    - Tries digits 1-9 ascending, or in a per-cell shuffled order when given a
      random generator
    - Works on the grid in place and clears every placement of a failed branch
    """

    def __init__(
        self,
        config: Optional[SolverConfig] = None,
        rng: Optional[np.random.Generator] = None,
    ):
        super().__init__(config)
        if rng is None and self.config.shuffle_digits:
            rng = np.random.default_rng()
        self.rng = rng

    def _digit_order(self) -> Sequence[int]:
        if self.rng is None:
            return DIGITS
        return [int(d) for d in self.rng.permutation(DIGITS)]

    def _search(self, grid: Grid) -> SearchGenerator:
        cell = find_empty_cell(grid)
        if cell is None:
            return grid

        row, col = cell
        for digit in self._digit_order():
            self.iterations += 1
            if not is_valid_move(grid, row, col, digit):
                yield from self._suspend(grid, StepKind.ATTEMPT, cell, digit)
                continue

            grid[row][col] = digit
            solution = None
            try:
                yield from self._suspend(grid, StepKind.PLACE, cell, digit)
                solution = yield from self._search(grid)
            finally:
                # also runs when the search is cancelled or closed mid-branch
                if solution is None:
                    grid[row][col] = EMPTY
            if solution is not None:
                return solution
            yield from self._suspend(grid, StepKind.UNDO, cell, digit)

        return None
