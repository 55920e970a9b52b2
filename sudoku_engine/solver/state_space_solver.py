# -*- coding: utf-8 -*-
"""Solvers that search over copies of whole grid states."""
from abc import abstractmethod

from sudoku_engine.common.constants import DIGITS, StepKind
from sudoku_engine.common.grid import (
    Cell,
    Grid,
    copy_grid,
    count_empty,
    find_empty_cell,
    grid_key,
    is_valid_move,
)
from sudoku_engine.solver.frontier import Frontier, SearchState
from sudoku_engine.solver.solver import SearchGenerator, Solver


class StateSpaceSolver(Solver):
    """
    Expands grid states taken from a frontier.

    Each expansion branches into one child state per legal digit at the state's
    target cell. Identical states are expanded once. The caller's grid is never
    modified: every child is a fresh copy.
    """

    @abstractmethod
    def _make_frontier(self) -> Frontier:
        """Create the structure holding pending states."""

    def _make_state(self, grid: Grid, cell: Cell, cost: int) -> SearchState:
        return SearchState(grid=grid, cell=cell, cost=cost)

    def _search(self, grid: Grid) -> SearchGenerator:
        start = find_empty_cell(grid)
        if start is None:
            return copy_grid(grid)

        frontier = self._make_frontier()
        frontier.put(self._make_state(copy_grid(grid), start, 0))
        visited = set()

        while len(frontier) > 0:
            state = frontier.get()
            key = grid_key(state.grid)
            if key in visited:
                continue
            visited.add(key)

            self.iterations += 1
            yield from self._suspend(state.grid, StepKind.EXPAND, state.cell)

            row, col = state.cell
            for digit in DIGITS:
                if not is_valid_move(state.grid, row, col, digit):
                    continue
                child = copy_grid(state.grid)
                child[row][col] = digit
                next_cell = find_empty_cell(child)
                if next_cell is None:
                    return child
                frontier.put(self._make_state(child, next_cell, state.cost + 1))

        self.logger.debug(f"[{self.name}] frontier exhausted after {len(visited)} states.")
        return None


def remaining_empty_cells(grid: Grid) -> int:
    """Heuristic of the best-first search: unit steps still needed to fill the grid."""
    return count_empty(grid)
