"""Best-first (A*-style) search over partial grids."""
from sudoku_engine.common.grid import Cell, Grid
from sudoku_engine.solver.frontier import Frontier, PriorityFrontier, SearchState
from sudoku_engine.solver.solver import SOLVERS
from sudoku_engine.solver.state_space_solver import StateSpaceSolver, remaining_empty_cells


@SOLVERS.register_module("astar")
class AStarSolver(StateSpaceSolver):
    """
    Expands the state with the lowest `f = g + h` first.

    `g` counts the cells filled along the branch and `h` the empty cells left in
    the state. Equal `f` values are expanded in insertion order.
    """

    def _make_frontier(self) -> Frontier:
        return PriorityFrontier()

    def _make_state(self, grid: Grid, cell: Cell, cost: int) -> SearchState:
        return SearchState(grid=grid, cell=cell, cost=cost, heuristic=remaining_empty_cells(grid))
