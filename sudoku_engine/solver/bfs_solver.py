"""Breadth-first search over partial grids."""
from sudoku_engine.solver.frontier import FifoFrontier, Frontier
from sudoku_engine.solver.solver import SOLVERS
from sudoku_engine.solver.state_space_solver import StateSpaceSolver


@SOLVERS.register_module("bfs")
class BfsSolver(StateSpaceSolver):
    """Expands states level by level. Keeps one grid copy per queued state."""

    def _make_frontier(self) -> Frontier:
        return FifoFrontier()
