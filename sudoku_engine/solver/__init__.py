# -*- coding: utf-8 -*-
"""Search strategies and solution counting."""
from sudoku_engine.solver.astar_solver import AStarSolver
from sudoku_engine.solver.bfs_solver import BfsSolver
from sudoku_engine.solver.counter import SolutionCounter, count_solutions
from sudoku_engine.solver.dfs_solver import DfsSolver
from sudoku_engine.solver.solver import (
    SOLVERS,
    SolveResult,
    SolveStep,
    Solver,
    StepCallback,
)

__all__ = [
    "SOLVERS",
    "Solver",
    "SolveResult",
    "SolveStep",
    "StepCallback",
    "DfsSolver",
    "BfsSolver",
    "AStarSolver",
    "SolutionCounter",
    "count_solutions",
]
