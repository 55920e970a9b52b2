# -*- coding: utf-8 -*-
"""Entry points used by front ends."""
from typing import Optional

from sudoku_engine.common.config import SolverConfig
from sudoku_engine.common.grid import Grid, is_valid_move
from sudoku_engine.common.judge import check_puzzle, validate_puzzle
from sudoku_engine.generator.generator import generate_puzzle
from sudoku_engine.solver import SOLVERS, SolveResult, StepCallback, count_solutions


def solve(
    grid: Grid,
    strategy: str = "dfs",
    on_step: Optional[StepCallback] = None,
    config: Optional[SolverConfig] = None,
) -> SolveResult:
    """Solve `grid` with the named strategy (`dfs`, `bfs` or `astar`).

    The grid is checked first: a malformed grid raises `GridFormatError` and
    conflicting givens raise `InvalidPuzzleError`. An unsatisfiable or cancelled
    search is reported through the result's status. `grid` is not modified.
    """
    solver_cls = SOLVERS.get(strategy)
    if solver_cls is None:
        raise ValueError(f"Unknown strategy `{strategy}`, must be one of {SOLVERS.list()}")
    check_puzzle(grid)
    return solver_cls(config).solve(grid, on_step=on_step)


__all__ = [
    "generate_puzzle",
    "solve",
    "count_solutions",
    "is_valid_move",
    "validate_puzzle",
]
