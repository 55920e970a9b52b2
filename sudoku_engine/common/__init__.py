# -*- coding: utf-8 -*-
"""Grid model, rules and shared definitions."""
from sudoku_engine.common.constants import (
    CheckResult,
    Difficulty,
    SolveStatus,
    StepAction,
    StepKind,
    TextStyle,
)
from sudoku_engine.common.exceptions import (
    GenerationError,
    GridFormatError,
    InvalidPuzzleError,
    SudokuError,
    UnsolvablePuzzleError,
)
from sudoku_engine.common.grid import (
    Grid,
    copy_grid,
    count_empty,
    empty_grid,
    find_empty_cell,
    grid_key,
    is_valid_move,
)
from sudoku_engine.common.judge import (
    check_board,
    check_puzzle,
    is_solved_grid,
    validate_puzzle,
)

__all__ = [
    "CheckResult",
    "Difficulty",
    "SolveStatus",
    "StepAction",
    "StepKind",
    "TextStyle",
    "SudokuError",
    "GridFormatError",
    "InvalidPuzzleError",
    "UnsolvablePuzzleError",
    "GenerationError",
    "Grid",
    "copy_grid",
    "count_empty",
    "empty_grid",
    "find_empty_cell",
    "grid_key",
    "is_valid_move",
    "check_board",
    "check_puzzle",
    "is_solved_grid",
    "validate_puzzle",
]
