# -*- coding: utf-8 -*-
"""Sudoku generation, validation and search."""

__version__ = "0.1.0"

from sudoku_engine.api import (
    count_solutions,
    generate_puzzle,
    is_valid_move,
    solve,
    validate_puzzle,
)
from sudoku_engine.session import SudokuSession

__all__ = [
    "generate_puzzle",
    "solve",
    "count_solutions",
    "is_valid_move",
    "validate_puzzle",
    "SudokuSession",
]
