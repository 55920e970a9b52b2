# -*- coding: utf-8 -*-
"""Exceptions raised by the engine."""


class SudokuError(Exception):
    """Base class of all engine errors."""


class GridFormatError(SudokuError, ValueError):
    """The input is not a 9x9 grid of digits 0-9."""


class InvalidPuzzleError(SudokuError, ValueError):
    """The grid is well formed but breaks the Sudoku rules, or was rejected as a puzzle."""


class UnsolvablePuzzleError(SudokuError):
    """No completion of the puzzle exists."""


class GenerationError(SudokuError, RuntimeError):
    """The generator could not produce a puzzle within its budget."""
