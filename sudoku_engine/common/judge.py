# -*- coding: utf-8 -*-
"""Judge grids: structure, rule conflicts and finished solutions."""
from typing import Any, List

from sudoku_engine.common.constants import DIGITS, EMPTY, GRID_SIZE, CheckResult
from sudoku_engine.common.exceptions import GridFormatError, InvalidPuzzleError
from sudoku_engine.common.grid import Grid, box_id, find_empty_cell, is_valid_move, iter_cells


def _units(board: Grid) -> List[List[int]]:
    units = [list(row) for row in board]
    units.extend([board[r][c] for r in range(GRID_SIZE)] for c in range(GRID_SIZE))
    boxes: List[List[int]] = [[] for _ in range(GRID_SIZE)]
    for r, c in iter_cells():
        boxes[box_id(r, c)].append(board[r][c])
    units.extend(boxes)
    return units


def check_structure(board: Any) -> None:
    """Raise `GridFormatError` unless `board` is 9 rows of 9 ints in 0-9."""
    if not isinstance(board, (list, tuple)) or len(board) != GRID_SIZE:
        raise GridFormatError(f"Expected {GRID_SIZE} rows")
    for r, row in enumerate(board):
        if not isinstance(row, (list, tuple)) or len(row) != GRID_SIZE:
            raise GridFormatError(f"Row {r + 1}: expected {GRID_SIZE} cells")
        for c, value in enumerate(row):
            # bool is an int subclass but never a cell value
            if isinstance(value, bool) or not isinstance(value, int):
                raise GridFormatError(f"Row {r + 1}, column {c + 1}: {value!r} is not a digit")
            if not EMPTY <= value <= GRID_SIZE:
                raise GridFormatError(f"Row {r + 1}, column {c + 1}: {value} is out of range")


def has_conflicts(board: Grid) -> bool:
    """True if any given repeats inside a row, column or box."""
    for r, c in iter_cells():
        value = board[r][c]
        if value == EMPTY:
            continue
        board[r][c] = EMPTY
        try:
            valid = is_valid_move(board, r, c, value)
        finally:
            board[r][c] = value
        if not valid:
            return True
    return False


def check_puzzle(board: Any) -> None:
    """Raise `GridFormatError` for a malformed grid, `InvalidPuzzleError` for conflicting givens."""
    check_structure(board)
    if has_conflicts([list(row) for row in board]):
        raise InvalidPuzzleError("The givens of this puzzle break the Sudoku rules")


def validate_puzzle(board: Any) -> bool:
    try:
        check_puzzle(board)
    except (GridFormatError, InvalidPuzzleError):
        return False
    return True


def is_solved_grid(board: Grid) -> bool:
    """Every row, column and box holds the digits 1-9 exactly once."""
    expected = set(DIGITS)
    return all(len(unit) == GRID_SIZE and set(unit) == expected for unit in _units(board))


def check_board(board: Grid) -> CheckResult:
    if find_empty_cell(board) is not None:
        return CheckResult.INCOMPLETE
    if is_solved_grid(board):
        return CheckResult.CORRECT
    return CheckResult.INCORRECT
