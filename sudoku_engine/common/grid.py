# -*- coding: utf-8 -*-
"""Grid model and the primitive operations every search is built on."""
from typing import Iterator, List, Optional, Tuple

from sudoku_engine.common.constants import BOX_SIZE, EMPTY, GRID_SIZE

Grid = List[List[int]]
Cell = Tuple[int, int]


def empty_grid() -> Grid:
    return [[EMPTY for _ in range(GRID_SIZE)] for _ in range(GRID_SIZE)]


def copy_grid(grid: Grid) -> Grid:
    return [list(row) for row in grid]


def iter_cells() -> Iterator[Cell]:
    """Yield every (row, col) in row-major order."""
    for row in range(GRID_SIZE):
        for col in range(GRID_SIZE):
            yield row, col


def box_id(row: int, col: int) -> int:
    return (row // BOX_SIZE) * BOX_SIZE + col // BOX_SIZE


def is_valid_move(grid: Grid, row: int, col: int, digit: int) -> bool:
    """Check whether `digit` can go at (row, col) without repeating in its row, column or box.

    The target cell itself is compared like any other cell, so a caller testing a
    replacement for a filled cell must clear it first.
    """
    if digit in grid[row]:
        return False

    for r in range(GRID_SIZE):
        if grid[r][col] == digit:
            return False

    br, bc = (row // BOX_SIZE) * BOX_SIZE, (col // BOX_SIZE) * BOX_SIZE
    for r in range(br, br + BOX_SIZE):
        for c in range(bc, bc + BOX_SIZE):
            if grid[r][c] == digit:
                return False

    return True


def find_empty_cell(grid: Grid) -> Optional[Cell]:
    """First empty cell in row-major order, or None when the grid is full."""
    for row in range(GRID_SIZE):
        for col in range(GRID_SIZE):
            if grid[row][col] == EMPTY:
                return row, col
    return None


def count_empty(grid: Grid) -> int:
    return sum(1 for row in grid for value in row if value == EMPTY)


def count_clues(grid: Grid) -> int:
    return GRID_SIZE * GRID_SIZE - count_empty(grid)


def grid_key(grid: Grid) -> str:
    """Canonical 81-character encoding of a grid, used to deduplicate search states."""
    return "".join(str(value) for row in grid for value in row)
