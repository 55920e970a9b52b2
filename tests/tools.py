"""Shared grids and helpers for the test suite."""
from typing import List

from sudoku_engine.common.config import Config
from sudoku_engine.common.grid import Grid, copy_grid


def rows_to_grid(rows: List[str]) -> Grid:
    return [[0 if ch == "." else int(ch) for ch in row] for row in rows]


SOLUTION = rows_to_grid(
    [
        "534678912",
        "672195348",
        "198342567",
        "859761423",
        "426853791",
        "713924856",
        "961537284",
        "287419635",
        "345286179",
    ]
)

# 30 givens, the only completion is SOLUTION
PUZZLE = rows_to_grid(
    [
        "53..7....",
        "6..195...",
        ".98....6.",
        "8...6...3",
        "4..8.3..1",
        "7...2...6",
        ".6....28.",
        "...419..5",
        "....8..79",
    ]
)


def get_light_puzzle(filled_rows: int = 6) -> Grid:
    """PUZZLE with its top rows filled in: still unique, cheap for every strategy."""
    grid = copy_grid(PUZZLE)
    for row in range(filled_rows):
        grid[row] = SOLUTION[row][:]
    return grid


def get_one_hole_grid(row: int = 4, col: int = 4) -> Grid:
    grid = copy_grid(SOLUTION)
    grid[row][col] = 0
    return grid


def get_two_solution_grid() -> Grid:
    """SOLUTION with a 6/7 rectangle cleared; the two digits can be swapped."""
    grid = copy_grid(SOLUTION)
    for row, col in [(0, 3), (0, 4), (3, 3), (3, 4)]:
        grid[row][col] = 0
    return grid


def get_dead_end_grid() -> Grid:
    """No completion and no conflicting givens: r1c1 has no candidate left."""
    grid = [[0] * 9 for _ in range(9)]
    grid[0] = [0, 1, 2, 3, 4, 5, 6, 7, 8]
    grid[4][0] = 9
    return grid


def get_unsolvable_puzzle() -> Grid:
    """PUZZLE with a wrong but locally legal given at r1c3; the search has to exhaust."""
    grid = copy_grid(PUZZLE)
    grid[0][2] = 1
    return grid


def get_conflicting_grid() -> Grid:
    grid = copy_grid(PUZZLE)
    grid[0][8] = 5  # second 5 in row 1
    return grid


def get_template_config() -> Config:
    return Config()


def is_permutation(values: List[int]) -> bool:
    return sorted(values) == list(range(1, 10))
