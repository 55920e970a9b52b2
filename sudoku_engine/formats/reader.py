# -*- coding: utf-8 -*-
"""Reader of puzzle text files."""
import re
from typing import List

from sudoku_engine.common.constants import EMPTY, GRID_SIZE
from sudoku_engine.common.exceptions import GridFormatError
from sudoku_engine.common.grid import Grid
from sudoku_engine.common.judge import check_puzzle
from sudoku_engine.utils.log import get_logger

logger = get_logger(__name__)

_EMPTY_TOKENS = {"", ".", "0"}
_BARE_ROW = re.compile(r"^[0-9.]{%d}$" % GRID_SIZE)
_NOT_A_CELL = re.compile(r"[^0-9.]")


def _parse_token(token: str, row: int) -> int:
    token = token.strip()
    if token in _EMPTY_TOKENS:
        return EMPTY
    try:
        return int(token)
    except ValueError:
        raise GridFormatError(f"Row {row + 1}: cannot parse cell {token!r}")


def _parse_row(line: str, row: int) -> List[int]:
    # comma separated
    if "," in line:
        values = line.split(",")
        if len(values) != GRID_SIZE:
            raise GridFormatError(f"Row {row + 1}: Expected {GRID_SIZE} values, got {len(values)}")
        return [_parse_token(value, row) for value in values]

    # whitespace separated
    tokens = line.split()
    if len(tokens) == GRID_SIZE:
        return [_parse_token(token, row) for token in tokens]

    # one character per cell
    if _BARE_ROW.match(line):
        return [_parse_token(ch, row) for ch in line]

    # anything else, e.g. rows drawn with box separators: keep digits and dots only
    cleaned = _NOT_A_CELL.sub("", line)
    if len(cleaned) != GRID_SIZE:
        raise GridFormatError(f"Row {row + 1}: Expected {GRID_SIZE} cells, got {len(cleaned)}")
    return [_parse_token(ch, row) for ch in cleaned]


def parse_grid_text(text: str) -> Grid:
    """Parse a 9-line puzzle.

    Each line is comma separated, whitespace separated, or 9 bare characters;
    `.` and `0` mark empty cells. Blank lines are ignored.

    Raises:
        GridFormatError: If the text does not describe exactly 9 rows of 9 cells.
    """
    text = text.lstrip("\ufeff")
    lines = [line.strip() for line in text.splitlines() if line.strip()]
    if len(lines) != GRID_SIZE:
        raise GridFormatError(f"Expected {GRID_SIZE} rows, got {len(lines)}")
    return [_parse_row(line, row) for row, line in enumerate(lines)]


def load_puzzle(text: str) -> Grid:
    """Parse `text` and reject grids that are malformed or whose givens conflict."""
    grid = parse_grid_text(text)
    check_puzzle(grid)
    return grid


def read_puzzle_file(path: str) -> Grid:
    with open(path, "r", encoding="utf-8") as f:
        text = f.read()
    logger.debug(f"Read puzzle file {path}.")
    return load_puzzle(text)
