"""Writer of puzzle text files."""
from typing import Union

from sudoku_engine.common.constants import EMPTY, TextStyle
from sudoku_engine.common.grid import Grid
from sudoku_engine.utils.log import get_logger

logger = get_logger(__name__)

_SEPARATORS = {
    TextStyle.DIGITS: "",
    TextStyle.CSV: ",",
    TextStyle.SPACE: " ",
}


def format_grid(
    grid: Grid, style: Union[TextStyle, str] = TextStyle.DIGITS, empty: str = "."
) -> str:
    """Render `grid` as 9 lines, one row per line, each line ending in a newline."""
    separator = _SEPARATORS[TextStyle(style)]
    lines = [separator.join(str(v) if v != EMPTY else empty for v in row) for row in grid]
    return "\n".join(lines) + "\n"


def write_puzzle_file(
    path: str, grid: Grid, style: Union[TextStyle, str] = TextStyle.DIGITS
) -> None:
    with open(path, "w", encoding="utf-8") as f:
        f.write(format_grid(grid, style))
    logger.info(f"Puzzle written to {path}.")
