from sudoku_engine.formats.reader import load_puzzle, parse_grid_text, read_puzzle_file
from sudoku_engine.formats.writer import format_grid, write_puzzle_file

__all__ = [
    "parse_grid_text",
    "load_puzzle",
    "read_puzzle_file",
    "format_grid",
    "write_puzzle_file",
]
