# -*- coding: utf-8 -*-
"""In-memory puzzle state: the givens, the board being worked on, and its solution."""
from typing import Optional, Union

from sudoku_engine.common.config import Config
from sudoku_engine.common.constants import EMPTY, GRID_SIZE, MIN_CLUES, CheckResult, Difficulty
from sudoku_engine.common.exceptions import InvalidPuzzleError, UnsolvablePuzzleError
from sudoku_engine.common.grid import Grid, copy_grid, count_clues, empty_grid
from sudoku_engine.common.judge import check_board, check_puzzle
from sudoku_engine.formats.reader import load_puzzle
from sudoku_engine.formats.writer import format_grid
from sudoku_engine.generator.generator import SudokuGenerator
from sudoku_engine.solver import SOLVERS, DfsSolver, SolveResult, StepCallback, count_solutions
from sudoku_engine.utils.log import get_logger


class SudokuSession:
    """
    One puzzle and the player's progress on it.

    - `original` holds the givens (0 where a cell is free); given cells are fixed
    - `board` is the current state
    - `solution` is kept from generation, or found on demand
    """

    def __init__(self, config: Optional[Config] = None):
        self.config = config if config is not None else Config()
        self.logger = get_logger(__name__)
        self.original: Grid = empty_grid()
        self.board: Grid = empty_grid()
        self.solution: Optional[Grid] = None

    def new_puzzle(
        self, difficulty: Union[Difficulty, str, None] = None, seed: Optional[int] = None
    ) -> Grid:
        generated = SudokuGenerator(self.config.generator, seed=seed).generate(difficulty)
        self.original = copy_grid(generated.puzzle)
        self.board = copy_grid(generated.puzzle)
        self.solution = copy_grid(generated.solution)
        return self.board

    def load(self, grid: Grid) -> None:
        """Load givens from `grid`; the solution is unknown until solved."""
        check_puzzle(grid)
        self.original = [list(row) for row in grid]
        self.board = copy_grid(self.original)
        self.solution = None

    def load_text(self, text: str) -> None:
        self.load(load_puzzle(text))

    def is_fixed(self, row: int, col: int) -> bool:
        return self.original[row][col] != EMPTY

    def set_cell(self, row: int, col: int, digit: int) -> None:
        """Write `digit` at (row, col); 0 clears the cell. Given cells cannot be changed."""
        if not (0 <= row < GRID_SIZE and 0 <= col < GRID_SIZE):
            raise ValueError(f"Cell ({row}, {col}) is outside the grid")
        if not 0 <= digit <= GRID_SIZE:
            raise ValueError(f"Digit {digit} is out of range")
        if self.is_fixed(row, col):
            raise ValueError(f"Cell r{row + 1}c{col + 1} is a given and cannot be changed")
        self.board[row][col] = digit

    def clear(self) -> None:
        """Remove everything that is not a given."""
        self.board = copy_grid(self.original)

    def check(self) -> CheckResult:
        return check_board(self.board)

    def solve(
        self, strategy: Optional[str] = None, on_step: Optional[StepCallback] = None
    ) -> SolveResult:
        """Solve from the givens with the named strategy, showing the result on the board."""
        strategy = strategy or self.config.solver.strategy
        solver_cls = SOLVERS.get(strategy)
        if solver_cls is None:
            raise ValueError(f"Unknown strategy `{strategy}`, must be one of {SOLVERS.list()}")
        self.board = copy_grid(self.original)
        result = solver_cls(self.config.solver).solve(self.original, on_step=on_step)
        if result.solved:
            self.board = copy_grid(result.grid)
            self.solution = copy_grid(result.grid)
        return result

    def reveal(self) -> Grid:
        """Show the solution, solving quietly first if it is not known yet."""
        if self.solution is None:
            result = DfsSolver().solve(self.original)
            if not result.solved:
                raise UnsolvablePuzzleError("No solution exists for this puzzle")
            self.solution = result.grid
        self.board = copy_grid(self.solution)
        return self.board

    def set_custom_puzzle(self) -> Grid:
        """Promote the current board to the puzzle being played.

        Raises:
            InvalidPuzzleError: If the board has fewer than 17 clues, conflicting
                clues, no solution, or more than one solution.
        """
        clues = count_clues(self.board)
        if clues < MIN_CLUES:
            raise InvalidPuzzleError(
                f"You need at least {MIN_CLUES} clues for a valid Sudoku puzzle, got {clues}"
            )
        check_puzzle(self.board)
        solutions = count_solutions(self.board, 2)
        if solutions == 0:
            raise InvalidPuzzleError("This puzzle has no solutions")
        if solutions > 1:
            raise InvalidPuzzleError("This puzzle has multiple solutions, it needs more clues")

        self.original = copy_grid(self.board)
        self.solution = DfsSolver().solve(self.original).grid
        self.logger.info(f"Custom puzzle set with {clues} clues.")
        return self.board

    def export_text(self) -> str:
        """The givens in the bare-digit text format."""
        return format_grid(self.original)
