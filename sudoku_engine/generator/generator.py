# -*- coding: utf-8 -*-
"""Puzzle generator: random solved grid, then carve a uniquely solvable puzzle."""
from dataclasses import dataclass
from typing import Optional, Tuple, Union

import numpy as np

from sudoku_engine.common.config import GeneratorConfig
from sudoku_engine.common.constants import EMPTY, GRID_SIZE, Difficulty
from sudoku_engine.common.exceptions import GenerationError
from sudoku_engine.common.grid import Grid, copy_grid, empty_grid, is_valid_move
from sudoku_engine.solver.counter import SolutionCounter
from sudoku_engine.solver.dfs_solver import DfsSolver
from sudoku_engine.utils.log import get_logger


@dataclass
class GeneratedPuzzle:
    puzzle: Grid
    solution: Grid
    difficulty: Difficulty
    cells_removed: int
    target_removals: int


class SudokuGenerator:
    """
    Sudoku puzzle generator.

    - Drops a few random givens on an empty grid, then fills it by backtracking
      with a shuffled digit order per cell
    - Removes cells one at a time, keeping a removal only while the puzzle still
      has exactly one solution
    - Retries with a fresh solution grid when a carving pass falls short
    """

    def __init__(self, config: Optional[GeneratorConfig] = None, seed: Optional[int] = None):
        self.config = config if config is not None else GeneratorConfig()
        if seed is None:
            seed = self.config.seed
        self.rng = np.random.default_rng(seed)
        self.logger = get_logger(__name__)

    def target_removals(self, difficulty: Difficulty) -> int:
        if self.config.cells_to_remove is not None:
            return self.config.cells_to_remove
        return difficulty.cells_to_remove

    def generate(self, difficulty: Union[Difficulty, str, None] = None) -> GeneratedPuzzle:
        difficulty = Difficulty(difficulty if difficulty is not None else self.config.difficulty)
        target = self.target_removals(difficulty)

        best: Optional[Tuple[Grid, Grid, int]] = None
        for attempt in range(self.config.max_restarts + 1):
            solution = self.generate_solution()
            puzzle, removed = self.carve(solution, target)
            if best is None or removed > best[2]:
                best = (solution, puzzle, removed)
            if removed >= target:
                break
            self.logger.info(
                f"Carving pass {attempt + 1} removed {removed}/{target} cells, "
                "retrying with a new solution grid."
            )

        solution, puzzle, removed = best
        if removed < target:
            msg = (
                f"Could only remove {removed} of {target} cells for a `{difficulty.value}` "
                f"puzzle after {self.config.max_restarts + 1} solution grids."
            )
            if self.config.strict:
                raise GenerationError(msg)
            clues = GRID_SIZE * GRID_SIZE - removed
            self.logger.warning(f"{msg} Accepting a puzzle with {clues} clues.")

        self.logger.info(f"Generated a `{difficulty.value}` puzzle with {removed} empty cells.")
        return GeneratedPuzzle(
            puzzle=puzzle,
            solution=solution,
            difficulty=difficulty,
            cells_removed=removed,
            target_removals=target,
        )

    def generate_solution(self) -> Grid:
        """A random, completely filled grid."""
        board = empty_grid()
        for _ in range(self.config.seed_attempts):
            row, col = (int(v) for v in self.rng.integers(0, GRID_SIZE, size=2))
            digit = int(self.rng.integers(1, GRID_SIZE + 1))
            if board[row][col] == EMPTY and is_valid_move(board, row, col, digit):
                board[row][col] = digit

        result = DfsSolver(rng=self.rng).solve(board)
        if not result.solved:
            raise GenerationError("The seeded grid could not be completed")
        return result.grid

    def carve(self, solution: Grid, target: int) -> Tuple[Grid, int]:
        """Empty up to `target` cells of `solution` while the puzzle stays unique.

        Cells are visited once each in random order. A rejected removal is final:
        emptying more cells can only add solutions.

        Returns:
            Tuple[Grid, int]: The puzzle and the number of cells removed.
        """
        puzzle = copy_grid(solution)
        order = self.rng.permutation(GRID_SIZE * GRID_SIZE)
        if self.config.max_attempts is not None:
            order = order[: self.config.max_attempts]

        counter = SolutionCounter(max_solutions=2)
        removed = 0
        for index in order:
            if removed >= target:
                break
            row, col = divmod(int(index), GRID_SIZE)
            digit = puzzle[row][col]
            puzzle[row][col] = EMPTY
            if counter.count(puzzle) == 1:
                removed += 1
            else:
                puzzle[row][col] = digit
                self.logger.debug(f"Keeping r{row + 1}c{col + 1}: removing it breaks uniqueness.")
        return puzzle, removed


def generate_puzzle(
    difficulty: Union[Difficulty, str] = Difficulty.MEDIUM,
    seed: Optional[int] = None,
    config: Optional[GeneratorConfig] = None,
) -> GeneratedPuzzle:
    return SudokuGenerator(config=config, seed=seed).generate(difficulty)
