# -*- coding: utf-8 -*-
"""Base Solver Class"""
import time
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Callable, Generator, Optional

from sudoku_engine.common.config import SolverConfig
from sudoku_engine.common.constants import SolveStatus, StepAction, StepKind
from sudoku_engine.common.grid import Cell, Grid, copy_grid, count_empty
from sudoku_engine.utils.log import get_logger
from sudoku_engine.utils.registry import Registry

SOLVERS = Registry("solvers")


@dataclass
class SolveStep:
    """Snapshot handed to the caller at every suspension point.

    `grid` is the live search state; copy it before keeping it past the next step.
    """

    grid: Grid
    iteration: int
    elapsed: float
    kind: StepKind
    cell: Optional[Cell] = None
    digit: Optional[int] = None


@dataclass
class SolveResult:
    status: SolveStatus
    grid: Optional[Grid]
    iterations: int
    elapsed: float
    strategy: str

    @property
    def solved(self) -> bool:
        return self.status == SolveStatus.SOLVED


StepCallback = Callable[[SolveStep], Optional[StepAction]]
SearchGenerator = Generator[SolveStep, None, Optional[Grid]]


class SearchCancelled(Exception):
    """Unwinds a search from its current suspension point."""


class Solver(ABC):
    """The base solver class.

    A solver is driven either step by step through `steps()`, or to completion
    through `solve()`. Both run the same search.
    """

    def __init__(self, config: Optional[SolverConfig] = None):
        self.config = config if config is not None else SolverConfig()
        self.logger = get_logger(__name__)
        self.iterations = 0
        self._start_time = 0.0
        self._cancelled = False

    @property
    def name(self) -> str:
        return getattr(self, "_name", type(self).__name__)

    @property
    def elapsed(self) -> float:
        return time.perf_counter() - self._start_time

    def cancel(self) -> None:
        """Ask the running search to stop at its next suspension point."""
        self._cancelled = True

    @abstractmethod
    def _search(self, grid: Grid) -> SearchGenerator:
        """Search for a completion of `grid`, yielding a step at every suspension point.

        Returns the solved grid, or None when the search space is exhausted.
        """

    def _suspend(
        self,
        grid: Grid,
        kind: StepKind,
        cell: Optional[Cell] = None,
        digit: Optional[int] = None,
    ) -> Generator[SolveStep, None, None]:
        yield SolveStep(
            grid=grid,
            iteration=self.iterations,
            elapsed=self.elapsed,
            kind=kind,
            cell=cell,
            digit=digit,
        )
        if self._cancelled:
            raise SearchCancelled()

    def steps(self, grid: Grid) -> Generator[SolveStep, None, SolveResult]:
        """Run the search on `grid` cooperatively.

        Yields a `SolveStep` after every attempted placement, undo or state expansion
        and returns the `SolveResult` (as the `StopIteration` value). Closing the
        generator or calling `cancel()` unwinds the search and leaves `grid` as it was
        handed in.
        """
        self.iterations = 0
        self._cancelled = False
        self._start_time = time.perf_counter()
        self.logger.debug(f"[{self.name}] search started with {count_empty(grid)} empty cells.")
        try:
            solution = yield from self._search(grid)
        except SearchCancelled:
            status, solution = SolveStatus.CANCELLED, None
        else:
            status = SolveStatus.SOLVED if solution is not None else SolveStatus.UNSOLVABLE
        result = SolveResult(
            status=status,
            grid=solution,
            iterations=self.iterations,
            elapsed=self.elapsed,
            strategy=self.name,
        )
        self.logger.debug(
            f"[{self.name}] search {status.value} after {result.iterations} iterations "
            f"in {result.elapsed:.3f}s."
        )
        return result

    def solve(self, grid: Grid, on_step: Optional[StepCallback] = None) -> SolveResult:
        """Run the search to completion on a copy of `grid`.

        Args:
            grid (Grid): The puzzle; it is not modified.
            on_step (Optional[StepCallback]): Called at every suspension point;
                returning `StepAction.CANCEL` abandons the search.

        Returns:
            SolveResult: The terminal state of the search.
        """
        steps = self.steps(copy_grid(grid))
        progress_every = self.config.progress_every
        last_logged = 0
        while True:
            try:
                step = next(steps)
            except StopIteration as stop:
                return stop.value
            if on_step is not None and on_step(step) == StepAction.CANCEL:
                self.cancel()
            if progress_every and step.iteration - last_logged >= progress_every:
                last_logged = step.iteration
                self.logger.info(
                    f"[{self.name}] {step.iteration} iterations, {step.elapsed:.2f}s elapsed."
                )
