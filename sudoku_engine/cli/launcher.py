# -*- coding: utf-8 -*-
"""Launch the command line interface."""
import argparse
import sys
from typing import List, Optional

from sudoku_engine.common.config import Config, load_config
from sudoku_engine.common.constants import Difficulty, StepKind
from sudoku_engine.common.exceptions import GenerationError, GridFormatError, InvalidPuzzleError
from sudoku_engine.formats.reader import read_puzzle_file
from sudoku_engine.formats.writer import format_grid, write_puzzle_file
from sudoku_engine.generator.generator import SudokuGenerator
from sudoku_engine.solver import SOLVERS, SolveStep, count_solutions
from sudoku_engine.utils.log import get_logger, set_log_level

logger = get_logger(__name__)


def generate(args: argparse.Namespace, config: Config) -> int:
    if args.difficulty is not None:
        config.generator.difficulty = args.difficulty
    if args.seed is not None:
        config.generator.seed = args.seed
    try:
        generated = SudokuGenerator(config.generator).generate()
    except GenerationError as e:
        logger.error(str(e))
        return 1
    if args.output:
        write_puzzle_file(args.output, generated.puzzle, args.style)
    else:
        print(format_grid(generated.puzzle, args.style), end="")
    if args.with_solution:
        print()
        print(format_grid(generated.solution, args.style), end="")
    return 0


def solve(args: argparse.Namespace, config: Config) -> int:
    if args.strategy is not None:
        config.solver.strategy = args.strategy
    if args.progress_every is not None:
        config.solver.progress_every = args.progress_every
    solver_cls = SOLVERS.get(config.solver.strategy)
    if solver_cls is None:
        logger.error(
            f"Unknown strategy `{config.solver.strategy}`, must be one of {SOLVERS.list()}"
        )
        return 1

    grid = read_puzzle_file(args.path)
    if args.animate:
        set_log_level("DEBUG")

    def on_step(step: SolveStep) -> None:
        if step.kind == StepKind.ATTEMPT:
            return
        logger.debug(
            f"#{step.iteration} {step.kind.value} cell={step.cell} digit={step.digit} "
            f"({step.elapsed:.3f}s)\n{format_grid(step.grid)}"
        )

    result = solver_cls(config.solver).solve(grid, on_step=on_step if args.animate else None)
    logger.info(
        f"Strategy `{result.strategy}` finished with status `{result.status.value}` "
        f"after {result.iterations} iterations in {result.elapsed:.3f}s."
    )
    if not result.solved:
        return 1
    print(format_grid(result.grid, args.style), end="")
    return 0


def validate(args: argparse.Namespace, config: Config) -> int:
    grid = read_puzzle_file(args.path)
    solutions = count_solutions(grid, 2)
    if solutions == 0:
        print("invalid: the puzzle has no solution")
        return 1
    if solutions > 1:
        print("invalid: the puzzle has multiple solutions")
        return 1
    print("valid: the puzzle has exactly one solution")
    return 0


def count(args: argparse.Namespace, config: Config) -> int:
    grid = read_puzzle_file(args.path)
    print(count_solutions(grid, args.max))
    return 0


COMMANDS = {
    "generate": generate,
    "solve": solve,
    "validate": validate,
    "count": count,
}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="sudoku-engine", description="Generate, validate and solve Sudoku puzzles."
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    common = argparse.ArgumentParser(add_help=False)
    common.add_argument("--config", type=str, default=None, help="Path to a YAML config file.")
    common.add_argument(
        "--style",
        type=str,
        default="digits",
        choices=["digits", "csv", "space"],
        help="Layout of printed grids.",
    )

    generate_parser = subparsers.add_parser(
        "generate", parents=[common], help="Generate a new puzzle."
    )
    generate_parser.add_argument(
        "--difficulty",
        type=str,
        default=None,
        choices=[d.value for d in Difficulty],
        help="Difficulty tier (default: from config).",
    )
    generate_parser.add_argument("--seed", type=int, default=None, help="Random seed.")
    generate_parser.add_argument(
        "--output", type=str, default=None, help="Write the puzzle to this file."
    )
    generate_parser.add_argument(
        "--with-solution", action="store_true", default=False, help="Also print the solution."
    )

    solve_parser = subparsers.add_parser("solve", parents=[common], help="Solve a puzzle file.")
    solve_parser.add_argument("path", type=str, help="Path to the puzzle file.")
    solve_parser.add_argument(
        "--strategy", type=str, default=None, help="Search strategy: dfs, bfs or astar."
    )
    solve_parser.add_argument(
        "--animate",
        action="store_true",
        default=False,
        help="Log every search step at debug level.",
    )
    solve_parser.add_argument(
        "--progress-every", type=int, default=None, help="Log progress every N iterations."
    )

    validate_parser = subparsers.add_parser(
        "validate", parents=[common], help="Check that a puzzle file is a proper puzzle."
    )
    validate_parser.add_argument("path", type=str, help="Path to the puzzle file.")

    count_parser = subparsers.add_parser(
        "count", parents=[common], help="Count solutions of a puzzle."
    )
    count_parser.add_argument("path", type=str, help="Path to the puzzle file.")
    count_parser.add_argument(
        "--max", type=int, default=2, help="Stop counting at this many solutions."
    )

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """The main entrypoint."""
    args = build_parser().parse_args(argv)
    try:
        config = load_config(args.config)
        return COMMANDS[args.command](args, config)
    except (GridFormatError, InvalidPuzzleError) as e:
        logger.error(f"Rejected puzzle: {e}")
        return 1
    except ValueError as e:
        logger.error(str(e))
        return 1


if __name__ == "__main__":
    sys.exit(main())
