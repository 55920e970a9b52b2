from sudoku_engine.generator.generator import GeneratedPuzzle, SudokuGenerator, generate_puzzle

__all__ = [
    "GeneratedPuzzle",
    "SudokuGenerator",
    "generate_puzzle",
]
