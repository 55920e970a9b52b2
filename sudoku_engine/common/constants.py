# -*- coding: utf-8 -*-
"""Constants and enums shared across the engine."""
from enum import Enum, EnumMeta

GRID_SIZE = 9
BOX_SIZE = 3
DIGITS = tuple(range(1, GRID_SIZE + 1))
EMPTY = 0

# fewest givens any uniquely solvable 9x9 puzzle can have
MIN_CLUES = 17


class CaseInsensitiveEnumMeta(EnumMeta):
    def __getitem__(cls, name):
        return super().__getitem__(name.upper())

    def __call__(cls, value, *args, **kwargs):
        if isinstance(value, str):
            value = value.lower()
        return super().__call__(value, *args, **kwargs)


class CaseInsensitiveEnum(Enum, metaclass=CaseInsensitiveEnumMeta):
    pass


class Difficulty(CaseInsensitiveEnum):
    """Difficulty tiers of generated puzzles."""

    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"
    EXPERT = "expert"

    @property
    def cells_to_remove(self) -> int:
        return CELLS_TO_REMOVE[self]


CELLS_TO_REMOVE = {
    Difficulty.EASY: 40,
    Difficulty.MEDIUM: 50,
    Difficulty.HARD: 55,
    Difficulty.EXPERT: 60,
}


class SolveStatus(CaseInsensitiveEnum):
    """Terminal state of a search."""

    SOLVED = "solved"
    UNSOLVABLE = "unsolvable"
    CANCELLED = "cancelled"


class StepKind(CaseInsensitiveEnum):
    """What happened at a suspension point of a search."""

    ATTEMPT = "attempt"  # a digit was tested and rejected
    PLACE = "place"
    UNDO = "undo"
    EXPAND = "expand"  # a queued state was taken off the frontier


class StepAction(CaseInsensitiveEnum):
    """What a step callback asks the search to do next."""

    CONTINUE = "continue"
    CANCEL = "cancel"


class CheckResult(CaseInsensitiveEnum):
    """Verdict on a player's board."""

    INCOMPLETE = "incomplete"
    CORRECT = "correct"
    INCORRECT = "incorrect"


class TextStyle(CaseInsensitiveEnum):
    """Line layouts understood by the text reader and writer."""

    DIGITS = "digits"
    CSV = "csv"
    SPACE = "space"
