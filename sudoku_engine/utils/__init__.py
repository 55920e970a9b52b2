from sudoku_engine.utils.log import get_logger, set_log_level
from sudoku_engine.utils.registry import Registry

__all__ = [
    "get_logger",
    "set_log_level",
    "Registry",
]
