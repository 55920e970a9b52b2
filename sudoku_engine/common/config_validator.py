from abc import ABC, abstractmethod

from sudoku_engine.common.config import Config
from sudoku_engine.common.constants import GRID_SIZE, Difficulty
from sudoku_engine.utils.log import get_logger, set_log_level


class ConfigValidator(ABC):
    def __init__(self):
        self.logger = get_logger(__name__)

    @abstractmethod
    def validate(self, config: Config) -> None:
        pass


class GeneratorConfigValidator(ConfigValidator):
    def validate(self, config: Config) -> None:
        generator = config.generator
        try:
            generator.difficulty = Difficulty(generator.difficulty).value
        except ValueError:
            raise ValueError(
                f"Invalid generator.difficulty: {generator.difficulty}, "
                f"must be one of {[d.value for d in Difficulty]}."
            )
        if generator.cells_to_remove is not None:
            if not 0 <= generator.cells_to_remove <= GRID_SIZE * GRID_SIZE:
                raise ValueError(
                    f"Invalid generator.cells_to_remove: {generator.cells_to_remove}, "
                    f"must be between 0 and {GRID_SIZE * GRID_SIZE}."
                )
            self.logger.info(
                f"`generator.cells_to_remove` is set to {generator.cells_to_remove}, "
                f"ignoring the removal count of difficulty `{generator.difficulty}`."
            )
        if generator.seed_attempts < 0:
            raise ValueError("`generator.seed_attempts` must be non-negative.")
        if generator.max_attempts is not None and generator.max_attempts <= 0:
            raise ValueError("`generator.max_attempts` must be positive when set.")
        if generator.max_restarts < 0:
            raise ValueError("`generator.max_restarts` must be non-negative.")


class SolverConfigValidator(ConfigValidator):
    def validate(self, config: Config) -> None:
        from sudoku_engine.solver import SOLVERS

        if SOLVERS.get(config.solver.strategy) is None:
            raise ValueError(
                f"Invalid solver.strategy: {config.solver.strategy}, "
                f"must be one of {SOLVERS.list()}."
            )
        if config.solver.progress_every < 0:
            raise ValueError("`solver.progress_every` must be non-negative.")


class LogConfigValidator(ConfigValidator):
    def validate(self, config: Config) -> None:
        config.log.level = config.log.level.upper()
        set_log_level(config.log.level)


validators = [
    LogConfigValidator(),
    GeneratorConfigValidator(),
    SolverConfigValidator(),
]


def validate_config(config: Config) -> None:
    for validator in validators:
        validator.validate(config)
