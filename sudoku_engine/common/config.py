# -*- coding: utf-8 -*-
"""Configs for the generator, the solvers and logging."""
from dataclasses import dataclass, field
from typing import Optional

from omegaconf import OmegaConf


@dataclass
class GeneratorConfig:
    difficulty: str = "medium"
    # overrides the removal count of `difficulty` when set
    cells_to_remove: Optional[int] = None
    seed: Optional[int] = None
    # random givens dropped on the empty grid before the shuffled fill
    seed_attempts: int = 3
    # tentative removals per carving pass; None means try every filled cell once
    max_attempts: Optional[int] = None
    # fresh solution grids to try when a pass falls short of the target
    max_restarts: int = 5
    # raise instead of accepting a puzzle with more clues than requested
    strict: bool = False


@dataclass
class SolverConfig:
    strategy: str = "dfs"
    shuffle_digits: bool = False
    # log progress every N iterations; 0 disables
    progress_every: int = 0


@dataclass
class LogConfig:
    level: str = "INFO"


@dataclass
class Config:
    generator: GeneratorConfig = field(default_factory=GeneratorConfig)
    solver: SolverConfig = field(default_factory=SolverConfig)
    log: LogConfig = field(default_factory=LogConfig)

    def save(self, config_path: str) -> None:
        """Save config to file."""
        with open(config_path, "w", encoding="utf-8") as f:
            OmegaConf.save(OmegaConf.structured(self), f)


def load_config(config_path: Optional[str] = None) -> Config:
    """Load a YAML config on top of the defaults and validate it.

    Args:
        config_path (Optional[str]): Path to the YAML file; None gives the defaults.

    Returns:
        Config: The validated config.
    """
    from sudoku_engine.common.config_validator import validate_config

    schema = OmegaConf.structured(Config)
    if config_path:
        yaml_config = OmegaConf.load(config_path)
        schema = OmegaConf.merge(schema, yaml_config)
    config: Config = OmegaConf.to_object(schema)  # type: ignore [assignment]
    validate_config(config)
    return config
