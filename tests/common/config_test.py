# -*- coding: utf-8 -*-
"""Test cases for config loading and validation."""
import os
import tempfile
import unittest

from sudoku_engine.common.config import Config, load_config
from sudoku_engine.common.config_validator import validate_config
from sudoku_engine.common.constants import Difficulty
from sudoku_engine.utils.log import set_log_level
from tests.tools import get_template_config


class TestConfig(unittest.TestCase):
    def setUp(self):
        self.temp_dir = tempfile.TemporaryDirectory()

    def tearDown(self):
        self.temp_dir.cleanup()
        set_log_level("INFO")

    def _write(self, text: str) -> str:
        path = os.path.join(self.temp_dir.name, "config.yaml")
        with open(path, "w", encoding="utf-8") as f:
            f.write(text)
        return path

    def test_defaults(self):
        config = load_config()
        self.assertEqual(config.generator.difficulty, "medium")
        self.assertIsNone(config.generator.cells_to_remove)
        self.assertEqual(config.generator.seed_attempts, 3)
        self.assertEqual(config.generator.max_restarts, 5)
        self.assertFalse(config.generator.strict)
        self.assertEqual(config.solver.strategy, "dfs")
        self.assertEqual(config.log.level, "INFO")

    def test_load_yaml_over_defaults(self):
        path = self._write(
            """
generator:
  difficulty: HARD
  seed: 7
  strict: true
solver:
  strategy: astar
  progress_every: 1000
log:
  level: warning
"""
        )
        config = load_config(path)
        self.assertIsInstance(config, Config)
        # difficulty names are case insensitive and normalized
        self.assertEqual(config.generator.difficulty, "hard")
        self.assertEqual(Difficulty(config.generator.difficulty).cells_to_remove, 55)
        self.assertEqual(config.generator.seed, 7)
        self.assertTrue(config.generator.strict)
        self.assertEqual(config.generator.seed_attempts, 3)
        self.assertEqual(config.solver.strategy, "astar")
        self.assertEqual(config.solver.progress_every, 1000)
        self.assertEqual(config.log.level, "WARNING")

    def test_save_and_reload(self):
        config = get_template_config()
        config.generator.cells_to_remove = 30
        config.solver.strategy = "bfs"
        path = os.path.join(self.temp_dir.name, "saved.yaml")
        config.save(path)

        loaded = load_config(path)
        self.assertEqual(loaded.generator.cells_to_remove, 30)
        self.assertEqual(loaded.solver.strategy, "bfs")

    def test_invalid_values(self):
        cases = [
            ("difficulty", lambda c: setattr(c.generator, "difficulty", "impossible")),
            ("cells_to_remove", lambda c: setattr(c.generator, "cells_to_remove", 82)),
            ("seed_attempts", lambda c: setattr(c.generator, "seed_attempts", -1)),
            ("max_attempts", lambda c: setattr(c.generator, "max_attempts", 0)),
            ("max_restarts", lambda c: setattr(c.generator, "max_restarts", -1)),
            ("strategy", lambda c: setattr(c.solver, "strategy", "greedy")),
            ("progress_every", lambda c: setattr(c.solver, "progress_every", -5)),
            ("level", lambda c: setattr(c.log, "level", "LOUD")),
        ]
        for name, mutate in cases:
            with self.subTest(field=name):
                config = get_template_config()
                mutate(config)
                with self.assertRaises(ValueError):
                    validate_config(config)

    def test_invalid_yaml_value(self):
        path = self._write("solver:\n  strategy: greedy\n")
        with self.assertRaises(ValueError):
            load_config(path)

    def test_example_config(self):
        path = os.path.join(
            os.path.dirname(__file__), "..", "..", "examples", "config", "sudoku.yaml"
        )
        config = load_config(path)
        self.assertEqual(config, load_config())
