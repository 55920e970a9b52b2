import unittest

from sudoku_engine.common.grid import empty_grid
from sudoku_engine.solver.frontier import FifoFrontier, PriorityFrontier, SearchState


def _state(tag: int, cost: int = 0, heuristic: int = 0) -> SearchState:
    return SearchState(grid=empty_grid(), cell=(0, tag), cost=cost, heuristic=heuristic)


class TestFrontier(unittest.TestCase):
    def test_fifo_frontier(self):
        frontier = FifoFrontier()
        for tag in range(4):
            frontier.put(_state(tag))
        self.assertEqual(len(frontier), 4)
        self.assertEqual([frontier.get().cell[1] for _ in range(4)], [0, 1, 2, 3])
        self.assertEqual(len(frontier), 0)
        with self.assertRaises(IndexError):
            frontier.get()

    def test_priority_order(self):
        frontier = PriorityFrontier()
        frontier.put(_state(0, cost=3, heuristic=4))  # 7
        frontier.put(_state(1, cost=1, heuristic=1))  # 2
        frontier.put(_state(2, cost=0, heuristic=5))  # 5
        frontier.put(_state(3, cost=2, heuristic=0))  # 2
        self.assertEqual(frontier.size(), 4)
        self.assertEqual(list(frontier.priority_groups.keys()), [2, 5, 7])

        order = [frontier.get().cell[1] for _ in range(4)]
        # equal priorities leave in insertion order
        self.assertEqual(order, [1, 3, 2, 0])
        self.assertEqual(len(frontier), 0)
        self.assertEqual(len(frontier.priority_groups), 0)

    def test_ties_are_fifo(self):
        frontier = PriorityFrontier()
        for tag in range(5):
            frontier.put(_state(tag, cost=tag, heuristic=10 - tag))
        frontier.put(_state(9, cost=0, heuristic=1))
        self.assertEqual(frontier.get().cell[1], 9)
        self.assertEqual([frontier.get().cell[1] for _ in range(5)], [0, 1, 2, 3, 4])

    def test_empty_priority_frontier(self):
        frontier = PriorityFrontier()
        with self.assertRaises(IndexError):
            frontier.get()
        frontier.put(_state(0))
        frontier.get()
        with self.assertRaises(IndexError):
            frontier.get()
