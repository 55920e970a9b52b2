"""Frontiers of pending search states."""
from abc import ABC, abstractmethod
from collections import deque
from dataclasses import dataclass

from sortedcontainers import SortedDict

from sudoku_engine.common.grid import Cell, Grid


@dataclass
class SearchState:
    grid: Grid
    cell: Cell  # next cell to fill in `grid`
    cost: int = 0  # cells filled along the branch so far
    heuristic: int = 0

    @property
    def priority(self) -> int:
        return self.cost + self.heuristic


class Frontier(ABC):
    @abstractmethod
    def put(self, state: SearchState) -> None:
        """Add a state to the frontier."""

    @abstractmethod
    def get(self) -> SearchState:
        """Remove and return the next state to expand."""

    @abstractmethod
    def size(self) -> int:
        """Number of states waiting in the frontier."""

    def __len__(self) -> int:
        return self.size()


class FifoFrontier(Frontier):
    """States are expanded in insertion order."""

    def __init__(self):
        self._queue = deque()

    def put(self, state: SearchState) -> None:
        self._queue.append(state)

    def get(self) -> SearchState:
        return self._queue.popleft()

    def size(self) -> int:
        return len(self._queue)


class PriorityFrontier(Frontier):
    """
    A min-priority queue of search states keyed by `f = g + h`.

    Attributes:
        priority_groups (SortedDict): Maps priorities to deques of states with the same priority.

    States sharing a priority leave in insertion order.
    """

    def __init__(self):
        self._count = 0
        self.priority_groups = SortedDict()  # Maps priority -> deque of states

    def put(self, state: SearchState) -> None:
        priority = state.priority
        if priority not in self.priority_groups:
            self.priority_groups[priority] = deque()
        self.priority_groups[priority].append(state)
        self._count += 1

    def get(self) -> SearchState:
        """
        Retrieve the lowest-priority state from the queue.

        Raises:
            IndexError: If the queue is empty.
        """
        if self._count == 0:
            raise IndexError("get from an empty frontier")
        _, state_queue = self.priority_groups.peekitem(index=0)
        state = state_queue.popleft()
        if not state_queue:
            self.priority_groups.popitem(index=0)
        self._count -= 1
        return state

    def size(self) -> int:
        return self._count
