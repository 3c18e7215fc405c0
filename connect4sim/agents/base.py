"""Abstract base class for Connect-4 agents and the closed set of strategies."""

from __future__ import annotations

import abc
import enum
from typing import Callable

from connect4sim.engine import GridState

# promptForColumn(lo, hi): blocks until the user supplies an integer in [lo, hi].
PromptFn = Callable[[int, int], int]


class Strategy(str, enum.Enum):
    RANDOM = "random"
    NAIVE = "naive"
    SIMPLE = "simple"
    HEURISTIC = "heuristic"
    MINIMAX = "minimax"
    HUMAN = "human"


class Agent(abc.ABC):
    name: str
    strategy: Strategy

    @abc.abstractmethod
    def select_move(self, state: GridState, symbol: str, opponent: str) -> int:
        raise NotImplementedError
