"""Random baseline agent."""

from __future__ import annotations

import random
from typing import Optional

from connect4sim.agents.base import Agent, Strategy
from connect4sim.engine import GridState
from connect4sim.search import random_move


class RandomAgent(Agent):
    strategy = Strategy.RANDOM

    def __init__(self, name: str, seed: Optional[int] = None) -> None:
        self.name = name
        self.rng = random.Random(seed)

    def select_move(self, state: GridState, symbol: str, opponent: str) -> int:
        return random_move(state, self.rng)
