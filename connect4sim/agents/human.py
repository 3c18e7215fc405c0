"""Human-in-the-loop agent that defers input handling to a prompt function."""

from __future__ import annotations

import logging

from connect4sim.agents.base import Agent, PromptFn, Strategy
from connect4sim.engine import GridState
from connect4sim.errors import NoLegalMove

logger = logging.getLogger(__name__)


class HumanAgent(Agent):
    strategy = Strategy.HUMAN

    def __init__(self, name: str, prompt_fn: PromptFn) -> None:
        self.name = name
        self.prompt_fn = prompt_fn

    def select_move(self, state: GridState, symbol: str, opponent: str) -> int:
        if state.is_full():
            raise NoLegalMove("no legal moves available: the board is full")

        # The prompt only guarantees the range; a full column means asking again.
        while True:
            col = self.prompt_fn(0, state.columns - 1)
            if not state.is_column_full(col):
                return col
            logger.warning("%s picked full column %d, asking again", self.name, col)
