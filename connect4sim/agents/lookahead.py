"""Rule-based and lookahead agents built on connect4sim.search."""

from __future__ import annotations

import random
from typing import Optional

from connect4sim.agents.base import Agent, Strategy
from connect4sim.engine import GridState
from connect4sim.search import best_immediate_heuristic, greedy_move, naive_move, shallow_tree_move


class NaiveAgent(Agent):
    """Take a win, else block one, else play at random."""

    strategy = Strategy.NAIVE

    def __init__(self, name: str, seed: Optional[int] = None) -> None:
        self.name = name
        self.rng = random.Random(seed)

    def select_move(self, state: GridState, symbol: str, opponent: str) -> int:
        return naive_move(state, symbol, opponent, self.rng)


class SimpleAgent(Agent):
    """Take a win, else block one, else the best one-ply heuristic."""

    strategy = Strategy.SIMPLE

    def __init__(self, name: str) -> None:
        self.name = name

    def select_move(self, state: GridState, symbol: str, opponent: str) -> int:
        return greedy_move(state, symbol, opponent)


class HeuristicAgent(Agent):
    strategy = Strategy.HEURISTIC

    def __init__(self, name: str) -> None:
        self.name = name

    def select_move(self, state: GridState, symbol: str, opponent: str) -> int:
        return best_immediate_heuristic(state, symbol, opponent)


class TreeAgent(Agent):
    """
    The "minimax" player: a fixed 3-ply exhaustive-sum lookahead.

    Leaf scores are summed per first move rather than min/maxed, see
    connect4sim.search.shallow_tree_move.
    """

    strategy = Strategy.MINIMAX

    def __init__(self, name: str) -> None:
        self.name = name

    def select_move(self, state: GridState, symbol: str, opponent: str) -> int:
        return shallow_tree_move(state, symbol, opponent)
