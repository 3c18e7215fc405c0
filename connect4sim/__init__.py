"""Connect-4 strategy simulator (engine + evaluation + agents + CLI)."""

from connect4sim.config import BoardConfig, MatchConfig
from connect4sim.engine import EMPTY, GridState, initial_state
from connect4sim.evaluation import count_open_straights, heuristic, simple_heuristic, winner

__all__ = [
    "EMPTY",
    "BoardConfig",
    "GridState",
    "MatchConfig",
    "count_open_straights",
    "heuristic",
    "initial_state",
    "simple_heuristic",
    "winner",
]
