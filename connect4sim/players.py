"""Player identities and the named player roster."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Tuple

from connect4sim.agents.base import Strategy
from connect4sim.engine import EMPTY
from connect4sim.errors import DuplicateSymbol, InvalidSymbol

# Characters that read as "empty" on a printed board.
RESERVED_SYMBOLS = frozenset({EMPTY, "e", "_"})


@dataclass(frozen=True)
class Player:
    name: str
    symbol: str
    strategy: Strategy

    def __post_init__(self) -> None:
        if not isinstance(self.symbol, str) or len(self.symbol) != 1:
            raise InvalidSymbol("player symbol must be exactly one character", {"symbol": self.symbol})
        if self.symbol in RESERVED_SYMBOLS or self.symbol.isspace():
            raise InvalidSymbol("player symbol is reserved for empty cells", {"symbol": self.symbol})
        object.__setattr__(self, "strategy", Strategy(self.strategy))


def check_opponents(first: Player, second: Player) -> None:
    if first.symbol == second.symbol:
        raise DuplicateSymbol(
            "both players cannot have the same symbol",
            {"first": first.name, "second": second.name, "symbol": first.symbol},
        )


def default_roster() -> Tuple[List[Player], List[Player]]:
    """
    The standard computer players and a mirror opponent for each.

    Returns (players, opponents); opponents[i] plays the same strategy as
    players[i] with its own symbol, for self-play matches.
    """

    players = [
        Player("Random Player", "a", Strategy.RANDOM),
        Player("Naive Player", "c", Strategy.NAIVE),
        Player("Simple Player", "f", Strategy.SIMPLE),
        Player("Heuristic Player", "h", Strategy.HEURISTIC),
        Player("Minimax Player", "j", Strategy.MINIMAX),
    ]
    opponents = [
        Player("Random Opponent", "b", Strategy.RANDOM),
        Player("Naive Opponent", "d", Strategy.NAIVE),
        Player("Simple Opponent", "g", Strategy.SIMPLE),
        Player("Heuristic Opponent", "i", Strategy.HEURISTIC),
        Player("Minimax Opponent", "k", Strategy.MINIMAX),
    ]
    return players, opponents


def human_player(name: str = "Human Player", symbol: str = "H") -> Player:
    return Player(name, symbol, Strategy.HUMAN)
