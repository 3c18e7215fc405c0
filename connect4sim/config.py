"""Board and match configuration."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from connect4sim.errors import InvalidDimensions

MIN_ROWS = 6
MIN_COLUMNS = 7


@dataclass(frozen=True)
class BoardConfig:
    rows: int = MIN_ROWS
    columns: int = MIN_COLUMNS

    def validate(self) -> None:
        if self.rows < MIN_ROWS:
            raise InvalidDimensions(f"rows must be >= {MIN_ROWS}", {"rows": self.rows})
        if self.columns < MIN_COLUMNS:
            raise InvalidDimensions(f"columns must be >= {MIN_COLUMNS}", {"columns": self.columns})


@dataclass(frozen=True)
class MatchConfig:
    """
    Settings for a series of games between two players.

    seed: base seed for random strategies; the second seat uses seed + 1 so the
          two players never share a random stream.
    progress: show a tqdm progress bar over the games.
    """

    games: int = 100
    seed: Optional[int] = None
    board: BoardConfig = field(default_factory=BoardConfig)
    progress: bool = False

    def validate(self) -> None:
        if self.games < 1:
            raise ValueError("games must be >= 1")
        self.board.validate()
