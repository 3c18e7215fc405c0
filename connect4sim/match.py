"""Game loop, multi-game matches and the round-robin tournament."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Callable, Dict, List, Optional, Sequence

from tqdm import trange

from connect4sim.agents import Agent, PromptFn, build_agent
from connect4sim.config import MatchConfig
from connect4sim.engine import GridState, initial_state
from connect4sim.errors import Connect4Error
from connect4sim.evaluation import winner
from connect4sim.players import Player, check_opponents

logger = logging.getLogger(__name__)

MoveCallback = Callable[[GridState, Player, int], None]


@dataclass(frozen=True)
class Seat:
    player: Player
    agent: Agent


@dataclass(frozen=True)
class GameRecord:
    winner: Optional[Player]  # None for a tie
    moves: int


@dataclass
class MatchResult:
    first: Player
    second: Player
    games_played: int = 0
    ties: int = 0
    wins: Dict[str, int] = field(default_factory=dict)
    win_moves: Dict[str, List[int]] = field(default_factory=dict)
    error: Optional[str] = None

    def __post_init__(self) -> None:
        for p in (self.first, self.second):
            self.wins.setdefault(p.symbol, 0)
            self.win_moves.setdefault(p.symbol, [])

    def record(self, game: GameRecord) -> None:
        self.games_played += 1
        if game.winner is None:
            self.ties += 1
            return
        self.wins[game.winner.symbol] += 1
        self.win_moves[game.winner.symbol].append(game.moves)

    def average_moves_to_win(self, symbol: str) -> Optional[float]:
        moves = self.win_moves.get(symbol, [])
        if not moves:
            return None
        return sum(moves) / len(moves)


def play_game(
    state: GridState,
    first: Seat,
    second: Seat,
    *,
    on_move: Optional[MoveCallback] = None,
) -> GameRecord:
    """
    Alternate moves starting with `first` until someone connects four or the
    board fills up. The state is played on as given; callers reset it.
    """

    check_opponents(first.player, second.player)
    a, b = first.player.symbol, second.player.symbol

    turn = 0
    while not state.is_full():
        seat, other = (first, second) if turn % 2 == 0 else (second, first)
        turn += 1

        col = seat.agent.select_move(state, seat.player.symbol, other.player.symbol)
        state.apply_move(col, seat.player.symbol)
        if on_move is not None:
            on_move(state, seat.player, col)

        win = winner(state, a, b)
        if win is not None:
            champ = first.player if win == a else second.player
            return GameRecord(winner=champ, moves=state.move_count())

    return GameRecord(winner=None, moves=state.move_count())


def _pick_seed(base: Optional[int], offset: int) -> Optional[int]:
    if base is None:
        return None
    return base + offset


class Match:
    """A series of games between two players on one reusable board."""

    def __init__(
        self,
        first: Player,
        second: Player,
        config: Optional[MatchConfig] = None,
        *,
        prompt: Optional[PromptFn] = None,
        on_move: Optional[MoveCallback] = None,
    ) -> None:
        self.config = config or MatchConfig()
        self.config.validate()
        check_opponents(first, second)

        self.state = initial_state(self.config.board)
        self.first = self._seat(first, offset=0, prompt=prompt)
        self.second = self._seat(second, offset=1, prompt=prompt)
        self.on_move = on_move

    def _seat(self, player: Player, *, offset: int, prompt: Optional[PromptFn]) -> Seat:
        seed = _pick_seed(self.config.seed, offset)
        return Seat(player, build_agent(player.strategy, player.name, seed=seed, prompt=prompt))

    def play(self) -> MatchResult:
        """
        Play config.games games and tally the results.

        Any simulator error ends the whole match; the tallies so far are kept
        and the error message is stored on the result.
        """

        result = MatchResult(self.first.player, self.second.player)
        desc = f"{self.first.player.name} vs. {self.second.player.name}"

        try:
            for _ in trange(self.config.games, desc=desc, disable=not self.config.progress, leave=False):
                self.state.reset()
                game = play_game(self.state, self.first, self.second, on_move=self.on_move)
                result.record(game)
                logger.debug(
                    "%s: %s in %d moves",
                    desc,
                    "tie" if game.winner is None else f"{game.winner.name} wins",
                    game.moves,
                )
        except Connect4Error as e:
            logger.error("Error playing: %s: %s", desc, e)
            result.error = str(e)

        return result


def run_round_robin(
    players: Sequence[Player],
    opponents: Sequence[Player],
    config: Optional[MatchConfig] = None,
) -> List[MatchResult]:
    """
    Every player against every other player, then each player against its
    mirror opponent (opponents[i] for players[i]).
    """

    if len(players) != len(opponents):
        raise ValueError("each player needs exactly one mirror opponent")

    results: List[MatchResult] = []
    for i in range(len(players)):
        for j in range(i + 1, len(players)):
            results.append(Match(players[i], players[j], config).play())

    for player, opponent in zip(players, opponents):
        results.append(Match(player, opponent, config).play())

    logger.info("Completed %d matches", len(results))
    return results


def format_report(result: MatchResult) -> str:
    lines = [
        "------Match Results------",
        f"Number of Games: {result.games_played}",
        f"Number of Ties: {result.ties}",
    ]
    if result.error is not None:
        lines.append(f"Aborted: {result.error}")

    for p in (result.first, result.second):
        avg = result.average_moves_to_win(p.symbol)
        lines.extend(
            [
                "",
                f"Player: {p.name}",
                f"Symbol: {p.symbol}",
                f"Strategy: {p.strategy.value}",
                f"Wins: {result.wins[p.symbol]}",
                f"Average Number of Moves to Win: {'n/a' if avg is None else f'{avg:.2f}'}",
            ]
        )
    return "\n".join(lines)
