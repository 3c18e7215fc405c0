"""CLI rendering, input helpers and the match runner entry point."""

from __future__ import annotations

import argparse
import logging
from typing import List, Optional

from connect4sim.agents import Strategy
from connect4sim.config import BoardConfig, MatchConfig
from connect4sim.engine import GridState
from connect4sim.errors import Connect4Error
from connect4sim.match import Match, format_report, run_round_robin
from connect4sim.players import Player, default_roster


def render_board(state: GridState) -> str:
    lines: List[str] = []
    for r in range(state.rows):
        lines.append(" ".join(state.row(r)))
    lines.append("-" * (2 * state.columns - 1))
    lines.append(" ".join(str(c % 10) for c in range(state.columns)))
    return "\n".join(lines)


def _parse_column(raw: str, lo: int, hi: int) -> Optional[int]:
    raw = raw.strip()
    if not raw:
        return None
    try:
        col = int(raw)
    except ValueError:
        return None

    if lo <= col <= hi:
        return col
    return None


def prompt_for_column(lo: int, hi: int) -> int:
    """Read a column number from stdin, asking again until it is in [lo, hi]."""
    prompt = f"Enter a column number [{lo},{hi}]: "

    while True:
        raw = input(prompt)
        col = _parse_column(raw, lo, hi)
        if col is None:
            print(f"Enter a whole number between {lo} and {hi}.")
            continue
        return col


def _print_move(state: GridState, player: Player, col: int) -> None:
    print(f"Move: {player.symbol} -> col {col}")
    print(render_board(state))
    print("")


def main(argv: Optional[List[str]] = None) -> None:
    choices = [s.value for s in Strategy]

    parser = argparse.ArgumentParser(description="Connect-4 strategy simulator")
    parser.add_argument("--x", choices=choices, default="human", help="strategy for X (moves first)")
    parser.add_argument("--o", choices=choices, default="minimax", help="strategy for O")
    parser.add_argument("--games", type=int, default=None, help="games per match (default 1 with a human, else 100)")
    parser.add_argument("--rows", type=int, default=6, help="board rows (>= 6)")
    parser.add_argument("--columns", type=int, default=7, help="board columns (>= 7)")
    parser.add_argument("--seed", type=int, default=None, help="base random seed (for random/naive agents)")
    parser.add_argument(
        "--round-robin",
        action="store_true",
        help="ignore --x/--o and play every computer strategy against every other and itself",
    )
    parser.add_argument("--show-board", action="store_true", help="print the board after every move")
    parser.add_argument("--progress", action="store_true", help="show a progress bar per match")
    parser.add_argument("--verbose", action="store_true", help="debug logging")

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    has_human = not args.round_robin and Strategy.HUMAN.value in (args.x, args.o)
    games = args.games if args.games is not None else (1 if has_human else 100)

    cfg = MatchConfig(
        games=games,
        seed=args.seed,
        board=BoardConfig(rows=args.rows, columns=args.columns),
        progress=args.progress,
    )
    try:
        cfg.validate()
    except ValueError as e:
        parser.error(str(e))

    if args.round_robin:
        players, opponents = default_roster()
        for result in run_round_robin(players, opponents, cfg):
            print(format_report(result))
            print("")
        print("Completed All Matches")
        return

    x = Player(f"Player X ({args.x})", "X", Strategy(args.x))
    o = Player(f"Player O ({args.o})", "O", Strategy(args.o))
    show = args.show_board or has_human

    try:
        match = Match(x, o, cfg, prompt=prompt_for_column, on_move=_print_move if show else None)
    except Connect4Error as e:
        parser.error(str(e))

    if show:
        print(render_board(match.state))
        print("")
    print(format_report(match.play()))


if __name__ == "__main__":
    main()
