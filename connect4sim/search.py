"""
Move-selection algorithms, from uniform random play up to a 3-ply lookahead.

Every function here borrows the GridState mutably for the duration of the call
and hands it back unchanged: each speculative apply_move is paired with an
undo_move in reverse order. Two searches must never run on the same state at
the same time; clone it with GridState.copy() for that.
"""

from __future__ import annotations

import logging
import math
import random
from typing import Dict, List, Optional

from connect4sim.engine import GridState
from connect4sim.errors import NoLegalMove
from connect4sim.evaluation import heuristic, simple_heuristic, winner

logger = logging.getLogger(__name__)


def is_immediate_win(state: GridState, symbol: str, opponent: str, column: int) -> bool:
    """Return True if dropping `symbol` into `column` wins on the spot."""
    state.apply_move(column, symbol)
    try:
        return winner(state, symbol, opponent) == symbol
    finally:
        state.undo_move(column)


def random_move(state: GridState, rng: Optional[random.Random] = None) -> int:
    legal = _legal_or_raise(state)
    return (rng or random).choice(legal)


def naive_move(state: GridState, symbol: str, opponent: str, rng: Optional[random.Random] = None) -> int:
    """Win if possible, else block the opponent's win, else play at random."""
    legal = _legal_or_raise(state)

    col = _win_or_block(state, legal, symbol, opponent)
    if col is not None:
        return col
    return random_move(state, rng)


def greedy_move(state: GridState, symbol: str, opponent: str) -> int:
    """Same as naive_move, but falls back to the best immediate heuristic."""
    legal = _legal_or_raise(state)

    col = _win_or_block(state, legal, symbol, opponent)
    if col is not None:
        return col
    return best_immediate_heuristic(state, symbol, opponent)


def best_immediate_heuristic(state: GridState, symbol: str, opponent: str) -> int:
    """
    Greedy one-ply choice: the column whose resulting position scores highest.

    Ties keep the lowest column because only a strictly greater score replaces
    the running best.
    """
    legal = _legal_or_raise(state)

    best_col = legal[0]
    best_score = -math.inf
    for col in legal:
        state.apply_move(col, symbol)
        try:
            score = heuristic(state, symbol, opponent)
        finally:
            state.undo_move(col)

        if score > best_score:
            best_col = col
            best_score = score

    return best_col


def shallow_tree_move(state: GridState, symbol: str, opponent: str) -> int:
    """
    3-ply exhaustive-sum lookahead (the "minimax" strategy).

    Despite the strategy's name this is not minimax: the simple heuristic of
    every player/opponent/player leaf is summed into the total of the first
    column, with no minimizing over the opponent's reply. An immediate win is
    always taken first.
    """
    legal = _legal_or_raise(state)

    for col in legal:
        if is_immediate_win(state, symbol, opponent, col):
            return col

    totals = tree_totals(state, symbol, opponent)

    best_col = legal[0]
    best_total = totals[best_col]
    for col in legal:
        if totals[col] > best_total:
            best_col = col
            best_total = totals[col]

    logger.debug("tree totals for %s: %s -> col %d", symbol, totals, best_col)
    return best_col


def tree_totals(state: GridState, symbol: str, opponent: str) -> Dict[int, int]:
    """Sum of simple_heuristic over all 3-ply leaves, keyed by the first column."""
    legal = _legal_or_raise(state)
    totals: Dict[int, int] = {col: 0 for col in legal}

    for first in legal:
        state.apply_move(first, symbol)
        try:
            for second in state.available_columns():
                state.apply_move(second, opponent)
                try:
                    for third in state.available_columns():
                        state.apply_move(third, symbol)
                        try:
                            totals[first] += simple_heuristic(state, symbol, opponent)
                        finally:
                            state.undo_move(third)
                finally:
                    state.undo_move(second)
        finally:
            state.undo_move(first)

    return totals


def _win_or_block(state: GridState, legal: List[int], symbol: str, opponent: str) -> Optional[int]:
    for col in legal:
        if is_immediate_win(state, symbol, opponent, col):
            return col
    for col in legal:
        if is_immediate_win(state, opponent, symbol, col):
            return col
    return None


def _legal_or_raise(state: GridState) -> List[int]:
    legal = state.available_columns()
    if not legal:
        raise NoLegalMove("no legal moves available: the board is full")
    return legal
