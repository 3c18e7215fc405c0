"""
Line-pattern evaluation: win detection, open-straight counting, heuristics.

Patterns are matched by comparing fixed-width windows of every scanned line
against small code vectors ("e" = empty cell, "s" = the symbol being counted).
Every occurrence counts, including overlapping ones, so an "e s s e" run also
matches "e s s" and "s s e".
"""

from __future__ import annotations

from typing import Dict, List, Optional, Tuple

import numpy as np
from numpy.lib.stride_tricks import sliding_window_view

from connect4sim.engine import EMPTY_CODE, GridState
from connect4sim.errors import InvalidLength

WIN_LENGTH = 4

# Template characters: "e" empty, "s" symbol.
STRAIGHT_PATTERNS: Dict[int, Tuple[str, ...]] = {
    1: ("ese",),
    2: ("esse", "ess", "ses", "sse"),
    3: ("essse", "esss", "sess", "sses", "ssse"),
    4: ("ssss",),
}

HEURISTIC_WEIGHTS: Dict[int, int] = {1: 1, 2: 3, 3: 5, 4: 10}
SIMPLE_HEURISTIC_WEIGHTS: Dict[int, int] = {2: 3, 3: 5}


def winner(state: GridState, symbol_a: str, symbol_b: str) -> Optional[str]:
    """
    Return the symbol owning a four-in-a-row, or None.

    Lines are scanned rows, columns, down-right diagonals, down-left diagonals;
    within a line symbol_a is checked before symbol_b.
    """

    m = state.line_matrix()
    windows = sliding_window_view(m, WIN_LENGTH, axis=1)  # (lines, starts, 4)

    hits: List[Tuple[np.ndarray, str]] = []
    for symbol in (symbol_a, symbol_b):
        code = state.code_of(symbol)
        if code is None:
            continue
        per_line = np.all(windows == code, axis=2).any(axis=1)
        hits.append((per_line, symbol))

    if not hits:
        return None

    found = np.stack([h for h, _ in hits], axis=0)  # (symbols, lines)
    lines_with_win = np.nonzero(found.any(axis=0))[0]
    if len(lines_with_win) == 0:
        return None

    first_line = int(lines_with_win[0])
    for per_line, symbol in hits:
        if per_line[first_line]:
            return symbol
    return None


def count_open_straights(state: GridState, symbol: str, length: int) -> int:
    """Count pattern occurrences for straights of `length` (1..4) of `symbol`."""

    if length not in STRAIGHT_PATTERNS:
        raise InvalidLength("straight length must be 1..4", {"length": length})

    code = state.code_of(symbol)
    if code is None:
        return 0

    m = state.line_matrix()
    total = 0
    for width, patterns in _patterns_by_width(length, code).items():
        if width > m.shape[1]:
            continue
        windows = sliding_window_view(m, width, axis=1)  # (lines, starts, width)
        # (lines, starts, patterns) -> every matching window counts once per pattern
        matches = np.all(windows[:, :, None, :] == patterns[None, None, :, :], axis=3)
        total += int(matches.sum())
    return total


def heuristic(state: GridState, symbol: str, opponent: str) -> int:
    """
    Weighted straight difference between `symbol` and `opponent`.

        sum(w[L] * count(symbol, L)) - sum(w[L] * count(opponent, L)),  L = 1..4
        w = {1: 1, 2: 3, 3: 5, 4: 10}
    """
    return _weighted_difference(state, symbol, opponent, HEURISTIC_WEIGHTS)


def simple_heuristic(state: GridState, symbol: str, opponent: str) -> int:
    """Cheaper heuristic over straights of 2 and 3 only; used at the tree leaves."""
    return _weighted_difference(state, symbol, opponent, SIMPLE_HEURISTIC_WEIGHTS)


def _weighted_difference(state: GridState, symbol: str, opponent: str, weights: Dict[int, int]) -> int:
    score = 0
    for length, w in weights.items():
        score += w * count_open_straights(state, symbol, length)
        score -= w * count_open_straights(state, opponent, length)
    return score


def _patterns_by_width(length: int, code: int) -> Dict[int, np.ndarray]:
    grouped: Dict[int, List[List[int]]] = {}
    for template in STRAIGHT_PATTERNS[length]:
        row = [code if ch == "s" else EMPTY_CODE for ch in template]
        grouped.setdefault(len(row), []).append(row)
    return {width: np.array(rows, dtype=np.int8) for width, rows in grouped.items()}
