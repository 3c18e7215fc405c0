"""
Mutable Connect-4 grid with incremental apply/undo.

Row 0 is the TOP of the board, row rows-1 is the BOTTOM. Pieces fall to the
lowest empty cell of a column, so for every column c the occupied cells are
exactly rows rows-heights[c] .. rows-1 (no holes).

Cells are stored as small integer codes in a numpy grid:
  0      = empty
  1, 2.. = player symbols, assigned in the order they are first placed
"""

from __future__ import annotations

from typing import Dict, List, Optional, Tuple

import numpy as np

from connect4sim.config import BoardConfig
from connect4sim.errors import ColumnFull, EmptyColumn, InvalidColumn, InvalidSymbol, OutOfBounds

EMPTY = "."
EMPTY_CODE = 0
PAD_CODE = -1  # fills the tail of short lines in line_matrix(); never equal to a cell code

# Only lines that can hold four in a row are worth scanning.
MIN_LINE = 4


class GridState:
    def __init__(self, rows: int = 6, columns: int = 7) -> None:
        BoardConfig(rows=rows, columns=columns).validate()
        self.rows = rows
        self.columns = columns
        self.board = np.zeros((rows, columns), dtype=np.int8)
        self._heights = np.zeros((columns,), dtype=np.int16)
        self._codes: Dict[str, int] = {}
        self._symbols: List[str] = [EMPTY]

    @classmethod
    def from_config(cls, cfg: BoardConfig) -> "GridState":
        return cls(rows=cfg.rows, columns=cfg.columns)

    # ------------------------------------------------------------------
    # Moves
    # ------------------------------------------------------------------

    def apply_move(self, column: int, symbol: str) -> None:
        """Drop `symbol` into `column`; it lands on the lowest empty cell."""
        self._check_column(column)
        if self._heights[column] >= self.rows:
            raise ColumnFull("cannot add a symbol to a full column", {"column": column})
        code = self._register(symbol)

        row = self.rows - 1 - int(self._heights[column])
        self.board[row, column] = code
        self._heights[column] += 1

    def undo_move(self, column: int) -> None:
        """Remove the top piece of `column`. Must mirror the latest apply_move on it."""
        self._check_column(column)
        if self._heights[column] == 0:
            raise EmptyColumn("cannot remove a symbol from an empty column", {"column": column})

        row = self.rows - int(self._heights[column])
        self.board[row, column] = EMPTY_CODE
        self._heights[column] -= 1

    def reset(self) -> None:
        self.board.fill(EMPTY_CODE)
        self._heights.fill(0)

    def copy(self) -> "GridState":
        """Independent clone, for searches that must not share a board."""
        other = GridState(rows=self.rows, columns=self.columns)
        other.board = self.board.copy()
        other._heights = self._heights.copy()
        other._codes = dict(self._codes)
        other._symbols = list(self._symbols)
        return other

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    @property
    def heights(self) -> Tuple[int, ...]:
        return tuple(int(h) for h in self._heights)

    def available_columns(self) -> List[int]:
        return np.nonzero(self._heights < self.rows)[0].tolist()

    def is_full(self) -> bool:
        return bool(np.all(self._heights == self.rows))

    def is_column_full(self, column: int) -> bool:
        self._check_column(column)
        return int(self._heights[column]) == self.rows

    def is_column_empty(self, column: int) -> bool:
        self._check_column(column)
        return int(self._heights[column]) == 0

    def move_count(self) -> int:
        return int(self._heights.sum())

    def cell_at(self, row: int, col: int) -> str:
        if not (0 <= row < self.rows and 0 <= col < self.columns):
            raise OutOfBounds("cell outside the board", {"row": row, "col": col})
        return self._symbols[int(self.board[row, col])]

    def row(self, i: int) -> List[str]:
        if not 0 <= i < self.rows:
            raise OutOfBounds("invalid row index", {"row": i})
        return [self._symbols[int(v)] for v in self.board[i, :]]

    def column(self, j: int) -> List[str]:
        if not 0 <= j < self.columns:
            raise OutOfBounds("invalid column index", {"column": j})
        return [self._symbols[int(v)] for v in self.board[:, j]]

    def code_of(self, symbol: str) -> Optional[int]:
        """Cell code for `symbol`, or None if it was never placed on this board."""
        return self._codes.get(symbol)

    # ------------------------------------------------------------------
    # Line scans
    # ------------------------------------------------------------------

    def lines(self) -> List[np.ndarray]:
        """
        Every line that can hold four in a row, as vectors of cell codes.

        Order: rows (left to right), columns (top to bottom), down-right
        diagonals, down-left diagonals. Diagonals shorter than four are skipped.
        """
        out: List[np.ndarray] = []
        out.extend(self.board[r, :] for r in range(self.rows))
        out.extend(self.board[:, c] for c in range(self.columns))

        offsets = range(-(self.rows - MIN_LINE), self.columns - MIN_LINE + 1)
        out.extend(self.board.diagonal(k) for k in offsets)
        flipped = np.fliplr(self.board)
        out.extend(flipped.diagonal(k) for k in offsets)
        return out

    def line_matrix(self) -> np.ndarray:
        """
        All lines() stacked into one (n_lines, max_len) array.

        Short lines are padded with PAD_CODE so fixed-width windows that run past
        the end of a line can never match a pattern.
        """
        lines = self.lines()
        width = max(self.rows, self.columns)
        m = np.full((len(lines), width), PAD_CODE, dtype=np.int8)
        for i, line in enumerate(lines):
            m[i, : len(line)] = line
        return m

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _check_column(self, column: int) -> None:
        if not 0 <= column < self.columns:
            raise InvalidColumn("column out of range", {"column": column, "columns": self.columns})

    def _register(self, symbol: str) -> int:
        code = self._codes.get(symbol)
        if code is not None:
            return code
        if not isinstance(symbol, str) or len(symbol) != 1 or symbol == EMPTY:
            raise InvalidSymbol("symbol must be a single character other than the empty marker", {"symbol": symbol})
        if len(self._symbols) > np.iinfo(np.int8).max:
            raise InvalidSymbol("too many distinct symbols on one board", {"symbol": symbol})

        code = len(self._symbols)
        self._codes[symbol] = code
        self._symbols.append(symbol)
        return code

    def __str__(self) -> str:
        lines = [" ".join(self._symbols[int(v)] for v in self.board[r, :]) for r in range(self.rows)]
        lines.append(f"Heights: {list(self.heights)}")
        return "\n".join(lines)


def initial_state(cfg: BoardConfig) -> GridState:
    cfg.validate()
    return GridState.from_config(cfg)
