"""
Error hierarchy for the Connect-4 simulator.

Every failure raised by the engine, the evaluator, the strategies or the player
setup derives from Connect4Error. The base class subclasses ValueError so call
sites that only care about "bad input" can keep catching ValueError.

Usage:
    from connect4sim.errors import ColumnFull, Connect4Error

    try:
        state.apply_move(col, "X")
    except ColumnFull as e:
        print(e.message, e.context)
"""

from __future__ import annotations

from typing import Any, Dict, Optional

__all__ = [
    "ColumnFull",
    "Connect4Error",
    "DuplicateSymbol",
    "EmptyColumn",
    "InvalidColumn",
    "InvalidDimensions",
    "InvalidLength",
    "InvalidSymbol",
    "NoLegalMove",
    "OutOfBounds",
]


class Connect4Error(ValueError):
    """Base exception for all simulator errors.

    Attributes:
        code: Machine-readable error code
        message: Human-readable description
        context: Extra values describing the failing call
    """

    code: str = "CONNECT4_ERROR"

    def __init__(self, message: str, context: Optional[Dict[str, Any]] = None) -> None:
        super().__init__(message)
        self.message = message
        self.context = context or {}

    def __str__(self) -> str:
        if self.context:
            ctx = ", ".join(f"{k}={v}" for k, v in self.context.items())
            return f"[{self.code}] {self.message} ({ctx})"
        return f"[{self.code}] {self.message}"


class InvalidDimensions(Connect4Error):
    """Board smaller than 6 rows by 7 columns."""

    code = "INVALID_DIMENSIONS"


class InvalidColumn(Connect4Error):
    code = "INVALID_COLUMN"


class ColumnFull(Connect4Error):
    code = "COLUMN_FULL"


class EmptyColumn(Connect4Error):
    """Undo requested on a column that holds no pieces."""

    code = "EMPTY_COLUMN"


class OutOfBounds(Connect4Error):
    code = "OUT_OF_BOUNDS"


class InvalidLength(Connect4Error):
    """Straight length outside 1..4."""

    code = "INVALID_LENGTH"


class NoLegalMove(Connect4Error):
    """A strategy was asked to move on a full board."""

    code = "NO_LEGAL_MOVE"


class InvalidSymbol(Connect4Error):
    code = "INVALID_SYMBOL"


class DuplicateSymbol(Connect4Error):
    """Both players of a game share the same symbol."""

    code = "DUPLICATE_SYMBOL"
