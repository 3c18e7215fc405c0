import pytest

from connect4sim.engine import GridState


@pytest.fixture
def state():
    return GridState(6, 7)


def fill_board(state, columns=None):
    """Fill the given columns (default: all) with alternating filler symbols."""
    for c in columns if columns is not None else range(state.columns):
        while not state.is_column_full(c):
            state.apply_move(c, "A" if (state.heights[c] + c) % 2 == 0 else "B")


def play(state, moves):
    """Apply (column, symbol) pairs in order."""
    for col, symbol in moves:
        state.apply_move(col, symbol)


def gravity_holds(state):
    for c in range(state.columns):
        h = state.heights[c]
        cells = state.column(c)
        if any(v == "." for v in cells[state.rows - h :]):
            return False
        if any(v != "." for v in cells[: state.rows - h]):
            return False
    return True
