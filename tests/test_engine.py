import random

import numpy as np
import pytest

from conftest import fill_board, gravity_holds, play
from connect4sim.config import BoardConfig
from connect4sim.engine import EMPTY, GridState, initial_state
from connect4sim.errors import ColumnFull, EmptyColumn, InvalidColumn, InvalidDimensions, InvalidSymbol, OutOfBounds


@pytest.mark.parametrize("rows,columns", [(5, 7), (6, 6), (0, 0)])
def test_rejects_small_boards(rows, columns):
    with pytest.raises(InvalidDimensions):
        GridState(rows, columns)


def test_larger_board_allowed():
    s = GridState(8, 9)
    assert s.available_columns() == list(range(9))
    assert len(s.row(0)) == 9
    assert len(s.column(0)) == 8


def test_initial_state_from_config():
    s = initial_state(BoardConfig(rows=7, columns=8))
    assert (s.rows, s.columns) == (7, 8)
    with pytest.raises(InvalidDimensions):
        initial_state(BoardConfig(rows=4, columns=7))


def test_apply_move_uses_gravity(state):
    state.apply_move(3, "X")
    assert state.cell_at(5, 3) == "X"
    assert state.heights[3] == 1

    state.apply_move(3, "O")
    assert state.cell_at(4, 3) == "O"
    assert state.cell_at(5, 3) == "X"
    assert state.heights == (0, 0, 0, 2, 0, 0, 0)
    assert state.move_count() == 2


def test_column_full(state):
    for _ in range(6):
        state.apply_move(0, "X")
    assert state.is_column_full(0)
    with pytest.raises(ColumnFull):
        state.apply_move(0, "O")
    assert 0 not in state.available_columns()


@pytest.mark.parametrize("col", [-1, 7, 100])
def test_invalid_column(state, col):
    with pytest.raises(InvalidColumn):
        state.apply_move(col, "X")
    with pytest.raises(InvalidColumn):
        state.undo_move(col)


@pytest.mark.parametrize("symbol", ["", "XY", EMPTY])
def test_invalid_symbol(state, symbol):
    with pytest.raises(InvalidSymbol):
        state.apply_move(0, symbol)
    assert state.heights[0] == 0


def test_undo_empty_column(state):
    with pytest.raises(EmptyColumn):
        state.undo_move(2)


def test_apply_undo_round_trip(state):
    play(state, [(0, "X"), (0, "O"), (4, "X")])
    board = state.board.copy()
    heights = state.heights

    for col in state.available_columns():
        state.apply_move(col, "O")
        state.undo_move(col)
        assert np.array_equal(state.board, board)
        assert state.heights == heights


def test_undo_removes_top_piece(state):
    play(state, [(2, "X"), (2, "O")])
    state.undo_move(2)
    assert state.column(2) == [EMPTY] * 5 + ["X"]
    assert state.heights[2] == 1


def test_gravity_invariant_under_random_play(state):
    rng = random.Random(7)
    stack = []
    for _ in range(200):
        if stack and (state.is_full() or rng.random() < 0.4):
            state.undo_move(stack.pop())
        else:
            col = rng.choice(state.available_columns())
            state.apply_move(col, rng.choice("XO"))
            stack.append(col)
        assert gravity_holds(state)
        assert state.move_count() == len(stack)


def test_full_board(state):
    assert not state.is_full()
    fill_board(state)
    assert state.is_full()
    assert state.available_columns() == []


def test_row_and_column_directions(state):
    play(state, [(0, "X"), (1, "O"), (0, "O")])
    assert state.row(5) == ["X", "O"] + [EMPTY] * 5
    assert state.column(0) == [EMPTY] * 4 + ["O", "X"]


def test_out_of_bounds_reads(state):
    with pytest.raises(OutOfBounds):
        state.cell_at(6, 0)
    with pytest.raises(OutOfBounds):
        state.cell_at(0, -1)
    with pytest.raises(OutOfBounds):
        state.row(6)
    with pytest.raises(OutOfBounds):
        state.column(7)


def test_lines_cover_rows_columns_and_long_diagonals(state):
    lines = state.lines()
    # 6 rows + 7 columns + 6 diagonals of length >= 4 in each direction
    assert len(lines) == 25
    assert all(len(line) >= 4 for line in lines)
    assert state.line_matrix().shape == (25, 7)


def test_copy_is_independent(state):
    state.apply_move(3, "X")
    clone = state.copy()
    clone.apply_move(3, "O")
    assert state.heights[3] == 1
    assert clone.heights[3] == 2
    assert clone.cell_at(5, 3) == "X"


def test_reset(state):
    play(state, [(1, "X"), (2, "O")])
    state.reset()
    assert state.move_count() == 0
    assert state.row(5) == [EMPTY] * 7


def test_str_dumps_grid_and_heights(state):
    state.apply_move(6, "X")
    text = str(state)
    assert text.splitlines()[5] == ". . . . . . X"
    assert "Heights: [0, 0, 0, 0, 0, 0, 1]" in text
