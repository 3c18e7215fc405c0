import pytest

from conftest import play
from connect4sim.engine import GridState
from connect4sim.errors import InvalidLength
from connect4sim.evaluation import count_open_straights, heuristic, simple_heuristic, winner


def test_no_winner_on_empty_board(state):
    assert winner(state, "X", "O") is None


def test_no_winner_with_three(state):
    play(state, [(0, "X"), (1, "X"), (2, "X"), (0, "O"), (0, "O"), (0, "O")])
    assert winner(state, "X", "O") is None


def test_horizontal_win(state):
    play(state, [(c, "X") for c in range(4)])
    assert winner(state, "X", "O") == "X"


def test_vertical_win(state):
    play(state, [(2, "O")] + [(2, "X")] * 4)
    assert winner(state, "X", "O") == "X"
    assert winner(state, "O", "X") == "X"


def test_down_right_diagonal_win(state):
    # X on (2,0) (3,1) (4,2) (5,3)
    play(
        state,
        [(0, "O"), (0, "O"), (0, "O"), (0, "X"), (1, "O"), (1, "O"), (1, "X"), (2, "O"), (2, "X"), (3, "X")],
    )
    assert winner(state, "X", "O") == "X"


def test_down_left_diagonal_win(state):
    # X on (5,0) (4,1) (3,2) (2,3)
    play(
        state,
        [(0, "X"), (1, "O"), (1, "X"), (2, "O"), (2, "O"), (2, "X"), (3, "O"), (3, "O"), (3, "O"), (3, "X")],
    )
    assert winner(state, "X", "O") == "X"


def test_second_symbol_can_win(state):
    play(state, [(c, "O") for c in range(3, 7)])
    assert winner(state, "X", "O") == "O"


def test_unplaced_symbols_never_win(state):
    play(state, [(c, "Z") for c in range(4)])
    assert winner(state, "X", "O") is None


def test_win_in_top_corner_of_larger_board():
    s = GridState(7, 8)
    # X on (0,4) (1,5) (2,6) (3,7); fillers underneath alternate A/B
    for col, top in ((4, 0), (5, 1), (6, 2), (7, 3)):
        for i in range(s.rows - 1 - top):
            s.apply_move(col, "A" if i % 2 == 0 else "B")
        s.apply_move(col, "X")
    assert s.cell_at(0, 4) == "X"
    assert winner(s, "X", "O") == "X"


@pytest.mark.parametrize("length", [0, 5, -1])
def test_invalid_length(state, length):
    with pytest.raises(InvalidLength):
        count_open_straights(state, "X", length)


def test_counts_on_empty_board(state):
    for length in range(1, 5):
        assert count_open_straights(state, "X", length) == 0


def test_single_piece_is_an_open_one(state):
    state.apply_move(3, "X")
    assert count_open_straights(state, "X", 1) == 1
    assert count_open_straights(state, "X", 2) == 0


def test_overlapping_patterns_all_count(state):
    # bottom row: . X X . . . .  matches "esse", "ess" and "sse"
    play(state, [(1, "X"), (2, "X")])
    assert count_open_straights(state, "X", 2) == 3
    assert count_open_straights(state, "X", 1) == 0


def test_bottom_row_four(state):
    play(state, [(c, "X") for c in range(4)])
    assert count_open_straights(state, "X", 4) == 1
    assert count_open_straights(state, "X", 3) == 1
    assert count_open_straights(state, "X", 2) == 1
    assert count_open_straights(state, "X", 1) == 0


def test_four_count_matches_winner(state):
    play(state, [(5, "O")] + [(5, "X")] * 3)
    assert count_open_straights(state, "X", 4) == 0
    assert winner(state, "X", "O") is None

    state.apply_move(5, "X")
    assert count_open_straights(state, "X", 4) == 1
    assert winner(state, "X", "O") == "X"


def test_heuristic_for_open_three(state):
    play(state, [(0, "X"), (1, "X"), (2, "X")])
    # one "sse" (w2=3) and one "ssse" (w3=5)
    assert heuristic(state, "X", "O") == 8
    assert heuristic(state, "O", "X") == -8
    assert simple_heuristic(state, "X", "O") == 8


def test_simple_heuristic_ignores_ones_and_fours(state):
    state.apply_move(3, "X")
    assert heuristic(state, "X", "O") == 1
    assert simple_heuristic(state, "X", "O") == 0


def test_heuristic_is_antisymmetric(state):
    play(state, [(3, "X"), (3, "O"), (2, "X"), (4, "O"), (1, "X"), (4, "O")])
    assert heuristic(state, "X", "O") == -heuristic(state, "O", "X")
    assert simple_heuristic(state, "X", "O") == -simple_heuristic(state, "O", "X")
