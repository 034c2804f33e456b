import pytest

from gobang.rules import (
    Board,
    GameMode,
    Stone,
    check_four,
    check_three,
    check_win,
    is_forbidden,
    long_link,
)


def place(board, color, coords):
    for x, y in coords:
        board[x, y] = color
    return board


def fresh(size=19):
    return Board(size)


def test_new_board_is_empty():
    board = fresh(7)
    assert all(board.is_empty(x, y) for x in range(7) for y in range(7))
    assert board.size == 7


def test_set_and_get_round_trip():
    board = fresh()
    board[3, 4] = Stone.BLACK
    board[4, 3] = -1
    assert board[3, 4] is Stone.BLACK
    assert board[4, 3] is Stone.WHITE
    assert not board.is_empty(3, 4)


def test_stone_values_fixed():
    assert int(Stone.BLACK) == 1
    assert int(Stone.WHITE) == -1
    assert Stone.BLACK.opponent is Stone.WHITE
    assert GameMode(2) is GameMode.MACHINE_FIRST


@pytest.mark.parametrize("pos", [(-1, 0), (0, 19), (19, 19)])
def test_off_board_access_raises(pos):
    board = fresh()
    assert not board.in_bounds(*pos)
    with pytest.raises(IndexError):
        board[pos]
    with pytest.raises(IndexError):
        board[pos] = Stone.BLACK


def test_invalid_value_and_size():
    with pytest.raises(ValueError):
        Board(0)
    board = fresh()
    with pytest.raises(ValueError):
        board[0, 0] = 5


@pytest.mark.parametrize("dx,dy", [(1, 0), (0, 1), (1, 1), (1, -1)])
@pytest.mark.parametrize("color", [Stone.BLACK, Stone.WHITE])
def test_five_in_a_row_wins(dx, dy, color):
    board = fresh()
    line = [(9 + i * dx, 9 + i * dy) for i in range(-2, 3)]
    place(board, color, line)
    assert all(check_win(board, x, y) for x, y in line)


def test_four_does_not_win_and_empty_does_not_win():
    board = place(fresh(), Stone.BLACK, [(5, y) for y in range(4)])
    assert not check_win(board, 5, 0)
    assert not check_win(board, 10, 10)


def test_broken_line_does_not_win():
    board = place(fresh(), Stone.WHITE, [(5, 0), (5, 1), (5, 3), (5, 4), (5, 5)])
    board[5, 2] = Stone.BLACK
    assert not check_win(board, 5, 1)


def test_long_link_six_black():
    board = place(fresh(), Stone.BLACK, [(x, 4) for x in range(3, 9)])
    assert long_link(board, 5, 4)
    assert is_forbidden(board, 5, 4)


def test_long_link_five_black_is_not_overline():
    board = place(fresh(), Stone.BLACK, [(x, 4) for x in range(3, 8)])
    assert not long_link(board, 5, 4)
    assert check_win(board, 5, 4)


def test_white_has_no_overline():
    board = place(fresh(), Stone.WHITE, [(x, 4) for x in range(3, 9)])
    assert not long_link(board, 5, 4)
    assert not is_forbidden(board, 5, 4)


DOUBLE_THREE = [(9, 8), (9, 10), (8, 9), (10, 9), (9, 9)]


def test_double_open_three_is_forbidden_for_black():
    board = place(fresh(), Stone.BLACK, DOUBLE_THREE)
    assert check_three(board, 9, 9)
    assert is_forbidden(board, 9, 9)


def test_single_open_three_is_allowed():
    board = place(fresh(), Stone.BLACK, [(9, 8), (9, 10), (9, 9)])
    assert not check_three(board, 9, 9)
    assert not is_forbidden(board, 9, 9)


def test_blocked_three_does_not_count():
    board = place(fresh(), Stone.BLACK, DOUBLE_THREE)
    board[9, 7] = Stone.WHITE
    assert not check_three(board, 9, 9)


def test_double_three_for_white_is_allowed():
    board = place(fresh(), Stone.WHITE, DOUBLE_THREE)
    assert not check_three(board, 9, 9)
    assert not is_forbidden(board, 9, 9)


def test_double_open_four_is_forbidden():
    board = fresh()
    place(board, Stone.BLACK, [(9, 7), (9, 8), (9, 10)])
    place(board, Stone.BLACK, [(7, 9), (8, 9), (10, 9)])
    board[9, 9] = Stone.BLACK
    assert check_four(board, 9, 9)
    assert is_forbidden(board, 9, 9)


def test_single_open_four_is_not_double_four():
    board = place(fresh(), Stone.BLACK, [(9, 7), (9, 8), (9, 10), (9, 9)])
    assert not check_four(board, 9, 9)


def test_blocked_four_plus_open_four_is_forbidden():
    board = fresh()
    board[9, 5] = Stone.WHITE
    place(board, Stone.BLACK, [(9, 6), (9, 7), (9, 8)])
    place(board, Stone.BLACK, [(7, 9), (8, 9), (10, 9)])
    board[9, 9] = Stone.BLACK
    assert check_four(board, 9, 9)


def test_four_checks_ignore_white():
    board = fresh()
    place(board, Stone.WHITE, [(9, 7), (9, 8), (9, 10), (7, 9), (8, 9), (10, 9), (9, 9)])
    assert not check_four(board, 9, 9)


def test_lone_stone_is_never_forbidden():
    board = place(fresh(), Stone.BLACK, [(0, 0)])
    assert not is_forbidden(board, 0, 0)
    assert not check_win(board, 0, 0)