import os
import sys

ROOT_DIR = os.path.dirname(os.path.dirname(__file__))
sys.path.append(ROOT_DIR)  # noqa: E402

import pytest  # noqa: E402

from board import BLACK, EMPTY, WHITE, GoBoard, opponent  # noqa: E402
from errors import FrozenBoardError, InvalidSizeError, OutOfBoundsError  # noqa: E402


def test_new_board_is_empty():
    board = GoBoard(9)
    assert board.size == 9
    assert board.is_empty()
    assert all(board.get(r, c) == EMPTY for r in range(9) for c in range(9))


@pytest.mark.parametrize("size", [0, -3, 2.5, "19", True])
def test_invalid_size_rejected(size):
    with pytest.raises(InvalidSizeError):
        GoBoard(size)


def test_set_and_get():
    board = GoBoard(5)
    board.set(2, 3, BLACK)
    board.set(0, 0, WHITE)
    assert board.get(2, 3) == BLACK
    assert board.get(0, 0) == WHITE
    assert board.count(BLACK) == 1
    assert board.count(WHITE) == 1


@pytest.mark.parametrize("point", [(-1, 0), (0, -1), (5, 0), (0, 5), (7, 7)])
def test_out_of_bounds(point):
    board = GoBoard(5)
    with pytest.raises(OutOfBoundsError):
        board.get(*point)
    with pytest.raises(OutOfBoundsError):
        board.set(*point, BLACK)


def test_out_of_bounds_is_a_value_error():
    with pytest.raises(ValueError):
        GoBoard(5).get(5, 5)


def test_set_rejects_unknown_value():
    with pytest.raises(ValueError):
        GoBoard(5).set(0, 0, 2)


def test_copy_is_independent():
    board = GoBoard(5)
    board.set(1, 1, BLACK)
    clone = board.copy()
    assert clone == board
    clone.set(1, 1, EMPTY)
    clone.set(2, 2, WHITE)
    assert board.get(1, 1) == BLACK
    assert board.get(2, 2) == EMPTY
    assert clone != board


def test_neighbors_stay_on_board():
    board = GoBoard(5)
    assert sorted(board.neighbors(0, 0)) == [(0, 1), (1, 0)]
    assert sorted(board.neighbors(0, 2)) == [(0, 1), (0, 3), (1, 2)]
    assert sorted(board.neighbors(2, 2)) == [(1, 2), (2, 1), (2, 3), (3, 2)]


def test_opponent():
    assert opponent(BLACK) == WHITE
    assert opponent(WHITE) == BLACK
    with pytest.raises(ValueError):
        opponent(EMPTY)


def test_str_skips_letter_i():
    board = GoBoard(9)
    board.set(0, 8, BLACK)
    lines = str(board).splitlines()
    assert lines[0].split() == list("ABCDEFGHJ")
    assert lines[1].split() == ["9", ".", ".", ".", ".", ".", ".", ".", ".", "X"]


def test_frozen_board_rejects_set_but_copies_are_writable():
    board = GoBoard(5)
    board.set(1, 1, BLACK)
    assert board.freeze() is board
    with pytest.raises(FrozenBoardError):
        board.set(0, 0, WHITE)
    assert board.get(0, 0) == EMPTY
    clone = board.copy()
    assert not clone.frozen
    clone.set(0, 0, WHITE)
    assert clone.get(0, 0) == WHITE
    assert board.get(0, 0) == EMPTY
