import random

import pytest

from towergame.ai import choose_move, legal_moves, play_computer
from towergame.board import Board, InvalidMoveError, Player


def test_fresh_board_every_cell_is_legal():
    board = Board(3)
    moves = legal_moves(board, Player.TWO)
    assert len(moves) == 9
    assert moves[0] == (1, 1)
    assert moves[-1] == (3, 3)


def test_opponent_cells_are_excluded():
    board = Board(4)
    board.play(Player.ONE, 1, 1)
    moves = legal_moves(board, Player.TWO)
    for cell in [(1, 1), (1, 2), (2, 1)]:
        assert cell not in moves
    assert all(board.cell(r, c) <= 0 for r, c in moves)


def test_no_legal_move_raises():
    board = Board(1)
    board.play(Player.ONE, 1, 1)
    assert legal_moves(board, Player.TWO) == []
    with pytest.raises(InvalidMoveError):
        choose_move(board, Player.TWO, random.Random(0))


def test_choose_move_is_legal_and_reproducible():
    board = Board(6)
    board.play(Player.ONE, 3, 3)
    first = choose_move(board, Player.TWO, random.Random(42))
    second = choose_move(board, Player.TWO, random.Random(42))
    assert first == second
    assert first in legal_moves(board, Player.TWO)


def test_play_computer_changes_board():
    board = Board(6)
    row, col = play_computer(board, Player.TWO, random.Random(7))
    assert board.cell(row, col) == -1
    _, twos = board.counts()
    assert twos >= 1


def test_computer_never_plays_illegal_cell():
    board = Board(3)
    rng = random.Random(3)
    for _ in range(5):
        if not legal_moves(board, Player.TWO):
            break
        before = board.rows()
        row, col = play_computer(board, Player.TWO, rng)
        assert before[row - 1][col - 1] <= 0
        assert before[row - 1][col - 1] > -3