"""Computer opponent that picks a random legal cell."""

from __future__ import annotations

import random

from towergame.board import Board, InvalidMoveError, Player


def legal_moves(board: Board, player: Player) -> list[tuple[int, int]]:
    """All 1-based cells the player may currently play, in row order."""
    return [
        (row, col)
        for row in range(1, board.size + 1)
        for col in range(1, board.size + 1)
        if board.can_play(player, row, col)
    ]


def choose_move(board: Board, player: Player, rng: random.Random) -> tuple[int, int]:
    """Pick a random legal move for the player."""
    moves = legal_moves(board, player)
    if not moves:
        raise InvalidMoveError("no legal move left for this player")
    return rng.choice(moves)


def play_computer(board: Board, player: Player, rng: random.Random) -> tuple[int, int]:
    """Choose a random legal move, play it and return it."""
    row, col = choose_move(board, player, rng)
    board.play(player, row, col)
    return row, col