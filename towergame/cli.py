"""Interactive turn-by-turn console game."""

from __future__ import annotations

import argparse
import random
import sys
from collections.abc import Callable

from towergame.ai import legal_moves, play_computer
from towergame.board import MSG_INVALID_INDEX, Board, InvalidMoveError, Outcome, Player

Reader = Callable[[], str]
Writer = Callable[[str], None]

PROMPT_ROW = "\nOu voulez-vous jouer ? Ligne : "
PROMPT_COL = "\nColonnes : "
PROMPT_CONTINUE = "\nVoulez vous jouer ? (1 pour oui/ 0 pour non) : "
PROMPT_MODE = (
    "\nVoulez-vous jouer seul(1) contre une IA(Work In Progress) ou a deux(2) ?"
)
MSG_CHOICE = "\nMerci de saisir l'un des deux chiffres possible"
MSG_NUMBER = "\nMerci de saisir un nombre"
MSG_COMPUTER = "\nTour de l'ordinateur"
MSG_END = "Fin de partie"

_MESSAGES = {
    Outcome.PLAYER_ONE: "\nLe joueur 1 a gagne ! Bravo !\n",
    Outcome.PLAYER_TWO: "\nLe Joueur 2 a gagne ! Bravo !\n",
    Outcome.DRAW: "\nC'est une egalite, dommage\n",
}


def read_int(prompt: str, read: Reader, write: Writer) -> int:
    """Show the prompt and read an integer, asking again until one is given."""
    while True:
        write(prompt)
        text = read().strip()
        try:
            return int(text)
        except ValueError:
            write(MSG_NUMBER)


def prompt_move(
    board: Board, player: Player, read: Reader, write: Writer
) -> tuple[int, int]:
    """Ask the player for a cell until a legal one is given, then play it."""
    while True:
        write(f"\n Joueur {player.number}")
        row = read_int(PROMPT_ROW, read, write)
        if not 1 <= row <= board.size:
            write("\n" + MSG_INVALID_INDEX)
            continue
        col = read_int(PROMPT_COL, read, write)
        try:
            board.play(player, row, col)
        except InvalidMoveError as exc:
            write(f"\n{exc}")
            continue
        return row, col


def _wants_to_continue(read: Reader, write: Writer) -> bool:
    answer = read_int(PROMPT_CONTINUE, read, write)
    if answer == 0:
        return False
    if answer > 1:
        write(MSG_CHOICE)
    return True


def play_match(
    board: Board,
    turns: int | None,
    read: Reader,
    write: Writer,
    rng: random.Random | None = None,
    versus_computer: bool = False,
) -> Outcome:
    """Run a game; ``turns=None`` plays until every cell is owned."""
    rng = rng if rng is not None else random.Random()
    write(board.render("A"))
    remaining = turns

    def finished() -> bool:
        return remaining is None and board.is_full()

    while remaining is None or remaining > 0:
        if remaining is not None:
            write(f"Tours restants : {remaining}")
        if not _wants_to_continue(read, write):
            break
        prompt_move(board, Player.ONE, read, write)
        write(board.render("A"))
        if finished():
            break
        if versus_computer:
            write(MSG_COMPUTER)
            if not legal_moves(board, Player.TWO):
                break
            play_computer(board, Player.TWO, rng)
        else:
            if not _wants_to_continue(read, write):
                break
            prompt_move(board, Player.TWO, read, write)
        write(board.render("A"))
        if finished():
            break
        if remaining is not None:
            remaining -= 1

    write(MSG_END)
    outcome = board.outcome()
    write(outcome_message(outcome))
    return outcome


def outcome_message(outcome: Outcome) -> str:
    """Announcement for a finished game."""
    return _MESSAGES[outcome]


def _stdin_reader() -> str:
    line = sys.stdin.readline()
    if not line:
        raise EOFError("input exhausted")
    return line


def _stdout_writer(text: str) -> None:
    sys.stdout.write(text)
    sys.stdout.flush()


def main(argv: list[str] | None = None) -> int:
    """Start a game on the console."""
    parser = argparse.ArgumentParser(prog="towergame", description=__doc__)
    parser.add_argument("--size", type=int, default=6, help="board side length")
    parser.add_argument("--turns", type=int, default=5, help="number of rounds")
    parser.add_argument(
        "--until-full",
        action="store_true",
        help="play until every cell is owned instead of a fixed number of rounds",
    )
    parser.add_argument("--seed", type=int, default=None, help="seed for the computer")
    mode = parser.add_mutually_exclusive_group()
    mode.add_argument("--vs-computer", action="store_true", help="play against the computer")
    mode.add_argument("--two-players", action="store_true", help="two human players")
    args = parser.parse_args(argv)

    try:
        board = Board(args.size)
    except ValueError as exc:
        parser.error(str(exc))

    read, write = _stdin_reader, _stdout_writer
    try:
        if args.vs_computer:
            versus_computer = True
        elif args.two_players:
            versus_computer = False
        else:
            versus_computer = read_int(PROMPT_MODE, read, write) == 1
        play_match(
            board,
            None if args.until_full else args.turns,
            read,
            write,
            random.Random(args.seed),
            versus_computer,
        )
    except EOFError:
        write("\n")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())