"""Game board for the tower-stacking duel."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

MAX_HEIGHT = 3

MSG_INVALID_INDEX = "Veuillez choisir un index de case valide"
MSG_TAKEN = "Veuillez choisir une case non prise par l'autre joueur"
MSG_MAXIMUM = "Cette case est deja a son maximum"


class Player(Enum):
    """A player. Player one builds positive towers, player two negative ones."""

    ONE = 1
    TWO = -1

    @property
    def sign(self) -> int:
        return self.value

    @property
    def number(self) -> int:
        return 1 if self is Player.ONE else 2

    @property
    def opponent(self) -> Player:
        return Player.TWO if self is Player.ONE else Player.ONE


class Outcome(Enum):
    """Result of a finished game."""

    PLAYER_ONE = "player_one"
    PLAYER_TWO = "player_two"
    DRAW = "draw"


class InvalidMoveError(ValueError):
    """Raised when a move is not allowed on the board."""


@dataclass
class Board:
    """A square grid of towers; positive cells belong to player one."""

    size: int = 6
    _cells: list[list[int]] = field(init=False, repr=False)

    def __post_init__(self) -> None:
        if self.size < 1:
            raise ValueError("board size must be at least 1")
        self._cells = [[0] * self.size for _ in range(self.size)]

    def _in_bounds(self, row: int, col: int) -> bool:
        return 1 <= row <= self.size and 1 <= col <= self.size

    def cell(self, row: int, col: int) -> int:
        """Value of the cell at 1-based coordinates."""
        if not self._in_bounds(row, col):
            raise IndexError(f"cell ({row}, {col}) is outside the board")
        return self._cells[row - 1][col - 1]

    def rows(self) -> tuple[tuple[int, ...], ...]:
        """Snapshot of the board, row by row."""
        return tuple(tuple(line) for line in self._cells)

    def _check(self, player: Player, row: int, col: int) -> None:
        if not self._in_bounds(row, col):
            raise InvalidMoveError(MSG_INVALID_INDEX)
        height = self._cells[row - 1][col - 1] * player.sign
        if height < 0:
            raise InvalidMoveError(MSG_TAKEN)
        if height >= MAX_HEIGHT:
            raise InvalidMoveError(MSG_MAXIMUM)

    def can_play(self, player: Player, row: int, col: int) -> bool:
        """Whether the player may play at the given cell."""
        try:
            self._check(player, row, col)
        except InvalidMoveError:
            return False
        return True

    def play(self, player: Player, row: int, col: int) -> None:
        """Raise the chosen tower and push its orthogonal neighbours toward the player."""
        self._check(player, row, col)
        sign = player.sign
        self._cells[row - 1][col - 1] += sign
        for dr, dc in ((-1, 0), (0, -1), (1, 0), (0, 1)):
            r, c = row + dr, col + dc
            if self._in_bounds(r, c) and self._cells[r - 1][c - 1] * sign < MAX_HEIGHT:
                self._cells[r - 1][c - 1] += sign

    def is_full(self) -> bool:
        """True when no cell is neutral any more."""
        return all(value != 0 for line in self._cells for value in line)

    def counts(self) -> tuple[int, int]:
        """Number of cells owned by player one and by player two."""
        values = [value for line in self._cells for value in line]
        return sum(v >= 1 for v in values), sum(v <= -1 for v in values)

    def outcome(self) -> Outcome:
        """Winner by number of owned cells."""
        ones, twos = self.counts()
        if twos > ones:
            return Outcome.PLAYER_TWO
        if ones > twos:
            return Outcome.PLAYER_ONE
        return Outcome.DRAW

    def render(self, label: str = "A") -> str:
        """Text table of the board under a heading."""
        lines = "".join(
            "".join(f"{value:4d}" for value in line) + "\n" for line in self._cells
        )
        return f"\n\nPlateau actuel {label} :\n{lines}"