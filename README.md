# towergame

A small turn-based board game for the terminal, played on a square grid.

Every cell starts at 0. Player 1 raises towers (positive heights) and
player 2 digs them down (negative heights). Playing a cell moves it one
step in your direction. It also moves each of its orthogonal neighbours on
the board one step your way, unless that neighbour is already at height 3
in your direction. You may not play a cell the other player holds, and you
may not play a cell that is already at 3 in your direction.

When the game ends the board is scored. Whoever holds more cells wins, and
equal counts are a draw.

## Installing

```
pip install .
```

## Playing

```
towergame
```

With no options, the game first asks whether you want to play alone
against the computer (`1`) or with two players at one keyboard (any other
number). Before each move, a human player is asked whether to keep playing.
Answer `0` to stop. Any other number continues, and a number above 1 also
prints a reminder of the two choices. You then give the row and the column
of your move, both counted from 1. If a move is not allowed, the reason is
shown and you are asked again.

The board is printed after every move. Against the computer, player 2
chooses a random legal cell. When the game ends, the result is announced.

Options:

| Option | Effect |
| --- | --- |
| `--size N` | Side length of the board (default 6). |
| `--turns N` | Number of rounds to play (default 5). |
| `--until-full` | Play until no cell is at 0 any more, instead of a fixed number of rounds. |
| `--seed N` | Seed for the computer's random choices. |
| `--vs-computer` | Play against the computer without being asked. |
| `--two-players` | Two human players, without being asked. |

`--vs-computer` and `--two-players` cannot be used together.

The command exits with status 1 if input runs out before the game ends.

## Using the library

```python
import random

from towergame.board import Board, Player
from towergame.ai import play_computer

board = Board(6)
board.play(Player.ONE, 3, 3)
play_computer(board, Player.TWO, random.Random(0))
print(board.render("A"))
print(board.counts(), board.outcome())
```

`towergame.board` provides:

- `Board`, with these methods:
  - `cell(row, col)` returns the value of a cell.
  - `rows()` returns a snapshot of the board.
  - `can_play(player, row, col)` and `play(player, row, col)` check and make a move.
  - `is_full()` tells whether no cell is at 0.
  - `counts()` returns the number of cells held by each player.
  - `outcome()` returns the result.
  - `render(label)` returns the board as a text table.
- `Player` (`ONE`, `TWO`).
- `Outcome` (`PLAYER_ONE`, `PLAYER_TWO`, `DRAW`).
- `InvalidMoveError`, which `Board.play` raises for a move that is off the board, on a cell the other player holds, or on a cell already at its limit.

`towergame.ai` provides:

- `legal_moves(board, player)`, which lists the cells a player may play.
- `choose_move(board, player, rng)`, which picks one of them at random and raises `InvalidMoveError` if there is none.
- `play_computer(board, player, rng)`, which chooses a move and plays it.

`towergame.cli.play_match(board, turns, read, write, rng, versus_computer)`
runs a whole game. It takes any input function and output function, which
makes it easy to drive from a script. Pass `turns=None` to play until the
board is full.

## What it does not do

The computer opponent only picks random legal cells. There is no strategy
behind its moves. Games cannot be saved or resumed, and play is only
through the terminal.

## Running the tests

```
pip install .[test]
pytest
```