# gobang

Gomoku (five in a row) played in the terminal. Black moves first and is bound by
forbidden-move rules. A double three, a double four or an overline (six or more
in a row) by Black loses the game for Black at once. White has no restrictions. A
simple computer opponent can take either side.

## Installing

```
pip install .
```

## Playing

```
gobang
```

Options:

- `--size N` sets the board size. The default is 19.
- `--mode M` sets who plays. `0` is human against human. `1` means you take Black
  and move first, with the computer as White. This is the default. `2` means the
  computer takes Black and moves first.

On each human turn the game prints `Please enter the coordinates:`. Enter two
integers separated by a space, row first and column second, counting from 0:

```
Please enter the coordinates:
9 9
```

You are asked again (`Please re-enter!`) if the input is not two integers, if
the point is off the board, or if the point is already taken.

The game ends when a player makes five in a row, when the board is full, or when
Black plays a forbidden move. It then prints `黑棋胜利` (Black wins), `白棋胜利`
(White wins) or `平局` (draw). If input runs out, or if the move log fills up, it
prints `error` and exits with status 1.

### Game records

When a game ends with five in a row or a full board, its record is written to the
current directory. The record goes to the first free file named `1.log`, `2.log`
and so on. A game lost to a forbidden move is not saved. The record is a line of
400 space-separated integers, laid out like this:

| index | contents                                            |
|-------|-----------------------------------------------------|
| 0     | board size                                          |
| 1     | game mode                                           |
| 3     | result: 1 Black wins, -1 White wins, 0 draw         |
| 4     | number of moves                                     |
| 5     | undo count (always 0)                               |
| 8     | error flag (-404 after a log overflow, otherwise 0) |
| 9…    | moves in order, each packed as `x << 7 \| y`        |

The log holds at most 391 moves.

## What it does not do

The board is never drawn. During play you see only the prompts, so you have to
keep track of the position yourself. Moves cannot be taken back, and there is no
command to replay or load a saved record.

## Using the library

- `gobang.rules` has `Board`, indexed as `board[x, y]`, and the `Stone` and
  `GameMode` enums. It also has the rule checks `check_win`, `long_link`,
  `check_three`, `check_four` and `is_forbidden`.
- `gobang.machine` has the computer opponent: `evaluate_position`,
  `find_best_move`, `machine_color` and `play_machine`.
- `gobang.game` has `GameLog`, `Game`, `Outcome`, `LogOverflowError` and the
  `main` entry point.

```python
from gobang.rules import Board, Stone, check_win, is_forbidden
from gobang.machine import find_best_move

board = Board(15)
for y in range(5):
    board[7, y] = Stone.BLACK
assert check_win(board, 7, 4)

board = Board(15)
board[7, 7] = Stone.BLACK
x, y = find_best_move(board, Stone.WHITE, False)
```

`find_best_move` plays the centre while it is free. Otherwise it picks the
highest-scoring empty point within two steps of a stone. When its last argument
is true and the colour is Black, it skips forbidden points.

`Game(size, mode, read_move, write)` runs a whole match. `read_move` returns one
line of input and `write` prints one message. `Game.play()` returns the
`Outcome`.

## Running the tests

```
pip install .[test]
pytest
```