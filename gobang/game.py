"""Game loop, move log and the command-line entry point."""

from __future__ import annotations

import argparse
from enum import IntEnum
from pathlib import Path
from typing import Callable, Optional, Sequence, Union

from .machine import machine_color, play_machine
from .rules import Board, GameMode, Stone, check_win, is_forbidden

LOG_LENGTH = 400
_FIRST_MOVE_SLOT = 9
MAX_MOVES = LOG_LENGTH - _FIRST_MOVE_SLOT
UNDECIDED = -2
OVERFLOW_ERROR = -404
_PENDING_NAME = "chess_board.log"


class Outcome(IntEnum):
    """Result of a finished game, from black's point of view."""

    WHITE_WINS = -1
    DRAW = 0
    BLACK_WINS = 1


class LogOverflowError(RuntimeError):
    """The move log has no room for another move."""


class GameLog:
    """Fixed-size record of a game: header fields followed by encoded moves."""

    def __init__(self, size: int, mode: int) -> None:
        self.size = size
        self.mode = int(mode)
        self.result = UNDECIDED
        self.undo_count = 0
        self.error = 0
        self.moves: list[tuple[int, int]] = []

    def record_move(self, x: int, y: int) -> None:
        """Append a move, raising ``LogOverflowError`` when the log is full."""
        if len(self.moves) >= MAX_MOVES:
            self.error = OVERFLOW_ERROR
            raise LogOverflowError(f"the log holds at most {MAX_MOVES} moves")
        self.moves.append((x, y))

    def to_values(self) -> list[int]:
        """The log as its fixed list of integers; each move is ``x << 7 | y``."""
        values = [0] * LOG_LENGTH
        values[0] = self.size
        values[1] = self.mode
        values[3] = self.result
        values[4] = len(self.moves)
        values[5] = self.undo_count
        values[8] = self.error
        for slot, (x, y) in enumerate(self.moves, start=_FIRST_MOVE_SLOT):
            values[slot] = x << 7 | y
        return values

    def save(self, directory: Union[str, Path]) -> Path:
        """Write the log to the first free ``N.log`` in ``directory`` and return its path."""
        directory = Path(directory)
        pending = directory / _PENDING_NAME
        pending.write_text("".join(f"{value} " for value in self.to_values()))
        count = 1
        while (directory / f"{count}.log").exists():
            count += 1
        target = directory / f"{count}.log"
        pending.rename(target)
        return target


class Game:
    """One game of gomoku between humans, or a human and the machine."""

    def __init__(
        self,
        size: int,
        mode: int,
        read_move: Callable[[], str] = input,
        write: Callable[[str], object] = print,
    ) -> None:
        self.mode = GameMode(mode)
        self.board = Board(size)
        self.log = GameLog(size, self.mode)
        self._read_move = read_move
        self._write = write

    def _parse(self, line: str) -> Optional[tuple[int, int]]:
        parts = line.split()
        if len(parts) < 2:
            return None
        try:
            x, y = int(parts[0]), int(parts[1])
        except ValueError:
            return None
        if not self.board.in_bounds(x, y) or not self.board.is_empty(x, y):
            return None
        return x, y

    def human_move(self, color: int) -> tuple[int, int]:
        """Ask until a free intersection is given, place ``color`` there and log it."""
        while True:
            self._write("Please enter the coordinates:")
            pos = self._parse(self._read_move())
            if pos is not None:
                break
            self._write("Please re-enter!")
        self.board[pos] = Stone(color)
        self.log.record_move(*pos)
        return pos

    def _machine_plays(self, color: Stone) -> bool:
        return self.mode is not GameMode.HUMAN_VS_HUMAN and machine_color(self.mode) is color

    def _board_full(self) -> bool:
        size = self.board.size
        return not any(self.board.is_empty(x, y) for x in range(size) for y in range(size))

    def _finish(self, outcome: Outcome, save: bool = True) -> Outcome:
        self.log.result = int(outcome)
        if save:
            self.log.save(Path.cwd())
        return outcome

    def _turn(self, color: Stone) -> Optional[Outcome]:
        if self._machine_plays(color):
            x, y = play_machine(self.board, self.mode)
            self.log.record_move(x, y)
        else:
            x, y = self.human_move(color)
            if color is Stone.BLACK and is_forbidden(self.board, x, y):
                # A forbidden black move loses the game on the spot.
                return self._finish(Outcome.WHITE_WINS, save=False)
        if check_win(self.board, x, y):
            winner = Outcome.BLACK_WINS if color is Stone.BLACK else Outcome.WHITE_WINS
            return self._finish(winner)
        if self._board_full():
            return self._finish(Outcome.DRAW)
        return None

    def play(self) -> Outcome:
        """Alternate turns, black first, until the game is decided."""
        while True:
            for color in (Stone.BLACK, Stone.WHITE):
                outcome = self._turn(color)
                if outcome is not None:
                    return outcome


_MESSAGES = {
    Outcome.DRAW: "平局",
    Outcome.BLACK_WINS: "黑棋胜利",
    Outcome.WHITE_WINS: "白棋胜利",
}


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Play a game on the console and print who won."""
    parser = argparse.ArgumentParser(prog="gobang", description="Play gomoku on the console.")
    parser.add_argument("--size", type=int, default=19, help="board size (default 19)")
    parser.add_argument(
        "--mode",
        type=int,
        choices=[int(m) for m in GameMode],
        default=int(GameMode.HUMAN_FIRST),
        help="0: human vs human, 1: human moves first, 2: machine moves first",
    )
    args = parser.parse_args(argv)
    try:
        outcome = Game(args.size, args.mode, input, print).play()
    except (EOFError, LogOverflowError):
        print("error")
        return 1
    print(_MESSAGES[outcome])
    return 0