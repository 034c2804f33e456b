"""Board representation and the rules of gomoku with Renju-style restrictions on black."""

from __future__ import annotations

from enum import IntEnum
from typing import Iterator, Optional

# Horizontal, vertical, main diagonal, anti-diagonal.
DIRECTIONS: tuple[tuple[int, int], ...] = ((1, 0), (0, 1), (1, 1), (1, -1))


class Stone(IntEnum):
    """Contents of a board intersection."""

    EMPTY = 0
    BLACK = 1
    WHITE = -1

    @property
    def opponent(self) -> "Stone":
        return Stone(-int(self))


class GameMode(IntEnum):
    """Who plays which colour."""

    HUMAN_VS_HUMAN = 0
    HUMAN_FIRST = 1
    MACHINE_FIRST = 2


class Board:
    """A square gomoku board addressed as ``board[x, y]``."""

    def __init__(self, size: int) -> None:
        if size < 1:
            raise ValueError(f"board size must be positive, got {size}")
        self.size = size
        self._cells = [[Stone.EMPTY] * size for _ in range(size)]

    def _check(self, pos: tuple[int, int]) -> tuple[int, int]:
        x, y = pos
        if not self.in_bounds(x, y):
            raise IndexError(f"position {pos} is off a {self.size}x{self.size} board")
        return x, y

    def __getitem__(self, pos: tuple[int, int]) -> Stone:
        x, y = self._check(pos)
        return self._cells[x][y]

    def __setitem__(self, pos: tuple[int, int], value: int) -> None:
        x, y = self._check(pos)
        self._cells[x][y] = Stone(value)

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.size and 0 <= y < self.size

    def is_empty(self, x: int, y: int) -> bool:
        return self[x, y] is Stone.EMPTY


def _ray(board: Board, x: int, y: int, dx: int, dy: int) -> Iterator[Stone]:
    x, y = x + dx, y + dy
    while board.in_bounds(x, y):
        yield board[x, y]
        x, y = x + dx, y + dy


def _run_length(board: Board, x: int, y: int, dx: int, dy: int, color: Stone) -> int:
    """Length of the unbroken line of ``color`` through (x, y) along one direction."""
    count = 1
    for sx, sy in ((dx, dy), (-dx, -dy)):
        for stone in _ray(board, x, y, sx, sy):
            if stone != color:
                break
            count += 1
    return count


def check_win(board: Board, x: int, y: int) -> bool:
    """True when the stone at (x, y) is part of five or more in a row."""
    color = board[x, y]
    if color is Stone.EMPTY:
        return False
    return any(_run_length(board, x, y, dx, dy, color) >= 5 for dx, dy in DIRECTIONS)


def long_link(board: Board, x: int, y: int) -> bool:
    """True when a black stone at (x, y) makes six or more in a row (overline)."""
    if board[x, y] is not Stone.BLACK:
        return False
    return any(
        _run_length(board, x, y, dx, dy, Stone.BLACK) >= 6 for dx, dy in DIRECTIONS
    )


def _window(
    board: Board, x: int, y: int, dx: int, dy: int, reach: int
) -> list[Optional[Stone]]:
    """Cells from ``-reach`` to ``+reach`` steps around (x, y); ``None`` is off the board."""
    cells: list[Optional[Stone]] = []
    for step in range(-reach, reach + 1):
        nx, ny = x + step * dx, y + step * dy
        cells.append(board[nx, ny] if board.in_bounds(nx, ny) else None)
    return cells


def _matches(window: list[Optional[Stone]], pattern: str, color: Stone) -> bool:
    """Match a window against a pattern.

    ``X`` own stone, ``_`` empty, ``?`` any on-board cell,
    ``#`` blocked (off board or occupied), ``.`` anything.
    """
    for cell, want in zip(window, pattern):
        if want == ".":
            continue
        if want == "#":
            if cell is None or cell is not Stone.EMPTY:
                continue
            return False
        if cell is None:
            return False
        if want == "X" and cell != color:
            return False
        if want == "_" and cell is not Stone.EMPTY:
            return False
    return True


# Seven-cell windows, the new stone at index 3.
_CONTINUOUS_THREES = ("._XXX_.", "__XXX_.", "._XXX__")
_JUMP_THREES = ("__XX_X_", "__X_XX_")

# Nine-cell windows, the new stone at index 4.
_LIVE_FOURS = ("._XXXX_?.", "._XXX_X_.", "._XX_XX_.", "._X_XXX_.")
_RUSH_FOURS = ("#XXXX_...", "..._XXXX#", "XXX_X#...")


def _has_three(board: Board, x: int, y: int, dx: int, dy: int, color: Stone) -> bool:
    window = _window(board, x, y, dx, dy, 3)
    return any(_matches(window, p, color) for p in _CONTINUOUS_THREES + _JUMP_THREES)


def _four_count(board: Board, x: int, y: int, dx: int, dy: int, color: Stone) -> int:
    window = _window(board, x, y, dx, dy, 4)
    live = int(any(_matches(window, p, color) for p in _LIVE_FOURS))
    rush = sum(_matches(window, p, color) for p in _RUSH_FOURS)
    return live + rush


def check_three(board: Board, x: int, y: int) -> bool:
    """True when a black stone at (x, y) forms open threes in two or more directions."""
    color = board[x, y]
    if color is not Stone.BLACK:
        return False
    count = sum(_has_three(board, x, y, dx, dy, color) for dx, dy in DIRECTIONS)
    return count >= 2


def check_four(board: Board, x: int, y: int) -> bool:
    """True when a black stone at (x, y) forms two or more fours."""
    color = board[x, y]
    if color is not Stone.BLACK:
        return False
    count = sum(_four_count(board, x, y, dx, dy, color) for dx, dy in DIRECTIONS)
    return count >= 2


def is_forbidden(board: Board, x: int, y: int) -> bool:
    """True when the stone at (x, y) is a forbidden black move: double three, double four or overline."""
    return check_three(board, x, y) or check_four(board, x, y) or long_link(board, x, y)