"""A simple greedy opponent that scores empty intersections and plays the best one."""

from __future__ import annotations

from contextlib import contextmanager
from typing import Iterator

from .rules import DIRECTIONS, Board, GameMode, Stone, check_win, is_forbidden

WIN_SCORE = 10000
BLOCK_SCORE = 5000
OCCUPIED_SCORE = -1000
_NO_SCORE = -10000
_NEIGHBOUR_REACH = 2


@contextmanager
def _placed(board: Board, x: int, y: int, stone: Stone) -> Iterator[None]:
    """Put a stone on (x, y) for the duration of the block, then clear it."""
    board[x, y] = stone
    try:
        yield
    finally:
        board[x, y] = Stone.EMPTY


def _open_run(board: Board, x: int, y: int, dx: int, dy: int, color: Stone) -> tuple[int, int]:
    """Length of the run of ``color`` through (x, y) and how many of its ends are empty."""
    count = 1
    empty_ends = 0
    for sx, sy in ((dx, dy), (-dx, -dy)):
        nx, ny = x + sx, y + sy
        while board.in_bounds(nx, ny):
            stone = board[nx, ny]
            if stone == color:
                count += 1
                nx, ny = nx + sx, ny + sy
                continue
            if stone is Stone.EMPTY:
                empty_ends += 1
            break
    return count, empty_ends


def _run_score(count: int, empty_ends: int) -> int:
    if count >= 4:
        return 1000
    return {(3, 2): 500, (3, 1): 100, (2, 2): 50, (2, 1): 10}.get((count, empty_ends), 0)


def evaluate_position(board: Board, x: int, y: int, color: int) -> int:
    """Score playing ``color`` at (x, y); the board is left as it was."""
    color = Stone(color)
    if not board.is_empty(x, y):
        return OCCUPIED_SCORE
    with _placed(board, x, y, color):
        if check_win(board, x, y):
            return WIN_SCORE
    with _placed(board, x, y, color.opponent):
        if check_win(board, x, y):
            return BLOCK_SCORE
    with _placed(board, x, y, color):
        return sum(
            _run_score(*_open_run(board, x, y, dx, dy, color)) for dx, dy in DIRECTIONS
        )


def _has_neighbour(board: Board, x: int, y: int) -> bool:
    reach = range(-_NEIGHBOUR_REACH, _NEIGHBOUR_REACH + 1)
    return any(
        board.in_bounds(x + dx, y + dy) and not board.is_empty(x + dx, y + dy)
        for dx in reach
        for dy in reach
    )


def _candidates(board: Board) -> Iterator[tuple[int, int]]:
    """Empty intersections close to an existing stone, row by row."""
    for x in range(board.size):
        for y in range(board.size):
            if board.is_empty(x, y) and _has_neighbour(board, x, y):
                yield x, y


def find_best_move(board: Board, color: int, check_forbidden: bool) -> tuple[int, int]:
    """Pick the highest-scoring move for ``color``; the centre if it is still free."""
    color = Stone(color)
    center = board.size // 2
    best = (center, center)
    if board.is_empty(*best):
        return best

    max_score = _NO_SCORE
    for x, y in _candidates(board):
        if check_forbidden and color is Stone.BLACK:
            with _placed(board, x, y, color):
                if is_forbidden(board, x, y):
                    continue
        score = evaluate_position(board, x, y, color)
        if score > max_score:
            max_score = score
            best = (x, y)
    return best


def machine_color(mode: int) -> Stone:
    """The colour the machine plays in ``mode``: black only when it moves first."""
    return Stone.BLACK if mode == GameMode.MACHINE_FIRST else Stone.WHITE


def play_machine(board: Board, mode: int) -> tuple[int, int]:
    """Choose and place the machine's stone; return where it went."""
    color = machine_color(mode)
    x, y = find_best_move(board, color, color is Stone.BLACK)
    if not board.is_empty(x, y):
        raise ValueError("no empty intersection left for the machine to play")
    board[x, y] = color
    return x, y