"""Game logic: immutable board state, move application, and win/draw detection."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Literal

Mark = Literal["X", "O"]
Cell = Mark | None
Board = tuple[tuple[Cell, ...], ...]
Status = Literal["playing", "won", "draw"]

MIN_BOARD_SIZE = 3
MIN_MARKS_TO_WIN = 3

# Four directions: horizontal, vertical, diagonal ↘, diagonal ↙
DIRECTIONS = [
    (0, 1),
    (1, 0),
    (1, 1),
    (1, -1),
]


def other_mark(mark: Mark) -> Mark:
    return "O" if mark == "X" else "X"


@dataclass(frozen=True)
class GameState:
    """A single snapshot of a game.

    States are never mutated. Every accepted move produces a new state, so a
    caller may keep a reference to an older one for display.
    """

    board: Board
    current_turn: Mark = "X"
    status: Status = "playing"
    winner: Mark | None = None
    marks_to_win: int = MIN_MARKS_TO_WIN

    @property
    def board_size(self) -> int:
        return len(self.board)

    @property
    def is_over(self) -> bool:
        return self.status != "playing"

    @property
    def move_count(self) -> int:
        return sum(1 for row in self.board for cell in row if cell is not None)

    def cell(self, row: int, col: int) -> Cell:
        return self.board[row][col]

    def in_bounds(self, row: int, col: int) -> bool:
        return 0 <= row < self.board_size and 0 <= col < self.board_size


def empty_board(board_size: int) -> Board:
    return tuple((None,) * board_size for _ in range(board_size))


def init_game(board_size: int, marks_to_win: int = MIN_MARKS_TO_WIN) -> GameState:
    """Return a fresh game: empty board, X to move.

    ``marks_to_win`` larger than ``board_size`` is accepted; such a game can
    never be won and every finished game ends in a draw.
    """
    if board_size < 1:
        raise ValueError(f"board_size must be positive, got {board_size}")
    return GameState(board=empty_board(board_size), marks_to_win=marks_to_win)


def reconfigure(board_size: int, marks_to_win: int) -> GameState:
    """Discard any game in progress and start over with the new settings."""
    return init_game(board_size, marks_to_win)


def reset(state: GameState) -> GameState:
    return init_game(state.board_size, state.marks_to_win)


def detect_win(board: Board, last_row: int, last_col: int, mark: Mark, marks_to_win: int) -> bool:
    """Check if the mark just placed at (last_row, last_col) completes a run.

    Only lines through the last move are scanned, so this must be called once
    per move, right after the mark is placed.
    """
    size = len(board)

    for dr, dc in DIRECTIONS:
        count = 1

        # Extend in positive direction
        for i in range(1, marks_to_win):
            r, c = last_row + dr * i, last_col + dc * i
            if r < 0 or r >= size or c < 0 or c >= size:
                break
            if board[r][c] != mark:
                break
            count += 1

        # Extend in negative direction
        for i in range(1, marks_to_win):
            r, c = last_row - dr * i, last_col - dc * i
            if r < 0 or r >= size or c < 0 or c >= size:
                break
            if board[r][c] != mark:
                break
            count += 1

        if count >= marks_to_win:
            return True

    return False


def detect_draw(board: Board) -> bool:
    return all(cell is not None for row in board for cell in row)


def place(board: Board, row: int, col: int, mark: Mark) -> Board:
    """Return a copy of ``board`` with ``mark`` at (row, col)."""
    new_row = board[row][:col] + (mark,) + board[row][col + 1:]
    return board[:row] + (new_row,) + board[row + 1:]


def apply_move(state: GameState, row: int, col: int) -> GameState:
    """Place the current player's mark and return the resulting state.

    Illegal moves (game over, out of bounds, occupied cell) return ``state``
    itself, unchanged.
    """
    if state.is_over:
        return state
    if not state.in_bounds(row, col):
        return state
    if state.board[row][col] is not None:
        return state

    mark = state.current_turn
    board = place(state.board, row, col, mark)

    if detect_win(board, row, col, mark, state.marks_to_win):
        return replace(state, board=board, status="won", winner=mark)

    if detect_draw(board):
        return replace(state, board=board, status="draw", winner=None)

    return replace(state, board=board, current_turn=other_mark(mark))
