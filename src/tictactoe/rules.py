"""
Move validation and terminal-state detection.

Only the lines passing through the last move are inspected: a line the move
did not touch cannot have just become a winning one.
"""

from typing import Optional, Tuple

from .errors import MoveError, MoveResult
from .game import (
    BOARD_SIZE,
    Board,
    Draw,
    GameState,
    InProgress,
    Move,
    Win,
    in_bounds,
    is_full,
    place,
)

Line = Tuple[Tuple[int, int], ...]


def apply_move(board: Board, move: Move) -> MoveResult[Board]:
    """
    Validate a move and place it.

    Checks run in order and the first failure wins:
      1. row and col inside the board (OUT_OF_BOUNDS)
      2. target cell empty (CELL_ALREADY_TAKEN)

    Returns:
        MoveResult holding the new board; the input board is never modified.
    """
    if not in_bounds(move.row, move.col):
        return MoveResult.fail(MoveError.OUT_OF_BOUNDS)
    if board[move.row][move.col] is not None:
        return MoveResult.fail(MoveError.CELL_ALREADY_TAKEN)
    return MoveResult.ok(place(board, move.row, move.col, move.mark))


def _lines_through(row: int, col: int):
    """Yield the lines passing through (row, col): row, column, then diagonals."""
    yield tuple((row, c) for c in range(BOARD_SIZE))
    yield tuple((r, col) for r in range(BOARD_SIZE))
    if row == col:
        yield tuple((i, i) for i in range(BOARD_SIZE))
    if row + col == BOARD_SIZE - 1:
        yield tuple((i, BOARD_SIZE - 1 - i) for i in range(BOARD_SIZE))


def winning_line(board: Board, move: Move) -> Optional[Line]:
    """Return the first line through the move fully held by its mark, if any."""
    for line in _lines_through(move.row, move.col):
        if all(board[r][c] == move.mark for r, c in line):
            return line
    return None


def is_winning_move(board: Board, move: Move) -> bool:
    return winning_line(board, move) is not None


def next_state(board: Board, move: Move) -> GameState:
    """
    Compute the state reached after a move already placed on board.

    Win beats draw: a move that completes a line on the last empty cell
    is a win.
    """
    if is_winning_move(board, move):
        return Win(board, move.mark)
    if is_full(board):
        return Draw(board, move.mark)
    return InProgress(board, move.mark.toggle())
