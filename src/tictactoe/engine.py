"""
Turn orchestration: start a game and play one move at a time.

Every call is pure. The caller keeps the returned state; nothing is
retained here between calls.
"""

import logging
from typing import List, Tuple

from .errors import MoveError, MoveResult
from .game import GameState, InProgress, Move, empty_board, empty_cells, is_terminal
from .rules import apply_move, next_state

logger = logging.getLogger(__name__)


def new_game() -> InProgress:
    """Return a fresh game: empty board, first player to move."""
    return InProgress(empty_board())


def legal_moves(state: GameState) -> List[Tuple[int, int]]:
    """Return playable (row, col) pairs; empty once the game is over."""
    if is_terminal(state):
        return []
    return empty_cells(state.board)


def play_turn(state: GameState, row: int, col: int) -> MoveResult[GameState]:
    """
    Play the side to move at (row, col).

    Args:
        state: Current game state
        row: Target row
        col: Target column

    Returns:
        MoveResult with the next GameState, or the MoveError that rejected
        the move. The input state is never altered.
    """
    if not isinstance(state, InProgress):
        logger.debug("Rejected move (%s, %s): game is over", row, col)
        return MoveResult.fail(MoveError.NOT_IN_PROGRESS)

    move = Move(row, col, state.current_mark)
    placed = apply_move(state.board, move)
    if not placed.is_ok:
        logger.debug("Rejected move %s: %s", move, placed.error.value)
        return MoveResult.fail(placed.error)

    new_state = next_state(placed.value, move)
    if is_terminal(new_state):
        logger.info("Game over after %s: %s", move, type(new_state).__name__)
    else:
        logger.debug("Accepted move %s", move)
    return MoveResult.ok(new_state)
