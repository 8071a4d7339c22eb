"""
TicTacToe rules engine - immutable boards, move validation, win/draw detection.

Callers hold a GameState, pass it to play_turn with a (row, col) pair and get
back a MoveResult carrying either the next state or a MoveError.
"""

from .game import (
    BOARD_SIZE,
    WIN_LINES,
    Mark,
    Move,
    InProgress,
    Draw,
    Win,
    GameState,
    empty_board,
    board_from_rows,
    board_of,
    current_mark,
    is_terminal,
    winner,
)
from .errors import MoveError, MoveResult, MoveRejected
from .rules import apply_move, is_winning_move, winning_line, next_state
from .engine import new_game, play_turn, legal_moves
from .session import GameSession
from .display import format_board, describe_state, describe_error

__version__ = "0.1.0"
__all__ = [
    "BOARD_SIZE",
    "WIN_LINES",
    "Mark",
    "Move",
    "InProgress",
    "Draw",
    "Win",
    "GameState",
    "empty_board",
    "board_from_rows",
    "board_of",
    "current_mark",
    "is_terminal",
    "winner",
    "MoveError",
    "MoveResult",
    "MoveRejected",
    "apply_move",
    "is_winning_move",
    "winning_line",
    "next_state",
    "new_game",
    "play_turn",
    "legal_moves",
    "GameSession",
    "format_board",
    "describe_state",
    "describe_error",
]
