"""
Text rendering of boards, states and move errors for front ends.
"""

from typing import Optional

from .errors import MoveError
from .game import Board, Draw, GameState, InProgress, Mark, Win

MESSAGES = {
    MoveError.OUT_OF_BOUNDS: "Move is outside the board",
    MoveError.CELL_ALREADY_TAKEN: "This cell is already taken",
    MoveError.NOT_IN_PROGRESS: "The game is over, start a new one",
}

UNEXPECTED_ERROR = "Something went wrong"


def mark_symbol(mark: Optional[Mark]) -> str:
    return mark.value if mark is not None else " "


def format_board(board: Board) -> str:
    """
    Render a board as text:

        X|O|
        -+-+-
         |X|
        -+-+-
        O| |X
    """
    rows = ["|".join(mark_symbol(cell) for cell in row) for row in board]
    return "\n-+-+-\n".join(rows)


def describe_state(state: GameState) -> str:
    if isinstance(state, InProgress):
        return f"{mark_symbol(state.current_mark)} to move"
    if isinstance(state, Win):
        return f"{mark_symbol(state.winning_mark)} wins!"
    if isinstance(state, Draw):
        return "Draw!"
    return UNEXPECTED_ERROR


def describe_error(error: MoveError) -> str:
    return MESSAGES.get(error, UNEXPECTED_ERROR)
