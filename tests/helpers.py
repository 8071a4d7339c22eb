"""Shared helpers for building boards and playing sequences in tests."""

from tictactoe.engine import new_game, play_turn
from tictactoe.game import Mark, board_from_rows

_CELLS = {"X": Mark.FIRST, "O": Mark.SECOND, ".": None}


def make_board(text: str):
    """Build a board from three rows such as "XO. .X. ..O"."""
    return board_from_rows([[_CELLS[ch] for ch in row] for row in text.split()])


def play_sequence(moves, state=None):
    """Play (row, col) moves in order, asserting each one is accepted."""
    state = state if state is not None else new_game()
    for row, col in moves:
        result = play_turn(state, row, col)
        assert result.is_ok, f"move {(row, col)} rejected: {result.error}"
        state = result.value
    return state
