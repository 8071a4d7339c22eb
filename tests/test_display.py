"""Tests for text rendering."""

from tictactoe.display import MESSAGES, describe_error, describe_state, format_board, mark_symbol
from tictactoe.engine import new_game
from tictactoe.errors import MoveError
from tictactoe.game import Draw, InProgress, Mark, Win
from tests.helpers import make_board


def test_format_board():
    board = make_board("XO. .X. O.X")
    assert format_board(board) == "X|O| \n-+-+-\n |X| \n-+-+-\nO| |X"


def test_mark_symbol():
    assert mark_symbol(Mark.FIRST) == "X"
    assert mark_symbol(Mark.SECOND) == "O"
    assert mark_symbol(None) == " "


def test_describe_state():
    board = make_board("XXX OO. ...")
    assert describe_state(new_game()) == "X to move"
    assert describe_state(InProgress(board, Mark.SECOND)) == "O to move"
    assert describe_state(Win(board, Mark.FIRST)) == "X wins!"
    assert describe_state(Draw(board, Mark.SECOND)) == "Draw!"


def test_every_error_has_a_message():
    assert set(MESSAGES) == set(MoveError)
    assert describe_error(MoveError.CELL_ALREADY_TAKEN) == "This cell is already taken"
