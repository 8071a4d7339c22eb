"""
TicTacToe board and game state model.

Board representation: tuple of 3 row tuples, each holding 3 cells
  - None: empty
  - Mark.FIRST: X
  - Mark.SECOND: O

Game phase: InProgress | Draw | Win, each carrying the board it resulted from.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, List, Optional, Tuple, Union

BOARD_SIZE = 3


class Mark(Enum):
    """Player symbol. FIRST always opens the game."""
    FIRST = "X"
    SECOND = "O"

    def toggle(self) -> "Mark":
        return Mark.SECOND if self is Mark.FIRST else Mark.FIRST


Cell = Optional[Mark]
Board = Tuple[Tuple[Cell, ...], ...]

# Winning lines as (row, col) coordinates
WIN_LINES = (
    [tuple((r, c) for c in range(BOARD_SIZE)) for r in range(BOARD_SIZE)]        # rows
    + [tuple((r, c) for r in range(BOARD_SIZE)) for c in range(BOARD_SIZE)]      # columns
    + [tuple((i, i) for i in range(BOARD_SIZE))]                                 # main diagonal
    + [tuple((i, BOARD_SIZE - 1 - i) for i in range(BOARD_SIZE))]                # anti-diagonal
)


@dataclass(frozen=True)
class Move:
    """Attempted placement. Bounds are checked by the rules, not here."""
    row: int
    col: int
    mark: Mark


@dataclass(frozen=True)
class InProgress:
    board: Board
    current_mark: Mark = Mark.FIRST


@dataclass(frozen=True)
class Draw:
    board: Board
    last_mark: Mark  # Mark of the move that filled the board


@dataclass(frozen=True)
class Win:
    board: Board
    winning_mark: Mark


GameState = Union[InProgress, Draw, Win]


def empty_board() -> Board:
    """Return an all-empty board."""
    return tuple((None,) * BOARD_SIZE for _ in range(BOARD_SIZE))


def board_from_rows(rows: Iterable[Iterable[Cell]]) -> Board:
    """
    Build a board from any nested iterable of cells.

    Raises:
        ValueError: if the rows do not form a BOARD_SIZE x BOARD_SIZE grid
            or contain something other than a Mark or None.
    """
    board = tuple(tuple(row) for row in rows)
    if len(board) != BOARD_SIZE or any(len(row) != BOARD_SIZE for row in board):
        raise ValueError(f"Board must be {BOARD_SIZE}x{BOARD_SIZE}, got {[len(r) for r in board]}")
    for row in board:
        for cell in row:
            if cell is not None and not isinstance(cell, Mark):
                raise ValueError(f"Invalid cell value: {cell!r}")
    return board


def cell_at(board: Board, row: int, col: int) -> Cell:
    return board[row][col]


def in_bounds(row: int, col: int) -> bool:
    return 0 <= row < BOARD_SIZE and 0 <= col < BOARD_SIZE


def empty_cells(board: Board) -> List[Tuple[int, int]]:
    """Return (row, col) of every empty cell in row-major order."""
    return [
        (r, c)
        for r in range(BOARD_SIZE)
        for c in range(BOARD_SIZE)
        if board[r][c] is None
    ]


def is_full(board: Board) -> bool:
    return all(cell is not None for row in board for cell in row)


def place(board: Board, row: int, col: int, mark: Mark) -> Board:
    """Return a new board with (row, col) set to mark."""
    return tuple(
        tuple(mark if (r, c) == (row, col) else cell for c, cell in enumerate(cells))
        for r, cells in enumerate(board)
    )


def board_of(state: GameState) -> Board:
    return state.board


def current_mark(state: GameState) -> Mark:
    """
    Mark associated with the state.

    For InProgress this is the side to move; for terminal states it is the
    mark responsible for the outcome.
    """
    if isinstance(state, InProgress):
        return state.current_mark
    if isinstance(state, Draw):
        return state.last_mark
    if isinstance(state, Win):
        return state.winning_mark
    raise TypeError(f"Not a game state: {state!r}")


def is_terminal(state: GameState) -> bool:
    return isinstance(state, (Draw, Win))


def winner(state: GameState) -> Optional[Mark]:
    """Return the winning mark, or None for draws and unfinished games."""
    if isinstance(state, Win):
        return state.winning_mark
    return None
