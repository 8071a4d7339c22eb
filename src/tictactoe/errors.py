"""
Move errors and the result value returned by the rules.

Rejections are returned as values; nothing in the rules raises for an
illegal move.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Generic, Optional, TypeVar

T = TypeVar("T")


class MoveError(Enum):
    OUT_OF_BOUNDS = "out_of_bounds"
    CELL_ALREADY_TAKEN = "cell_already_taken"
    NOT_IN_PROGRESS = "not_in_progress"


class MoveRejected(Exception):
    """Raised only when a caller explicitly unwraps a failed result."""

    def __init__(self, error: MoveError):
        super().__init__(error.value)
        self.error = error


@dataclass(frozen=True)
class MoveResult(Generic[T]):
    """Either a value (board or game state) or a MoveError, never both."""
    value: Optional[T] = None
    error: Optional[MoveError] = None

    @staticmethod
    def ok(value: T) -> "MoveResult[T]":
        return MoveResult(value=value)

    @staticmethod
    def fail(error: MoveError) -> "MoveResult[T]":
        return MoveResult(error=error)

    @property
    def is_ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> T:
        """Return the value, or raise MoveRejected for a failed result."""
        if self.error is not None:
            raise MoveRejected(self.error)
        return self.value
