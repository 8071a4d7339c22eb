"""
Session holder for one logical game.

The core functions are pure; this is the layer that owns the current state
and makes sure moves are applied one at a time, in submission order.
"""

import logging
import threading
from typing import Optional

from .engine import new_game, play_turn
from .errors import MoveError, MoveResult
from .game import GameState, InProgress

logger = logging.getLogger(__name__)


class GameSession:
    """Holds the current GameState and replaces it wholesale on each move."""

    def __init__(self, first_state: Optional[GameState] = None):
        self._lock = threading.Lock()
        self._state: GameState = first_state if first_state is not None else new_game()
        self.last_error: Optional[MoveError] = None

    @property
    def state(self) -> GameState:
        return self._state

    def play(self, row: int, col: int) -> MoveResult[GameState]:
        with self._lock:
            result = play_turn(self._state, row, col)
            if result.is_ok:
                self._state = result.value
                self.last_error = None
            else:
                self.last_error = result.error
            return result

    def play_or_raise(self, row: int, col: int) -> GameState:
        """Play a move and return the new state; raises MoveRejected on failure."""
        return self.play(row, col).unwrap()

    def reset(self) -> InProgress:
        with self._lock:
            state = new_game()
            self._state = state
            self.last_error = None
        logger.debug("Session reset")
        return state
