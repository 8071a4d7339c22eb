"""Tests for the session holder."""

import threading

import pytest

from tictactoe.engine import new_game
from tictactoe.errors import MoveError, MoveRejected
from tictactoe.game import Draw, InProgress, Mark, is_terminal
from tictactoe.session import GameSession
from tests.helpers import make_board


class TestGameSession:

    def test_starts_with_new_game(self):
        session = GameSession()
        assert session.state == new_game()
        assert session.last_error is None

    def test_accepts_initial_state(self):
        state = InProgress(make_board("X.. ... ..."), Mark.SECOND)
        assert GameSession(state).state is state

    def test_play_replaces_state(self):
        session = GameSession()
        first = session.state

        result = session.play(1, 1)

        assert result.is_ok
        assert session.state is result.value
        assert session.state is not first
        assert first == new_game()

    def test_failed_move_keeps_state_and_records_error(self):
        session = GameSession()
        session.play(0, 0)
        held = session.state

        result = session.play(0, 0)

        assert result.error is MoveError.CELL_ALREADY_TAKEN
        assert session.state is held
        assert session.last_error is MoveError.CELL_ALREADY_TAKEN

        session.play(0, 1)
        assert session.last_error is None

    def test_play_or_raise(self):
        session = GameSession()
        assert session.play_or_raise(2, 2) == InProgress(make_board("... ... ..X"), Mark.SECOND)
        with pytest.raises(MoveRejected):
            session.play_or_raise(-1, 2)

    def test_finished_game_rejects_until_reset(self):
        session = GameSession(Draw(make_board("XOX XOO OXX"), Mark.FIRST))

        assert session.play(0, 0).error is MoveError.NOT_IN_PROGRESS

        state = session.reset()
        assert state == new_game()
        assert session.state is state
        assert session.last_error is None

    def test_concurrent_moves_are_serialized(self):
        session = GameSession()
        barrier = threading.Barrier(9)
        results = []

        def worker(row, col):
            barrier.wait()
            results.append(session.play(row, col))

        threads = [threading.Thread(target=worker, args=(r, c)) for r in range(3) for c in range(3)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        accepted = [r for r in results if r.is_ok]
        placed = sum(cell is not None for row in session.state.board for cell in row)
        assert placed == len(accepted)
        marks = [cell for row in session.state.board for cell in row if cell is not None]
        assert marks.count(Mark.FIRST) - marks.count(Mark.SECOND) in (0, 1)
        assert all(r.error is MoveError.NOT_IN_PROGRESS for r in results if not r.is_ok)
        assert is_terminal(session.state)
