"""
Two-player TicTacToe on one terminal.

Usage:
    tictactoe
    tictactoe --log-level DEBUG
"""

import argparse
from typing import Callable, Optional, Sequence

from .config import EngineConfig, setup_logging
from .display import describe_error, describe_state, format_board
from .game import is_terminal
from .session import GameSession

QUIT_WORDS = ("q", "quit", "exit")


def parse_move(text: str):
    """Parse "row col" (or "row,col") into a pair of ints; None if malformed."""
    parts = text.replace(",", " ").split()
    if len(parts) != 2:
        return None
    try:
        return int(parts[0]), int(parts[1])
    except ValueError:
        return None


def play_interactive(
    session: GameSession,
    input_fn: Callable[[str], str] = input,
    output_fn: Callable[[str], None] = print,
) -> None:
    """Run games until the players quit."""
    output_fn("Enter moves as 'row col' (0-2), q to quit.")

    while True:
        state = session.state
        output_fn(format_board(state.board))
        output_fn(describe_state(state))

        if is_terminal(state):
            try:
                again = input_fn("Play again? [y/N] ").strip().lower()
            except (EOFError, KeyboardInterrupt):
                again = ""
            if again not in ("y", "yes"):
                return
            session.reset()
            continue

        try:
            text = input_fn("Your move: ").strip().lower()
        except (EOFError, KeyboardInterrupt):
            output_fn("\nGame aborted")
            return
        if text in QUIT_WORDS:
            output_fn("Game aborted")
            return

        coords = parse_move(text)
        if coords is None:
            output_fn("Invalid input, try again")
            continue

        result = session.play(*coords)
        if not result.is_ok:
            output_fn(describe_error(result.error))


def main(argv: Optional[Sequence[str]] = None) -> None:
    config = EngineConfig.from_env()

    parser = argparse.ArgumentParser(description="Play TicTacToe against another human")
    parser.add_argument("--log-level", type=str, default=config.log_level, help="Logging level")
    parser.add_argument("--log-format", type=str, default=config.log_format,
                        choices=["simple", "detailed"], help="Log line format")
    args = parser.parse_args(argv)

    setup_logging(args.log_level, args.log_format)
    play_interactive(GameSession())


if __name__ == "__main__":
    main()
