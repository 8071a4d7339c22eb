"""
Runtime configuration and logging setup.
"""

import logging
import os
import sys
from dataclasses import dataclass

LOG_FORMATS = {
    "simple": "%(name)s - %(levelname)s - %(message)s",
    "detailed": "%(asctime)s - %(name)s - %(levelname)s - %(filename)s:%(lineno)d - %(message)s",
}


@dataclass
class EngineConfig:
    """Configuration for front ends embedding the engine."""

    # Logging
    log_level: str = "WARNING"
    log_format: str = "simple"

    @classmethod
    def from_env(cls) -> "EngineConfig":
        """Read overrides from TICTACTOE_LOG_LEVEL and TICTACTOE_LOG_FORMAT."""
        return cls(
            log_level=os.environ.get("TICTACTOE_LOG_LEVEL", cls.log_level),
            log_format=os.environ.get("TICTACTOE_LOG_FORMAT", cls.log_format),
        )


def setup_logging(level: str = "WARNING", format_style: str = "simple") -> None:
    """
    Configure the root logger.

    Args:
        level: Logging level name (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        format_style: Key of LOG_FORMATS; unknown styles fall back to "simple"
    """
    numeric_level = getattr(logging, level.upper(), logging.WARNING)
    logging.basicConfig(
        level=numeric_level,
        format=LOG_FORMATS.get(format_style, LOG_FORMATS["simple"]),
        handlers=[logging.StreamHandler(sys.stderr)],
        force=True,
    )
