"""
Configuration - Settings read from the environment, and logging setup.

Environment variables:
    PEBBLES_LOG_LEVEL             Root log level (default WARNING)
    PEBBLES_SEED                  Seed for reproducible games (default: unseeded)
    PEBBLES_STATE_FILE            Snapshot path used by the CLI
    PEBBLES_DEFAULT_COUNT         Pile size when none is given (default 15)
    PEBBLES_DEFAULT_MAX_PER_TURN  Per-turn cap when none is given (default 3)
    PEBBLES_DEFAULT_DIFFICULTY    easy | hard (default easy)
"""

from __future__ import annotations
from dataclasses import dataclass
import logging
import os

from .engine_core.state import Difficulty

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def _env_int(name: str, default: int | None) -> int | None:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from None


@dataclass
class Settings:
    """Process-wide defaults for the CLI and service."""
    log_level: str = "WARNING"
    seed: int | None = None
    state_file: str = "pebbles_state.json"
    default_pebbles_count: int = 15
    default_max_pebbles_per_turn: int = 3
    default_difficulty: Difficulty = Difficulty.EASY

    @classmethod
    def from_env(cls) -> Settings:
        defaults = cls()
        difficulty = os.getenv("PEBBLES_DEFAULT_DIFFICULTY", defaults.default_difficulty.value)
        return cls(
            log_level=os.getenv("PEBBLES_LOG_LEVEL", defaults.log_level).upper(),
            seed=_env_int("PEBBLES_SEED", None),
            state_file=os.getenv("PEBBLES_STATE_FILE", defaults.state_file),
            default_pebbles_count=_env_int(
                "PEBBLES_DEFAULT_COUNT", defaults.default_pebbles_count
            ),
            default_max_pebbles_per_turn=_env_int(
                "PEBBLES_DEFAULT_MAX_PER_TURN", defaults.default_max_pebbles_per_turn
            ),
            default_difficulty=Difficulty(difficulty.lower()),
        )


def configure_logging(level: str | None = None) -> None:
    """Configure root logging. Safe to call more than once."""
    if level is None:
        level = os.getenv("PEBBLES_LOG_LEVEL", "WARNING").upper()

    root_logger = logging.getLogger()
    if not root_logger.handlers:
        logging.basicConfig(level=level, format=LOG_FORMAT)
    root_logger.setLevel(level)
