"""
Game State - The single live pebbles session.

Design principles:
- Six stored fields, everything else derived
- Serializable: one snapshot is the only persistence format
- Copy-friendly: the reducer mutates a copy, the facade commits it
"""

from __future__ import annotations
from dataclasses import dataclass, replace
from enum import Enum
from typing import Any

from .errors import DegenerateConfigurationError

U32_MAX = 2**32 - 1


class Player(Enum):
    """The two sides of the game."""
    USER = "user"
    PROGRAM = "program"


class Difficulty(Enum):
    """Move-selection policy of the computer opponent."""
    EASY = "easy"
    HARD = "hard"


class GamePhase(Enum):
    """High-level session phases."""
    UNINITIALIZED = "uninitialized"
    ACTIVE = "active"
    GAME_OVER = "game_over"


def validate_settings(pebbles_count: int, max_pebbles_per_turn: int) -> None:
    """
    Reject settings that cannot produce a well-formed game.

    Raises:
        DegenerateConfigurationError: if either value is outside 1..U32_MAX
    """
    if max_pebbles_per_turn < 1:
        raise DegenerateConfigurationError(
            f"max_pebbles_per_turn must be at least 1, got {max_pebbles_per_turn}"
        )
    if pebbles_count < 1:
        raise DegenerateConfigurationError(
            f"pebbles_count must be at least 1, got {pebbles_count}"
        )
    if pebbles_count > U32_MAX or max_pebbles_per_turn > U32_MAX:
        raise DegenerateConfigurationError("Pebble counts must fit in 32 bits")


@dataclass
class GameState:
    """
    Snapshot of one game.

    pebbles_count, max_pebbles_per_turn, difficulty and first_player
    never change after creation. pebbles_remaining shrinks every turn
    and winner is set exactly once.
    """
    pebbles_count: int
    max_pebbles_per_turn: int
    pebbles_remaining: int
    difficulty: Difficulty
    first_player: Player
    winner: Player | None = None

    @property
    def is_terminal(self) -> bool:
        return self.winner is not None

    @property
    def phase(self) -> GamePhase:
        return GamePhase.GAME_OVER if self.is_terminal else GamePhase.ACTIVE

    def copy(self) -> GameState:
        """Return an independent copy (all fields are immutable values)."""
        return replace(self)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to a JSON-ready mapping."""
        return {
            "pebbles_count": self.pebbles_count,
            "max_pebbles_per_turn": self.max_pebbles_per_turn,
            "pebbles_remaining": self.pebbles_remaining,
            "difficulty": self.difficulty.value,
            "first_player": self.first_player.value,
            "winner": self.winner.value if self.winner else None,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> GameState:
        """
        Rebuild a snapshot produced by to_dict().

        Raises:
            DegenerateConfigurationError: if the snapshot breaks an invariant
            KeyError / ValueError: if the mapping is malformed
        """
        winner = data.get("winner")
        state = cls(
            pebbles_count=int(data["pebbles_count"]),
            max_pebbles_per_turn=int(data["max_pebbles_per_turn"]),
            pebbles_remaining=int(data["pebbles_remaining"]),
            difficulty=Difficulty(data["difficulty"]),
            first_player=Player(data["first_player"]),
            winner=Player(winner) if winner else None,
        )
        validate_settings(state.pebbles_count, state.max_pebbles_per_turn)
        if not 0 <= state.pebbles_remaining <= state.pebbles_count:
            raise DegenerateConfigurationError(
                f"pebbles_remaining {state.pebbles_remaining} outside "
                f"0..{state.pebbles_count}"
            )
        return state
