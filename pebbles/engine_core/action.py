"""
Action System - Actions, events, and results.

Actions are what the human side sends:
1. Turn (take N pebbles)
2. GiveUp
3. Restart (replace the session with a fresh one)

Events are what the engine answers with:
1. CounterTurn (the computer took N pebbles)
2. Won (a side won)

All state changes flow through actions.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from .state import Difficulty, GameState, Player


class ActionType(Enum):
    """Types of actions in the system."""
    TURN = "turn"
    GIVE_UP = "give_up"
    RESTART = "restart"


class EventType(Enum):
    """Notifications emitted by the engine."""
    COUNTER_TURN = "counter_turn"
    WON = "won"


@dataclass(frozen=True)
class Action:
    """
    A complete action to be applied to the game state.

    Only the fields relevant to action_type are set; use the
    factories rather than constructing directly.
    """
    action_type: ActionType
    pebbles_taken: int | None = None

    # Restart settings
    difficulty: Difficulty | None = None
    pebbles_count: int | None = None
    max_pebbles_per_turn: int | None = None

    @classmethod
    def turn(cls, pebbles_taken: int) -> Action:
        """Factory for a human turn."""
        return cls(action_type=ActionType.TURN, pebbles_taken=pebbles_taken)

    @classmethod
    def give_up(cls) -> Action:
        """Factory for giving up."""
        return cls(action_type=ActionType.GIVE_UP)

    @classmethod
    def restart(
        cls,
        difficulty: Difficulty,
        pebbles_count: int,
        max_pebbles_per_turn: int,
    ) -> Action:
        """Factory for restarting with new settings."""
        return cls(
            action_type=ActionType.RESTART,
            difficulty=difficulty,
            pebbles_count=pebbles_count,
            max_pebbles_per_turn=max_pebbles_per_turn,
        )


@dataclass(frozen=True)
class Event:
    """A notification produced while applying an action."""
    event_type: EventType
    pebbles_taken: int | None = None
    winner: Player | None = None

    @classmethod
    def counter_turn(cls, pebbles_taken: int) -> Event:
        return cls(event_type=EventType.COUNTER_TURN, pebbles_taken=pebbles_taken)

    @classmethod
    def won(cls, winner: Player) -> Event:
        return cls(event_type=EventType.WON, winner=winner)

    def to_dict(self) -> dict[str, Any]:
        return {
            "event": self.event_type.value,
            "pebbles_taken": self.pebbles_taken,
            "winner": self.winner.value if self.winner else None,
        }


@dataclass
class ActionResult:
    """
    Result of applying an action.

    Contains:
    - Whether action succeeded
    - New state (if succeeded)
    - Error and error code (if failed)
    - Events emitted, in order
    """
    success: bool
    new_state: GameState | None = None
    error: str | None = None
    error_code: str | None = None
    events: list[Event] = field(default_factory=list)

    @classmethod
    def failure(cls, error: str, error_code: str | None = None) -> ActionResult:
        """Create a failure result."""
        return cls(success=False, error=error, error_code=error_code)

    @classmethod
    def success_with_state(
        cls,
        state: GameState,
        events: list[Event] | None = None,
    ) -> ActionResult:
        """Create a success result with new state."""
        return cls(success=True, new_state=state, events=events or [])
