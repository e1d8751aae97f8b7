"""
Engine Core - Pebble game state management and turn processing.

The engine is the runtime that:
1. Creates GameState (coin flip, opening move)
2. Validates human actions
3. Applies actions via the reducer
4. Asks the bot policy for the computer's reply
"""

from .errors import (
    ErrorCode,
    PebblesError,
    NotInitializedError,
    InvalidMoveError,
    InsufficientPebblesError,
    DegenerateConfigurationError,
    GameOverError,
)
from .state import GameState, GamePhase, Player, Difficulty, validate_settings
from .action import Action, ActionType, ActionResult, Event, EventType
from .random_source import RandomSource, SystemRandomSource, SequenceRandomSource
from .reducer import Reducer, apply_action
from .lifecycle import GameLifecycleManager, choose_first_player

__all__ = [
    "ErrorCode",
    "PebblesError",
    "NotInitializedError",
    "InvalidMoveError",
    "InsufficientPebblesError",
    "DegenerateConfigurationError",
    "GameOverError",
    "GameState",
    "GamePhase",
    "Player",
    "Difficulty",
    "validate_settings",
    "Action",
    "ActionType",
    "ActionResult",
    "Event",
    "EventType",
    "RandomSource",
    "SystemRandomSource",
    "SequenceRandomSource",
    "Reducer",
    "apply_action",
    "GameLifecycleManager",
    "choose_first_player",
]
