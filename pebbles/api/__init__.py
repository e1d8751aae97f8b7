"""
API Module - Message interface to the engine.

A caller:
1. Creates the game
2. Sends Turn / GiveUp / Restart actions
3. Receives CounterTurn / Won events
4. Queries the full state snapshot

There is exactly one game per service instance.
"""

from .schemas import (
    # Requests
    CreateRequest,
    TurnAction,
    GiveUpAction,
    RestartAction,
    ActionMessage,
    # Responses
    ActionResponse,
    EventInfo,
    GameStateResponse,
    ErrorResponse,
    # Enums
    DifficultyLevel,
    PlayerSide,
    GamePhaseValue,
    EventKind,
    ErrorCode,
)
from .service import GameService

__all__ = [
    # Requests
    "CreateRequest",
    "TurnAction",
    "GiveUpAction",
    "RestartAction",
    "ActionMessage",
    # Responses
    "ActionResponse",
    "EventInfo",
    "GameStateResponse",
    "ErrorResponse",
    # Enums
    "DifficultyLevel",
    "PlayerSide",
    "GamePhaseValue",
    "EventKind",
    "ErrorCode",
    # Service
    "GameService",
]
