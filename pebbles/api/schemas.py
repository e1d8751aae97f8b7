"""
Pydantic Schemas - The message contract between a caller and the engine.

These models define the exact shape of every message. They are
transport-agnostic: the CLI feeds them JSON from the command line,
tests build them directly.

Error Codes:
- NOT_INITIALIZED: No game has been created yet
- INVALID_MOVE: Took zero pebbles or more than the per-turn cap
- INSUFFICIENT_PEBBLES: Took more pebbles than remain
- DEGENERATE_CONFIGURATION: Settings that cannot produce a game
- GAME_OVER: Turn or give-up after the game was won
- VALIDATION_ERROR: Message could not be parsed
"""

from enum import Enum
from typing import Annotated, Literal, Optional, Union
from pydantic import BaseModel, Field

U32_MAX = 2**32 - 1


# =============================================================================
# Enums
# =============================================================================

class DifficultyLevel(str, Enum):
    """Computer difficulty."""
    EASY = "easy"
    HARD = "hard"


class PlayerSide(str, Enum):
    """The two sides of the game."""
    USER = "user"
    PROGRAM = "program"


class GamePhaseValue(str, Enum):
    """Session phase values."""
    UNINITIALIZED = "uninitialized"
    ACTIVE = "active"
    GAME_OVER = "game_over"


class EventKind(str, Enum):
    """Notification kinds."""
    COUNTER_TURN = "counter_turn"
    WON = "won"


class ErrorCode(str, Enum):
    """Structured error codes."""
    NOT_INITIALIZED = "NOT_INITIALIZED"
    INVALID_MOVE = "INVALID_MOVE"
    INSUFFICIENT_PEBBLES = "INSUFFICIENT_PEBBLES"
    DEGENERATE_CONFIGURATION = "DEGENERATE_CONFIGURATION"
    GAME_OVER = "GAME_OVER"
    VALIDATION_ERROR = "VALIDATION_ERROR"
    INTERNAL_ERROR = "INTERNAL_ERROR"


# =============================================================================
# Request Models
# =============================================================================

class CreateRequest(BaseModel):
    """Request to create the game."""
    pebbles_count: int = Field(..., ge=0, le=U32_MAX, description="Pile size")
    max_pebbles_per_turn: int = Field(
        ..., ge=0, le=U32_MAX, description="Most pebbles removable in one turn"
    )
    difficulty: DifficultyLevel = Field(DifficultyLevel.EASY, description="easy or hard")


class TurnAction(BaseModel):
    """Take some pebbles."""
    action: Literal["turn"] = "turn"
    pebbles_taken: int = Field(..., ge=0, le=U32_MAX)


class GiveUpAction(BaseModel):
    """Concede the game."""
    action: Literal["give_up"] = "give_up"


class RestartAction(BaseModel):
    """Replace the game with a fresh one."""
    action: Literal["restart"] = "restart"
    difficulty: DifficultyLevel
    pebbles_count: int = Field(..., ge=0, le=U32_MAX)
    max_pebbles_per_turn: int = Field(..., ge=0, le=U32_MAX)


ActionMessage = Annotated[
    Union[TurnAction, GiveUpAction, RestartAction],
    Field(discriminator="action"),
]


# =============================================================================
# Response Models
# =============================================================================

class EventInfo(BaseModel):
    """A notification emitted by the engine."""
    event: EventKind
    pebbles_taken: Optional[int] = Field(None, description="Set for counter_turn")
    winner: Optional[PlayerSide] = Field(None, description="Set for won")


class GameStateResponse(BaseModel):
    """Complete game state snapshot."""
    pebbles_count: int
    max_pebbles_per_turn: int
    pebbles_remaining: int
    difficulty: DifficultyLevel
    first_player: PlayerSide
    winner: Optional[PlayerSide] = None
    phase: GamePhaseValue


class ActionResponse(BaseModel):
    """Outcome of create or of one action."""
    success: bool
    events: list[EventInfo] = Field(default_factory=list)
    state: Optional[GameStateResponse] = None
    error: Optional[str] = None
    error_code: Optional[ErrorCode] = None


class ErrorResponse(BaseModel):
    """Standard error response."""
    error: str = Field(..., description="Human-readable error message")
    error_code: ErrorCode = Field(..., description="Machine-readable error code")
    details: Optional[dict] = Field(None, description="Additional error context")
