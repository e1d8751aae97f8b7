"""
API Service - Message layer between a caller and the engine.

The service:
1. Translates request messages to engine calls
2. Holds the engine (and so the one live session)
3. Formats results as response messages

This layer is transport-agnostic (used by the CLI, usable by anything
that can produce JSON).
"""

from __future__ import annotations
from dataclasses import dataclass, field
import logging

from pydantic import TypeAdapter, ValidationError

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
    ErrorCode,
)
from ..engine_core.action import Action, ActionResult, Event
from ..engine_core.errors import NotInitializedError
from ..engine_core.state import Difficulty, GameState
from ..session import GameEngine

logger = logging.getLogger(__name__)

_action_adapter: TypeAdapter = TypeAdapter(ActionMessage)


@dataclass
class GameService:
    """
    Main message service.

    Usage:
        service = GameService()

        service.create(CreateRequest(pebbles_count=10, max_pebbles_per_turn=4))
        response = service.handle(TurnAction(pebbles_taken=2))
        state = service.query()
    """
    engine: GameEngine = field(default_factory=GameEngine)

    def create(self, request: CreateRequest) -> ActionResponse:
        """Create the game. May carry the computer's opening move."""
        result = self.engine.initialize(
            pebbles_count=request.pebbles_count,
            max_pebbles_per_turn=request.max_pebbles_per_turn,
            difficulty=Difficulty(request.difficulty.value),
        )
        return self._result_to_response(result)

    def handle(self, message: TurnAction | GiveUpAction | RestartAction) -> ActionResponse:
        """Apply one action message."""
        return self._result_to_response(self.engine.apply(to_action(message)))

    def handle_json(self, payload: str | bytes) -> ActionResponse | ErrorResponse:
        """Parse a raw action message and apply it."""
        try:
            message = _action_adapter.validate_json(payload)
        except ValidationError as e:
            logger.info("Malformed action message: %s", e.error_count())
            return ErrorResponse(
                error="Malformed action message",
                error_code=ErrorCode.VALIDATION_ERROR,
                details={"errors": e.errors(include_url=False, include_context=False)},
            )
        return self.handle(message)

    def query(self) -> GameStateResponse | ErrorResponse:
        """Full current snapshot."""
        try:
            state = self.engine.state()
        except NotInitializedError as e:
            return ErrorResponse(error=e.message, error_code=ErrorCode.NOT_INITIALIZED)
        return state_to_response(state)

    def _result_to_response(self, result: ActionResult) -> ActionResponse:
        if not result.success:
            return ActionResponse(
                success=False,
                error=result.error,
                error_code=ErrorCode(result.error_code or ErrorCode.INTERNAL_ERROR.value),
            )
        return ActionResponse(
            success=True,
            events=[event_to_info(e) for e in result.events],
            state=state_to_response(result.new_state) if result.new_state else None,
        )


# =============================================================================
# Conversion Helpers
# =============================================================================

def to_action(message: TurnAction | GiveUpAction | RestartAction) -> Action:
    """Convert a parsed message into an engine Action."""
    if isinstance(message, TurnAction):
        return Action.turn(message.pebbles_taken)
    if isinstance(message, GiveUpAction):
        return Action.give_up()
    if isinstance(message, RestartAction):
        return Action.restart(
            difficulty=Difficulty(message.difficulty.value),
            pebbles_count=message.pebbles_count,
            max_pebbles_per_turn=message.max_pebbles_per_turn,
        )
    raise TypeError(f"Unknown action message: {type(message).__name__}")


def event_to_info(event: Event) -> EventInfo:
    return EventInfo(**event.to_dict())


def state_to_response(state: GameState) -> GameStateResponse:
    return GameStateResponse(**state.to_dict(), phase=state.phase.value)
