"""
Reducer - Applies human actions to game state.

The reducer is the single point of in-game state mutation.
All turns and give-ups go through apply_action().

Design principles:
- (state, action) -> ActionResult, input state never touched
- Validates before applying
- Returns ActionResult with success/failure
- Delegates the computer's reply to the bot policy
"""

from __future__ import annotations
from dataclasses import dataclass
import logging

from .state import GameState, Player
from .action import Action, ActionType, ActionResult, Event
from .errors import (
    ErrorCode,
    PebblesError,
    GameOverError,
    InvalidMoveError,
    InsufficientPebblesError,
)
from .random_source import RandomSource
from ..bots import policy as bot_policy

logger = logging.getLogger(__name__)


@dataclass
class Reducer:
    """
    Reducer applies human actions to game state.

    Stateless - all state is in GameState.
    rng feeds the Easy policy.
    """
    rng: RandomSource

    def apply(self, state: GameState, action: Action) -> ActionResult:
        """
        Apply an action to the game state.

        Returns ActionResult with new state or error.
        """
        handler = self._get_handler(action.action_type)
        if not handler:
            return ActionResult.failure(
                f"No handler for action type: {action.action_type}",
                error_code=ErrorCode.INTERNAL_ERROR.value,
            )

        try:
            self._validate_action(state, action)
        except PebblesError as e:
            logger.info("Rejected %s: %s", action.action_type.value, e.message)
            return ActionResult.failure(e.message, error_code=e.code.value)

        return handler(state.copy(), action)

    def _validate_action(self, state: GameState, action: Action) -> None:
        """
        Validate that an action is legal in the current state.

        Raises a PebblesError subclass if invalid.
        """
        if state.is_terminal:
            raise GameOverError(f"Game is over - {state.winner.value} already won")

        if action.action_type is ActionType.TURN:
            taken = action.pebbles_taken
            if taken is None or taken < 1 or taken > state.max_pebbles_per_turn:
                raise InvalidMoveError(
                    f"Invalid number of pebbles taken: {taken} "
                    f"(must be 1..{state.max_pebbles_per_turn})"
                )
            if taken > state.pebbles_remaining:
                raise InsufficientPebblesError(
                    f"Not enough pebbles remaining: {state.pebbles_remaining} left, "
                    f"{taken} requested"
                )

    def _get_handler(self, action_type: ActionType):
        """Get the handler function for an action type."""
        handlers = {
            ActionType.TURN: self._handle_turn,
            ActionType.GIVE_UP: self._handle_give_up,
        }
        return handlers.get(action_type)

    def _handle_turn(self, state: GameState, action: Action) -> ActionResult:
        """Handle a human turn and the computer's reply."""
        state.pebbles_remaining -= action.pebbles_taken

        if state.pebbles_remaining == 0:
            state.winner = Player.USER
            logger.info("User took the last pebble")
            return ActionResult.success_with_state(state, [Event.won(Player.USER)])

        return ActionResult.success_with_state(state, self.counter_turn(state))

    def _handle_give_up(self, state: GameState, action: Action) -> ActionResult:
        """Handle the human giving up."""
        state.winner = Player.PROGRAM
        logger.info("User gave up with %d pebbles left", state.pebbles_remaining)
        return ActionResult.success_with_state(state, [Event.won(Player.PROGRAM)])

    def counter_turn(self, state: GameState) -> list[Event]:
        """
        Let the computer move on state in place.

        Returns the events it produced: CounterTurn, or Won(Program)
        when the move empties the pile.
        """
        taken = bot_policy.decide(
            state.pebbles_remaining,
            state.max_pebbles_per_turn,
            state.difficulty,
            self.rng,
        )
        state.pebbles_remaining -= taken

        if state.pebbles_remaining == 0:
            state.winner = Player.PROGRAM
            logger.info("Program took the last %d pebble(s)", taken)
            return [Event.won(Player.PROGRAM)]
        return [Event.counter_turn(taken)]


def apply_action(state: GameState, action: Action, rng: RandomSource) -> ActionResult:
    """Convenience function to apply an action."""
    return Reducer(rng=rng).apply(state, action)
