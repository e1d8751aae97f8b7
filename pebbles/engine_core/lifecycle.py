"""
Game Lifecycle - Creates fresh game state.

This module handles:
- Validating game settings
- Flipping the coin for the first player
- Running the computer's opening move when it starts

Restart is the same operation as create; the previous session is
simply discarded by the caller.
"""

from __future__ import annotations
from dataclasses import dataclass
import logging

from .state import Difficulty, GameState, Player, validate_settings
from .action import ActionResult, Event
from .random_source import RandomSource
from ..bots import policy as bot_policy

logger = logging.getLogger(__name__)


def choose_first_player(rng: RandomSource) -> Player:
    """Fair coin: even draw -> User, odd draw -> Program."""
    return Player.USER if rng.next_u32() % 2 == 0 else Player.PROGRAM


@dataclass
class GameLifecycleManager:
    """Builds new sessions from settings."""
    rng: RandomSource

    def create(
        self,
        pebbles_count: int,
        max_pebbles_per_turn: int,
        difficulty: Difficulty,
    ) -> ActionResult:
        """
        Create a new game.

        Args:
            pebbles_count: Pile size (>= 1)
            max_pebbles_per_turn: Per-turn cap (>= 1)
            difficulty: Computer policy

        Returns:
            ActionResult with the new state and any opening-move events

        Raises:
            DegenerateConfigurationError: for unusable settings, before
                any random draw is made
        """
        validate_settings(pebbles_count, max_pebbles_per_turn)

        first_player = choose_first_player(self.rng)
        state = GameState(
            pebbles_count=pebbles_count,
            max_pebbles_per_turn=max_pebbles_per_turn,
            pebbles_remaining=pebbles_count,
            difficulty=difficulty,
            first_player=first_player,
            winner=None,
        )
        events: list[Event] = []

        if first_player is Player.PROGRAM:
            taken = bot_policy.decide(
                pebbles_count, max_pebbles_per_turn, difficulty, self.rng
            )
            state.pebbles_remaining -= taken
            events.append(Event.counter_turn(taken))
            # No win check here: an emptied pile still starts with winner None

        logger.info(
            "New %s game: %d pebbles, max %d per turn, %s moves first",
            difficulty.value, pebbles_count, max_pebbles_per_turn, first_player.value,
        )
        return ActionResult.success_with_state(state, events)

    def restart(
        self,
        difficulty: Difficulty,
        pebbles_count: int,
        max_pebbles_per_turn: int,
    ) -> ActionResult:
        """Start over with new settings. Nothing carries over."""
        return self.create(pebbles_count, max_pebbles_per_turn, difficulty)
