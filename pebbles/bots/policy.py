"""
Bot Policy - How the computer decides how many pebbles to take.

A BotPolicy looks at the pile and returns a decision.
Two policies exist, one per difficulty:
- EasyPolicy: uniform random take in 1..max, clipped to the pile
- HardPolicy: leave the opponent on a multiple of (max + 1)
"""

from __future__ import annotations
from abc import ABC, abstractmethod
from dataclasses import dataclass
import logging

from ..engine_core.random_source import RandomSource
from ..engine_core.state import Difficulty

logger = logging.getLogger(__name__)


@dataclass
class BotDecision:
    """
    A decision made by a bot.

    Contains:
    - How many pebbles to take
    - Explanation (for logs/CLI)
    """
    take: int
    explanation: str = ""


class BotPolicy(ABC):
    """
    Abstract base class for bot policies.

    Precondition for select_take: pebbles_remaining >= 1 and
    max_pebbles_per_turn >= 1. The caller never asks a policy to move
    on an empty pile.
    """

    @abstractmethod
    def select_take(
        self,
        pebbles_remaining: int,
        max_pebbles_per_turn: int,
        rng: RandomSource,
    ) -> BotDecision:
        """
        Select how many pebbles to take.

        Args:
            pebbles_remaining: Pebbles left in the pile (>= 1)
            max_pebbles_per_turn: Per-turn cap (>= 1)
            rng: Random source (used by stochastic policies only)

        Returns:
            BotDecision with 1 <= take <= min(max, remaining)
        """
        pass

    def get_name(self) -> str:
        """Get the bot's name/identifier."""
        return self.__class__.__name__


class EasyPolicy(BotPolicy):
    """Random policy - one draw from the random source per move."""

    def select_take(
        self,
        pebbles_remaining: int,
        max_pebbles_per_turn: int,
        rng: RandomSource,
    ) -> BotDecision:
        roll = rng.next_u32()
        take = min(roll % max_pebbles_per_turn + 1, pebbles_remaining)
        return BotDecision(take=take, explanation=f"Random take (roll={roll})")


class HardPolicy(BotPolicy):
    """
    Optimal policy for the subtraction game.

    Positions that are multiples of (max + 1) lose for the player to
    move. Take remaining % (max + 1) to hand the opponent one; if that
    is zero we are already in a losing position and take 1.
    """

    def select_take(
        self,
        pebbles_remaining: int,
        max_pebbles_per_turn: int,
        rng: RandomSource,
    ) -> BotDecision:
        optimal = pebbles_remaining % (max_pebbles_per_turn + 1)
        if optimal == 0:
            return BotDecision(take=1, explanation="Losing position, forced take")
        return BotDecision(
            take=optimal,
            explanation=f"Leaves a multiple of {max_pebbles_per_turn + 1}",
        )


POLICIES: dict[Difficulty, BotPolicy] = {
    Difficulty.EASY: EasyPolicy(),
    Difficulty.HARD: HardPolicy(),
}


def policy_for(difficulty: Difficulty) -> BotPolicy:
    """Get the policy for a difficulty level."""
    return POLICIES[difficulty]


def decide(
    pebbles_remaining: int,
    max_pebbles_per_turn: int,
    difficulty: Difficulty,
    rng: RandomSource,
) -> int:
    """
    Number of pebbles the computer takes this turn.

    Raises:
        ValueError: if called on an empty pile or with a zero cap
    """
    if pebbles_remaining < 1:
        raise ValueError("Computer cannot move on an empty pile")
    if max_pebbles_per_turn < 1:
        raise ValueError("max_pebbles_per_turn must be at least 1")

    decision = policy_for(difficulty).select_take(
        pebbles_remaining, max_pebbles_per_turn, rng
    )
    logger.debug(
        "%s takes %d of %d (%s)",
        difficulty.value, decision.take, pebbles_remaining, decision.explanation,
    )
    return decision.take
