"""
Pytest fixtures for Pebbles tests.
"""

import pytest

from ..engine_core.state import GameState, Difficulty, Player
from ..engine_core.random_source import SequenceRandomSource
from ..engine_core.reducer import Reducer
from ..session import GameEngine


@pytest.fixture
def zero_rng() -> SequenceRandomSource:
    """Every draw is 0: coin lands on User, Easy always takes 1."""
    return SequenceRandomSource([0])


@pytest.fixture
def reducer(zero_rng) -> Reducer:
    return Reducer(rng=zero_rng)


@pytest.fixture
def easy_state() -> GameState:
    """Fresh 10-pebble Easy game, user to move."""
    return GameState(
        pebbles_count=10,
        max_pebbles_per_turn=4,
        pebbles_remaining=10,
        difficulty=Difficulty.EASY,
        first_player=Player.USER,
    )


@pytest.fixture
def hard_state() -> GameState:
    """15-pebble Hard game with 5 left, user to move."""
    return GameState(
        pebbles_count=15,
        max_pebbles_per_turn=4,
        pebbles_remaining=5,
        difficulty=Difficulty.HARD,
        first_player=Player.USER,
    )


@pytest.fixture
def engine(zero_rng) -> GameEngine:
    """Initialized engine: 10 pebbles, max 4, Easy, user first."""
    engine = GameEngine(rng=zero_rng)
    result = engine.initialize(10, 4, Difficulty.EASY)
    assert result.success
    return engine
