"""
Game Engine - Facade owning the one live session.

LIFECYCLE:
1. Uninitialized: no session, only initialize() is accepted
2. Active: turns and give-up are processed
3. Terminal: a winner is set, only restart is accepted
4. Restart from Active or Terminal goes straight back to Active

COMMIT RULES:
- Every operation works on a copy of the session
- The copy replaces the live session only when the operation succeeds
- A rejected action leaves the previous session untouched
"""

from __future__ import annotations
import logging

from ..engine_core.state import Difficulty, GamePhase, GameState
from ..engine_core.action import Action, ActionResult, ActionType
from ..engine_core.errors import NotInitializedError, PebblesError
from ..engine_core.lifecycle import GameLifecycleManager
from ..engine_core.random_source import RandomSource, SystemRandomSource
from ..engine_core.reducer import Reducer

logger = logging.getLogger(__name__)


class GameEngine:
    """
    Entry point for the external boundary.

    Usage:
        engine = GameEngine()
        engine.initialize(10, 4, Difficulty.EASY)
        result = engine.apply(Action.turn(2))
        snapshot = engine.state()
    """

    def __init__(self, rng: RandomSource | None = None, state: GameState | None = None):
        self.rng = rng or SystemRandomSource()
        self._state = state.copy() if state else None
        self._reducer = Reducer(rng=self.rng)
        self._lifecycle = GameLifecycleManager(rng=self.rng)

    @property
    def phase(self) -> GamePhase:
        if self._state is None:
            return GamePhase.UNINITIALIZED
        return self._state.phase

    def is_initialized(self) -> bool:
        return self._state is not None

    def initialize(
        self,
        pebbles_count: int,
        max_pebbles_per_turn: int,
        difficulty: Difficulty,
    ) -> ActionResult:
        """Create the session. Any earlier session is replaced."""
        if self._state is not None:
            logger.warning("initialize() called on a live session; replacing it")
        return self._commit(
            self._run(self._lifecycle.create, pebbles_count, max_pebbles_per_turn, difficulty)
        )

    def apply(self, action: Action) -> ActionResult:
        """
        Dispatch one action.

        Turn and GiveUp go to the reducer, Restart to the lifecycle
        manager. Failures carry an error_code and change nothing.
        """
        if self._state is None:
            error = NotInitializedError()
            return ActionResult.failure(error.message, error_code=error.code.value)

        if action.action_type is ActionType.RESTART:
            result = self._run(
                self._lifecycle.restart,
                action.difficulty,
                action.pebbles_count,
                action.max_pebbles_per_turn,
            )
        else:
            result = self._reducer.apply(self._state, action)
        return self._commit(result)

    def state(self) -> GameState:
        """
        Current snapshot (a copy).

        Raises:
            NotInitializedError: before initialize()
        """
        if self._state is None:
            raise NotInitializedError()
        return self._state.copy()

    def _run(self, operation, *args) -> ActionResult:
        try:
            return operation(*args)
        except PebblesError as e:
            logger.info("Rejected configuration: %s", e.message)
            return ActionResult.failure(e.message, error_code=e.code.value)

    def _commit(self, result: ActionResult) -> ActionResult:
        if result.success and result.new_state is not None:
            self._state = result.new_state
            result.new_state = self._state.copy()
        return result
