"""
Tests for the reducer (turn processing).

Tests:
- Validation order and error codes
- Win detection for both sides
- The computer's counter-turn
- Give-up and terminal sessions
- Input state is never mutated
"""

import pytest

from ..engine_core.action import Action, Event, EventType
from ..engine_core.errors import ErrorCode
from ..engine_core.random_source import SequenceRandomSource
from ..engine_core.reducer import Reducer, apply_action
from ..engine_core.state import Difficulty, GamePhase, Player


class TestTurnValidation:
    """Tests for rejected turns."""

    @pytest.mark.parametrize("taken", [0, -1, 5])
    def test_out_of_range_is_invalid_move(self, reducer, easy_state, taken):
        """Turn(0) and Turn(max + 1) fail with InvalidMove."""
        result = reducer.apply(easy_state, Action.turn(taken))

        assert not result.success
        assert result.error_code == ErrorCode.INVALID_MOVE.value
        assert result.new_state is None
        assert result.events == []

    def test_more_than_remaining(self, reducer, easy_state):
        """Turn(remaining + 1) fails with InsufficientPebbles."""
        easy_state.pebbles_remaining = 3
        result = reducer.apply(easy_state, Action.turn(4))

        assert not result.success
        assert result.error_code == ErrorCode.INSUFFICIENT_PEBBLES.value
        assert "3 left" in result.error

    def test_cap_checked_before_pile(self, reducer, easy_state):
        easy_state.pebbles_remaining = 2
        result = reducer.apply(easy_state, Action.turn(5))
        assert result.error_code == ErrorCode.INVALID_MOVE.value

    def test_rejected_turn_leaves_state_untouched(self, reducer, easy_state):
        before = easy_state.copy()
        reducer.apply(easy_state, Action.turn(9))
        assert easy_state == before

    def test_restart_is_not_a_reducer_action(self, reducer, easy_state):
        result = reducer.apply(easy_state, Action.restart(Difficulty.HARD, 5, 2))
        assert not result.success
        assert result.error_code == ErrorCode.INTERNAL_ERROR.value


class TestTurnEffects:
    """Tests for accepted turns."""

    def test_user_takes_last_pebble(self, reducer, easy_state):
        """Turn(remaining) always makes the user win."""
        easy_state.pebbles_remaining = 3
        result = reducer.apply(easy_state, Action.turn(3))

        assert result.success
        assert result.new_state.pebbles_remaining == 0
        assert result.new_state.winner == Player.USER
        assert result.events == [Event.won(Player.USER)]

    def test_user_win_skips_computer(self, easy_state):
        rng = SequenceRandomSource([0])
        easy_state.pebbles_remaining = 2
        Reducer(rng=rng).apply(easy_state, Action.turn(2))
        assert rng.calls == 0

    def test_counter_turn(self, reducer, easy_state):
        """User takes 2 of 10, Easy (roll 0) answers with 1."""
        result = reducer.apply(easy_state, Action.turn(2))

        assert result.success
        assert result.new_state.pebbles_remaining == 7
        assert result.new_state.winner is None
        assert result.events == [Event.counter_turn(1)]

    def test_computer_takes_last_pebble(self, reducer, hard_state):
        """5 left, user takes 1, Hard takes the remaining 4."""
        result = reducer.apply(hard_state, Action.turn(1))

        assert result.success
        assert result.new_state.pebbles_remaining == 0
        assert result.new_state.winner == Player.PROGRAM
        assert result.events == [Event.won(Player.PROGRAM)]

    def test_hard_reply_leaves_multiple(self, reducer, hard_state):
        hard_state.pebbles_remaining = 14
        result = reducer.apply(hard_state, Action.turn(2))

        # 12 after the user, 12 mod 5 = 2, so 10 after the computer
        assert result.new_state.pebbles_remaining == 10
        assert result.events[0].event_type == EventType.COUNTER_TURN
        assert result.events[0].pebbles_taken == 2

    def test_input_state_not_mutated(self, reducer, easy_state):
        reducer.apply(easy_state, Action.turn(2))
        assert easy_state.pebbles_remaining == 10

    def test_apply_action_helper(self, easy_state):
        result = apply_action(easy_state, Action.turn(1), SequenceRandomSource([1]))
        assert result.new_state.pebbles_remaining == 7


class TestGiveUp:
    """Tests for giving up and terminal sessions."""

    def test_give_up(self, reducer, easy_state):
        result = reducer.apply(easy_state, Action.give_up())

        assert result.success
        assert result.new_state.winner == Player.PROGRAM
        assert result.new_state.pebbles_remaining == 10
        assert result.new_state.phase == GamePhase.GAME_OVER
        assert result.events == [Event.won(Player.PROGRAM)]

    def test_give_up_after_game_over(self, reducer, easy_state):
        easy_state.winner = Player.PROGRAM
        result = reducer.apply(easy_state, Action.give_up())

        assert not result.success
        assert result.error_code == ErrorCode.GAME_OVER.value

    def test_turn_after_game_over_changes_nothing(self, reducer, easy_state):
        easy_state.winner = Player.PROGRAM
        result = reducer.apply(easy_state, Action.turn(1))

        assert not result.success
        assert result.error_code == ErrorCode.GAME_OVER.value
        assert easy_state.pebbles_remaining == 10

    def test_game_over_checked_first(self, reducer, easy_state):
        easy_state.winner = Player.USER
        result = reducer.apply(easy_state, Action.turn(0))
        assert result.error_code == ErrorCode.GAME_OVER.value
