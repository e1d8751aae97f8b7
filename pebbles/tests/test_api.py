"""
Tests for the message layer.

Tests:
- GameService create / handle / query
- Raw JSON action parsing
- Error codes surfaced to the caller
- Schema validation
"""

import pytest
from pydantic import ValidationError

from ..api.schemas import (
    CreateRequest,
    TurnAction,
    GiveUpAction,
    RestartAction,
    ErrorResponse,
    GameStateResponse,
    DifficultyLevel,
    PlayerSide,
    GamePhaseValue,
    EventKind,
    ErrorCode,
)
from ..api.service import GameService, to_action
from ..engine_core.action import ActionType
from ..engine_core.errors import ErrorCode as EngineErrorCode
from ..engine_core.random_source import SequenceRandomSource
from ..session import GameEngine


@pytest.fixture
def service():
    """Service whose random source always rolls 0 (user first, Easy takes 1)."""
    return GameService(engine=GameEngine(rng=SequenceRandomSource([0])))


@pytest.fixture
def started(service):
    response = service.create(
        CreateRequest(pebbles_count=10, max_pebbles_per_turn=4, difficulty="easy")
    )
    assert response.success
    return service


class TestGameService:
    """Tests for GameService."""

    def test_create(self, service):
        response = service.create(
            CreateRequest(pebbles_count=10, max_pebbles_per_turn=4)
        )

        assert response.success
        assert response.events == []
        assert response.state.pebbles_remaining == 10
        assert response.state.difficulty == DifficultyLevel.EASY
        assert response.state.first_player == PlayerSide.USER
        assert response.state.phase == GamePhaseValue.ACTIVE

    def test_create_with_opening_move(self):
        service = GameService(engine=GameEngine(rng=SequenceRandomSource([1])))
        response = service.create(
            CreateRequest(pebbles_count=7, max_pebbles_per_turn=4, difficulty="hard")
        )

        assert response.events[0].event == EventKind.COUNTER_TURN
        assert response.events[0].pebbles_taken == 2
        assert response.state.pebbles_remaining == 5

    def test_create_degenerate(self, service):
        response = service.create(
            CreateRequest(pebbles_count=10, max_pebbles_per_turn=0)
        )

        assert not response.success
        assert response.error_code == ErrorCode.DEGENERATE_CONFIGURATION
        assert isinstance(service.query(), ErrorResponse)

    def test_query_before_create(self, service):
        response = service.query()

        assert isinstance(response, ErrorResponse)
        assert response.error_code == ErrorCode.NOT_INITIALIZED

    def test_turn(self, started):
        response = started.handle(TurnAction(pebbles_taken=2))

        assert response.success
        assert [e.event for e in response.events] == [EventKind.COUNTER_TURN]
        assert response.events[0].pebbles_taken == 1
        assert started.query().pebbles_remaining == 7

    def test_invalid_turn(self, started):
        response = started.handle(TurnAction(pebbles_taken=0))

        assert not response.success
        assert response.error_code == ErrorCode.INVALID_MOVE
        assert response.events == []
        assert response.state is None
        assert started.query().pebbles_remaining == 10

    def test_give_up(self, started):
        response = started.handle(GiveUpAction())

        assert response.events[0].event == EventKind.WON
        assert response.events[0].winner == PlayerSide.PROGRAM
        assert started.query().phase == GamePhaseValue.GAME_OVER

    def test_give_up_twice(self, started):
        started.handle(GiveUpAction())
        response = started.handle(GiveUpAction())

        assert not response.success
        assert response.error_code == ErrorCode.GAME_OVER

    def test_restart(self, started):
        started.handle(GiveUpAction())
        response = started.handle(
            RestartAction(difficulty="hard", pebbles_count=15, max_pebbles_per_turn=10)
        )

        assert response.success
        state = started.query()
        assert state.pebbles_count == 15
        assert state.max_pebbles_per_turn == 10
        assert state.difficulty == DifficultyLevel.HARD
        assert state.winner is None


class TestRawMessages:
    """Tests for handle_json."""

    def test_turn_message(self, started):
        response = started.handle_json('{"action": "turn", "pebbles_taken": 3}')
        assert response.success
        assert started.query().pebbles_remaining == 6

    def test_give_up_message(self, started):
        response = started.handle_json('{"action": "give_up"}')
        assert response.events[0].winner == PlayerSide.PROGRAM

    def test_restart_message(self, started):
        response = started.handle_json(
            '{"action": "restart", "difficulty": "hard",'
            ' "pebbles_count": 15, "max_pebbles_per_turn": 10}'
        )
        assert response.success
        assert response.state.difficulty == DifficultyLevel.HARD

    @pytest.mark.parametrize("payload", [
        '{"action": "dance"}',
        '{"action": "turn"}',
        '{"action": "turn", "pebbles_taken": -2}',
        'not json',
    ])
    def test_malformed_message(self, started, payload):
        response = started.handle_json(payload)

        assert isinstance(response, ErrorResponse)
        assert response.error_code == ErrorCode.VALIDATION_ERROR
        assert response.details["errors"]
        assert started.query().pebbles_remaining == 10

    def test_message_before_create(self, service):
        response = service.handle_json('{"action": "give_up"}')
        assert response.error_code == ErrorCode.NOT_INITIALIZED

    @pytest.mark.parametrize("code", list(EngineErrorCode))
    def test_every_engine_code_is_reportable(self, code):
        assert ErrorCode(code.value).value == code.value


class TestSchemas:
    """Tests for schema validation and conversion."""

    def test_negative_counts_rejected(self):
        with pytest.raises(ValidationError):
            CreateRequest(pebbles_count=-1, max_pebbles_per_turn=3)

    def test_u32_upper_bound(self):
        with pytest.raises(ValidationError):
            TurnAction(pebbles_taken=2**32)

    def test_unknown_difficulty(self):
        with pytest.raises(ValidationError):
            RestartAction(difficulty="medium", pebbles_count=5, max_pebbles_per_turn=2)

    def test_state_serializes_to_values(self):
        state = GameStateResponse(
            pebbles_count=10,
            max_pebbles_per_turn=4,
            pebbles_remaining=3,
            difficulty="hard",
            first_player="program",
            winner=None,
            phase="active",
        )
        data = state.model_dump(mode="json")
        assert data["difficulty"] == "hard"
        assert data["first_player"] == "program"
        assert data["winner"] is None

    def test_to_action(self):
        action = to_action(
            RestartAction(difficulty="easy", pebbles_count=8, max_pebbles_per_turn=2)
        )
        assert action.action_type == ActionType.RESTART
        assert action.pebbles_count == 8
        assert to_action(GiveUpAction()).action_type == ActionType.GIVE_UP
