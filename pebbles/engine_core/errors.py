"""
Engine Errors - Caller errors raised by the pebbles engine.

Every error is detected synchronously before any state is mutated.
The reducer converts them into ActionResult failures; configuration
and query paths raise them directly.
"""

from __future__ import annotations
from enum import Enum


class ErrorCode(str, Enum):
    """Machine-readable error codes."""
    NOT_INITIALIZED = "NOT_INITIALIZED"
    INVALID_MOVE = "INVALID_MOVE"
    INSUFFICIENT_PEBBLES = "INSUFFICIENT_PEBBLES"
    DEGENERATE_CONFIGURATION = "DEGENERATE_CONFIGURATION"
    GAME_OVER = "GAME_OVER"
    INTERNAL_ERROR = "INTERNAL_ERROR"


class PebblesError(Exception):
    """Base class for all engine errors."""
    code: ErrorCode

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class NotInitializedError(PebblesError):
    """An operation other than create was invoked before a session exists."""
    code = ErrorCode.NOT_INITIALIZED

    def __init__(self, message: str = "Game state is not initialized"):
        super().__init__(message)


class InvalidMoveError(PebblesError):
    """Turn takes zero pebbles or more than the per-turn cap."""
    code = ErrorCode.INVALID_MOVE


class InsufficientPebblesError(PebblesError):
    """Turn takes more pebbles than remain in the pile."""
    code = ErrorCode.INSUFFICIENT_PEBBLES


class DegenerateConfigurationError(PebblesError):
    """Game settings that cannot produce a well-formed game."""
    code = ErrorCode.DEGENERATE_CONFIGURATION


class GameOverError(PebblesError):
    """Turn or give-up on a session that already has a winner."""
    code = ErrorCode.GAME_OVER
