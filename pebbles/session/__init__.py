"""
Session Module - Owns the one live game.

A session is:
- Created by initialize()
- Mutated only when an action succeeds
- Replaced wholesale on restart

The only persistence is a single JSON snapshot of the current state.
"""

from .engine import GameEngine
from .storage import SnapshotStore, DEFAULT_STATE_PATH

__all__ = [
    "GameEngine",
    "SnapshotStore",
    "DEFAULT_STATE_PATH",
]
