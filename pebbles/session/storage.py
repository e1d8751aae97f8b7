"""Save and load the single current game snapshot as a local JSON file."""

from __future__ import annotations

import json
import logging
from pathlib import Path

from ..engine_core.state import GameState

LOGGER = logging.getLogger(__name__)
DEFAULT_STATE_PATH = Path("pebbles_state.json")


class SnapshotStore:
    """One JSON file holding one GameState. No history is kept."""

    def __init__(self, path: Path | str = DEFAULT_STATE_PATH):
        self.path = Path(path)

    def exists(self) -> bool:
        return self.path.exists()

    def load(self) -> GameState | None:
        """
        Read the snapshot, or None if no file exists yet.

        Raises:
            ValueError: the file is not valid JSON
            DegenerateConfigurationError: the snapshot breaks an invariant
        """
        if not self.path.exists():
            return None
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except json.JSONDecodeError as exc:
            raise ValueError(f"Corrupt snapshot in {self.path}: {exc}") from exc
        LOGGER.debug("Loaded snapshot from %s", self.path)
        return GameState.from_dict(data)

    def save(self, state: GameState) -> None:
        """Overwrite the snapshot atomically (write temp file, then rename)."""
        tmp_path = self.path.with_name(self.path.name + ".tmp")
        tmp_path.write_text(json.dumps(state.to_dict(), indent=2), encoding="utf-8")
        tmp_path.replace(self.path)
        LOGGER.debug("Saved snapshot to %s", self.path)

    def clear(self) -> None:
        if self.path.exists():
            self.path.unlink()
