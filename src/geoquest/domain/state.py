"""Session-level state tracking."""
from __future__ import annotations

from dataclasses import dataclass

from geoquest.core.types import Scene

DEFAULT_PLAYER_LABEL = "Player"
MAX_NAME_LENGTH = 16


@dataclass
class GameState:
    """Minimal session storage for the console front end."""

    player_name: str = ""
    scene: Scene = "title"

    @property
    def display_name(self) -> str:
        return self.player_name.strip() or DEFAULT_PLAYER_LABEL
