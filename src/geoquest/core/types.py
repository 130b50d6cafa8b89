"""Shared type aliases for the core and domain layers."""
from typing import Literal

AttackerRole = Literal["player", "enemy"]
BattleOutcome = Literal["win", "lose"]
Scene = Literal["title", "name", "map", "battle", "result", "dex"]

__all__ = ["AttackerRole", "BattleOutcome", "Scene"]
