"""Repository exports."""

from .monsters_repo import MonstersRepository

__all__ = [
    "MonstersRepository",
]
