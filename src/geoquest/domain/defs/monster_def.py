"""Monster and dataset definition structures."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Mapping, Tuple

from .quiz_def import QuizDef


@dataclass(frozen=True, slots=True)
class MonsterDef:
    """Fully defaulted monster record for one region."""

    id: str
    name: str
    species: str
    image: str
    desc: str
    difficulty: int
    hp: int
    quizzes: Tuple[QuizDef, ...] = ()

    @property
    def has_quizzes(self) -> bool:
        return bool(self.quizzes)


@dataclass(frozen=True, slots=True)
class DatasetDef:
    """Version plus the region id -> monster mapping, in document order."""

    version: float
    monsters: Mapping[str, MonsterDef] = field(default_factory=dict)
