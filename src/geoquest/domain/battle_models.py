"""Battle domain models."""
from __future__ import annotations

from dataclasses import dataclass

from geoquest.core.types import BattleOutcome
from geoquest.domain.defs import MonsterDef, QuizDef

# Marks an encounter that runs without quizzes.
NO_QUIZ_INDEX = -1


@dataclass(frozen=True, slots=True)
class BattleState:
    """Snapshot of one encounter. Transitions produce new snapshots."""

    encounter_id: str
    region_id: str
    enemy: MonsterDef
    enemy_hp: int
    enemy_max_hp: int
    player_hp: int
    player_max_hp: int
    quiz_index: int
    last_message: str
    finished: BattleOutcome | None = None
    answered: bool = False
    captured_visual: bool = False

    @property
    def is_over(self) -> bool:
        return self.finished is not None

    @property
    def is_fallback_mode(self) -> bool:
        return self.quiz_index == NO_QUIZ_INDEX

    @property
    def current_quiz(self) -> QuizDef | None:
        if self.is_fallback_mode:
            return None
        return self.enemy.quizzes[self.quiz_index]

    def next_quiz_index(self) -> int:
        """Index of the following quiz, wrapping so quizzes repeat."""
        if self.is_fallback_mode:
            return NO_QUIZ_INDEX
        return (self.quiz_index + 1) % len(self.enemy.quizzes)
