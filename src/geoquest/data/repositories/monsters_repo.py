"""Monsters repository: validates the dataset and defaults each monster."""
from __future__ import annotations

import logging
import math
from pathlib import Path
from typing import Dict, List, Tuple

from geoquest.data.dataset_validator import ensure_valid_dataset
from geoquest.data.paths import DATASET_FILENAME
from geoquest.data.repositories.base import RepositoryBase
from geoquest.domain.defs import CHOICE_COUNT, DatasetDef, MonsterDef, QuizDef
from geoquest.domain.enemy_scaling import (
    DEFAULT_BASE_HP,
    DEFAULT_DIFFICULTY,
    MAX_ENEMY_HP,
    MIN_ENEMY_HP,
    clamp,
    clamp_difficulty,
)

logger = logging.getLogger(__name__)


class MonstersRepository(RepositoryBase[MonsterDef]):
    """Loads the quiz dataset and exposes one monster per region."""

    def __init__(self, base_path: Path | str | None = None, filename: str = DATASET_FILENAME) -> None:
        super().__init__(filename, base_path)
        self._version: float | None = None

    @classmethod
    def from_path(cls, dataset_path: Path | str) -> "MonstersRepository":
        """Build a repository reading an explicit dataset file."""
        path = Path(dataset_path)
        return cls(base_path=path.parent, filename=path.name)

    def _build(self, raw: object) -> Dict[str, MonsterDef]:
        document = ensure_valid_dataset(raw)
        self._version = document["version"]  # type: ignore[assignment]
        raw_monsters = document["monsters"]
        assert isinstance(raw_monsters, dict)

        monsters: Dict[str, MonsterDef] = {}
        for region_id, payload in raw_monsters.items():
            monsters[str(region_id)] = self._build_monster(str(region_id), payload)
        logger.info("Loaded dataset version %s with %d monsters", self._version, len(monsters))
        return monsters

    def region_ids(self) -> List[str]:
        """Return region ids in the order the dataset lists them."""
        return self.ids()

    def dataset(self) -> DatasetDef:
        self._ensure_loaded()
        assert self._definitions is not None and self._version is not None
        return DatasetDef(version=self._version, monsters=dict(self._definitions))

    def _build_monster(self, region_id: str, payload: object) -> MonsterDef:
        data = payload if isinstance(payload, dict) else {}
        if not isinstance(payload, dict):
            logger.warning("Monster '%s' is not an object; using defaults", region_id)
        difficulty = self._coerce_int(data.get("difficulty"), DEFAULT_DIFFICULTY)
        hp = self._coerce_int(data.get("hp"), DEFAULT_BASE_HP)
        return MonsterDef(
            id=region_id,
            name=self._coerce_str(data.get("name"), region_id),
            species=self._coerce_str(data.get("species"), ""),
            image=self._coerce_str(data.get("image"), ""),
            desc=self._coerce_str(data.get("desc"), ""),
            difficulty=clamp_difficulty(difficulty),
            hp=clamp(hp, MIN_ENEMY_HP, MAX_ENEMY_HP),
            quizzes=self._build_quizzes(region_id, data.get("quizzes")),
        )

    def _build_quizzes(self, region_id: str, value: object) -> Tuple[QuizDef, ...]:
        if not isinstance(value, list):
            return ()
        quizzes: List[QuizDef] = []
        for index, entry in enumerate(value):
            quiz = self._build_quiz(entry)
            if quiz is None:
                logger.warning("Dropping malformed quiz %d for monster '%s'", index, region_id)
                continue
            quizzes.append(quiz)
        return tuple(quizzes)

    @staticmethod
    def _build_quiz(entry: object) -> QuizDef | None:
        if not isinstance(entry, dict):
            return None
        question = entry.get("q")
        choices = entry.get("c")
        answer = entry.get("a")
        if not isinstance(question, str):
            return None
        if not isinstance(choices, list) or len(choices) != CHOICE_COUNT:
            return None
        if not all(isinstance(choice, str) for choice in choices):
            return None
        if isinstance(answer, bool) or not isinstance(answer, int) or not 0 <= answer < CHOICE_COUNT:
            return None
        hint = entry.get("hint")
        return QuizDef(
            question=question,
            choices=(choices[0], choices[1], choices[2], choices[3]),
            answer_index=answer,
            hint=hint if isinstance(hint, str) and hint else None,
        )

    @staticmethod
    def _coerce_str(value: object, default: str) -> str:
        return value if isinstance(value, str) else default

    @staticmethod
    def _coerce_int(value: object, default: int) -> int:
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            return default
        if isinstance(value, float) and not math.isfinite(value):
            return default
        return int(value)
