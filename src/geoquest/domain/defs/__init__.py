"""Domain definition exports."""

from .monster_def import DatasetDef, MonsterDef
from .quiz_def import CHOICE_COUNT, CHOICE_LABELS, QuizDef

__all__ = [
    "CHOICE_COUNT",
    "CHOICE_LABELS",
    "DatasetDef",
    "MonsterDef",
    "QuizDef",
]
