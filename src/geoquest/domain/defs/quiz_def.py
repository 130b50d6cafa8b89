"""Quiz definition structures."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

CHOICE_COUNT = 4
CHOICE_LABELS = ("A", "B", "C", "D")


@dataclass(frozen=True, slots=True)
class QuizDef:
    """Four-choice question attached to a monster."""

    question: str
    choices: Tuple[str, str, str, str]
    answer_index: int
    hint: str | None = None

    def is_correct(self, choice_index: int) -> bool:
        return choice_index == self.answer_index
