"""Events emitted while an encounter progresses."""
from __future__ import annotations

from dataclasses import dataclass

from geoquest.core.types import AttackerRole, BattleOutcome


@dataclass(slots=True)
class BattleEvent:
    """Base battle event."""


@dataclass(slots=True)
class BattleStartedEvent(BattleEvent):
    encounter_id: str
    region_id: str
    enemy_name: str
    message: str


@dataclass(slots=True)
class AnswerJudgedEvent(BattleEvent):
    choice_index: int
    answer_index: int
    correct: bool


@dataclass(slots=True)
class AnswerRejectedEvent(BattleEvent):
    reason: str


@dataclass(slots=True)
class AttackResolvedEvent(BattleEvent):
    attacker: AttackerRole
    target_name: str
    damage: int
    target_hp: int
    target_max_hp: int


@dataclass(slots=True)
class EnemyCounterScheduledEvent(BattleEvent):
    encounter_id: str
    delay_ms: int


@dataclass(slots=True)
class BattleResolvedEvent(BattleEvent):
    outcome: BattleOutcome
    message: str


@dataclass(slots=True)
class MonsterCapturedEvent(BattleEvent):
    region_id: str
    monster_name: str
    newly_captured: bool
