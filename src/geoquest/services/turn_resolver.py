"""Pure turn transitions for an encounter.

Every function takes the current ``BattleState`` and returns a ``TurnResult``
holding the next state, the events describing what happened, and an optional
request to schedule the delayed enemy counter. Nothing here touches clocks or
the collection log; ``BattleService`` carries out those side effects.

Quiz mode timing is asymmetric: a correct answer that leaves the enemy
standing locks input and asks for a delayed counter, while a wrong answer is
punished immediately and leaves input open.
"""
from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import List, Tuple

from geoquest.domain.battle_models import BattleState
from geoquest.domain.damage import FALLBACK_ATTACK_DAMAGE, calc_damage
from geoquest.domain.defs import CHOICE_COUNT
from geoquest.domain.enemy_scaling import clamp
from geoquest.services.battle_events import (
    AnswerJudgedEvent,
    AnswerRejectedEvent,
    AttackResolvedEvent,
    BattleEvent,
    BattleResolvedEvent,
    EnemyCounterScheduledEvent,
)

COUNTER_DELAY_MS = 550


@dataclass(frozen=True, slots=True)
class TurnResult:
    """Outcome of a single transition."""

    state: BattleState
    events: List[BattleEvent] = field(default_factory=list)
    counter_delay_ms: int | None = None

    @property
    def schedules_counter(self) -> bool:
        return self.counter_delay_ms is not None


def resolve_answer(
    state: BattleState,
    choice_index: int | None,
    *,
    counter_delay_ms: int = COUNTER_DELAY_MS,
) -> TurnResult:
    """Apply a player action. In fallback mode ``choice_index`` is ignored."""
    if state.is_over:
        return TurnResult(state)
    if state.answered:
        return TurnResult(state, [AnswerRejectedEvent(reason="awaiting_counter")])
    if state.is_fallback_mode:
        return _resolve_fallback_attack(state)

    quiz = state.current_quiz
    assert quiz is not None
    if choice_index is None or not 0 <= choice_index < CHOICE_COUNT:
        raise ValueError(f"Choice index must be between 0 and {CHOICE_COUNT - 1}.")

    judged = AnswerJudgedEvent(
        choice_index=choice_index,
        answer_index=quiz.answer_index,
        correct=quiz.is_correct(choice_index),
    )
    if judged.correct:
        return _resolve_correct_answer(state, judged, counter_delay_ms)
    next_state, events = _enemy_attack(state, prefix="Wrong... ")
    return TurnResult(next_state, [judged, *events])


def resolve_enemy_counter(state: BattleState) -> TurnResult:
    """Run the delayed counter against the state as it is when the timer fires."""
    if state.is_over or not state.answered:
        return TurnResult(state)
    next_state, events = _enemy_attack(state, prefix="")
    return TurnResult(next_state, events)


def _resolve_fallback_attack(state: BattleState) -> TurnResult:
    name = state.enemy.name
    damage = FALLBACK_ATTACK_DAMAGE
    enemy_hp = clamp(state.enemy_hp - damage, 0, state.enemy_max_hp)
    attack = _player_attack_event(state, damage, enemy_hp)
    if enemy_hp <= 0:
        message = f"{name} was defeated!"
        next_state = replace(
            state, enemy_hp=enemy_hp, last_message=message, finished="win", captured_visual=True
        )
        return TurnResult(next_state, [attack, BattleResolvedEvent(outcome="win", message=message)])
    next_state = replace(state, enemy_hp=enemy_hp, last_message=f"{name} took {damage} damage!")
    return TurnResult(next_state, [attack])


def _resolve_correct_answer(
    state: BattleState, judged: AnswerJudgedEvent, counter_delay_ms: int
) -> TurnResult:
    name = state.enemy.name
    damage = calc_damage("player", state.enemy.difficulty)
    enemy_hp = clamp(state.enemy_hp - damage, 0, state.enemy_max_hp)
    attack = _player_attack_event(state, damage, enemy_hp)
    if enemy_hp <= 0:
        message = f"Correct! {name} was defeated!"
        next_state = replace(
            state, enemy_hp=enemy_hp, last_message=message, finished="win", captured_visual=True
        )
        return TurnResult(next_state, [judged, attack, BattleResolvedEvent(outcome="win", message=message)])

    next_state = replace(
        state,
        enemy_hp=enemy_hp,
        last_message=f"Correct! {name} took {damage} damage!",
        answered=True,
    )
    scheduled = EnemyCounterScheduledEvent(encounter_id=state.encounter_id, delay_ms=counter_delay_ms)
    return TurnResult(next_state, [judged, attack, scheduled], counter_delay_ms=counter_delay_ms)


def _enemy_attack(state: BattleState, *, prefix: str) -> Tuple[BattleState, List[BattleEvent]]:
    name = state.enemy.name
    damage = calc_damage("enemy", state.enemy.difficulty)
    player_hp = clamp(state.player_hp - damage, 0, state.player_max_hp)
    lost = player_hp <= 0
    if lost:
        message = f"{prefix}{name} attacks! You were defeated..."
    else:
        message = f"{prefix}{name} attacks! You took {damage} damage..."
    next_state = replace(
        state,
        player_hp=player_hp,
        last_message=message,
        finished="lose" if lost else None,
        answered=False,
        quiz_index=state.next_quiz_index(),
    )
    events: List[BattleEvent] = [
        AttackResolvedEvent(
            attacker="enemy",
            target_name="player",
            damage=damage,
            target_hp=player_hp,
            target_max_hp=state.player_max_hp,
        )
    ]
    if lost:
        events.append(BattleResolvedEvent(outcome="lose", message=message))
    return next_state, events


def _player_attack_event(state: BattleState, damage: int, enemy_hp: int) -> AttackResolvedEvent:
    return AttackResolvedEvent(
        attacker="player",
        target_name=state.enemy.name,
        damage=damage,
        target_hp=enemy_hp,
        target_max_hp=state.enemy_max_hp,
    )
