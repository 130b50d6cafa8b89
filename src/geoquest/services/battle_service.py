"""Battle service owning the active encounter and its delayed enemy counter."""
from __future__ import annotations

import itertools
import logging
from dataclasses import dataclass
from typing import List, Tuple

from geoquest.core.scheduler import ScheduledCall, Scheduler
from geoquest.core.types import BattleOutcome
from geoquest.data.repositories import MonstersRepository
from geoquest.domain.battle_models import BattleState
from geoquest.domain.defs import CHOICE_LABELS
from geoquest.services.battle_events import (
    BattleEvent,
    BattleResolvedEvent,
    BattleStartedEvent,
    MonsterCapturedEvent,
)
from geoquest.services.factories import create_encounter, make_instance_id
from geoquest.services.progress_service import ProgressTracker
from geoquest.services.turn_resolver import (
    COUNTER_DELAY_MS,
    TurnResult,
    resolve_answer,
    resolve_enemy_counter,
)

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class QuizView:
    """Presentation view for the quiz currently being asked."""

    question: str
    choices: List[Tuple[str, str]]
    hint: str | None


@dataclass(slots=True)
class BattleView:
    """Presentation view for the current battle state."""

    encounter_id: str
    region_id: str
    enemy_name: str
    species: str
    difficulty: int
    image: str
    enemy_hp: int
    enemy_max_hp: int
    player_hp: int
    player_max_hp: int
    message: str
    quiz: QuizView | None
    can_answer: bool
    finished: BattleOutcome | None
    captured_visual: bool


class BattleService:
    """Runs one encounter at a time against monsters from the dataset.

    Turn logic lives in ``turn_resolver``; this class applies its results,
    owns the single pending counter timer, and records captures. Events from
    delayed counters are buffered until ``drain_events`` is called.
    """

    def __init__(
        self,
        monsters_repo: MonstersRepository,
        progress: ProgressTracker,
        scheduler: Scheduler,
        *,
        counter_delay_ms: int = COUNTER_DELAY_MS,
    ) -> None:
        self._monsters_repo = monsters_repo
        self._progress = progress
        self._scheduler = scheduler
        self._counter_delay_ms = counter_delay_ms
        self._encounter_ids = itertools.count(1)
        self._battle: BattleState | None = None
        self._pending_counter: ScheduledCall | None = None
        self._deferred_events: List[BattleEvent] = []

    # -----------------------
    # Battle Lifecycle
    # -----------------------
    @property
    def active_battle(self) -> BattleState | None:
        return self._battle

    def start_battle(self, region_id: str) -> tuple[BattleState, List[BattleEvent]]:
        """Open a new encounter, invalidating whatever was running before."""
        self._cancel_pending_counter()
        self._deferred_events.clear()
        battle_state = create_encounter(
            region_id,
            self._monsters_repo,
            encounter_id=make_instance_id("encounter", self._encounter_ids),
        )
        self._battle = battle_state
        logger.info("Encounter %s started in region '%s'", battle_state.encounter_id, region_id)
        events: List[BattleEvent] = [
            BattleStartedEvent(
                encounter_id=battle_state.encounter_id,
                region_id=region_id,
                enemy_name=battle_state.enemy.name,
                message=battle_state.last_message,
            )
        ]
        return battle_state, events

    def retry_battle(self) -> tuple[BattleState, List[BattleEvent]]:
        """Restart against the same region as the current or last encounter."""
        if self._battle is None:
            raise ValueError("No encounter to retry.")
        return self.start_battle(self._battle.region_id)

    def abandon_battle(self) -> None:
        """Drop the active encounter; a pending counter will never land."""
        self._cancel_pending_counter()
        self._deferred_events.clear()
        self._battle = None

    # -----------------------
    # Player Actions
    # -----------------------
    def answer(self, choice_index: int | None) -> List[BattleEvent]:
        """Submit a quiz choice (or any action in fallback mode)."""
        if self._battle is None:
            return []
        result = resolve_answer(self._battle, choice_index, counter_delay_ms=self._counter_delay_ms)
        return self._apply(result)

    def is_awaiting_counter(self) -> bool:
        return self._battle is not None and self._battle.answered

    def has_pending_counter(self) -> bool:
        return self._pending_counter is not None and self._pending_counter.pending

    def drain_events(self) -> List[BattleEvent]:
        """Return and clear events produced by delayed counters."""
        events = self._deferred_events
        self._deferred_events = []
        return events

    def get_battle_view(self) -> BattleView | None:
        """Return structured information for rendering."""
        battle_state = self._battle
        if battle_state is None:
            return None
        enemy = battle_state.enemy
        quiz = battle_state.current_quiz
        quiz_view = None
        if quiz is not None:
            quiz_view = QuizView(
                question=quiz.question,
                choices=list(zip(CHOICE_LABELS, quiz.choices)),
                hint=quiz.hint,
            )
        return BattleView(
            encounter_id=battle_state.encounter_id,
            region_id=battle_state.region_id,
            enemy_name=enemy.name,
            species=enemy.species,
            difficulty=enemy.difficulty,
            image=enemy.image,
            enemy_hp=battle_state.enemy_hp,
            enemy_max_hp=battle_state.enemy_max_hp,
            player_hp=battle_state.player_hp,
            player_max_hp=battle_state.player_max_hp,
            message=battle_state.last_message,
            quiz=quiz_view,
            can_answer=not battle_state.is_over and not battle_state.answered,
            finished=battle_state.finished,
            captured_visual=battle_state.captured_visual,
        )

    # -----------------------
    # Helpers
    # -----------------------
    def _apply(self, result: TurnResult) -> List[BattleEvent]:
        self._battle = result.state
        events = list(result.events)
        for event in result.events:
            if isinstance(event, BattleResolvedEvent):
                events.extend(self._on_resolved(result.state, event))
        if result.counter_delay_ms is not None:
            self._schedule_counter(result.state.encounter_id, result.counter_delay_ms)
        return events

    def _on_resolved(self, battle_state: BattleState, event: BattleResolvedEvent) -> List[BattleEvent]:
        logger.info("Encounter %s ended: %s", battle_state.encounter_id, event.outcome)
        if event.outcome != "win":
            return []
        newly_captured = self._progress.capture(battle_state.region_id)
        return [
            MonsterCapturedEvent(
                region_id=battle_state.region_id,
                monster_name=battle_state.enemy.name,
                newly_captured=newly_captured,
            )
        ]

    def _schedule_counter(self, encounter_id: str, delay_ms: int) -> None:
        self._cancel_pending_counter()
        logger.debug("Scheduling enemy counter for %s in %d ms", encounter_id, delay_ms)
        self._pending_counter = self._scheduler.schedule(
            lambda: self._fire_counter(encounter_id), delay_ms
        )

    def _fire_counter(self, encounter_id: str) -> None:
        battle_state = self._battle
        if battle_state is None or battle_state.encounter_id != encounter_id:
            logger.debug("Ignoring enemy counter for stale encounter %s", encounter_id)
            return
        self._pending_counter = None
        self._deferred_events.extend(self._apply(resolve_enemy_counter(battle_state)))

    def _cancel_pending_counter(self) -> None:
        if self._pending_counter is not None and self._pending_counter.cancel():
            logger.debug("Cancelled pending enemy counter")
        self._pending_counter = None
