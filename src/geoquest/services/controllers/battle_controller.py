"""UI-agnostic battle controller that separates state progression from rendering."""
from __future__ import annotations

from dataclasses import dataclass
from typing import List, Literal

from geoquest.core.scheduler import Scheduler
from geoquest.services.battle_events import BattleEvent
from geoquest.services.battle_service import BattleService, BattleView

BattleActionType = Literal["answer", "attack"]


@dataclass(slots=True)
class BattleAction:
    """Represents a structured action decision from the player."""

    action_type: BattleActionType
    choice_index: int | None = None


class BattleController:
    """
    UI-agnostic controller for battle state progression.

    Wraps BattleService and exposes only structured state and actions. It does
    NOT render, format text, or prompt for input.

    Responsibilities:
    - Pick the action kind the current encounter accepts (quiz or plain attack)
    - Apply player actions and return events
    - Let the delayed enemy counter land and hand back its events
    """

    def __init__(self, battle_service: BattleService, scheduler: Scheduler) -> None:
        self._service = battle_service
        self._scheduler = scheduler

    def get_battle_view(self) -> BattleView | None:
        return self._service.get_battle_view()

    def available_action(self) -> BattleActionType | None:
        """Return the action the player can take right now, if any."""
        view = self._service.get_battle_view()
        if view is None or not view.can_answer:
            return None
        return "answer" if view.quiz is not None else "attack"

    def is_over(self) -> bool:
        battle_state = self._service.active_battle
        return battle_state is not None and battle_state.is_over

    def apply_player_action(self, action: BattleAction) -> List[BattleEvent]:
        """Apply a player action and return the resulting events."""
        if action.action_type == "answer":
            if action.choice_index is None:
                raise ValueError("Answer action requires choice_index.")
            return self._service.answer(action.choice_index)
        if action.action_type == "attack":
            return self._service.answer(None)
        raise ValueError(f"Unknown action type: {action.action_type}")

    def settle(self) -> List[BattleEvent]:
        """Let a pending enemy counter land and return its events."""
        self._scheduler.wait_until_idle()
        return self._service.drain_events()
