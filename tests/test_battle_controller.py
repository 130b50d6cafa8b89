"""Battle controller is UI-agnostic and drives the counter through the scheduler."""
from __future__ import annotations

from pathlib import Path

import pytest

from geoquest.core.scheduler import ManualScheduler
from geoquest.data.repositories import MonstersRepository
from geoquest.services import BattleAction, BattleController, BattleService, ProgressTracker
from geoquest.services.battle_events import AttackResolvedEvent
from tests.helpers.dataset_builders import raw_monster, write_dataset


def _build_battle_controller(tmp_path: Path, **monster_overrides) -> tuple[BattleController, BattleService]:
    write_dataset(tmp_path, {"Kyoto": raw_monster(**monster_overrides)})
    scheduler = ManualScheduler()
    service = BattleService(MonstersRepository(base_path=tmp_path), ProgressTracker(), scheduler)
    service.start_battle("Kyoto")
    return BattleController(service, scheduler), service


def test_available_action_for_quiz_monster(tmp_path: Path) -> None:
    controller, _ = _build_battle_controller(tmp_path)
    assert controller.available_action() == "answer"


def test_available_action_for_fallback_monster(tmp_path: Path) -> None:
    controller, _ = _build_battle_controller(tmp_path, quizzes=[])
    assert controller.available_action() == "attack"
    controller.apply_player_action(BattleAction(action_type="attack"))
    assert controller.get_battle_view().enemy_hp == controller.get_battle_view().enemy_max_hp - 1


def test_settle_lands_counter_and_returns_events(tmp_path: Path) -> None:
    controller, service = _build_battle_controller(tmp_path)
    controller.apply_player_action(BattleAction(action_type="answer", choice_index=1))
    assert controller.available_action() is None

    events = controller.settle()

    assert any(isinstance(event, AttackResolvedEvent) and event.attacker == "enemy" for event in events)
    assert service.active_battle.player_hp == 4
    assert controller.available_action() == "answer"


def test_answer_action_requires_choice(tmp_path: Path) -> None:
    controller, _ = _build_battle_controller(tmp_path)
    with pytest.raises(ValueError):
        controller.apply_player_action(BattleAction(action_type="answer"))


def test_unknown_action_type_raises(tmp_path: Path) -> None:
    controller, _ = _build_battle_controller(tmp_path)
    with pytest.raises(ValueError):
        controller.apply_player_action(BattleAction(action_type="flee"))  # type: ignore[arg-type]


def test_is_over_after_loss(tmp_path: Path) -> None:
    controller, _ = _build_battle_controller(tmp_path, difficulty=5)
    for _ in range(3):
        controller.apply_player_action(BattleAction(action_type="answer", choice_index=0))
    assert controller.is_over()
    assert controller.available_action() is None
