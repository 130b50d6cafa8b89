"""Console-driven UI loops for GeoQuest."""
from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Dict, List

from geoquest.core.scheduler import RealtimeScheduler, Scheduler
from geoquest.core.types import BattleOutcome
from geoquest.data import DataError, get_dataset_path
from geoquest.data.repositories import MonstersRepository
from geoquest.domain.defs import CHOICE_LABELS
from geoquest.domain.state import MAX_NAME_LENGTH, GameState
from geoquest.presentation.cli import config
from geoquest.presentation.cli.dex_store import DexStore
from geoquest.presentation.cli.render import (
    debug_enabled,
    format_hp_bar,
    render_bullet_lines,
    render_heading,
    render_menu,
)
from geoquest.services import (
    BattleAction,
    BattleController,
    BattleService,
    BattleView,
    MapService,
    ProgressTracker,
)
from geoquest.services.battle_events import (
    AnswerJudgedEvent,
    AnswerRejectedEvent,
    AttackResolvedEvent,
    BattleEvent,
    BattleResolvedEvent,
    BattleStartedEvent,
    EnemyCounterScheduledEvent,
    MonsterCapturedEvent,
)

TITLE = "GeoQuest"


@dataclass(slots=True)
class AppContext:
    """Everything the UI loops need, wired once at startup."""

    monsters_repo: MonstersRepository
    progress: ProgressTracker
    dex_store: DexStore
    battle_service: BattleService
    controller: BattleController
    map_service: MapService
    settings: Dict[str, str]
    config_path: Path | None = None


def main() -> int:
    """Start the interactive CLI session. Returns a process exit code."""
    settings = config.load_config()
    try:
        context = build_context(settings)
    except DataError as exc:
        print(f"=== {TITLE} ===")
        print("Could not load the quiz dataset.")
        print(str(exc))
        return 1
    run_session(context, GameState(player_name=settings.get("player_name", "")))
    print("Goodbye!")
    return 0


def build_context(
    settings: Dict[str, str],
    *,
    scheduler: Scheduler | None = None,
    dex_store: DexStore | None = None,
    config_path: Path | None = None,
) -> AppContext:
    """Load the dataset and wire services. Raises DataError if the dataset is unusable."""
    monsters_repo = MonstersRepository.from_path(get_dataset_path(settings.get("data_path") or None))
    monsters_repo.region_ids()
    dex_store = dex_store or DexStore()
    progress = dex_store.load()
    scheduler = scheduler or RealtimeScheduler()
    battle_service = BattleService(monsters_repo, progress, scheduler)
    return AppContext(
        monsters_repo=monsters_repo,
        progress=progress,
        dex_store=dex_store,
        battle_service=battle_service,
        controller=BattleController(battle_service, scheduler),
        map_service=MapService(monsters_repo, progress),
        settings=settings,
        config_path=config_path,
    )


def run_session(context: AppContext, state: GameState) -> None:
    """Drive the scene loop until the player quits from the title screen."""
    while True:
        if state.scene == "title":
            if not _title_loop(context, state):
                return
        elif state.scene == "name":
            _name_entry(context, state)
        elif state.scene == "map":
            _map_loop(context, state)
        elif state.scene == "battle":
            outcome = _run_battle_loop(context, state)
            state.scene = "result" if outcome else "map"
        elif state.scene == "result":
            _result_loop(context, state)
        elif state.scene == "dex":
            _dex_loop(context, state)


# -----------------------
# Scenes
# -----------------------
def _title_loop(context: AppContext, state: GameState) -> bool:
    name_label = f"Set name ({state.player_name})" if state.player_name else "Set name"
    render_menu(f"{TITLE} [{context.map_service.progress_label()}]", ["Start", name_label, "Dex", "Quit"])
    choice = _prompt_choice(4)
    if choice == 0:
        state.scene = "map" if state.player_name.strip() else "name"
    elif choice == 1:
        state.scene = "name"
    elif choice == 2:
        state.scene = "dex"
    else:
        return False
    return True


def _name_entry(context: AppContext, state: GameState) -> None:
    name = _prompt_player_name()
    state.player_name = name
    context.settings["player_name"] = name
    config.save_config(context.settings, context.config_path)
    state.scene = "map"


def _map_loop(context: AppContext, state: GameState) -> None:
    regions = context.map_service.region_views()
    options: List[str] = []
    for region in regions:
        mark = "GET" if region.captured else "   "
        note = "" if region.has_quizzes else " (no quiz yet)"
        options.append(f"[{mark}] {region.region_id}: {region.monster_name} / difficulty {region.difficulty}{note}")
    options.extend(["Dex", "Title"])
    render_menu(f"Map - {state.display_name} [{context.map_service.progress_label()}]", options)
    choice = _prompt_choice(len(options))
    if choice == len(regions):
        state.scene = "dex"
        return
    if choice == len(regions) + 1:
        state.scene = "title"
        return
    region = regions[choice]
    if _confirm(f"Battle {region.region_id} ({region.monster_name})?"):
        _, events = context.battle_service.start_battle(region.region_id)
        _render_battle_events(events, context)
        state.scene = "battle"


def _run_battle_loop(context: AppContext, state: GameState) -> BattleOutcome | None:
    """Run the encounter until it resolves. Returns None if the player retreats."""
    controller = context.controller
    while True:
        view = controller.get_battle_view()
        if view is None:
            return None
        _render_battle_view(view, state)
        if view.finished is not None:
            return view.finished
        action = _prompt_battle_action(view)
        if action is None:
            if _confirm("Return to the map? The battle will be abandoned."):
                context.battle_service.abandon_battle()
                return None
            continue
        events = controller.apply_player_action(action)
        _render_battle_events(events, context)
        if context.battle_service.is_awaiting_counter():
            _render_battle_events(controller.settle(), context)


def _result_loop(context: AppContext, state: GameState) -> None:
    battle_state = context.battle_service.active_battle
    if battle_state is None:
        state.scene = "map"
        return
    name = battle_state.enemy.name
    if battle_state.finished == "win":
        render_heading("Victory!")
        print(f"{name} was registered in the Dex.")
    else:
        render_heading("Defeat...")
        print(f"{name} beat you... try again!")
    render_menu("Next", ["Map", "Dex", "Retry"])
    choice = _prompt_choice(3)
    if choice == 2:
        _, events = context.battle_service.retry_battle()
        _render_battle_events(events, context)
        state.scene = "battle"
        return
    context.battle_service.abandon_battle()
    state.scene = "map" if choice == 0 else "dex"


def _dex_loop(context: AppContext, state: GameState) -> None:
    render_heading(f"Dex [{context.map_service.progress_label()}]")
    for entry in context.map_service.dex_entries():
        if entry.captured:
            species = entry.species or "unknown"
            print(f"[GET] {entry.region_id}: {entry.name} ({species})")
            if entry.description:
                print(f"      {entry.description}")
        else:
            print(f"[---] {entry.region_id}: ???")
    render_menu("Dex Menu", ["Map", "Title", "Reset Dex"])
    choice = _prompt_choice(3)
    if choice == 0:
        state.scene = "map"
    elif choice == 1:
        state.scene = "title"
    elif _confirm("Reset the Dex on this device?"):
        context.dex_store.clear(context.progress)
        print("Dex reset.")


# -----------------------
# Rendering
# -----------------------
def _render_battle_view(view: BattleView, state: GameState) -> None:
    render_heading(f"Battle: {view.region_id}")
    defeated = " (defeated)" if view.captured_visual else ""
    print(format_hp_bar(view.enemy_name + defeated, view.enemy_hp, view.enemy_max_hp))
    print(f"  Species: {view.species or 'unknown'} / Difficulty: {view.difficulty}")
    print(format_hp_bar(state.display_name, view.player_hp, view.player_max_hp))
    print(f"> {view.message}")
    if view.finished is not None or view.quiz is None:
        return
    print(f"\nQ. {view.quiz.question}")
    if view.quiz.hint:
        print(f"  Hint: {view.quiz.hint}")
    for label, text in view.quiz.choices:
        print(f"  {label}. {text}")


def _render_battle_events(events: List[BattleEvent], context: AppContext) -> None:
    lines: List[str] = []
    for event in events:
        if isinstance(event, BattleStartedEvent):
            lines.append(event.message)
        elif isinstance(event, AnswerJudgedEvent):
            if event.correct:
                lines.append("Correct!")
            else:
                suffix = f" (answer: {CHOICE_LABELS[event.answer_index]})" if debug_enabled() else ""
                lines.append(f"Wrong...{suffix}")
        elif isinstance(event, AttackResolvedEvent):
            if event.attacker == "player":
                lines.append(f"{event.target_name} takes {event.damage} damage.")
            else:
                lines.append(f"You take {event.damage} damage.")
        elif isinstance(event, EnemyCounterScheduledEvent):
            lines.append("The enemy is getting ready to strike back...")
        elif isinstance(event, AnswerRejectedEvent):
            lines.append("Wait for the enemy to move.")
        elif isinstance(event, BattleResolvedEvent):
            lines.append(event.message)
        elif isinstance(event, MonsterCapturedEvent):
            if event.newly_captured:
                context.dex_store.save(context.progress)
                lines.append(f"{event.monster_name} was added to the Dex!")
            else:
                lines.append(f"{event.monster_name} is already in the Dex.")
    render_bullet_lines(lines)


# -----------------------
# Input
# -----------------------
def _prompt_battle_action(view: BattleView) -> BattleAction | None:
    """Return the chosen action, or None when the player wants to leave."""
    if view.quiz is None:
        raw = input("Press Enter to attack (q to leave): ").strip().lower()
        if raw == "q":
            return None
        return BattleAction(action_type="attack")
    labels = [label for label, _ in view.quiz.choices]
    while True:
        raw = input(f"Answer ({'/'.join(labels)}, q to leave): ").strip().upper()
        if raw == "Q":
            return None
        if raw in labels:
            return BattleAction(action_type="answer", choice_index=labels.index(raw))
        if raw.isdigit() and 1 <= int(raw) <= len(labels):
            return BattleAction(action_type="answer", choice_index=int(raw) - 1)
        print("Please choose one of the listed answers.")


def _prompt_player_name() -> str:
    while True:
        name = input(f"Enter your name (1-{MAX_NAME_LENGTH} characters): ").strip()
        if not name:
            print("Your name cannot be blank.")
        elif len(name) > MAX_NAME_LENGTH:
            print(f"Please keep your name to {MAX_NAME_LENGTH} characters or fewer.")
        else:
            return name


def _prompt_choice(choice_count: int) -> int:
    while True:
        raw = input("Select an option: ").strip()
        try:
            index = int(raw) - 1
        except ValueError:
            print("Please enter a number.")
            continue
        if 0 <= index < choice_count:
            return index
        print(f"Please enter a value between 1 and {choice_count}.")


def _confirm(question: str) -> bool:
    while True:
        raw = input(f"{question} (y/n): ").strip().lower()
        if raw in ("y", "yes"):
            return True
        if raw in ("n", "no"):
            return False
        print("Please answer y or n.")
