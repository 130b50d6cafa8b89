"""Factory for creating encounters from monster definitions."""
from __future__ import annotations

from geoquest.data.repositories import MonstersRepository
from geoquest.domain.battle_models import NO_QUIZ_INDEX, BattleState
from geoquest.domain.defs import MonsterDef
from geoquest.domain.enemy_scaling import calc_enemy_max_hp, calc_player_max_hp
from geoquest.services.errors import FactoryError


def appearance_message(monster: MonsterDef) -> str:
    return f"A wild {monster.name} appeared!"


def build_battle_state(region_id: str, monster: MonsterDef, *, encounter_id: str) -> BattleState:
    """Return the opening state of an encounter with ``monster``."""
    player_max_hp = calc_player_max_hp()
    enemy_max_hp = calc_enemy_max_hp(monster.hp, monster.difficulty)
    return BattleState(
        encounter_id=encounter_id,
        region_id=region_id,
        enemy=monster,
        enemy_hp=enemy_max_hp,
        enemy_max_hp=enemy_max_hp,
        player_hp=player_max_hp,
        player_max_hp=player_max_hp,
        quiz_index=0 if monster.has_quizzes else NO_QUIZ_INDEX,
        last_message=appearance_message(monster),
    )


def create_encounter(
    region_id: str,
    monsters_repo: MonstersRepository,
    *,
    encounter_id: str,
) -> BattleState:
    """Look up the region's monster and open an encounter against it."""
    try:
        monster = monsters_repo.get(region_id)
    except KeyError as exc:
        raise FactoryError(f"Region '{region_id}' not found.") from exc
    return build_battle_state(region_id, monster, encounter_id=encounter_id)
