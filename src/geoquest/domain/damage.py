"""Fixed damage table keyed by attacker role and difficulty tier."""
from __future__ import annotations

from typing import Dict, Tuple

from geoquest.core.types import AttackerRole
from geoquest.domain.enemy_scaling import clamp_difficulty

# difficulty -> (player deals, enemy deals)
# Tiers 4-5 flip the advantage to the enemy.
_DAMAGE_TABLE: Dict[int, Tuple[int, int]] = {
    1: (2, 1),
    2: (2, 1),
    3: (2, 1),
    4: (1, 2),
    5: (1, 2),
}

# Attack used when a monster has no quizzes.
FALLBACK_ATTACK_DAMAGE = 1


def calc_damage(attacker: AttackerRole, difficulty: int) -> int:
    """Return the damage ``attacker`` deals against a monster of ``difficulty``."""
    player_damage, enemy_damage = _DAMAGE_TABLE[clamp_difficulty(difficulty)]
    if attacker == "player":
        return player_damage
    if attacker == "enemy":
        return enemy_damage
    raise ValueError(f"Unknown attacker role: {attacker}")
