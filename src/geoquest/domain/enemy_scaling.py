"""Deterministic hit point rules for encounters."""
from __future__ import annotations

# The player always starts an encounter with the same pool.
PLAYER_MAX_HP = 5

DEFAULT_DIFFICULTY = 3
MIN_DIFFICULTY = 1
MAX_DIFFICULTY = 5

DEFAULT_BASE_HP = 7
MIN_ENEMY_HP = 3
MAX_ENEMY_HP = 30


def clamp(value: int, minimum: int, maximum: int) -> int:
    return max(minimum, min(maximum, value))


def clamp_difficulty(difficulty: int) -> int:
    return clamp(difficulty, MIN_DIFFICULTY, MAX_DIFFICULTY)


def calc_player_max_hp() -> int:
    return PLAYER_MAX_HP


def calc_enemy_max_hp(base_hp: int, difficulty: int) -> int:
    """Base HP nudged by how far the difficulty sits from the middle tier."""
    base = clamp(base_hp, MIN_ENEMY_HP, MAX_ENEMY_HP)
    offset = clamp_difficulty(difficulty) - DEFAULT_DIFFICULTY
    return clamp(base + offset, MIN_ENEMY_HP, MAX_ENEMY_HP)
