"""Factory helpers for runtime entities."""

from .encounter_factory import build_battle_state, create_encounter
from .id_factory import make_instance_id

__all__ = [
    "build_battle_state",
    "create_encounter",
    "make_instance_id",
]
