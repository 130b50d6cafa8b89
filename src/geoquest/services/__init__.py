"""Application services for the quiz battle game."""

from .battle_service import BattleService, BattleView, QuizView
from .controllers import BattleAction, BattleController
from .errors import FactoryError
from .map_service import DexEntryView, MapService, RegionView
from .progress_service import ProgressTracker

__all__ = [
    "BattleAction",
    "BattleController",
    "BattleService",
    "BattleView",
    "DexEntryView",
    "FactoryError",
    "MapService",
    "ProgressTracker",
    "QuizView",
    "RegionView",
]
