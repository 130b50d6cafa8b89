"""Application service for the region map and Dex views."""
from __future__ import annotations

from dataclasses import dataclass
from typing import List

from geoquest.data.repositories import MonstersRepository
from geoquest.services.progress_service import ProgressTracker


@dataclass(slots=True)
class RegionView:
    """Renderable map entry for one region."""

    region_id: str
    monster_name: str
    difficulty: int
    captured: bool
    has_quizzes: bool


@dataclass(slots=True)
class DexEntryView:
    """Renderable Dex page for one region."""

    region_id: str
    name: str
    species: str
    description: str
    image: str
    captured: bool


class MapService:
    """Joins dataset monsters with capture progress."""

    def __init__(self, monsters_repo: MonstersRepository, progress: ProgressTracker) -> None:
        self._monsters_repo = monsters_repo
        self._progress = progress

    def region_views(self) -> List[RegionView]:
        views: List[RegionView] = []
        for region_id in self._monsters_repo.region_ids():
            monster = self._monsters_repo.get(region_id)
            views.append(
                RegionView(
                    region_id=region_id,
                    monster_name=monster.name,
                    difficulty=monster.difficulty,
                    captured=self._progress.is_captured(region_id),
                    has_quizzes=monster.has_quizzes,
                )
            )
        return views

    def dex_entries(self) -> List[DexEntryView]:
        entries: List[DexEntryView] = []
        for region_id in self._monsters_repo.region_ids():
            monster = self._monsters_repo.get(region_id)
            entries.append(
                DexEntryView(
                    region_id=region_id,
                    name=monster.name,
                    species=monster.species,
                    description=monster.desc,
                    image=monster.image,
                    captured=self._progress.is_captured(region_id),
                )
            )
        return entries

    def captured_count(self) -> int:
        """Count captures that still exist in the loaded dataset."""
        region_ids = set(self._monsters_repo.region_ids())
        return sum(1 for region_id in self._progress.captured_ids() if region_id in region_ids)

    def progress_label(self) -> str:
        return f"GET {self.captured_count()}/{len(self._monsters_repo.region_ids())}"
