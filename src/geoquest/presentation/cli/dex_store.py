"""File-system storage for the collection log."""
from __future__ import annotations

import json
import logging
from pathlib import Path

from geoquest.presentation.cli import config
from geoquest.services.progress_service import ProgressTracker

logger = logging.getLogger(__name__)


class DexStore:
    """Persists captured region ids as a ``{region_id: true}`` JSON object."""

    def __init__(self, path: Path | str | None = None) -> None:
        self._path = Path(path) if path is not None else config.get_dex_path()

    @property
    def path(self) -> Path:
        return self._path

    def load(self) -> ProgressTracker:
        """Return the stored Dex; anything unreadable yields an empty one."""
        try:
            payload = json.loads(self._path.read_text(encoding="utf-8"))
        except FileNotFoundError:
            return ProgressTracker()
        except (OSError, ValueError) as exc:
            logger.warning("Ignoring unreadable Dex file %s: %s", self._path, exc)
            return ProgressTracker()
        return ProgressTracker.from_payload(payload)

    def save(self, progress: ProgressTracker) -> None:
        self._path.parent.mkdir(parents=True, exist_ok=True)
        self._path.write_text(json.dumps(progress.to_payload(), indent=2, sort_keys=True), encoding="utf-8")

    def clear(self, progress: ProgressTracker) -> None:
        """Reset ``progress`` and persist the empty Dex."""
        progress.reset()
        self.save(progress)
