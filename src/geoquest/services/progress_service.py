"""Collection log (Dex) of captured regions."""
from __future__ import annotations

from typing import Dict, List, Mapping

DexPayload = Dict[str, bool]


class ProgressTracker:
    """Append-only set of captured region ids, kept in capture order."""

    def __init__(self, captured: Mapping[str, bool] | None = None) -> None:
        self._captured: Dict[str, bool] = {}
        for region_id, present in (captured or {}).items():
            if present:
                self._captured[region_id] = True

    def capture(self, region_id: str) -> bool:
        """Record a capture. Returns False when the region was already captured."""
        if region_id in self._captured:
            return False
        self._captured[region_id] = True
        return True

    def is_captured(self, region_id: str) -> bool:
        return region_id in self._captured

    def captured_ids(self) -> List[str]:
        return list(self._captured)

    def count(self) -> int:
        return len(self._captured)

    def reset(self) -> None:
        """Forget every capture."""
        self._captured.clear()

    def to_payload(self) -> DexPayload:
        """Return a JSON-serializable ``{region_id: True}`` mapping."""
        return dict(self._captured)

    @classmethod
    def from_payload(cls, payload: object) -> "ProgressTracker":
        """Rebuild a tracker, ignoring anything that is not a present-marker entry."""
        if not isinstance(payload, Mapping):
            return cls()
        return cls({key: True for key, value in payload.items() if isinstance(key, str) and value})
