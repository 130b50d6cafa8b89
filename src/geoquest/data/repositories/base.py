"""Base repository implementation for JSON dataset files."""
from __future__ import annotations

from pathlib import Path
from typing import Dict, Generic, List, TypeVar

from geoquest.data.json_loader import load_json
from geoquest.data import paths

T = TypeVar("T")


class RepositoryBase(Generic[T]):
    """Common caching and loading behavior for repositories."""

    def __init__(self, filename: str, base_path: Path | str | None = None) -> None:
        self._filename = filename
        self._base_path = Path(base_path) if base_path is not None else None
        self._definitions: Dict[str, T] | None = None

    def _get_file_path(self) -> Path:
        definitions_dir = paths.get_definitions_path(self._base_path)
        return definitions_dir / self._filename

    def _load_raw(self) -> object:
        return load_json(self._get_file_path())

    def _build(self, raw: object) -> Dict[str, T]:
        """Convert a decoded document into typed definitions."""
        raise NotImplementedError

    def _ensure_loaded(self) -> None:
        if self._definitions is None:
            raw = self._load_raw()
            self._definitions = self._build(raw)

    def get(self, def_id: str) -> T:
        """Return a definition by id."""
        self._ensure_loaded()
        assert self._definitions is not None
        try:
            return self._definitions[def_id]
        except KeyError as exc:
            raise KeyError(def_id) from exc

    def ids(self) -> List[str]:
        """Return definition ids in document order."""
        self._ensure_loaded()
        assert self._definitions is not None
        return list(self._definitions.keys())

    def all(self) -> List[T]:
        """Return all definitions sorted deterministically by id."""
        self._ensure_loaded()
        assert self._definitions is not None
        return [self._definitions[key] for key in sorted(self._definitions.keys())]

