"""Helpers for resolving data file locations."""
from __future__ import annotations

import os
from pathlib import Path

DATASET_FILENAME = "data.json"
DATA_PATH_ENV = "GEOQUEST_DATA_PATH"


def get_repo_root() -> Path:
    """Return the repository root."""
    return Path(__file__).resolve().parents[3]


def get_definitions_path(base_path: Path | str | None = None) -> Path:
    """Return the directory containing the dataset file."""
    if base_path is not None:
        return Path(base_path)
    return get_repo_root() / "data" / "definitions"


def get_dataset_path(override: Path | str | None = None) -> Path:
    """Return the dataset file, honouring an explicit override or GEOQUEST_DATA_PATH."""
    if override:
        return Path(override)
    env_value = os.environ.get(DATA_PATH_ENV)
    if env_value:
        return Path(env_value)
    return get_definitions_path() / DATASET_FILENAME
